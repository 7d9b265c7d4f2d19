from hospital.server import serve

serve()
