"""Services: multi-step workflows composed from repositories."""
