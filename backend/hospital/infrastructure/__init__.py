"""Infrastructure Layer: MongoDB client, repositories and logging.

Invariants:
    - Driver exceptions (PyMongoError) never escape this layer untranslated
"""
