"""Infrastructure layer — SQLite engine, schema, drawer store, stand repository.

This layer depends on stdlib, SQLAlchemy, and the domain layer.
It must never import from services, commands, output, or api.
"""
