"""Infrastructure layer — async database engine, schema, migrations, Store.

This layer depends on stdlib and third-party libs (SQLAlchemy, Alembic).
It must never import from domain, services, commands, or output.
"""
