"""Service layer — customer data access and schema migration.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
