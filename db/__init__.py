"""
db/ - Database Layer
====================
PostgreSQL connection pool and schema creation for the postgres storage backend.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
