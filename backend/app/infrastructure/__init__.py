"""Infrastructure Layer — database, repositories, password hashing, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy errors mapped to DatabaseError/ConflictError before they leave this layer

Design Decisions:
    - Repositories implement the Protocols in core/repository_protocols.py
"""
