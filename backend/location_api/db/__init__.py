"""Database Infrastructure — SQLAlchemy Base and the locations table definition.

Invariants:
    - Single async engine per process (built in the lifespan)
    - All sessions are async (AsyncSession)
"""
