"""Infrastructure Layer — store engine, geocoding provider, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every external call maps its faults to core/errors.py types
"""
