"""Location API Package — CRUD service for geocoded location records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
