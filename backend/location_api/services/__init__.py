"""Services Layer — endpoint orchestration, request dispatch, dependency wiring.

Invariants:
    - Dispatch uses an explicit Route enumeration (no auto-discovery)
    - Endpoints talk to IO only through core/repository_protocols.py
"""
