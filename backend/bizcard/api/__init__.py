"""API Layer — FastAPI routes, auth dependencies, legacy envelopes, error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every authenticated route composes require_user / optional_user, never its own check
    - Legacy JSON shapes are built only in envelope.py
"""
