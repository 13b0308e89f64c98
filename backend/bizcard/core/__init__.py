"""Core Layer — identifier codec and authentication rules, no DB, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - IO reaches core only through the Protocols in repository_protocols.py

Design Decisions:
    - Functional core separated from imperative shell
"""
