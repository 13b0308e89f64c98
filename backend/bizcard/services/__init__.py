"""Services Layer — imperative shell around the core: token lifecycle and master-data reads.

Invariants:
    - Services take an AsyncSession; routes never build queries themselves
"""
