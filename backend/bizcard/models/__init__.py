"""ORM Models — SQLAlchemy declarative models for the legacy tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names match the legacy schema the mobile clients were built against

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bizcard.models.user import User  # noqa: F401
from bizcard.models.country import Country  # noqa: F401
from bizcard.models.state import State  # noqa: F401
from bizcard.models.city import City  # noqa: F401
