"""ORM Models — SQLAlchemy declarative models for the housing service.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from campus_api.models.building import Building  # noqa: F401
from campus_api.models.housing_unit import HousingUnit  # noqa: F401
from campus_api.models.user import User  # noqa: F401
