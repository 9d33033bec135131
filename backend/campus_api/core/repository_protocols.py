"""Boundary Protocols — contracts between the housing services and persistence.

Invariants:
    - Services NEVER import ORM models or SQLAlchemy — only these Protocols
    - Repositories return None for missing rows; they never raise "not found"
    - Implementations provided by repositories/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO
"""

from datetime import datetime
from typing import Protocol

from campus_api.core.domain_types import BuildingId, HousingUnitId, UserId


class UserLike(Protocol):
    """Structural contract for a stored user account."""
    id: int
    first_name: str
    last_name: str
    email_address: str
    password: str


class BuildingLike(Protocol):
    """Structural contract for a stored building."""
    id: int
    name: str


class HousingUnitLike(Protocol):
    """Structural contract for a stored housing unit."""
    id: int
    building_id: int
    unit_number: str
    created_datetime: datetime
    modified_datetime: datetime


class UserRepository(Protocol):
    """Contract for user account persistence."""
    async def find_by_email_address(self, email_address: str) -> UserLike | None: ...
    async def create(self, user_data: dict) -> UserId: ...


class BuildingRepository(Protocol):
    """Contract for building persistence."""
    async def get_by_id(self, building_id: BuildingId) -> BuildingLike | None: ...


class HousingUnitRepository(Protocol):
    """Contract for housing unit persistence."""
    async def get_by_id(
        self, housing_unit_id: HousingUnitId,
    ) -> HousingUnitLike | None: ...
    async def list_by_building(
        self, building_id: BuildingId,
    ) -> list[HousingUnitLike]: ...
