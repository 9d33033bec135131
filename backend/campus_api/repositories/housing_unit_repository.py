"""Housing Unit Repository — SQLAlchemy implementation of core HousingUnitRepository.

Invariants:
    - list_by_building returns units ordered by id
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.core.domain_types import BuildingId, HousingUnitId
from campus_api.models.housing_unit import HousingUnit


class SqlHousingUnitRepository:
    """HousingUnitRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_id(self, housing_unit_id: HousingUnitId) -> HousingUnit | None:
        return await self._db.get(HousingUnit, housing_unit_id)

    async def list_by_building(self, building_id: BuildingId) -> list[HousingUnit]:
        result = await self._db.execute(
            select(HousingUnit)
            .where(HousingUnit.building_id == building_id)
            .order_by(HousingUnit.id),
        )
        return list(result.scalars().all())
