"""Building Repository — SQLAlchemy implementation of core BuildingRepository."""

from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.core.domain_types import BuildingId
from campus_api.models.building import Building


class SqlBuildingRepository:
    """BuildingRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_id(self, building_id: BuildingId) -> Building | None:
        return await self._db.get(Building, building_id)
