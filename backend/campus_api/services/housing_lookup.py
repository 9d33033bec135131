"""Housing Lookup — building and housing-unit reads with not-found mapping.

Invariants:
    - Missing building / unit raises BuildingNotFoundError / HousingUnitNotFoundError
    - Units are listed only after the building is known to exist
"""

from campus_api.core.domain_types import BuildingId, HousingUnitId
from campus_api.core.errors import BuildingNotFoundError, HousingUnitNotFoundError
from campus_api.core.format_housing import housing_unit_detail, housing_unit_summary
from campus_api.core.repository_protocols import (
    BuildingRepository, HousingUnitRepository,
)


class HousingLookup:
    """Read-only housing queries for one request."""

    def __init__(
        self, buildings: BuildingRepository, housing_units: HousingUnitRepository,
    ):
        self._buildings = buildings
        self._housing_units = housing_units

    async def list_building_units(self, building_id: BuildingId) -> list[dict]:
        building = await self._buildings.get_by_id(building_id)
        if building is None:
            raise BuildingNotFoundError(building_id)
        units = await self._housing_units.list_by_building(building_id)
        return [housing_unit_summary(unit) for unit in units]

    async def get_housing_unit(self, housing_unit_id: HousingUnitId) -> dict:
        unit = await self._housing_units.get_by_id(housing_unit_id)
        if unit is None:
            raise HousingUnitNotFoundError(housing_unit_id)
        return housing_unit_detail(unit)
