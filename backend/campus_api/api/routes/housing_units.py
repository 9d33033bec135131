"""Housing Unit Routes — read-only building and housing-unit lookups.

Invariants:
    - Missing building / unit → 404 JSON error envelope with a descriptive message
    - Route handlers delegate to HousingLookup; no queries here
"""

from fastapi import APIRouter, Depends

from campus_api.api.dependencies import get_housing_lookup
from campus_api.core.domain_types import BuildingId, HousingUnitId
from campus_api.schemas.housing import HousingUnitDetail, HousingUnitSummary
from campus_api.services.housing_lookup import HousingLookup

router = APIRouter(tags=["housing"])


@router.get(
    "/building/{building_id}/housing-units",
    response_model=list[HousingUnitSummary],
)
async def get_building_housing_units(
    building_id: int, housing: HousingLookup = Depends(get_housing_lookup),
):
    """List the housing units of one building."""
    return await housing.list_building_units(BuildingId(building_id))


@router.get("/housing-unit/{housing_unit_id}", response_model=HousingUnitDetail)
async def get_housing_unit(
    housing_unit_id: int, housing: HousingLookup = Depends(get_housing_lookup),
):
    return await housing.get_housing_unit(HousingUnitId(housing_unit_id))
