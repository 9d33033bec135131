"""Housing Schemas — response models for building and housing-unit reads."""

from pydantic import BaseModel


class HousingUnitSummary(BaseModel):
    id: int
    unit_number: str


class HousingUnitDetail(BaseModel):
    id: int
    building_id: int
    unit_number: str
    created_datetime: str
    modified_datetime: str
