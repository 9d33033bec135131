"""Housing Projections — JSON-safe dicts returned by the housing endpoints.

Invariants:
    - Timestamps are ISO-8601 offset date-times: seconds always present, fraction
      only when non-zero (trailing zeros dropped), UTC written as "Z"
    - Naive datetimes (SQLite drops tzinfo) are treated as UTC
    - Summary projection exposes only id and unit_number
"""

from datetime import datetime, timezone

from campus_api.core.repository_protocols import HousingUnitLike


def format_offset_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset = value.strftime("%z")
    if offset == "+0000":
        return text + "Z"
    return f"{text}{offset[:3]}:{offset[3:5]}"


def housing_unit_summary(unit: HousingUnitLike) -> dict:
    return {"id": unit.id, "unit_number": unit.unit_number}


def housing_unit_detail(unit: HousingUnitLike) -> dict:
    return {
        "id": unit.id,
        "building_id": unit.building_id,
        "unit_number": unit.unit_number,
        "created_datetime": format_offset_datetime(unit.created_datetime),
        "modified_datetime": format_offset_datetime(unit.modified_datetime),
    }
