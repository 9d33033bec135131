"""HousingUnit ORM — one rentable unit inside a building.

Invariants:
    - Always belongs to exactly one existing Building (building_id FK, non-null)
    - created_datetime / modified_datetime are timezone-aware
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campus_api.db.base import Base


class HousingUnit(Base):
    """Housing unit entity."""
    __tablename__ = "housing_units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buildings.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    unit_number: Mapped[str] = mapped_column(String(50), nullable=False)
    created_datetime: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    modified_datetime: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    building: Mapped["Building"] = relationship(
        "Building", back_populates="housing_units",
    )
