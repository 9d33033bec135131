"""Housing schema — buildings, housing_units, users.

Revision ID: 001_housing
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_housing"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "buildings",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(50), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        sa.Column("created_datetime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("modified_datetime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "housing_units",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "building_id", sa.Integer,
            sa.ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("unit_number", sa.String(50), nullable=False),
        sa.Column("created_datetime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("modified_datetime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_housing_units_building_id", "housing_units", ["building_id"])

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email_address", sa.String(255), nullable=False),
        sa.Column("password", sa.String(64), nullable=False),
        sa.Column("created_datetime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("modified_datetime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email_address", "users", ["email_address"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_users_email_address", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_housing_units_building_id", table_name="housing_units")
    op.drop_table("housing_units")
    op.drop_table("buildings")
