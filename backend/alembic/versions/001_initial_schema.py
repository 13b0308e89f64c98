"""Initial schema — users, countries, states, cities.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("mobile", sa.String(20), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("designation", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("unique_token", sa.String(64), nullable=True),
        sa.Column("fcm_token", sa.String(512), nullable=True),
        sa.Column("status", sa.SmallInteger, nullable=False, server_default="0"),
        sa.Column("deleted", sa.SmallInteger, nullable=False, server_default="0"),
        sa.Column("created_dts", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_mobile", "users", ["mobile"])
    op.create_index("ix_users_unique_token", "users", ["unique_token"])

    op.create_table(
        "countries",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(150), nullable=True),
        sa.Column("status", sa.SmallInteger, nullable=False, server_default="1"),
        sa.Column("deleted", sa.SmallInteger, nullable=False, server_default="0"),
    )

    op.create_table(
        "states",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("country_id", sa.Integer, sa.ForeignKey("countries.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(150), nullable=True),
        sa.Column("status", sa.SmallInteger, nullable=False, server_default="1"),
        sa.Column("deleted", sa.SmallInteger, nullable=False, server_default="0"),
    )
    op.create_index("ix_states_country_id", "states", ["country_id"])

    op.create_table(
        "cities",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("state_id", sa.Integer, sa.ForeignKey("states.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(150), nullable=True),
        sa.Column("status", sa.SmallInteger, nullable=False, server_default="1"),
        sa.Column("deleted", sa.SmallInteger, nullable=False, server_default="0"),
    )
    op.create_index("ix_cities_state_id", "cities", ["state_id"])


def downgrade() -> None:
    op.drop_index("ix_cities_state_id", table_name="cities")
    op.drop_table("cities")
    op.drop_index("ix_states_country_id", table_name="states")
    op.drop_table("states")
    op.drop_table("countries")
    op.drop_index("ix_users_unique_token", table_name="users")
    op.drop_index("ix_users_mobile", table_name="users")
    op.drop_table("users")
