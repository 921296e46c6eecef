"""Initial schema: weekday_timeslots, party_themes, birthday_reservations, range_reservations.

Revision ID: 001_initial
Revises:
Create Date: 2025-06-02

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
        "weekday_timeslots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("day", sa.String(), nullable=False),
        sa.Column("timeslot", sa.String(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_weekday_timeslots_day"), "weekday_timeslots", ["day"], unique=False)

    op.create_table(
        "party_themes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_party_themes_name"), "party_themes", ["name"], unique=False)

    op.create_table(
        "birthday_reservations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(), nullable=False),
        sa.Column("theme", sa.String(), nullable=False),
        sa.Column("child", sa.String(), nullable=False),
        sa.Column("parent", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("birthday", sa.String(), nullable=False),
        sa.Column("message", sa.String(), nullable=True),
        sa.Column("invoice", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_birthday_reservations_date"), "birthday_reservations", ["date"], unique=False)

    op.create_table(
        "range_reservations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(), nullable=False),
        sa.Column("end_time", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_range_reservations_start_date"), "range_reservations", ["start_date"], unique=False)
    op.create_index(op.f("ix_range_reservations_end_date"), "range_reservations", ["end_date"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_range_reservations_end_date"), table_name="range_reservations")
    op.drop_index(op.f("ix_range_reservations_start_date"), table_name="range_reservations")
    op.drop_table("range_reservations")
    op.drop_index(op.f("ix_birthday_reservations_date"), table_name="birthday_reservations")
    op.drop_table("birthday_reservations")
    op.drop_index(op.f("ix_party_themes_name"), table_name="party_themes")
    op.drop_table("party_themes")
    op.drop_index(op.f("ix_weekday_timeslots_day"), table_name="weekday_timeslots")
    op.drop_table("weekday_timeslots")
