"""initial_hotel_tables

Revision ID: 0001_initial_hotel
Revises:
Create Date: 2026-10-19 09:12:40.118302

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_initial_hotel"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "businesses",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("business_type", sa.String(50), server_default="hotel"),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_businesses")),
    )

    op.create_table(
        "rooms",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), sa.ForeignKey("businesses.id", name=op.f("fk_rooms_business_id_businesses")), nullable=False),
        sa.Column("room_number", sa.String(20), nullable=False),
        sa.Column("room_type", sa.String(50), nullable=False),
        sa.Column("price_per_night", sa.Numeric(14, 2), server_default="0"),
        sa.Column("status", sa.String(20), server_default="available"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_rooms")),
    )
    op.create_index(op.f("ix_rooms_business_id"), "rooms", ["business_id"])

    op.create_table(
        "reservations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("business_id", sa.Uuid(), sa.ForeignKey("businesses.id", name=op.f("fk_reservations_business_id_businesses")), nullable=False),
        sa.Column("room_id", sa.Uuid(), sa.ForeignKey("rooms.id", name=op.f("fk_reservations_room_id_rooms")), nullable=True),
        sa.Column("check_in_date", sa.Date(), nullable=False),
        sa.Column("check_out_date", sa.Date(), nullable=False),
        sa.Column("total_amount", sa.Numeric(14, 2), server_default="0"),
        sa.Column("status", sa.String(20), server_default="pending"),
        sa.Column("payment_status", sa.String(20), server_default="pending"),
        sa.Column("source", sa.String(50), nullable=True),
        sa.Column("guest_count", sa.Integer(), server_default="1"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_reservations")),
    )
    op.create_index("ix_reservations_business_check_in", "reservations", ["business_id", "check_in_date"])


def downgrade() -> None:
    op.drop_index("ix_reservations_business_check_in", table_name="reservations")
    op.drop_table("reservations")
    op.drop_index(op.f("ix_rooms_business_id"), table_name="rooms")
    op.drop_table("rooms")
    op.drop_table("businesses")
