"""initial collections: menus, foods, tables, orders, order_items, invoices, users

Revision ID: 0001_initial_collections
Revises:
Create Date: 2026-10-18 10:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_initial_collections"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "menus",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "foods",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("food_image", sa.String(255), nullable=False),
        sa.Column("menu_id", sa.String(32), nullable=False, index=True),
        *_timestamps(),
    )

    op.create_table(
        "tables",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("table_number", sa.Integer, nullable=False),
        sa.Column("number_of_guests", sa.Integer, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("table_id", sa.String(32), nullable=True, index=True),
        *_timestamps(),
    )

    op.create_table(
        "order_items",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("order_id", sa.String(32), nullable=False, index=True),
        sa.Column("food_id", sa.String(32), nullable=False, index=True),
        sa.Column("quantity", sa.Enum("S", "M", "L", name="order_item_quantity"), nullable=False),
        sa.Column("unit_price", sa.Float, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("order_id", sa.String(32), nullable=False, index=True),
        sa.Column("payment_method", sa.Enum("CARD", "CASH", name="payment_method"), nullable=True),
        sa.Column("payment_status", sa.Enum("PENDING", "PAID", name="payment_status"), nullable=False),
        sa.Column("payment_due_date", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("phone", sa.String(32), nullable=False, unique=True, index=True),
        sa.Column("password", sa.String(128), nullable=False),
        sa.Column("avatar", sa.String(255), nullable=True),
        sa.Column("token", sa.Text, nullable=True),
        sa.Column("refresh_token", sa.Text, nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("users")
    op.drop_table("invoices")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("tables")
    op.drop_table("foods")
    op.drop_table("menus")
    sa.Enum(name="payment_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="payment_method").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="order_item_quantity").drop(op.get_bind(), checkfirst=True)
