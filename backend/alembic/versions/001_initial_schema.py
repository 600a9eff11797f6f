"""Initial schema: parent merchants, stores, hours, documents, registration progress, outlet timings, menu, offers, orders, area managers, audit_log.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "merchant_parent",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("parent_merchant_id", sa.String(32), nullable=False),
        sa.Column("parent_store_name", sa.String(255), nullable=False),
        sa.Column("registered_phone", sa.String(32), nullable=False),
        sa.Column("merchant_type", sa.Enum("LOCAL", "BRAND", name="merchanttype"), nullable=False),
        sa.Column("owner_name", sa.String(255), nullable=True),
        sa.Column("owner_email", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_merchant_parent_parent_merchant_id", "merchant_parent", ["parent_merchant_id"], unique=True)
    op.create_index("ix_merchant_parent_registered_phone", "merchant_parent", ["registered_phone"], unique=True)

    op.create_table(
        "merchant_store",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_id", sa.String(64), nullable=False),
        sa.Column("parent_id", sa.String(36), nullable=False),
        sa.Column("store_name", sa.String(255), nullable=False),
        sa.Column("store_display_name", sa.String(255), nullable=True),
        sa.Column("store_description", sa.Text(), nullable=True),
        sa.Column("store_email", sa.String(255), nullable=True),
        sa.Column("store_phones", sa.JSON(), nullable=True),
        sa.Column("cuisine_types", sa.JSON(), nullable=True),
        sa.Column("food_categories", sa.JSON(), nullable=True),
        sa.Column("full_address", sa.String(1024), nullable=True),
        sa.Column("landmark", sa.String(255), nullable=True),
        sa.Column("city", sa.String(128), nullable=True),
        sa.Column("state", sa.String(128), nullable=True),
        sa.Column("postal_code", sa.String(16), nullable=True),
        sa.Column("country", sa.String(64), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("logo_url", sa.String(2048), nullable=True),
        sa.Column("banner_url", sa.String(2048), nullable=True),
        sa.Column("gallery_images", sa.JSON(), nullable=True),
        sa.Column("pan_number", sa.String(16), nullable=True),
        sa.Column("aadhar_number", sa.String(16), nullable=True),
        sa.Column("gst_number", sa.String(32), nullable=True),
        sa.Column("fssai_number", sa.String(32), nullable=True),
        sa.Column("bank_account_holder", sa.String(255), nullable=True),
        sa.Column("bank_account_number", sa.String(32), nullable=True),
        sa.Column("bank_ifsc", sa.String(16), nullable=True),
        sa.Column("bank_name", sa.String(255), nullable=True),
        sa.Column("avg_preparation_time_minutes", sa.Integer(), nullable=True),
        sa.Column("min_order_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("delivery_radius_km", sa.Float(), nullable=True),
        sa.Column("is_pure_veg", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("accepts_online_payment", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("accepts_cash", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("am_name", sa.String(255), nullable=True),
        sa.Column("am_mobile", sa.String(32), nullable=True),
        sa.Column("am_email", sa.String(255), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="PENDING"),
        sa.Column("approval_status", sa.String(32), nullable=False, server_default="SUBMITTED"),
        sa.Column("approval_reason", sa.Text(), nullable=True),
        sa.Column("approved_by", sa.String(255), nullable=True),
        sa.Column("approved_by_email", sa.String(255), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("current_step", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["parent_id"], ["merchant_parent.id"]),
    )
    op.create_index("ix_merchant_store_store_id", "merchant_store", ["store_id"], unique=True)
    op.create_index("ix_merchant_store_parent_id", "merchant_store", ["parent_id"])
    op.create_index("ix_merchant_store_am_mobile", "merchant_store", ["am_mobile"])
    op.create_index("ix_merchant_store_approval_status", "merchant_store", ["approval_status"])
    op.create_index("ix_merchant_store_created_at", "merchant_store", ["created_at"])

    op.create_table(
        "merchant_store_operating_hours",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_id", sa.String(36), nullable=False),
        sa.Column("day_of_week", sa.String(16), nullable=False),
        sa.Column("is_open", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("slot1_start", sa.String(8), nullable=True),
        sa.Column("slot1_end", sa.String(8), nullable=True),
        sa.Column("slot2_start", sa.String(8), nullable=True),
        sa.Column("slot2_end", sa.String(8), nullable=True),
        sa.Column("total_duration_minutes", sa.Integer(), nullable=True),
        sa.Column("is_24_hours", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("same_for_all_days", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(["store_id"], ["merchant_store.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_merchant_store_operating_hours_store_id", "merchant_store_operating_hours", ["store_id"])

    op.create_table(
        "merchant_store_documents",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_id", sa.String(36), nullable=False),
        sa.Column("document_type", sa.String(64), nullable=False),
        sa.Column("document_url", sa.String(2048), nullable=False),
        sa.Column("document_name", sa.String(255), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(["store_id"], ["merchant_store.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_merchant_store_documents_store_id", "merchant_store_documents", ["store_id"])

    op.create_table(
        "store_registration_progress",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("parent_id", sa.String(36), nullable=False),
        sa.Column("step", sa.Integer(), nullable=False),
        sa.Column("completed_steps", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("form_data", sa.JSON(), nullable=True),
        sa.Column("store_id", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["parent_id"], ["merchant_parent.id"]),
    )
    op.create_index("ix_store_registration_progress_parent_id", "store_registration_progress", ["parent_id"], unique=True)

    op.create_table(
        "outlet_operating_hours",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_id", sa.String(64), nullable=False),
        *[
            sa.Column(f"{day}_{edge}", sa.String(8), nullable=True)
            for day in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
            for edge in ("open", "close")
        ],
        sa.Column("same_for_all", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("force_24_hours", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("closed_day", sa.String(16), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_outlet_operating_hours_store_id", "outlet_operating_hours", ["store_id"], unique=True)

    op.create_table(
        "menu_items",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("item_id", sa.String(64), nullable=False),
        sa.Column("store_id", sa.String(36), nullable=False),
        sa.Column("item_name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_type", sa.String(255), nullable=True),
        sa.Column("food_category_item", sa.String(255), nullable=True),
        sa.Column("actual_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("offer_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("offer_percent", sa.Numeric(5, 2), nullable=False, server_default="0"),
        sa.Column("in_stock", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("has_customization", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("has_addons", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("image_url", sa.String(2048), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["store_id"], ["merchant_store.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_menu_items_item_id", "menu_items", ["item_id"], unique=True)
    op.create_index("ix_menu_items_store_id", "menu_items", ["store_id"])

    op.create_table(
        "item_customizations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("menu_item_id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("required", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("max_selection", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["menu_item_id"], ["menu_items.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_item_customizations_menu_item_id", "item_customizations", ["menu_item_id"])

    op.create_table(
        "item_addons",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("customization_id", sa.String(36), nullable=False),
        sa.Column("addon_name", sa.String(255), nullable=False),
        sa.Column("addon_price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["customization_id"], ["item_customizations.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_item_addons_customization_id", "item_addons", ["customization_id"])

    op.create_table(
        "offers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_id", sa.String(64), nullable=False),
        sa.Column("offer_type", sa.Enum("ALL_ORDERS", "ITEM_LEVEL", name="offertype"), nullable=False),
        sa.Column("discount_type", sa.Enum("PERCENTAGE", "FIXED_AMOUNT", name="discounttype"), nullable=False),
        sa.Column("discount_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("item_name", sa.String(255), nullable=True),
        sa.Column("min_order_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=False),
        sa.Column("valid_till", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("usage_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_offers_store_id", "offers", ["store_id"])

    op.create_table(
        "food_orders",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("order_number", sa.String(64), nullable=False),
        sa.Column("restaurant_id", sa.String(64), nullable=False),
        sa.Column("restaurant_name", sa.String(255), nullable=True),
        sa.Column("user_name", sa.String(255), nullable=True),
        sa.Column("user_phone", sa.String(32), nullable=True),
        sa.Column("delivery_address", sa.Text(), nullable=True),
        sa.Column("items", sa.JSON(), nullable=True),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("payment_method", sa.String(32), nullable=True),
        sa.Column(
            "status",
            sa.Enum(
                "pending", "confirmed", "preparing", "ready", "out_for_delivery", "delivered", "cancelled",
                name="orderstatus",
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        sa.Column("confirmed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("delivered_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_food_orders_order_number", "food_orders", ["order_number"], unique=True)
    op.create_index("ix_food_orders_restaurant_id", "food_orders", ["restaurant_id"])
    op.create_index("ix_food_orders_status", "food_orders", ["status"])
    op.create_index("ix_food_orders_created_at", "food_orders", ["created_at"])

    op.create_table(
        "area_managers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("region", sa.String(128), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_area_managers_phone", "area_managers", ["phone"])

    op.create_table(
        "audit_log",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("entity_type", sa.String(50), nullable=False),
        sa.Column("entity_id", sa.String(64), nullable=True),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("old_data", sa.JSON(), nullable=True),
        sa.Column("new_data", sa.JSON(), nullable=True),
        sa.Column("performed_by", sa.String(255), nullable=True),
        sa.Column("performed_by_email", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_audit_log_entity_type", "audit_log", ["entity_type"])
    op.create_index("ix_audit_log_entity_id", "audit_log", ["entity_id"])
    op.create_index("ix_audit_log_action", "audit_log", ["action"])


def downgrade() -> None:
    op.drop_table("audit_log")
    op.drop_table("area_managers")
    op.drop_table("food_orders")
    op.drop_table("offers")
    op.drop_table("item_addons")
    op.drop_table("item_customizations")
    op.drop_table("menu_items")
    op.drop_table("outlet_operating_hours")
    op.drop_table("store_registration_progress")
    op.drop_table("merchant_store_documents")
    op.drop_table("merchant_store_operating_hours")
    op.drop_table("merchant_store")
    op.drop_table("merchant_parent")
    sa.Enum(name="orderstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="discounttype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="offertype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="merchanttype").drop(op.get_bind(), checkfirst=True)
