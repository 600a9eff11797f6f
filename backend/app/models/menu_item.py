from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(String(36), primary_key=True, index=True)
    item_id = Column(String(64), unique=True, index=True, nullable=False)  # ITEM1001, ...
    store_id = Column(String(36), ForeignKey("merchant_store.id", ondelete="CASCADE"), nullable=False, index=True)
    item_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True, default="")
    category_type = Column(String(255), nullable=True)
    food_category_item = Column(String(255), nullable=True)
    actual_price = Column(Numeric(10, 2), nullable=False)
    offer_price = Column(Numeric(10, 2), nullable=True)
    offer_percent = Column(Numeric(5, 2), default=0, nullable=False)
    in_stock = Column(Boolean, default=True, nullable=False)
    has_customization = Column(Boolean, default=False, nullable=False)
    has_addons = Column(Boolean, default=False, nullable=False)
    image_url = Column(String(2048), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationships
    store = relationship("MerchantStore", back_populates="menu_items")
    customizations = relationship(
        "ItemCustomization",
        back_populates="menu_item",
        cascade="all, delete-orphan",
        order_by="ItemCustomization.sort_order",
    )


class ItemCustomization(Base):
    __tablename__ = "item_customizations"

    id = Column(String(36), primary_key=True, index=True)
    menu_item_id = Column(String(36), ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    required = Column(Boolean, default=False, nullable=False)
    max_selection = Column(Integer, default=1, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)

    menu_item = relationship("MenuItem", back_populates="customizations")
    addons = relationship(
        "ItemAddon",
        back_populates="customization",
        cascade="all, delete-orphan",
        order_by="ItemAddon.sort_order",
    )


class ItemAddon(Base):
    __tablename__ = "item_addons"

    id = Column(String(36), primary_key=True, index=True)
    customization_id = Column(
        String(36), ForeignKey("item_customizations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    addon_name = Column(String(255), nullable=False)
    addon_price = Column(Numeric(10, 2), default=0, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)

    customization = relationship("ItemCustomization", back_populates="addons")
