from app.core.database import Base
from app.models.parent_merchant import ParentMerchant
from app.models.merchant_store import MerchantStore
from app.models.store_operating_hours import StoreOperatingHours
from app.models.store_document import StoreDocument
from app.models.store_registration_progress import StoreRegistrationProgress
from app.models.outlet_timings import OutletTimings
from app.models.menu_item import MenuItem, ItemCustomization, ItemAddon
from app.models.offer import Offer
from app.models.food_order import FoodOrder
from app.models.area_manager import AreaManager
from app.models.audit_log import AuditLog

__all__ = [
    "Base",
    "ParentMerchant",
    "MerchantStore",
    "StoreOperatingHours",
    "StoreDocument",
    "StoreRegistrationProgress",
    "OutletTimings",
    "MenuItem",
    "ItemCustomization",
    "ItemAddon",
    "Offer",
    "FoodOrder",
    "AreaManager",
    "AuditLog",
]
