import uuid
from decimal import Decimal

from app.models.menu_item import ItemAddon, ItemCustomization, MenuItem
from app.schemas.menu import CustomizationInput

# Free menu image quota: 10 included, then 7 bonus; beyond that each image is billed
TIER_1_LIMIT = 10
TIER_2_LIMIT = 7
PRICE_PER_IMAGE = 2.5


def image_upload_status(count: int) -> dict:
    total_free = TIER_1_LIMIT + TIER_2_LIMIT
    tier2_used = max(0, min(count - TIER_1_LIMIT, TIER_2_LIMIT))
    return {
        "totalUsed": count,
        "tier1Used": min(count, TIER_1_LIMIT),
        "tier1Remaining": max(0, TIER_1_LIMIT - count),
        "tier1Limit": TIER_1_LIMIT,
        "tier2Used": tier2_used,
        "tier2Remaining": max(0, TIER_2_LIMIT - tier2_used),
        "tier2Limit": TIER_2_LIMIT,
        "canAccessTier2": count >= TIER_1_LIMIT,
        "totalFreeAvailable": total_free,
        "totalFreeUsed": min(count, total_free),
        "isPaid": count > total_free,
        "paidCount": max(0, count - total_free),
        "pricePerImage": PRICE_PER_IMAGE,
    }


def customization_flags(customizations: list[CustomizationInput]) -> tuple[bool, bool]:
    """(has_customization, has_addons) derived from the submitted tree."""
    has_customization = len(customizations) > 0
    has_addons = any(c.addons for c in customizations)
    return has_customization, has_addons


def build_customizations(item: MenuItem, customizations: list[CustomizationInput]) -> None:
    """Attach a fresh customization/addon tree to the item (replacing any existing one)."""
    item.customizations.clear()
    for i, c in enumerate(customizations):
        cust = ItemCustomization(
            id=str(uuid.uuid4()),
            title=c.title,
            required=c.required,
            max_selection=c.max_selection,
            sort_order=i,
        )
        for j, a in enumerate(c.addons):
            cust.addons.append(
                ItemAddon(
                    id=str(uuid.uuid4()),
                    addon_name=a.addon_name,
                    addon_price=Decimal(str(a.addon_price)),
                    sort_order=j,
                )
            )
        item.customizations.append(cust)
