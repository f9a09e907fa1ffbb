"""
Inventory entities: categories, items, item images and inventory movements.

Items reference their zone by id only; the zone row itself carries no label,
so the join exposes the zone's branch id instead of a name.
"""

from rest_api.models import Category, ImagenItem, InventaryDetails, Item, Zone
from rest_api.services.crud import DisplayJoin, EntityDescriptor
from shared.utils.admin_schemas import (
    CategoryDTO,
    ImagenItemDTO,
    InventaryDetailsDTO,
    ItemDTO,
)


CATEGORY = EntityDescriptor(
    entity_name="Category",
    model=Category,
    dto=CategoryDTO,
    fields=("name", "description"),
    required_text=("name",),
)

ITEM = EntityDescriptor(
    entity_name="Item",
    model=Item,
    dto=ItemDTO,
    fields=(
        "code",
        "code_qr",
        "name",
        "description",
        "created_at",
        "category_id",
        "zone_id",
    ),
    required_text=("name",),
    display_joins=(
        DisplayJoin(Category, "category_id", "category_name"),
        DisplayJoin(Zone, "zone_id", "zone_branch_id", column="branch_id"),
    ),
)

IMAGEN_ITEM = EntityDescriptor(
    entity_name="ImagenItem",
    model=ImagenItem,
    dto=ImagenItemDTO,
    fields=("item_id", "url_image", "date_registry"),
    positive_ids=("item_id",),
    required_text=("url_image",),
    display_joins=(DisplayJoin(Item, "item_id", "item_name"),),
    stamp_on_create=("date_registry",),
)

INVENTARY_DETAILS = EntityDescriptor(
    entity_name="InventaryDetails",
    model=InventaryDetails,
    dto=InventaryDetailsDTO,
    fields=(
        "status_previous",
        "status_new",
        "observations",
        "date",
        "description",
        "zone_id",
    ),
    positive_ids=("zone_id",),
    display_joins=(DisplayJoin(Zone, "zone_id", "zone_branch_id", column="branch_id"),),
)
