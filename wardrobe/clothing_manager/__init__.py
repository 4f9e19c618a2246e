from .views import ClothingItemWithMeta
from .clothing_controller import (
    add_clothing_item,
    delete_clothing_item,
    get_clothing_item,
    get_distinct_brands,
    list_clothing_items,
    set_favorite,
    set_wash_status,
    update_clothing_item,
)
from .tag_controller import get_item_ids_by_tag, get_item_tag_ids, set_item_tags
