from .views import OutfitLogWithMeta, OutfitWithItems, OutfitWithMeta
from .outfit_controller import (
    add_outfit,
    delete_outfit,
    get_outfit,
    get_outfit_item_ids,
    get_outfit_with_items,
    list_outfits,
    update_outfit,
)
from .log_controller import (
    add_outfit_log,
    clear_ootd,
    delete_outfit_log,
    get_logs_by_date,
    get_outfit_log,
    set_ootd,
    update_outfit_log,
)
