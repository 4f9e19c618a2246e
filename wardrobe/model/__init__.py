from .lookups import (
    Category,
    Color,
    Material,
    Occasion,
    Pattern,
    Season,
    SizeSystem,
    SizeValue,
    Subcategory,
)
from .clothing_item import (
    TAG_JUNCTIONS,
    ClothingItem,
    ItemStatus,
    TagKind,
    WashStatus,
    clothing_item_colors,
    clothing_item_materials,
    clothing_item_occasions,
    clothing_item_patterns,
    clothing_item_seasons,
    utcnow,
)
from .outfit import Outfit, OutfitLog, outfit_items
from .app_setting import AppSetting
