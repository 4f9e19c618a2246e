"""
Closet filtering and sorting.

The closet view is composed in stages, each callable on its own:

1. ``resolve_junction_filters`` turns each active color/season/occasion filter
   into the set of item ids carrying that tag.
2. ``intersect_memberships`` ANDs those sets together.
3. ``apply_scalar_filters`` applies the column filters to the loaded items.
4. ``apply_membership`` keeps only items in the combined set.
5. ``sort_items`` orders the result; every sort is stable.
"""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, List, Optional, Set

from wardrobe.clothing_manager import ClothingItemWithMeta, get_item_ids_by_tag, list_clothing_items
from wardrobe.constants import ARCHIVED_STATUSES
from wardrobe.database.database import Database
from wardrobe.model import TagKind


class SortKey(str, Enum):
    recently_added = "recently_added"
    name_asc = "name_asc"
    name_desc = "name_desc"
    most_worn = "most_worn"
    least_worn = "least_worn"
    purchase_date = "purchase_date"


SORT_LABELS = {
    SortKey.recently_added: "Recently Added",
    SortKey.name_asc: "Name (A-Z)",
    SortKey.name_desc: "Name (Z-A)",
    SortKey.most_worn: "Most Worn",
    SortKey.least_worn: "Least Worn",
    SortKey.purchase_date: "Purchase Date",
}


@dataclass
class ActiveFilters:
    category_id: Optional[int] = None
    subcategory_id: Optional[int] = None
    color_id: Optional[int] = None
    season_id: Optional[int] = None
    occasion_id: Optional[int] = None
    brand: Optional[str] = None
    status: Optional[str] = None
    search: Optional[str] = None

    def junction_filters(self):
        """(kind, tag id) for every active tag filter."""
        pairs = [
            (TagKind.color, self.color_id),
            (TagKind.season, self.season_id),
            (TagKind.occasion, self.occasion_id),
        ]
        return [(kind, tag_id) for kind, tag_id in pairs if tag_id is not None]


def active_filter_count(filters: ActiveFilters) -> int:
    return sum(1 for f in fields(filters) if getattr(filters, f.name) not in (None, ""))


async def resolve_junction_filters(db: Database, filters: ActiveFilters) -> List[Set[int]]:
    return [set(await get_item_ids_by_tag(db, kind, tag_id)) for kind, tag_id in filters.junction_filters()]


def intersect_memberships(memberships: Iterable[Set[int]]) -> Optional[Set[int]]:
    """AND of all membership sets, or None when there are none to apply."""
    memberships = list(memberships)
    if not memberships:
        return None
    return set.intersection(*memberships)


def apply_scalar_filters(
    items: Iterable[ClothingItemWithMeta],
    filters: ActiveFilters,
    show_archived_items: bool = True,
) -> List[ClothingItemWithMeta]:
    result = list(items)

    # archived items only hide when no explicit status is asked for
    if not show_archived_items and filters.status is None:
        result = [i for i in result if i.status not in ARCHIVED_STATUSES]

    if filters.category_id is not None:
        result = [i for i in result if i.category_id == filters.category_id]
    if filters.subcategory_id is not None:
        result = [i for i in result if i.subcategory_id == filters.subcategory_id]
    if filters.status is not None:
        result = [i for i in result if i.status == filters.status]
    if filters.brand is not None:
        brand = filters.brand.casefold()
        result = [i for i in result if (i.brand or "").casefold() == brand]
    if filters.search:
        needle = filters.search.strip().casefold()
        result = [
            i for i in result
            if needle in i.name.casefold() or needle in (i.brand or "").casefold()
        ]
    return result


def apply_membership(items: Iterable[ClothingItemWithMeta], membership: Optional[Set[int]]) -> List[ClothingItemWithMeta]:
    if membership is None:
        return list(items)
    return [i for i in items if i.id in membership]


def sort_items(items: Iterable[ClothingItemWithMeta], sort_key=SortKey.recently_added) -> List[ClothingItemWithMeta]:
    items = list(items)
    sort_key = SortKey(sort_key)

    if sort_key == SortKey.recently_added:
        return sorted(items, key=lambda i: i.created_at, reverse=True)
    if sort_key == SortKey.name_asc:
        return sorted(items, key=lambda i: i.name.casefold())
    if sort_key == SortKey.name_desc:
        return sorted(items, key=lambda i: i.name.casefold(), reverse=True)
    if sort_key == SortKey.most_worn:
        return sorted(items, key=lambda i: i.wear_count, reverse=True)
    if sort_key == SortKey.least_worn:
        return sorted(items, key=lambda i: i.wear_count)

    # purchase date: newest first, undated items last
    dated = [i for i in items if i.purchase_date is not None]
    undated = [i for i in items if i.purchase_date is None]
    return sorted(dated, key=lambda i: i.purchase_date, reverse=True) + undated


def filter_and_sort(
    items: Iterable[ClothingItemWithMeta],
    filters: ActiveFilters,
    membership: Optional[Set[int]] = None,
    sort_key=SortKey.recently_added,
    show_archived_items: bool = True,
) -> List[ClothingItemWithMeta]:
    result = apply_scalar_filters(items, filters, show_archived_items)
    result = apply_membership(result, membership)
    return sort_items(result, sort_key)


async def resolve_closet_view(
    db: Database,
    filters: Optional[ActiveFilters] = None,
    sort_key=SortKey.recently_added,
    show_archived_items: bool = True,
) -> List[ClothingItemWithMeta]:
    """Loads the closet and runs the whole filter/sort pipeline over it."""
    filters = filters or ActiveFilters()
    items = await list_clothing_items(db)
    membership = intersect_memberships(await resolve_junction_filters(db, filters))
    return filter_and_sort(items, filters, membership, sort_key, show_archived_items)
