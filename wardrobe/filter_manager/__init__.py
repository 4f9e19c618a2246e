from .closet_filter import (
    SORT_LABELS,
    ActiveFilters,
    SortKey,
    active_filter_count,
    apply_membership,
    apply_scalar_filters,
    filter_and_sort,
    intersect_memberships,
    resolve_closet_view,
    resolve_junction_filters,
    sort_items,
)
