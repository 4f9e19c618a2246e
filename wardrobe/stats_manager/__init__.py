from .wear import cost_per_wear, wear_count_column
from .views import BreakdownRow, CalendarDay, ColorBreakdownRow, StatItem, StatsData, StatsOverview
from .stats_controller import (
    get_breakdown_by_brand,
    get_breakdown_by_category,
    get_breakdown_by_color,
    get_breakdown_by_material,
    get_breakdown_by_occasion,
    get_breakdown_by_season,
    get_calendar_days_for_month,
    get_cost_per_wear,
    get_least_worn_items,
    get_most_worn_items,
    get_never_worn_items,
    get_stats,
    get_stats_overview,
    get_wear_count,
)
