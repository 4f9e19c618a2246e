from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class StatsOverview:
    total_items: int = 0
    worn_items: int = 0
    never_worn_items: int = 0
    total_value: Optional[float] = None


@dataclass
class StatItem:
    id: int
    name: str
    image_path: Optional[str]
    wear_count: int


@dataclass
class BreakdownRow:
    label: str
    count: int


@dataclass
class ColorBreakdownRow:
    label: str
    hex: Optional[str]
    count: int


@dataclass
class CalendarDay:
    date: date
    log_count: int
    has_ootd: bool


@dataclass
class StatsData:
    overview: StatsOverview
    most_worn: List[StatItem] = field(default_factory=list)
    least_worn: List[StatItem] = field(default_factory=list)
    never_worn: List[StatItem] = field(default_factory=list)
    by_category: List[BreakdownRow] = field(default_factory=list)
    by_color: List[ColorBreakdownRow] = field(default_factory=list)
    by_brand: List[BreakdownRow] = field(default_factory=list)
    by_material: List[BreakdownRow] = field(default_factory=list)
    by_occasion: List[BreakdownRow] = field(default_factory=list)
    by_season: List[BreakdownRow] = field(default_factory=list)
