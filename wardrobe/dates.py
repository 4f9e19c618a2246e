from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, str, None]


def to_date(value: DateLike) -> Optional[date]:
    """Accepts a date or a 'YYYY-MM-DD' string; None passes through."""
    if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
        return value
    if isinstance(value, datetime):
        return value.date()
    return datetime.strptime(value, "%Y-%m-%d").date()
