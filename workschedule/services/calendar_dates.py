from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Union
from zoneinfo import ZoneInfo

from workschedule.models.enums import Granularity

DateLike = Union[date, datetime, str, None]

WORK_WEEK_DAYS = 5
MONTH_GRID_DAYS = 42


def parse_calendar_date(value: DateLike, timezone: str = "UTC") -> date | None:
    """
    Reduce a source date to its calendar date.

    Offset-aware timestamps are moved into ``timezone`` first; naive ones keep
    their own date. Unparseable input yields None instead of raising, so the
    record simply drops out of every bucket.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(ZoneInfo(timezone))
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parse_calendar_date(parsed, timezone)


def today(pinned: date | None = None, timezone: str = "UTC") -> date:
    if pinned is not None:
        return pinned
    return datetime.now(ZoneInfo(timezone)).date()


def week_start(d: date) -> date:
    # Monday on or before d; Sunday belongs to the week that started six days earlier.
    return d - timedelta(days=d.weekday())


def month_grid_start(d: date) -> date:
    first = d.replace(day=1)
    # weekday(): Monday=0 .. Sunday=6, so Sunday leads by zero days.
    return first - timedelta(days=(first.weekday() + 1) % 7)


def date_range(selected_date: date, granularity: Granularity) -> list[date]:
    """Dates covered by a calendar view, in ascending order."""
    if granularity == Granularity.DAY:
        return [selected_date]
    if granularity == Granularity.WEEK:
        monday = week_start(selected_date)
        return [monday + timedelta(days=i) for i in range(WORK_WEEK_DAYS)]
    start = month_grid_start(selected_date)
    return [start + timedelta(days=i) for i in range(MONTH_GRID_DAYS)]


def add_months(d: date, months: int) -> date:
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def shift_date(selected_date: date, granularity: Granularity, step: int) -> date:
    """Move the reference date by ``step`` views (negative steps go back)."""
    if granularity == Granularity.DAY:
        return selected_date + timedelta(days=step)
    if granularity == Granularity.WEEK:
        return selected_date + timedelta(weeks=step)
    return add_months(selected_date, step)


def range_label(selected_date: date, granularity: Granularity) -> str:
    if granularity == Granularity.MONTH:
        return f"{selected_date:%B} {selected_date.year}"
    if granularity == Granularity.WEEK:
        days = date_range(selected_date, granularity)
        first, last = days[0], days[-1]
        return f"{first:%b} {first.day} - {last:%b} {last.day}"
    return f"{selected_date:%A}, {selected_date:%B} {selected_date.day}, {selected_date.year}"
