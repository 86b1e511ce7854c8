from __future__ import annotations

from datetime import date
from typing import Iterable

from workschedule.models.enums import Granularity, SortKey, WorkItemType
from workschedule.schemas.work_item import WorkItem
from workschedule.services.calendar_dates import date_range

PRIORITY_RANK = {"critical": 0, "high": 1, "medium": 2, "low": 3}
_LOWEST_RANK = PRIORITY_RANK["low"]


def is_active_on(item: WorkItem, day: date) -> bool:
    """
    Work orders and recurring jobs are point events on their start date.
    Projects cover every day from start to end inclusive; without an end
    date they cover the start day only.
    """
    if item.start_date is None:
        return False
    if item.type != WorkItemType.PROJECT:
        return item.start_date == day
    end = item.end_date or item.start_date
    return item.start_date <= day <= end


def bucket_work_items(
    items: Iterable[WorkItem],
    selected_date: date,
    granularity: Granularity,
) -> dict[str, list[WorkItem]]:
    """
    Group items by ISO date over the view's date range.

    Every date of the range gets a key, in ascending order, even when no
    item falls on it.
    """
    items = list(items)
    return {
        day.isoformat(): [item for item in items if is_active_on(item, day)]
        for day in date_range(selected_date, granularity)
    }


def _date_key(item: WorkItem) -> tuple[bool, date]:
    return (item.start_date is None, item.start_date or date.min)


def _priority_key(item: WorkItem) -> int:
    # Critical sorts first; missing or unknown priorities sort with low.
    return PRIORITY_RANK.get((item.priority or "").lower(), _LOWEST_RANK)


def sort_work_items(items: Iterable[WorkItem], sort_by: SortKey = SortKey.DATE) -> list[WorkItem]:
    if sort_by == SortKey.PRIORITY:
        return sorted(items, key=_priority_key)
    if sort_by == SortKey.CUSTOMER:
        return sorted(items, key=lambda item: item.customer.casefold())
    if sort_by == SortKey.DURATION:
        return sorted(items, key=lambda item: item.estimated_duration or 0, reverse=True)
    return sorted(items, key=_date_key)
