from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping

from workschedule.models.enums import WorkItemType
from workschedule.schemas.schedule import BusiestDay, DaySummary, MonthSummary
from workschedule.schemas.work_item import WorkItem


def _count_type(items: list[WorkItem], item_type: WorkItemType) -> int:
    return sum(1 for item in items if item.type == item_type)


def _total_hours(items: Iterable[WorkItem]) -> float:
    return float(sum(item.estimated_duration or 0 for item in items))


def _status_has(item: WorkItem, *fragments: str) -> bool:
    status = item.status.lower()
    return any(fragment in status for fragment in fragments)


def summarize_day(items: Iterable[WorkItem]) -> DaySummary:
    items = list(items)
    return DaySummary(
        total_items=len(items),
        project_count=_count_type(items, WorkItemType.PROJECT),
        work_order_count=_count_type(items, WorkItemType.WORK_ORDER),
        recurring_count=_count_type(items, WorkItemType.RECURRING_JOB),
        total_hours=_total_hours(items),
        unique_customers=len({item.customer for item in items}),
    )


def summarize_month(buckets: Mapping[str, list[WorkItem]], month_start: date) -> MonthSummary:
    """
    Statistics for the days of ``month_start``'s month found in ``buckets``.

    Lead-in and trail-out days of the grid are ignored. A project spanning
    several days counts once. Items are told apart by id alone, so records
    of different types sharing an id count as one item.
    """
    month_days = [
        (day, day_items)
        for day, day_items in ((date.fromisoformat(key), value) for key, value in buckets.items())
        if (day.year, day.month) == (month_start.year, month_start.month)
    ]

    seen: set[str] = set()
    items: list[WorkItem] = []
    for _, day_items in month_days:
        for item in day_items:
            if item.id not in seen:
                seen.add(item.id)
                items.append(item)

    busiest_day = None
    for day, day_items in month_days:
        if day_items and (busiest_day is None or len(day_items) > busiest_day.count):
            busiest_day = BusiestDay(date=day, count=len(day_items))

    assignees = {person for item in items for person in item.assigned_to}

    return MonthSummary(
        total=len(items),
        project_count=_count_type(items, WorkItemType.PROJECT),
        work_order_count=_count_type(items, WorkItemType.WORK_ORDER),
        recurring_count=_count_type(items, WorkItemType.RECURRING_JOB),
        completed=sum(1 for i in items if _status_has(i, "complet") or i.status.lower() == "done"),
        in_progress=sum(1 for i in items if _status_has(i, "progress") or i.status.lower() == "active"),
        scheduled=sum(1 for i in items if _status_has(i, "schedul", "planning")),
        at_risk=sum(1 for i in items if _status_has(i, "risk", "overdue", "blocked")),
        critical_count=sum(1 for i in items if (i.priority or "").lower() == "critical"),
        high_count=sum(1 for i in items if (i.priority or "").lower() == "high"),
        busiest_day=busiest_day,
        team_member_count=len(assignees),
        total_hours=_total_hours(items),
        days_with_work=sum(1 for _, day_items in month_days if day_items),
    )
