from __future__ import annotations

from typing import Iterable

from workschedule.schemas.project import ProjectOut
from workschedule.schemas.recurring_task import RecurringTaskOut
from workschedule.schemas.schedule import ALL, ScheduleFilters
from workschedule.schemas.work_item import WorkItem
from workschedule.schemas.work_order import WorkOrderOut


def _is_set(value: str) -> bool:
    return bool(value) and value != ALL


def matches_search(item: WorkItem, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    haystack = (item.id, item.title, item.customer, item.description)
    return any(field is not None and needle in field.lower() for field in haystack)


def matches_filters(item: WorkItem, filters: ScheduleFilters) -> bool:
    if not matches_search(item, filters.search):
        return False
    if _is_set(filters.status) and item.status != filters.status:
        return False
    if _is_set(filters.priority) and item.priority != filters.priority:
        return False
    if _is_set(filters.customer) and item.customer != filters.customer:
        return False
    if _is_set(filters.assignee) and filters.assignee not in item.assigned_to:
        return False
    if filters.location:
        if item.location is None or filters.location.lower() not in item.location.lower():
            return False
    return True


def filter_work_items(items: Iterable[WorkItem], filters: ScheduleFilters) -> list[WorkItem]:
    """Keep the items matching every active filter, in their original order."""
    return [item for item in items if matches_filters(item, filters)]


def active_filter_count(filters: ScheduleFilters) -> int:
    # Free-text search is shown separately and is not counted.
    count = sum(1 for value in (filters.status, filters.priority, filters.customer, filters.assignee) if _is_set(value))
    if filters.location:
        count += 1
    return count


def unique_customers(
    projects: Iterable[ProjectOut],
    work_orders: Iterable[WorkOrderOut],
    recurring_tasks: Iterable[RecurringTaskOut],
) -> list[str]:
    customers: set[str] = set()
    customers.update(p.customer_name for p in projects)
    customers.update(wo.customer_name for wo in work_orders)
    customers.update(t.customer_name for t in recurring_tasks)
    return sorted(c for c in customers if c)
