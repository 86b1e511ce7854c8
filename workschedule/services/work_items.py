from __future__ import annotations

from typing import Iterable

from workschedule.models.enums import WorkItemType
from workschedule.schemas.project import ProjectOut
from workschedule.schemas.recurring_task import RecurringTaskOut
from workschedule.schemas.work_item import WorkItem
from workschedule.schemas.work_order import WorkOrderOut
from workschedule.services.calendar_dates import parse_calendar_date

# Recurring series carry no lifecycle field of their own.
RECURRING_JOB_STATUS = "active"


def _enum_value(value) -> str | None:
    if value is None:
        return None
    return getattr(value, "value", value)


def project_to_work_item(project: ProjectOut, timezone: str = "UTC") -> WorkItem:
    start_date = parse_calendar_date(project.start_date, timezone)
    end_date = parse_calendar_date(project.end_date, timezone)
    # An unreadable end date leaves the range undefined, so the project matches no day.
    if end_date is None and project.end_date and project.end_date.strip():
        start_date = None
    return WorkItem(
        id=project.id,
        type=WorkItemType.PROJECT,
        title=project.name,
        customer=project.customer_name or project.name,
        status=_enum_value(project.status),
        priority=_enum_value(project.priority),
        assigned_to=tuple(project.assigned_to),
        location=None,
        start_date=start_date,
        end_date=end_date,
        estimated_duration=None,
        description=project.description,
    )


def work_order_to_work_item(work_order: WorkOrderOut, timezone: str = "UTC") -> WorkItem:
    return WorkItem(
        id=work_order.id,
        type=WorkItemType.WORK_ORDER,
        title=work_order.title,
        customer=work_order.customer_name,
        status=_enum_value(work_order.status),
        priority=_enum_value(work_order.priority),
        assigned_to=(*work_order.assigned_to, *work_order.assigned_roles),
        location=work_order.location,
        start_date=parse_calendar_date(work_order.scheduled_date, timezone),
        end_date=parse_calendar_date(work_order.completed_date, timezone),
        estimated_duration=work_order.estimated_duration,
        description=work_order.description,
    )


def recurring_task_to_work_item(task: RecurringTaskOut, timezone: str = "UTC") -> WorkItem:
    return WorkItem(
        id=task.id,
        type=WorkItemType.RECURRING_JOB,
        title=task.title,
        customer=task.customer_name,
        status=RECURRING_JOB_STATUS,
        priority=_enum_value(task.activity_level),
        assigned_to=(*task.assigned_to, *task.assigned_roles),
        location=None,
        start_date=parse_calendar_date(task.next_occurrence, timezone),
        end_date=parse_calendar_date(task.end_date, timezone),
        estimated_duration=task.estimated_duration,
        description=task.description,
    )


def build_work_items(
    projects: Iterable[ProjectOut],
    work_orders: Iterable[WorkOrderOut],
    recurring_tasks: Iterable[RecurringTaskOut],
    show_projects: bool = True,
    show_work_orders: bool = True,
    show_recurring_jobs: bool = True,
    *,
    timezone: str = "UTC",
) -> list[WorkItem]:
    """
    Flatten the three sources into one list of work items.

    Projects come first, then work orders, then recurring jobs, each in source
    order. A disabled source contributes nothing.
    """
    items: list[WorkItem] = []
    if show_projects:
        items.extend(project_to_work_item(p, timezone) for p in projects)
    if show_work_orders:
        items.extend(work_order_to_work_item(wo, timezone) for wo in work_orders)
    if show_recurring_jobs:
        items.extend(recurring_task_to_work_item(t, timezone) for t in recurring_tasks)
    return items
