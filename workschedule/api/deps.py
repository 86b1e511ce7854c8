from __future__ import annotations

from fastapi import Query

from workschedule.schemas.schedule import ALL, ScheduleFilters, SourceToggles


def get_schedule_filters(
    search: str = "",
    status: str = ALL,
    priority: str = ALL,
    customer: str = ALL,
    assignee: str = Query(default=ALL, description="Person or role id"),
    location: str = "",
) -> ScheduleFilters:
    return ScheduleFilters(
        search=search,
        status=status,
        priority=priority,
        customer=customer,
        assignee=assignee,
        location=location,
    )


def get_source_toggles(
    show_projects: bool = True,
    show_work_orders: bool = True,
    show_recurring_jobs: bool = True,
) -> SourceToggles:
    return SourceToggles(
        show_projects=show_projects,
        show_work_orders=show_work_orders,
        show_recurring_jobs=show_recurring_jobs,
    )
