from __future__ import annotations

from datetime import date

from workschedule.models.enums import Granularity, SortKey
from workschedule.schemas.schedule import (
    ScheduleDay,
    ScheduleFilters,
    ScheduleResponse,
    SourceToggles,
)
from workschedule.services.calendar_buckets import bucket_work_items, sort_work_items
from workschedule.services.calendar_dates import range_label, shift_date
from workschedule.services.schedule_filters import active_filter_count, filter_work_items
from workschedule.services.schedule_summary import summarize_day, summarize_month
from workschedule.services.work_items import build_work_items
from workschedule.store import MockStore


def build_schedule(
    store: MockStore,
    selected_date: date,
    granularity: Granularity,
    filters: ScheduleFilters | None = None,
    toggles: SourceToggles | None = None,
    sort_by: SortKey = SortKey.DATE,
    timezone: str = "UTC",
) -> ScheduleResponse:
    """Run normalize, filter and bucket for one calendar view."""
    filters = filters or ScheduleFilters()
    toggles = toggles or SourceToggles()

    items = build_work_items(
        store.projects,
        store.work_orders,
        store.recurring_tasks,
        toggles.show_projects,
        toggles.show_work_orders,
        toggles.show_recurring_jobs,
        timezone=timezone,
    )
    buckets = bucket_work_items(filter_work_items(items, filters), selected_date, granularity)

    days = []
    for key, day_items in buckets.items():
        if granularity == Granularity.DAY:
            day_items = sort_work_items(day_items, sort_by)
        days.append(ScheduleDay(date=date.fromisoformat(key), items=day_items))

    response = ScheduleResponse(
        granularity=granularity,
        selected_date=selected_date,
        range_start=days[0].date,
        range_end=days[-1].date,
        label=range_label(selected_date, granularity),
        previous_date=shift_date(selected_date, granularity, -1),
        next_date=shift_date(selected_date, granularity, 1),
        sort_by=sort_by,
        active_filter_count=active_filter_count(filters),
        total_items=sum(len(day.items) for day in days),
        days=days,
    )
    if granularity == Granularity.DAY:
        response.day_summary = summarize_day(days[0].items)
    elif granularity == Granularity.MONTH:
        response.month_summary = summarize_month(buckets, selected_date.replace(day=1))
    return response
