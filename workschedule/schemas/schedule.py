from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from workschedule.models.enums import Granularity, SortKey
from workschedule.schemas.person import PersonOut
from workschedule.schemas.work_item import WorkItem

ALL = "all"


class ScheduleFilters(BaseModel):
    """Query parameters narrowing the schedule. "all" and "" mean no constraint."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    status: str = ALL
    priority: str = ALL
    customer: str = ALL
    assignee: str = ALL
    location: str = ""


class SourceToggles(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_projects: bool = True
    show_work_orders: bool = True
    show_recurring_jobs: bool = True


class ScheduleDay(BaseModel):
    date: date
    items: list[WorkItem]


class DaySummary(BaseModel):
    total_items: int
    project_count: int
    work_order_count: int
    recurring_count: int
    total_hours: float
    unique_customers: int


class BusiestDay(BaseModel):
    date: date
    count: int


class MonthSummary(BaseModel):
    total: int
    project_count: int
    work_order_count: int
    recurring_count: int
    completed: int
    in_progress: int
    scheduled: int
    at_risk: int
    critical_count: int
    high_count: int
    busiest_day: BusiestDay | None = None
    team_member_count: int
    total_hours: float
    days_with_work: int


class ScheduleResponse(BaseModel):
    granularity: Granularity
    selected_date: date
    range_start: date
    range_end: date
    label: str
    previous_date: date
    next_date: date
    sort_by: SortKey
    active_filter_count: int
    total_items: int
    days: list[ScheduleDay]
    day_summary: DaySummary | None = None
    month_summary: MonthSummary | None = None


class FilterOptions(BaseModel):
    customers: list[str] = Field(default_factory=list)
    people: list[PersonOut] = Field(default_factory=list)
