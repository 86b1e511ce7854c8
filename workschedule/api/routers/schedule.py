from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query

from workschedule.api.deps import get_schedule_filters, get_source_toggles
from workschedule.config import settings
from workschedule.models.enums import Granularity, SortKey
from workschedule.schemas.schedule import FilterOptions, ScheduleFilters, ScheduleResponse, SourceToggles
from workschedule.services.calendar_dates import today
from workschedule.services.schedule_filters import unique_customers
from workschedule.services.schedule_view import build_schedule
from workschedule.store import MockStore, get_store


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=ScheduleResponse)
async def get_schedule(
    granularity: Granularity | None = None,
    selected_date: date | None = Query(default=None, alias="date"),
    sort_by: SortKey = SortKey.DATE,
    filters: ScheduleFilters = Depends(get_schedule_filters),
    toggles: SourceToggles = Depends(get_source_toggles),
    store: MockStore = Depends(get_store),
) -> ScheduleResponse:
    granularity = granularity or settings.DEFAULT_GRANULARITY
    selected_date = selected_date or today(settings.SCHEDULE_TODAY, settings.TIMEZONE)
    logger.debug("Schedule query %s %s filters=%s toggles=%s", granularity.value, selected_date, filters, toggles)
    return build_schedule(
        store,
        selected_date,
        granularity,
        filters=filters,
        toggles=toggles,
        sort_by=sort_by,
        timezone=settings.TIMEZONE,
    )


@router.get("/filter-options", response_model=FilterOptions)
async def filter_options(store: MockStore = Depends(get_store)) -> FilterOptions:
    return FilterOptions(
        customers=unique_customers(store.projects, store.work_orders, store.recurring_tasks),
        people=store.people,
    )
