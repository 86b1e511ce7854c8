from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from workschedule.schemas.recurring_task import RecurringTaskOut
from workschedule.services.calendar_dates import parse_calendar_date
from workschedule.store import MockStore, get_store


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[RecurringTaskOut])
async def list_recurring_tasks(store: MockStore = Depends(get_store)) -> list[RecurringTaskOut]:
    return sorted(store.recurring_tasks, key=lambda t: parse_calendar_date(t.next_occurrence) or date.max)


@router.get("/{task_id}", response_model=RecurringTaskOut)
async def get_recurring_task(task_id: str, store: MockStore = Depends(get_store)) -> RecurringTaskOut:
    for task in store.recurring_tasks:
        if task.id == task_id:
            return task
    logger.info("Recurring task %s not found", task_id)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recurring task not found")
