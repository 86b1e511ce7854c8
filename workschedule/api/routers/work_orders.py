from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from workschedule.models.enums import WorkOrderStatus
from workschedule.schemas.work_order import WorkOrderOut
from workschedule.services.calendar_dates import parse_calendar_date
from workschedule.store import MockStore, get_store


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[WorkOrderOut])
async def list_work_orders(
    order_status: WorkOrderStatus | None = Query(default=None, alias="status"),
    project_id: str | None = None,
    store: MockStore = Depends(get_store),
) -> list[WorkOrderOut]:
    work_orders = store.work_orders
    if order_status is not None:
        work_orders = [wo for wo in work_orders if wo.status == order_status]
    if project_id:
        work_orders = [wo for wo in work_orders if wo.project_id == project_id]
    # Undated orders sort last.
    return sorted(work_orders, key=lambda wo: parse_calendar_date(wo.scheduled_date) or date.max)


@router.get("/{work_order_id}", response_model=WorkOrderOut)
async def get_work_order(work_order_id: str, store: MockStore = Depends(get_store)) -> WorkOrderOut:
    for work_order in store.work_orders:
        if work_order.id == work_order_id:
            return work_order
    logger.info("Work order %s not found", work_order_id)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Work order not found")
