from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from workschedule.models.enums import WorkItemType


class WorkItem(BaseModel):
    """One project, work order or recurring job, flattened for calendar display."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: WorkItemType
    title: str
    customer: str
    status: str
    priority: str | None = None
    assigned_to: tuple[str, ...] = ()
    location: str | None = None
    # None when the source date could not be parsed; such items match no bucket.
    start_date: date | None
    end_date: date | None = None
    estimated_duration: float | None = None
    description: str | None = None
