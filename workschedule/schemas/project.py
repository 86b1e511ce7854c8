from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from workschedule.models.enums import Priority, ProjectStatus


class ProjectOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    instance_id: str | None = Field(default=None, alias="instanceId")
    customer_name: str = Field(default="", alias="customerName")
    status: ProjectStatus
    # Dates stay as the raw strings the source records carry.
    start_date: str = Field(alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    budget: float | None = None
    assigned_to: list[str] = Field(default_factory=list, alias="assignedTo")
    progress: int = 0
    priority: Priority = Priority.MEDIUM
