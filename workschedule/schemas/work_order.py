from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from workschedule.models.enums import ActivityLevel, Priority, WorkOrderStatus


class WorkOrderOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    project_id: str | None = Field(default=None, alias="projectId")
    instance_id: str | None = Field(default=None, alias="instanceId")
    customer_name: str = Field(default="", alias="customerName")
    title: str
    description: str = ""
    status: WorkOrderStatus
    priority: Priority = Priority.MEDIUM
    location: str | None = None
    assigned_to: list[str] = Field(default_factory=list, alias="assignedTo")
    assigned_roles: list[str] = Field(default_factory=list, alias="assignedRoles")
    scheduled_date: str = Field(alias="scheduledDate")
    scheduled_time: str | None = Field(default=None, alias="scheduledTime")
    completed_date: str | None = Field(default=None, alias="completedDate")
    completed_by: str | None = Field(default=None, alias="completedBy")
    activity_level: ActivityLevel = Field(default=ActivityLevel.MEDIUM, alias="activityLevel")
    estimated_duration: float | None = Field(default=None, alias="estimatedDuration")
    actual_duration: float | None = Field(default=None, alias="actualDuration")
    is_recurring: bool = Field(default=False, alias="isRecurring")
    recurring_task_id: str | None = Field(default=None, alias="recurringTaskId")
