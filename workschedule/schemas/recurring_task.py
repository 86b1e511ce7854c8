from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from workschedule.models.enums import ActivityLevel, Frequency


class CompletionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    work_order_id: str = Field(alias="workOrderId")
    completed_by: str = Field(alias="completedBy")
    duration: float


class RecurringTaskOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    instance_id: str | None = Field(default=None, alias="instanceId")
    project_id: str | None = Field(default=None, alias="projectId")
    customer_name: str = Field(default="", alias="customerName")
    title: str
    description: str = ""
    frequency: Frequency
    frequency_details: str | None = Field(default=None, alias="frequencyDetails")
    start_date: str = Field(alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    assigned_to: list[str] = Field(default_factory=list, alias="assignedTo")
    assigned_roles: list[str] = Field(default_factory=list, alias="assignedRoles")
    estimated_duration: float | None = Field(default=None, alias="estimatedDuration")
    activity_level: ActivityLevel = Field(default=ActivityLevel.MEDIUM, alias="activityLevel")
    next_occurrence: str = Field(alias="nextOccurrence")
    completion_history: list[CompletionRecord] = Field(default_factory=list, alias="completionHistory")
