from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PersonOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    role: str
    role_id: str | None = Field(default=None, alias="roleId")
    instance_id: str | None = Field(default=None, alias="instanceId")
