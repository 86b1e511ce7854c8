from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from workschedule.models.enums import ProjectStatus
from workschedule.schemas.project import ProjectOut
from workschedule.store import MockStore, get_store


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[ProjectOut])
async def list_projects(
    project_status: ProjectStatus | None = Query(default=None, alias="status"),
    store: MockStore = Depends(get_store),
) -> list[ProjectOut]:
    if project_status is None:
        return store.projects
    return [p for p in store.projects if p.status == project_status]


@router.get("/{project_id}", response_model=ProjectOut)
async def get_project(project_id: str, store: MockStore = Depends(get_store)) -> ProjectOut:
    for project in store.projects:
        if project.id == project_id:
            return project
    logger.info("Project %s not found", project_id)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
