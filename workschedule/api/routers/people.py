from __future__ import annotations

from fastapi import APIRouter, Depends

from workschedule.schemas.person import PersonOut
from workschedule.store import MockStore, get_store


router = APIRouter()


@router.get("", response_model=list[PersonOut])
async def list_people(store: MockStore = Depends(get_store)) -> list[PersonOut]:
    return store.people
