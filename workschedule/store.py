from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from workschedule import seed
from workschedule.schemas.person import PersonOut
from workschedule.schemas.project import ProjectOut
from workschedule.schemas.recurring_task import RecurringTaskOut
from workschedule.schemas.work_order import WorkOrderOut


logger = logging.getLogger(__name__)


@dataclass
class MockStore:
    """Source collections held in memory for the lifetime of the process."""

    projects: list[ProjectOut] = field(default_factory=list)
    work_orders: list[WorkOrderOut] = field(default_factory=list)
    recurring_tasks: list[RecurringTaskOut] = field(default_factory=list)
    people: list[PersonOut] = field(default_factory=list)


def load_seed_store() -> MockStore:
    store = MockStore(
        projects=[ProjectOut.model_validate(row) for row in seed.PROJECTS],
        work_orders=[WorkOrderOut.model_validate(row) for row in seed.WORK_ORDERS],
        recurring_tasks=[RecurringTaskOut.model_validate(row) for row in seed.RECURRING_TASKS],
        people=[PersonOut.model_validate(row) for row in seed.PEOPLE],
    )
    logger.info(
        "Loaded mock data: %d projects, %d work orders, %d recurring tasks, %d people",
        len(store.projects),
        len(store.work_orders),
        len(store.recurring_tasks),
        len(store.people),
    )
    return store


@lru_cache(maxsize=1)
def get_store() -> MockStore:
    return load_seed_store()
