from fastapi import APIRouter

from workschedule.api.routers.people import router as people_router
from workschedule.api.routers.projects import router as projects_router
from workschedule.api.routers.recurring_tasks import router as recurring_tasks_router
from workschedule.api.routers.schedule import router as schedule_router
from workschedule.api.routers.work_orders import router as work_orders_router


api_router = APIRouter()
api_router.include_router(people_router, prefix="/people", tags=["people"])
api_router.include_router(projects_router, prefix="/projects", tags=["projects"])
api_router.include_router(recurring_tasks_router, prefix="/recurring-tasks", tags=["recurring-tasks"])
api_router.include_router(schedule_router, prefix="/schedule", tags=["schedule"])
api_router.include_router(work_orders_router, prefix="/work-orders", tags=["work-orders"])
