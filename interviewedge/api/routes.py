from fastapi import APIRouter
from interviewedge.api.routes_health import router as health_router
from interviewedge.api.routes_runs import router as runs_router
from interviewedge.api.routes_chat import router as chat_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(runs_router, tags=["runs"])
router.include_router(chat_router, tags=["copilot"])
