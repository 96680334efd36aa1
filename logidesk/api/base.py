from fastapi import APIRouter
from logidesk.api import analyze_file, assistant, conversations, health, tasks, timer

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(timer.router)
api_router.include_router(tasks.router)
api_router.include_router(conversations.router)
api_router.include_router(assistant.router)
api_router.include_router(analyze_file.router)
