from fastapi import APIRouter, Depends
from pydantic import BaseModel

from logidesk.container import ServiceContainer
from logidesk.models.task import Task
from logidesk.models.timer import TimerView

from .deps import get_container

router = APIRouter(prefix="/api/timer", tags=["timer"])


class CompleteTimerResponse(BaseModel):
    cleared: bool
    timer: TimerView


@router.get("", response_model=TimerView)
async def get_timer(container: ServiceContainer = Depends(get_container)):
    """Current timer state with elapsed time brought up to date"""
    return container.timer.view()


@router.post("/start", response_model=TimerView)
async def start_timer(task: Task, container: ServiceContainer = Depends(get_container)):
    """Start or resume timing a task"""
    container.timer.start_timer(task)
    return container.timer.view()


@router.post("/stop", response_model=TimerView)
async def stop_timer(container: ServiceContainer = Depends(get_container)):
    """Pause the running timer"""
    container.timer.stop_timer()
    return container.timer.view()


@router.post("/complete/{task_id}", response_model=CompleteTimerResponse)
async def complete_timer_task(task_id: str, container: ServiceContainer = Depends(get_container)):
    """Close out the timer if task_id is the active task"""
    cleared = container.timer.complete_task(task_id)
    return {"cleared": cleared, "timer": container.timer.view()}
