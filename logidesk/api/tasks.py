from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from logidesk.container import ServiceContainer
from logidesk.errors import ValidationError
from logidesk.models.task import Task, TaskCreate
from logidesk.models.timer import TimerView

from .deps import get_container

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


class TaskListResponse(BaseModel):
    tasks: List[Task]
    count: int


class TaskResponse(BaseModel):
    task: Task
    notice: Optional[str] = None


class TaskStartResponse(BaseModel):
    task: Task
    timer: TimerView


class TaskCompleteResponse(BaseModel):
    task: Task
    time_spent: str
    timer: TimerView


@router.get("", response_model=TaskListResponse)
async def list_tasks(container: ServiceContainer = Depends(get_container)):
    """List all tasks with time spent"""
    tasks = container.tasks.list_tasks()
    return {"tasks": tasks, "count": len(tasks)}


@router.post("", response_model=TaskResponse)
async def create_task(request: TaskCreate, container: ServiceContainer = Depends(get_container)):
    """Add a task"""
    try:
        task = container.tasks.add_task(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"task": task, "notice": container.tasks.last_notice}


@router.post("/{task_id}/start", response_model=TaskStartResponse)
async def start_task(task_id: str, container: ServiceContainer = Depends(get_container)):
    """Mark a task In Progress and start its timer"""
    try:
        task = container.tasks.start_task(task_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"task": task, "timer": container.timer.view()}


@router.post("/{task_id}/complete", response_model=TaskCompleteResponse)
async def complete_task(task_id: str, container: ServiceContainer = Depends(get_container)):
    """Mark a task Completed and close its timer"""
    try:
        time_spent = container.tasks.complete_task(task_id)
        task = container.tasks.get_task(task_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"task": task, "time_spent": time_spent, "timer": container.timer.view()}
