"""Task domain model"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Task status"""
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskBase(BaseModel):
    """Base task fields"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    assignee: str = ""
    deadline: str = ""  # YYYY-MM-DD
    time_estimate_hours: float = Field(1, alias="timeEstimate", ge=0)


class TaskCreate(TaskBase):
    """Task creation model"""
    pass


class Task(TaskBase):
    """Complete task model as persisted"""
    id: str
    time_spent: Optional[int] = Field(None, alias="timeSpent")  # seconds
