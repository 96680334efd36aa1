"""Timer state models"""
from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from .task import Task


class TimerStatus(str, Enum):
    """Timer status"""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class TimerState(BaseModel):
    """
    Timer state persisted under the taskTimer key.
    Serialized with the client field names (activeTask, startTime, elapsedTime, taskHistory).
    """
    model_config = ConfigDict(populate_by_name=True)

    active_task: Optional[Task] = Field(None, alias="activeTask")
    start_time_epoch_ms: Optional[int] = Field(None, alias="startTime")  # set <=> running
    elapsed_seconds: int = Field(0, alias="elapsedTime", ge=0)
    task_history: Dict[str, int] = Field(default_factory=dict, alias="taskHistory")
    # elapsed_seconds at the start of the current run segment
    segment_base_seconds: Optional[int] = Field(None, alias="segmentBase")

    @property
    def is_running(self) -> bool:
        return self.start_time_epoch_ms is not None

    @property
    def status(self) -> TimerStatus:
        if self.active_task is None:
            return TimerStatus.IDLE
        if self.is_running:
            return TimerStatus.RUNNING
        return TimerStatus.PAUSED


class TimerView(BaseModel):
    """Timer snapshot returned to the display surface"""
    status: TimerStatus
    active_task: Optional[Task] = None
    elapsed_seconds: int
    formatted: str
    task_history: Dict[str, int]
    notice: Optional[str] = None
