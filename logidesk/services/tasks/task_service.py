"""Task list service - mocked task entities kept in the key-value store"""
import logging
import uuid
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from logidesk.errors import ValidationError
from logidesk.infra.storage import KeyValueStore
from logidesk.models.task import Task, TaskCreate, TaskStatus
from logidesk.services.persistence import persist_json
from logidesk.services.timer import TimerManager
from logidesk.utils.datetime_helper import format_elapsed

logger = logging.getLogger(__name__)

TASKS_STORAGE_KEY = "tasks"

_task_list_adapter = TypeAdapter(List[Task])

INITIAL_TASKS = [
    Task(id="1", name="Contact new logistics partner", status=TaskStatus.IN_PROGRESS,
         assignee="John Doe", deadline="2023-06-15", time_estimate_hours=3),
    Task(id="2", name="Prepare client proposal", status=TaskStatus.NOT_STARTED,
         assignee="Maria Smith", deadline="2023-06-17", time_estimate_hours=5),
    Task(id="3", name="Review shipping documentation", status=TaskStatus.COMPLETED,
         assignee="Alex Johnson", deadline="2023-06-10", time_estimate_hours=2),
    Task(id="4", name="Update carrier database", status=TaskStatus.IN_PROGRESS,
         assignee="Sarah Williams", deadline="2023-06-20", time_estimate_hours=4),
    Task(id="5", name="Analyze Q2 transportation expenses", status=TaskStatus.NOT_STARTED,
         assignee="Robert Brown", deadline="2023-06-25", time_estimate_hours=6),
]


class TaskService:
    """Task list wired to the timer: starting a task times it, completing it closes the timer"""

    def __init__(self, store: KeyValueStore, timer: TimerManager):
        self._store = store
        self._timer = timer
        self.last_notice: Optional[str] = None
        self._tasks = self._load()

    def list_tasks(self) -> List[Task]:
        return [self._with_time_spent(task) for task in self._tasks]

    def get_task(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return self._with_time_spent(task)
        raise KeyError(task_id)

    def add_task(self, data: TaskCreate) -> Task:
        if not data.name.strip():
            raise ValidationError("Task name is required")

        task = Task(id=uuid.uuid4().hex, **data.model_dump())
        self._tasks.append(task)
        self._persist()
        logger.info(f"Task created: {task.id} - {task.name}")
        return task

    def update_status(self, task_id: str, status: TaskStatus) -> Task:
        task = self._find(task_id)
        task.status = status
        if status == TaskStatus.COMPLETED:
            self._timer.complete_task(task_id)
        self._persist()
        return self._with_time_spent(task)

    def start_task(self, task_id: str) -> Task:
        """Mark a task In Progress and start timing it"""
        task = self._find(task_id)
        active = self._timer.active_task

        if active is not None and active.id == task_id and self._timer.state.is_running:
            return self._with_time_spent(task)

        task.status = TaskStatus.IN_PROGRESS
        self._persist()
        self._timer.start_timer(task.model_copy())
        logger.info(f"Now tracking time for task {task_id}")
        return self._with_time_spent(task)

    def complete_task(self, task_id: str) -> str:
        """Mark a task Completed. Returns the formatted time spent on it."""
        self.update_status(task_id, TaskStatus.COMPLETED)
        time_spent = format_elapsed(self._timer.time_spent(task_id))
        logger.info(f"Task {task_id} marked as completed. Time spent: {time_spent}")
        return time_spent

    def _find(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise KeyError(task_id)

    def _with_time_spent(self, task: Task) -> Task:
        return task.model_copy(update={"time_spent": self._timer.time_spent(task.id)})

    def _load(self) -> List[Task]:
        data = self._store.get_json(TASKS_STORAGE_KEY)
        if data is None:
            return [task.model_copy() for task in INITIAL_TASKS]

        try:
            return _task_list_adapter.validate_python(data)
        except PydanticValidationError as e:
            logger.error(f"Error parsing tasks from store: {e}")
            return [task.model_copy() for task in INITIAL_TASKS]

    def _persist(self) -> None:
        self.last_notice = persist_json(
            self._store,
            TASKS_STORAGE_KEY,
            [task.model_dump(by_alias=True, mode="json", exclude={"time_spent"}) for task in self._tasks],
        )
