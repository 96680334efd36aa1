"""Timer Manager - tracks time spent on the active task"""
import logging
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from logidesk.infra.storage import KeyValueStore
from logidesk.models.task import Task
from logidesk.models.timer import TimerState, TimerView
from logidesk.services.persistence import persist_json
from logidesk.utils.datetime_helper import format_elapsed, now_epoch_ms

logger = logging.getLogger(__name__)

TIMER_STORAGE_KEY = "taskTimer"


class TimerManager:
    """
    Idle / Running / Paused state machine for the active task.

    Elapsed time is always derived from the wall clock (now - start), never from an
    interval counter, so suspended processes and closed sessions do not lose seconds.
    Every state change is written to the store under TIMER_STORAGE_KEY.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], int] = now_epoch_ms):
        self._store = store
        self._clock = clock
        self.last_notice: Optional[str] = None
        self._state = self._load()

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def active_task(self) -> Optional[Task]:
        return self._state.active_task

    def tick(self) -> int:
        """
        Bring elapsed_seconds up to date with the clock.

        Whole seconds since start are moved into elapsed_seconds and the start mark advances
        by the same amount, keeping the sub-second remainder for the next tick.
        """
        state = self._state
        if not state.is_running:
            return state.elapsed_seconds

        now = self._clock()
        whole_seconds = (now - state.start_time_epoch_ms) // 1000
        if whole_seconds > 0:
            state.elapsed_seconds += whole_seconds
            state.start_time_epoch_ms += whole_seconds * 1000
            self._persist()

        return state.elapsed_seconds

    def start_timer(self, task: Task) -> TimerState:
        """
        Start (or resume) timing a task.

        Switching to a different task closes the previous task's segment first and resets
        the visible counter. Restarting the same task keeps its elapsed time.
        """
        self.tick()
        state = self._state
        previous = state.active_task
        same_task = previous is not None and previous.id == task.id

        if previous is not None and not same_task:
            self._flush_segment()
            logger.info(f"Switched timer from task {previous.id} to {task.id}")

        if same_task:
            if not state.is_running:
                state.segment_base_seconds = state.elapsed_seconds
        else:
            state.elapsed_seconds = 0
            state.segment_base_seconds = 0

        state.active_task = task
        state.start_time_epoch_ms = self._clock()
        self._persist()

        logger.info(f"Timer started for task {task.id} at {state.elapsed_seconds}s")
        return state

    def stop_timer(self) -> TimerState:
        """Pause the running timer. The task stays active and its elapsed time stays visible."""
        state = self._state
        if state.active_task is None or not state.is_running:
            return state

        self.tick()
        self._flush_segment()
        state.start_time_epoch_ms = None
        self._persist()

        logger.info(f"Timer paused for task {state.active_task.id} at {state.elapsed_seconds}s")
        return state

    def complete_task(self, task_id: str) -> bool:
        """
        Close out the active task's timer.

        Only acts when task_id is the active task; completing any other task leaves the
        timer untouched. Returns True if the timer was cleared.
        """
        state = self._state
        if state.active_task is None or state.active_task.id != task_id:
            logger.debug(f"Task {task_id} completed while not active, timer untouched")
            return False

        if state.is_running:
            self.tick()
            self._flush_segment()

        state.active_task = None
        state.start_time_epoch_ms = None
        state.elapsed_seconds = 0
        state.segment_base_seconds = 0
        self._persist()

        logger.info(f"Task {task_id} completed, total {state.task_history.get(task_id, 0)}s")
        return True

    def time_spent(self, task_id: str) -> int:
        """Accumulated seconds for a task including the open segment"""
        self.tick()
        state = self._state
        total = state.task_history.get(task_id, 0)
        if state.active_task is not None and state.active_task.id == task_id:
            total += state.elapsed_seconds - (state.segment_base_seconds or 0)
        return total

    def get_elapsed_formatted(self) -> str:
        return format_elapsed(self.tick())

    def view(self) -> TimerView:
        elapsed = self.tick()
        return TimerView(
            status=self._state.status,
            active_task=self._state.active_task,
            elapsed_seconds=elapsed,
            formatted=format_elapsed(elapsed),
            task_history=dict(self._state.task_history),
            notice=self.last_notice,
        )

    def _flush_segment(self) -> None:
        """Add the open segment's seconds to task_history and start a new (empty) segment"""
        state = self._state
        if state.active_task is None:
            return

        task_id = state.active_task.id
        unflushed = state.elapsed_seconds - (state.segment_base_seconds or 0)
        state.task_history[task_id] = state.task_history.get(task_id, 0) + max(0, unflushed)
        state.segment_base_seconds = state.elapsed_seconds

    def _load(self) -> TimerState:
        """Rehydrate persisted state, counting any gap since the last save as running time"""
        data = self._store.get_json(TIMER_STORAGE_KEY)
        if data is None:
            return TimerState()

        try:
            state = TimerState.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Error parsing timer data from store: {e}")
            return TimerState()

        if state.segment_base_seconds is None:
            state.segment_base_seconds = 0 if state.is_running else state.elapsed_seconds

        if state.is_running:
            now = self._clock()
            gap = max(0, (now - state.start_time_epoch_ms) // 1000)
            state.elapsed_seconds += gap
            state.start_time_epoch_ms = now
            logger.info(f"Timer rehydrated: added {gap}s gap, elapsed now {state.elapsed_seconds}s")

        self._state = state
        self._persist()
        return state

    def _persist(self) -> None:
        self.last_notice = persist_json(
            self._store,
            TIMER_STORAGE_KEY,
            self._state.model_dump(by_alias=True, mode="json"),
        )
