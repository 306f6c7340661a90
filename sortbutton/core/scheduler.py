# sortbutton/core/scheduler.py
"""
Next-tick scheduling for work that must wait until the host has finished the
current event (e.g. populating which containers a player is looting).

Tasks carry ids, never live objects. The scheduler resolves the ids when the
task runs and silently drops it if the player or entity is gone by then.
"""
import traceback
from collections import deque
from typing import Any, Callable, Deque, NamedTuple

from sortbutton.utils.logger import Logger


class ScheduledTask(NamedTuple):
    player_id: int
    entity_id: int
    action: Callable[[Any, Any, Any], None]
    payload: Any = None


class TickScheduler:
    def __init__(self, world):
        self.world = world
        self._pending: Deque[ScheduledTask] = deque()

    def next_tick(self, player_id: int, entity_id: int, action: Callable[[Any, Any, Any], None],
                  payload: Any = None) -> ScheduledTask:
        task = ScheduledTask(player_id, entity_id, action, payload)
        self._pending.append(task)
        return task

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def is_alive(self, task: ScheduledTask) -> bool:
        return self.world.is_player_valid(task.player_id) and self.world.is_entity_valid(task.entity_id)

    def run_pending(self) -> int:
        """Runs the tasks queued before this call. Tasks queued while running wait for the next tick."""
        ran = 0
        for _ in range(len(self._pending)):
            task = self._pending.popleft()
            if not self.is_alive(task):
                Logger.debug("Scheduler", f"Dropping stale task for player {task.player_id}, entity {task.entity_id}.")
                continue
            player = self.world.find_player(task.player_id)
            entity = self.world.find_entity(task.entity_id)
            try:
                task.action(player, entity, task.payload)
                ran += 1
            except Exception as e:
                Logger.error("Scheduler", f"Error in scheduled task: {e}")
                traceback.print_exc()
        return ran

    def clear(self) -> None:
        self._pending.clear()
