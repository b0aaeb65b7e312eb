"""In-process log repository."""

import threading
from dataclasses import dataclass, field
from datetime import datetime

from nutriai.domain.logs import ChatExchange, FoodLogEntry, WorkoutEntry
from nutriai.services.logs import LogRepository


@dataclass
class InMemoryLogRepository(LogRepository):
    """Per-user append-only lists kept for the life of the process.

    All reads and writes go through one lock so concurrent requests cannot
    lose appends.
    """

    food_logs: dict[str, list[FoodLogEntry]] = field(default_factory=dict)
    workouts: dict[str, list[WorkoutEntry]] = field(default_factory=dict)
    chat_history: dict[str, list[ChatExchange]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def append_food(self, user_id: str, entry: FoodLogEntry) -> None:
        """Append a food entry."""
        with self._lock:
            self.food_logs.setdefault(user_id, []).append(entry)

    def append_workout(self, user_id: str, entry: WorkoutEntry) -> None:
        """Append a workout entry."""
        with self._lock:
            self.workouts.setdefault(user_id, []).append(entry)

    def append_chat(self, user_id: str, exchange: ChatExchange) -> None:
        """Append a chat exchange."""
        with self._lock:
            self.chat_history.setdefault(user_id, []).append(exchange)

    def list_food_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food entries within the range."""
        with self._lock:
            entries = list(self.food_logs.get(user_id, []))
        return [entry for entry in entries if start <= entry.timestamp < end]

    def list_workouts(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[WorkoutEntry]:
        """Return workouts within the range."""
        with self._lock:
            entries = list(self.workouts.get(user_id, []))
        return [entry for entry in entries if start <= entry.timestamp < end]

    def list_chat_history(self, user_id: str, limit: int) -> list[ChatExchange]:
        """Return the latest exchanges, oldest first."""
        with self._lock:
            history = list(self.chat_history.get(user_id, []))
        return history[-limit:] if limit > 0 else []
