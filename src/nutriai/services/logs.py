"""Food, workout and chat logging service."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, time as day_time, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from nutriai.domain.logs import (
    ChatExchange,
    DailyFoodTotals,
    FoodLogEntry,
    WorkoutEntry,
    WorkoutTotals,
)

ANONYMOUS_USER_ID = "anonymous"


class LogRepository(Protocol):
    """Persistence interface for per-user logs."""

    def append_food(self, user_id: str, entry: FoodLogEntry) -> None:
        """Append a food entry to the user's log."""

    def append_workout(self, user_id: str, entry: WorkoutEntry) -> None:
        """Append a workout entry to the user's log."""

    def append_chat(self, user_id: str, exchange: ChatExchange) -> None:
        """Append a chat exchange to the user's history."""

    def list_food_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food entries logged within [start, end) in append order."""

    def list_workouts(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[WorkoutEntry]:
        """Return workouts logged within [start, end) in append order."""

    def list_chat_history(self, user_id: str, limit: int) -> list[ChatExchange]:
        """Return the most recent chat exchanges, oldest first."""


@dataclass
class TimestampIdGenerator:
    """Millisecond-clock ids that never repeat within a process."""

    clock_ms: Callable[[], int] = field(default=lambda: time.time_ns() // 1_000_000)
    _last: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def next_id(self) -> int:
        """Return a new id, bumping past the last one on clock ties."""
        with self._lock:
            self._last = max(self.clock_ms(), self._last + 1)
            return self._last


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class LogService:
    """Service for appending and querying user logs."""

    repository: LogRepository
    id_generator: TimestampIdGenerator = field(default_factory=TimestampIdGenerator)
    clock: Callable[[], datetime] = _utc_now
    timezone_name: str | None = None

    def log_food(  # noqa: PLR0913
        self,
        user_id: str,
        food: str | None,
        calories: float | None,
        protein_g: float | None,
        carbs_g: float | None,
        fat_g: float | None,
        meal: str | None,
    ) -> FoodLogEntry:
        """Record a food entry and return it."""
        entry = FoodLogEntry(
            id=self.id_generator.next_id(),
            food=food,
            calories=calories,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fat_g=fat_g,
            meal=meal,
            timestamp=self.clock(),
        )
        self.repository.append_food(user_id, entry)
        return entry

    def log_workout(  # noqa: PLR0913
        self,
        user_id: str,
        exercise: str | None,
        duration_min: float | None,
        calories_burned: float | None,
        intensity: str | None,
    ) -> WorkoutEntry:
        """Record a workout entry and return it."""
        entry = WorkoutEntry(
            id=self.id_generator.next_id(),
            exercise=exercise,
            duration_min=duration_min,
            calories_burned=calories_burned,
            intensity=intensity,
            timestamp=self.clock(),
        )
        self.repository.append_workout(user_id, entry)
        return entry

    def record_chat(
        self, user_id: str, user_message: str, ai_response: str
    ) -> ChatExchange:
        """Append a chat exchange to the user's history."""
        exchange = ChatExchange(
            user_message=user_message,
            ai_response=ai_response,
            timestamp=self.clock(),
        )
        self.repository.append_chat(user_id, exchange)
        return exchange

    def get_today_food(
        self, user_id: str
    ) -> tuple[list[FoodLogEntry], DailyFoodTotals]:
        """Return today's food entries and their summed macros."""
        start, end = self._today_bounds()
        entries = [
            entry
            for entry in self.repository.list_food_logs(user_id, start, end)
            if start <= entry.timestamp < end
        ]
        totals = DailyFoodTotals(
            calories=sum(entry.calories or 0 for entry in entries),
            protein_g=sum(entry.protein_g or 0 for entry in entries),
            carbs_g=sum(entry.carbs_g or 0 for entry in entries),
            fat_g=sum(entry.fat_g or 0 for entry in entries),
        )
        return entries, totals

    def get_today_workouts(
        self, user_id: str
    ) -> tuple[list[WorkoutEntry], WorkoutTotals]:
        """Return today's workouts and their summed effort."""
        start, end = self._today_bounds()
        entries = [
            entry
            for entry in self.repository.list_workouts(user_id, start, end)
            if start <= entry.timestamp < end
        ]
        totals = WorkoutTotals(
            duration_min=sum(entry.duration_min or 0 for entry in entries),
            calories_burned=sum(entry.calories_burned or 0 for entry in entries),
        )
        return entries, totals

    def get_chat_history(self, user_id: str, limit: int = 50) -> list[ChatExchange]:
        """Return recent chat exchanges for a user."""
        return self.repository.list_chat_history(user_id, limit)

    def _today_bounds(self) -> tuple[datetime, datetime]:
        """Return the current calendar day as a UTC range.

        The day is taken in ``timezone_name`` when set, otherwise in the
        server's local time. Both ends use the offset in force at that
        instant, so days with a DST change are 23 or 25 hours long.
        """
        if self.timezone_name:
            tz = ZoneInfo(self.timezone_name)
            now = self.clock().astimezone(tz)
            start = now.replace(hour=0, minute=0, second=0, microsecond=0)
            end = start + timedelta(days=1)
        else:
            today = self.clock().astimezone().date()
            start = datetime.combine(today, day_time.min).astimezone()
            end = datetime.combine(today + timedelta(days=1), day_time.min).astimezone()
        return start.astimezone(UTC), end.astimezone(UTC)
