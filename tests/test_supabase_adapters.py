"""Tests for the Supabase log repository."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from nutriai.adapters.supabase_log_repository import SupabaseLogRepository
from nutriai.domain.logs import ChatExchange, FoodLogEntry, WorkoutEntry


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((f"{column}>=", value))
        return self

    def lt(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((f"{column}<", value))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_food_logs_insert_and_range_query() -> None:
    client = FakeSupabaseClient()
    table = client.table("food_logs")
    now = datetime.now(tz=UTC)
    table.queue("insert", [{"id": 1}])
    table.queue(
        "select",
        [
            {
                "id": 1,
                "food": "Rice",
                "calories": 216,
                "protein_g": 5,
                "carbs_g": 45,
                "fat_g": None,
                "meal": "lunch",
                "logged_at": now.isoformat(),
            }
        ],
    )
    repository = SupabaseLogRepository(client)

    repository.append_food(
        "u1",
        FoodLogEntry(
            id=1,
            food="Rice",
            calories=216,
            protein_g=5,
            carbs_g=45,
            fat_g=None,
            meal="lunch",
            timestamp=now,
        ),
    )
    entries = repository.list_food_logs(
        "u1", now - timedelta(hours=1), now + timedelta(hours=1)
    )

    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_id"] == "u1"
    assert table.last_payload["logged_at"] == now.isoformat()
    assert entries[0].calories == 216
    assert entries[0].fat_g is None
    assert entries[0].timestamp == now
    assert ("user_id", "u1") in table.last_filters


def test_supabase_insert_failure_raises() -> None:
    repository = SupabaseLogRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError, match="workout"):
        repository.append_workout(
            "u1",
            WorkoutEntry(
                id=2,
                exercise="Swim",
                duration_min=30,
                calories_burned=250,
                intensity="low",
                timestamp=datetime.now(tz=UTC),
            ),
        )


def test_supabase_workouts_query() -> None:
    client = FakeSupabaseClient()
    client.table("workout_logs").queue(
        "select",
        [
            {
                "id": 5,
                "exercise": "Row",
                "duration_min": 20,
                "calories_burned": 180,
                "intensity": "high",
                "logged_at": "2024-03-01T08:00:00",
            }
        ],
    )
    repository = SupabaseLogRepository(client)

    workouts = repository.list_workouts(
        "u1",
        datetime(2024, 3, 1, tzinfo=UTC),
        datetime(2024, 3, 2, tzinfo=UTC),
    )

    assert workouts[0].id == 5
    assert workouts[0].timestamp.tzinfo is not None


def test_supabase_chat_history_is_returned_oldest_first() -> None:
    client = FakeSupabaseClient()
    table = client.table("chat_history")
    table.queue("insert", [{"id": 1}])
    table.queue(
        "select",
        [
            {
                "user_message": "second",
                "ai_response": "b",
                "created_at": "2024-03-01T09:00:00+00:00",
            },
            {
                "user_message": "first",
                "ai_response": "a",
                "created_at": "2024-03-01T08:00:00+00:00",
            },
        ],
    )
    repository = SupabaseLogRepository(client)

    repository.append_chat(
        "u1",
        ChatExchange(
            user_message="hi", ai_response="hello", timestamp=datetime.now(tz=UTC)
        ),
    )
    history = repository.list_chat_history("u1", limit=10)

    assert [item.user_message for item in history] == ["first", "second"]
