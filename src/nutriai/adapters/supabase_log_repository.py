"""Supabase repository for food, workout and chat logs."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutriai.domain.logs import ChatExchange, FoodLogEntry, WorkoutEntry
from nutriai.services.logs import LogRepository


@dataclass
class SupabaseLogRepository(LogRepository):
    """Supabase implementation for user logs."""

    client: Client

    def append_food(self, user_id: str, entry: FoodLogEntry) -> None:
        """Insert a food log row."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "id": entry.id,
                    "user_id": user_id,
                    "food": entry.food,
                    "calories": entry.calories,
                    "protein_g": entry.protein_g,
                    "carbs_g": entry.carbs_g,
                    "fat_g": entry.fat_g,
                    "meal": entry.meal,
                    "logged_at": entry.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")

    def append_workout(self, user_id: str, entry: WorkoutEntry) -> None:
        """Insert a workout log row."""
        response = (
            self.client.table("workout_logs")
            .insert(
                {
                    "id": entry.id,
                    "user_id": user_id,
                    "exercise": entry.exercise,
                    "duration_min": entry.duration_min,
                    "calories_burned": entry.calories_burned,
                    "intensity": entry.intensity,
                    "logged_at": entry.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout log")

    def append_chat(self, user_id: str, exchange: ChatExchange) -> None:
        """Insert a chat history row."""
        response = (
            self.client.table("chat_history")
            .insert(
                {
                    "user_id": user_id,
                    "user_message": exchange.user_message,
                    "ai_response": exchange.ai_response,
                    "created_at": exchange.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store chat exchange")

    def list_food_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs in the time range."""
        response = (
            self.client.table("food_logs")
            .select("id, food, calories, protein_g, carbs_g, fat_g, meal, logged_at")
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_food_row(row) for row in response.data or []]

    def list_workouts(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[WorkoutEntry]:
        """Return workouts in the time range."""
        response = (
            self.client.table("workout_logs")
            .select(
                "id, exercise, duration_min, calories_burned, intensity, logged_at"
            )
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_workout_row(row) for row in response.data or []]

    def list_chat_history(self, user_id: str, limit: int) -> list[ChatExchange]:
        """Return the latest chat exchanges, oldest first."""
        response = (
            self.client.table("chat_history")
            .select("user_message, ai_response, created_at")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        exchanges = [
            ChatExchange(
                user_message=str(row.get("user_message", "")),
                ai_response=str(row.get("ai_response", "")),
                timestamp=_parse_timestamp(row.get("created_at")),
            )
            for row in response.data or []
        ]
        return list(reversed(exchanges))


def _parse_food_row(row: dict[str, object]) -> FoodLogEntry:
    return FoodLogEntry(
        id=int(row["id"]),
        food=row.get("food"),
        calories=_optional_float(row.get("calories")),
        protein_g=_optional_float(row.get("protein_g")),
        carbs_g=_optional_float(row.get("carbs_g")),
        fat_g=_optional_float(row.get("fat_g")),
        meal=row.get("meal"),
        timestamp=_parse_timestamp(row.get("logged_at")),
    )


def _parse_workout_row(row: dict[str, object]) -> WorkoutEntry:
    return WorkoutEntry(
        id=int(row["id"]),
        exercise=row.get("exercise"),
        duration_min=_optional_float(row.get("duration_min")),
        calories_burned=_optional_float(row.get("calories_burned")),
        intensity=row.get("intensity"),
        timestamp=_parse_timestamp(row.get("logged_at")),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _parse_timestamp(raw: object) -> datetime:
    if isinstance(raw, str) and raw:
        parsed = datetime.fromisoformat(raw)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return datetime.min.replace(tzinfo=UTC)
