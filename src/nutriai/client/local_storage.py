"""Local JSON cache for the user profile and progress data.

Storage failures are logged and swallowed so a broken cache only means the
data is not persisted.
"""

import json
import logging
import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

PROFILE_STORAGE_KEY = "userProfile"

_ID_ALPHABET = string.ascii_lowercase + string.digits

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileStorage:
    """Key-value storage writing one JSON file per key."""

    directory: Path

    def save(self, key: str, data: object) -> None:
        """Serialize and write a value."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(key).write_text(json.dumps(data), encoding="utf-8")
        except (OSError, TypeError, ValueError):
            _logger.exception("Error saving to local storage: key=%s", key)

    def load(self, key: str) -> object | None:
        """Return the stored value, or None when missing or unreadable."""
        path = self._path(key)
        try:
            if not path.exists():
                return None
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.exception("Error loading from local storage: key=%s", key)
            return None

    def remove(self, key: str) -> None:
        """Delete a stored value."""
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError:
            _logger.exception("Error removing from local storage: key=%s", key)

    def clear(self) -> None:
        """Delete every stored value."""
        try:
            for path in self.directory.glob("*.json"):
                path.unlink(missing_ok=True)
        except OSError:
            _logger.exception("Error clearing local storage")

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"


class UserProfileData(BaseModel):
    """Locally cached user profile."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    settings: dict[str, object] = Field(default_factory=dict)
    goals: dict[str, object] = Field(default_factory=dict)
    history: list[dict[str, object]] = Field(default_factory=list)


class ProgressPoint(BaseModel):
    """A dated progress measurement."""

    value: float
    date: datetime


class ProgressData(BaseModel):
    """Locally cached progress series."""

    weight: list[ProgressPoint] = Field(default_factory=list)
    calories: list[ProgressPoint] = Field(default_factory=list)
    workouts: list[dict[str, object]] = Field(default_factory=list)
    measurements: list[dict[str, object]] = Field(default_factory=list)


def generate_user_id() -> str:
    """Return a new local user id like ``user_<ms>_<9 chars>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"user_{time.time_ns() // 1_000_000}_{suffix}"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class UserProfileStore:
    """User profile cached under a fixed storage key."""

    storage: JsonFileStorage
    profile: UserProfileData = field(init=False)

    def __post_init__(self) -> None:
        raw = self.storage.load(PROFILE_STORAGE_KEY)
        self.profile = _parse_profile(raw)

    @property
    def user_id(self) -> str:
        """Return the local user id."""
        return self.profile.user_id

    def save(self) -> None:
        """Write the whole profile back to storage."""
        self.storage.save(
            PROFILE_STORAGE_KEY, self.profile.model_dump(mode="json", by_alias=True)
        )

    def update_settings(self, settings: dict[str, object]) -> None:
        """Merge settings into the profile and save."""
        self.profile.settings = {**self.profile.settings, **settings}
        self.save()

    def update_goals(self, goals: dict[str, object]) -> None:
        """Merge goals into the profile and save."""
        self.profile.goals = {**self.profile.goals, **goals}
        self.save()

    def add_to_history(
        self, entry: dict[str, object], now: datetime | None = None
    ) -> None:
        """Append a timestamped history entry and save."""
        timestamp = (now or _utc_now()).isoformat()
        self.profile.history.append({**entry, "timestamp": timestamp})
        self.save()

    def get_history(
        self, entry_type: str, days: int = 7, now: datetime | None = None
    ) -> list[dict[str, object]]:
        """Return history entries of a type from the last ``days`` days."""
        cutoff = (now or _utc_now()) - timedelta(days=days)
        return [
            entry
            for entry in self.profile.history
            if entry.get("type") == entry_type
            and _parse_date(entry.get("timestamp")) >= cutoff
        ]


@dataclass
class ProgressTracker:
    """Weight, calorie and workout progress cached per user."""

    user_id: str
    storage: JsonFileStorage
    data: ProgressData = field(init=False)

    def __post_init__(self) -> None:
        raw = self.storage.load(self.storage_key)
        self.data = _parse_progress(raw)

    @property
    def storage_key(self) -> str:
        """Return the storage key for this user's progress."""
        return f"progress_{self.user_id}"

    def save(self) -> None:
        """Write the whole progress object back to storage."""
        self.storage.save(self.storage_key, self.data.model_dump(mode="json"))

    def add_weight(self, weight: float, date: datetime | None = None) -> None:
        """Record a body weight measurement."""
        self.data.weight.append(ProgressPoint(value=weight, date=date or _utc_now()))
        self.save()

    def add_calories(self, calories: float, date: datetime | None = None) -> None:
        """Record a daily calorie total."""
        self.data.calories.append(
            ProgressPoint(value=calories, date=date or _utc_now())
        )
        self.save()

    def add_workout(
        self, workout: dict[str, object], date: datetime | None = None
    ) -> None:
        """Record a workout."""
        self.data.workouts.append(
            {**workout, "date": (date or _utc_now()).isoformat()}
        )
        self.save()

    def get_weight_progress(
        self, days: int = 30, now: datetime | None = None
    ) -> list[ProgressPoint]:
        """Return weight measurements from the last ``days`` days."""
        return _recent_points(self.data.weight, days, now)

    def get_calorie_progress(
        self, days: int = 7, now: datetime | None = None
    ) -> list[ProgressPoint]:
        """Return calorie totals from the last ``days`` days."""
        return _recent_points(self.data.calories, days, now)


def _recent_points(
    points: list[ProgressPoint], days: int, now: datetime | None
) -> list[ProgressPoint]:
    cutoff = (now or _utc_now()) - timedelta(days=days)
    recent = [point for point in points if _as_aware(point.date) >= cutoff]
    return sorted(recent, key=lambda point: _as_aware(point.date))


def _parse_profile(raw: object | None) -> UserProfileData:
    """Rebuild a cached profile, keeping every readable part of it."""
    if raw is None:
        return UserProfileData(user_id=generate_user_id())
    if not isinstance(raw, dict):
        _logger.warning("Discarding unreadable cached profile")
        return UserProfileData(user_id=generate_user_id())
    user_id = raw.get("userId")
    if not isinstance(user_id, str) or not user_id:
        _logger.warning("Cached profile has no user id, generating a new one")
        user_id = generate_user_id()
    return UserProfileData(
        user_id=user_id,
        settings=_dict_or_empty(raw.get("settings"), "settings"),
        goals=_dict_or_empty(raw.get("goals"), "goals"),
        history=_dict_items(raw.get("history"), "history"),
    )


def _parse_progress(raw: object | None) -> ProgressData:
    """Rebuild cached progress, dropping only entries that fail validation."""
    if raw is None:
        return ProgressData()
    if not isinstance(raw, dict):
        _logger.warning("Discarding unreadable cached progress")
        return ProgressData()
    return ProgressData(
        weight=_valid_points(raw.get("weight"), "weight"),
        calories=_valid_points(raw.get("calories"), "calories"),
        workouts=_dict_items(raw.get("workouts"), "workouts"),
        measurements=_dict_items(raw.get("measurements"), "measurements"),
    )


def _valid_points(raw: object, series: str) -> list[ProgressPoint]:
    points: list[ProgressPoint] = []
    for item in raw if isinstance(raw, list) else []:
        try:
            points.append(ProgressPoint.model_validate(item))
        except PydanticValidationError:
            _logger.warning("Dropping unreadable %s point: %r", series, item)
    return points


def _dict_items(raw: object, name: str) -> list[dict[str, object]]:
    items = raw if isinstance(raw, list) else []
    kept = [item for item in items if isinstance(item, dict)]
    if len(kept) != len(items):
        dropped = len(items) - len(kept)
        _logger.warning("Dropped %d unreadable %s entries", dropped, name)
    return kept


def _dict_or_empty(raw: object, name: str) -> dict[str, object]:
    if isinstance(raw, dict):
        return raw
    if raw is not None:
        _logger.warning("Discarding unreadable cached %s", name)
    return {}


def _parse_date(raw: object) -> datetime:
    if isinstance(raw, str):
        try:
            return _as_aware(datetime.fromisoformat(raw))
        except ValueError:
            pass
    return datetime.min.replace(tzinfo=UTC)


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)
