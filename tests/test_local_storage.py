"""Tests for the local profile and progress cache."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

from nutriai.client.local_storage import (
    PROFILE_STORAGE_KEY,
    JsonFileStorage,
    ProgressTracker,
    UserProfileStore,
    generate_user_id,
)

NOW = datetime(2024, 3, 10, 12, 0, tzinfo=UTC)


def test_generate_user_id_format() -> None:
    user_id = generate_user_id()

    prefix, millis, suffix = user_id.split("_")
    assert prefix == "user"
    assert millis.isdigit()
    assert len(suffix) == 9
    assert generate_user_id() != user_id


def test_storage_round_trip_and_remove(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "cache")

    storage.save("prefs", {"theme": "dark"})

    assert storage.load("prefs") == {"theme": "dark"}
    storage.remove("prefs")
    assert storage.load("prefs") is None


def test_storage_clear(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.save("a", 1)
    storage.save("b", 2)

    storage.clear()

    assert storage.load("a") is None
    assert storage.load("b") is None


def test_storage_swallows_corrupt_file(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    assert storage.load("broken") is None


def test_storage_swallows_write_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocked"
    blocker.write_text("file, not a directory", encoding="utf-8")
    storage = JsonFileStorage(blocker)

    storage.save("key", {"value": 1})

    assert storage.load("key") is None


def test_profile_is_created_and_reloaded(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    store = UserProfileStore(storage)
    store.update_settings({"units": "metric"})

    reloaded = UserProfileStore(storage)

    assert reloaded.user_id == store.user_id
    assert reloaded.profile.settings == {"units": "metric"}
    assert storage.load(PROFILE_STORAGE_KEY)["userId"] == store.user_id


def test_profile_settings_and_goals_merge(tmp_path: Path) -> None:
    store = UserProfileStore(JsonFileStorage(tmp_path))

    store.update_settings({"units": "metric", "theme": "light"})
    store.update_settings({"theme": "dark"})
    store.update_goals({"calories": 2000})
    store.update_goals({"protein": 150})

    assert store.profile.settings == {"units": "metric", "theme": "dark"}
    assert store.profile.goals == {"calories": 2000, "protein": 150}


def test_unreadable_profile_is_replaced(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.save(PROFILE_STORAGE_KEY, {"settings": "not a dict"})

    store = UserProfileStore(storage)

    assert store.user_id.startswith("user_")


def test_history_filters_by_type_and_age(tmp_path: Path) -> None:
    store = UserProfileStore(JsonFileStorage(tmp_path))
    store.add_to_history({"type": "meal", "food": "old"}, now=NOW - timedelta(days=9))
    store.add_to_history(
        {"type": "meal", "food": "recent"}, now=NOW - timedelta(days=1)
    )
    store.add_to_history({"type": "workout"}, now=NOW)

    meals = store.get_history("meal", now=NOW)

    assert [entry["food"] for entry in meals] == ["recent"]
    assert len(store.get_history("meal", days=30, now=NOW)) == 2


def test_progress_is_sorted_and_windowed(tmp_path: Path) -> None:
    tracker = ProgressTracker("u1", JsonFileStorage(tmp_path))
    tracker.add_weight(80, date=NOW - timedelta(days=2))
    tracker.add_weight(82, date=NOW - timedelta(days=40))
    tracker.add_weight(79, date=NOW - timedelta(days=5))
    tracker.add_calories(2100, date=NOW - timedelta(days=1))
    tracker.add_calories(2500, date=NOW - timedelta(days=8))

    weights = tracker.get_weight_progress(now=NOW)
    calories = tracker.get_calorie_progress(now=NOW)

    assert [point.value for point in weights] == [79, 80]
    assert [point.value for point in calories] == [2100]


def test_progress_persists_per_user(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    tracker = ProgressTracker("u1", storage)
    tracker.add_workout({"exercise": "Run"}, date=NOW)

    reloaded = ProgressTracker("u1", storage)
    other = ProgressTracker("u2", storage)

    assert reloaded.data.workouts[0]["exercise"] == "Run"
    assert other.data.workouts == []
    assert (tmp_path / "progress_u1.json").exists()


def test_unreadable_progress_point_keeps_the_rest(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.save(
        "progress_u1",
        {
            "weight": [
                {"value": 80, "date": "2024-03-01T08:00:00+00:00"},
                {"value": 79, "date": "not a date"},
            ],
            "calories": [{"value": "lots", "date": "2024-03-01T08:00:00+00:00"}],
            "workouts": [{"exercise": "Run"}, "garbage"],
        },
    )
    tracker = ProgressTracker("u1", storage)

    tracker.add_weight(78, date=NOW)

    saved = storage.load("progress_u1")
    assert [point["value"] for point in saved["weight"]] == [80, 78]
    assert saved["calories"] == []
    assert saved["workouts"] == [{"exercise": "Run"}]


def test_profile_with_bad_section_keeps_user_and_history(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.save(
        PROFILE_STORAGE_KEY,
        {
            "userId": "user_1_abc",
            "settings": "not a dict",
            "goals": {"calories": 1800},
            "history": [{"type": "meal", "timestamp": NOW.isoformat()}],
        },
    )
    store = UserProfileStore(storage)

    store.update_settings({"units": "metric"})

    saved = storage.load(PROFILE_STORAGE_KEY)
    assert saved["userId"] == "user_1_abc"
    assert saved["settings"] == {"units": "metric"}
    assert saved["goals"] == {"calories": 1800}
    assert len(saved["history"]) == 1
