"""Tests for container wiring."""

from pathlib import Path

import pytest

from nutriai.adapters.memory_log_repository import InMemoryLogRepository
from nutriai.config import Settings, parse_allowed_origins
from nutriai.containers import build_container, build_log_repository


def test_build_container_uses_memory_backend(tmp_path: Path) -> None:
    upload_dir = tmp_path / "uploads"
    settings = Settings(environment="test", upload_dir=str(upload_dir))

    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(container.log_service.repository, InMemoryLogRepository)
    assert upload_dir.is_dir()


def test_supabase_backend_requires_credentials() -> None:
    settings = Settings(log_backend="supabase", supabase_url=None)

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_log_repository(settings)


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log backend"):
        build_log_repository(Settings(log_backend="sqlite"))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, ["*"]),
        ("", ["*"]),
        ("*", ["*"]),
        ("https://a.test, https://b.test", ["https://a.test", "https://b.test"]),
        (" , ", ["*"]),
    ],
)
def test_parse_allowed_origins(raw: str | None, expected: list[str]) -> None:
    assert parse_allowed_origins(raw) == expected


def test_build_container_passes_timezone_to_log_service(tmp_path: Path) -> None:
    settings = Settings(
        environment="test",
        upload_dir=str(tmp_path / "uploads"),
        timezone="Europe/Berlin",
    )

    container = build_container(settings)

    assert container.log_service.timezone_name == "Europe/Berlin"
