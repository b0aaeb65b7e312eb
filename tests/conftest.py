"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from nutriai.adapters.local_upload_storage import LocalUploadStorage
from nutriai.adapters.memory_log_repository import InMemoryLogRepository
from nutriai.api.app import create_app
from nutriai.config import Settings
from nutriai.containers import AppContainer
from nutriai.domain.foods import FoodRecord
from nutriai.services.analysis import (
    FoodAnalysisService,
    FoodClassifier,
    UploadStorage,
)
from nutriai.services.catalog import FOOD_CATALOG
from nutriai.services.coach import ChatService
from nutriai.services.logs import LogService


@dataclass
class FakeFoodClassifier(FoodClassifier):
    """Classifier that always returns the same food."""

    food: FoodRecord = field(default_factory=lambda: FOOD_CATALOG["salmon"])
    seen: list[bytes] = field(default_factory=list)

    async def classify(self, image_bytes: bytes) -> FoodRecord:
        self.seen.append(image_bytes)
        return self.food


@dataclass
class FailingFoodClassifier(FoodClassifier):
    """Classifier that always fails."""

    async def classify(self, image_bytes: bytes) -> FoodRecord:
        raise RuntimeError("model offline")


@dataclass
class InMemoryUploadStorage(UploadStorage):
    """Upload storage that keeps files in a dict."""

    files: dict[str, bytes] = field(default_factory=dict)

    def save(self, original_name: str, content: bytes) -> str:
        name = f"food-{len(self.files) + 1}-{original_name}"
        self.files[name] = content
        return name


@dataclass
class FixedClock:
    """Clock returning a settable instant."""

    now: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __call__(self) -> datetime:
        return self.now


def local_noon_utc() -> datetime:
    """Return today's local noon as a UTC datetime."""
    local = datetime.now().astimezone()
    return local.replace(hour=12, minute=0, second=0, microsecond=0).astimezone(UTC)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        environment="test",
        upload_dir=str(tmp_path / "uploads"),
        analysis_delay_seconds=0,
    )


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def food_classifier() -> FakeFoodClassifier:
    return FakeFoodClassifier()


@pytest.fixture
def container(
    settings: Settings,
    log_repository: InMemoryLogRepository,
    food_classifier: FakeFoodClassifier,
) -> AppContainer:
    log_service = LogService(log_repository)
    food_analysis_service = FoodAnalysisService(
        classifier=food_classifier,
        storage=LocalUploadStorage.create(settings.upload_dir),
        max_upload_bytes=settings.max_upload_bytes,
    )

    return AppContainer(
        settings=settings,
        log_service=log_service,
        chat_service=ChatService(log_service),
        food_analysis_service=food_analysis_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
