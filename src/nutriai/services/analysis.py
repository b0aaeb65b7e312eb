"""Food image analysis with a pluggable classifier."""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Protocol

from nutriai.domain.errors import UnsupportedUploadError
from nutriai.domain.foods import FoodAnalysis, FoodRecord
from nutriai.services.catalog import pick_random_food

ALLOWED_IMAGE_TYPES = frozenset({"jpeg", "jpg", "png", "gif", "webp"})
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_logger = logging.getLogger(__name__)


class FoodClassifier(Protocol):
    """Interface for turning image bytes into a food record."""

    async def classify(self, image_bytes: bytes) -> FoodRecord:
        """Return the food detected in an image."""


class UploadStorage(Protocol):
    """Persistence interface for uploaded images."""

    def save(self, original_name: str, content: bytes) -> str:
        """Store the image and return its public file name."""


@dataclass
class RandomFoodClassifier(FoodClassifier):
    """Placeholder classifier that returns a random catalog food.

    This does not look at the image. It waits ``delay_seconds`` to mimic the
    latency of a real inference call, then picks uniformly from the catalog.
    Swap in a real ``FoodClassifier`` for actual recognition.
    """

    delay_seconds: float = 1.5
    rng: random.Random = field(default_factory=random.Random)

    async def classify(self, image_bytes: bytes) -> FoodRecord:
        """Return a random catalog food after a simulated delay."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return pick_random_food(self.rng)


@dataclass
class FoodAnalysisService:
    """Validates uploads, stores them and classifies the food."""

    classifier: FoodClassifier
    storage: UploadStorage
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    public_prefix: str = "/uploads"

    async def analyze(
        self, filename: str, content_type: str | None, content: bytes
    ) -> FoodAnalysis:
        """Analyze an uploaded image and return the detected food."""
        validate_upload(filename, content_type, len(content), self.max_upload_bytes)
        stored_name = self.storage.save(filename, content)
        food = await self.classifier.classify(content)
        _logger.info("Analyzed food image: file=%s food=%s", stored_name, food.name)
        return FoodAnalysis(food=food, image_url=f"{self.public_prefix}/{stored_name}")

    def check_declared_size(self, size: int | None) -> None:
        """Reject an upload whose declared size exceeds the limit."""
        if size is not None and size > self.max_upload_bytes:
            raise UnsupportedUploadError("File too large")


def validate_upload(
    filename: str, content_type: str | None, size: int, max_bytes: int
) -> None:
    """Reject files that are not accepted images or exceed the size limit."""
    extension = PurePath(filename).suffix.lower().lstrip(".")
    mime_ok = bool(content_type) and any(
        allowed in content_type.lower() for allowed in ALLOWED_IMAGE_TYPES
    )
    if extension not in ALLOWED_IMAGE_TYPES or not mime_ok:
        raise UnsupportedUploadError("Only image files are allowed!")
    if size > max_bytes:
        raise UnsupportedUploadError("File too large")
