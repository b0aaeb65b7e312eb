"""Filesystem storage for uploaded food images."""

import random
import time
from dataclasses import dataclass
from pathlib import Path, PurePath

from nutriai.services.analysis import UploadStorage


@dataclass
class LocalUploadStorage(UploadStorage):
    """Writes uploads into a local directory under unique names."""

    directory: Path

    @classmethod
    def create(cls, directory: str | Path) -> "LocalUploadStorage":
        """Create the storage, making the directory if needed."""
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def save(self, original_name: str, content: bytes) -> str:
        """Write the file and return the stored name."""
        suffix = PurePath(original_name).suffix.lower()
        unique = f"{time.time_ns() // 1_000_000}-{random.randint(0, 10**9)}"
        name = f"food-{unique}{suffix}"
        (self.directory / name).write_bytes(content)
        return name
