"""HTTP client for the NutriAI API."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_BASE_URL = "http://localhost:3000/api"

_logger = logging.getLogger(__name__)


class NutriAIClientError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NutriAIClient(Protocol):
    """Interface for NutriAI API interactions."""

    async def calculate_bmr(self, profile: dict[str, object]) -> dict[str, object]:
        """Return nutrition targets for a profile."""

    async def analyze_food_image(
        self, filename: str, content: bytes, content_type: str
    ) -> dict[str, object]:
        """Upload a food photo and return the analysis."""

    async def chat(
        self, message: str, user_id: str = "anonymous"
    ) -> dict[str, object]:
        """Send a coach message."""

    async def log_food(self, food: dict[str, object]) -> dict[str, object]:
        """Log a food entry."""

    async def log_workout(self, workout: dict[str, object]) -> dict[str, object]:
        """Log a workout entry."""

    async def get_food_logs(self, user_id: str) -> dict[str, object]:
        """Return today's food logs for a user."""

    async def get_daily_food(self) -> dict[str, object]:
        """Return the food of the day."""

    async def get_daily_motivation(self) -> dict[str, object]:
        """Return the quote of the day."""


@dataclass
class HttpxNutriAIClient(NutriAIClient):
    """NutriAI client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str = DEFAULT_BASE_URL) -> "HttpxNutriAIClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def calculate_bmr(self, profile: dict[str, object]) -> dict[str, object]:
        """Return nutrition targets for a profile."""
        return await self._request("POST", "/calculate-bmr", json=profile)

    async def analyze_food_image(
        self, filename: str, content: bytes, content_type: str
    ) -> dict[str, object]:
        """Upload a food photo and return the analysis."""
        response = await self.http_client.post(
            f"{self.base_url}/analyze-food",
            files={"image": (filename, content, content_type)},
            timeout=30,
        )
        if response.is_error:
            message = _error_message(response, "Failed to analyze food image")
            _logger.error("Food image analysis failed: %s", message)
            raise NutriAIClientError(message, status_code=response.status_code)
        return response.json()

    async def chat(
        self, message: str, user_id: str = "anonymous"
    ) -> dict[str, object]:
        """Send a coach message."""
        return await self._request(
            "POST", "/chat", json={"message": message, "userId": user_id}
        )

    async def log_food(self, food: dict[str, object]) -> dict[str, object]:
        """Log a food entry."""
        return await self._request("POST", "/log-food", json=food)

    async def log_workout(self, workout: dict[str, object]) -> dict[str, object]:
        """Log a workout entry."""
        return await self._request("POST", "/log-workout", json=workout)

    async def get_food_logs(self, user_id: str) -> dict[str, object]:
        """Return today's food logs for a user."""
        return await self._request("GET", f"/food-logs/{user_id}")

    async def get_daily_food(self) -> dict[str, object]:
        """Return the food of the day."""
        return await self._request("GET", "/daily-food")

    async def get_daily_motivation(self) -> dict[str, object]:
        """Return the quote of the day."""
        return await self._request("GET", "/daily-motivation")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self, method: str, endpoint: str, **kwargs: object
    ) -> dict[str, object]:
        url = f"{self.base_url}{endpoint}"
        try:
            response = await self.http_client.request(
                method, url, timeout=15, **kwargs
            )
        except httpx.HTTPError:
            _logger.exception("API request failed: %s %s", method, endpoint)
            raise
        if response.is_error:
            message = _error_message(response)
            _logger.error("API error: %s %s: %s", method, endpoint, message)
            raise NutriAIClientError(message, status_code=response.status_code)
        return response.json()


def _error_message(
    response: httpx.Response, default: str = "API request failed"
) -> str:
    """Extract the server's error text from a failed response."""
    try:
        payload = response.json()
    except ValueError:
        return default
    if isinstance(payload, dict):
        for key in ("error", "message"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return default
