"""Pydantic models for API request bodies."""

from pydantic import BaseModel, ConfigDict, Field

from nutriai.services.logs import ANONYMOUS_USER_ID


class CalculateBmrRequest(BaseModel):
    """Profile fields for the BMR calculator."""

    age: float | str | None = None
    gender: str | None = None
    height: float | str | None = None
    weight: float | str | None = None
    activity: float | str | None = None
    goal: str | None = None


class ChatRequest(BaseModel):
    """Coach chat message."""

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    user_id: str = Field(default=ANONYMOUS_USER_ID, alias="userId")


class LogFoodRequest(BaseModel):
    """Food log entry."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(default=ANONYMOUS_USER_ID, alias="userId")
    food: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    meal: str | None = None


class LogWorkoutRequest(BaseModel):
    """Workout log entry."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(default=ANONYMOUS_USER_ID, alias="userId")
    exercise: str | None = None
    duration: float | None = None
    calories_burned: float | None = Field(default=None, alias="caloriesBurned")
    intensity: str | None = None
