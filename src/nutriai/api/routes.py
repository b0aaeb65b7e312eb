"""Nutrition coach REST endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Request, UploadFile

from nutriai.api.request_models import (
    CalculateBmrRequest,
    ChatRequest,
    LogFoodRequest,
    LogWorkoutRequest,
)
from nutriai.domain.errors import NutriAIError, UpstreamFailure, ValidationError
from nutriai.services.catalog import daily_food, daily_motivation
from nutriai.services.nutrition import build_profile, compute_nutrition

if TYPE_CHECKING:
    from nutriai.containers import AppContainer
    from nutriai.domain.foods import DailyFood, FoodRecord
    from nutriai.domain.logs import ChatExchange, FoodLogEntry, WorkoutEntry

router = APIRouter(prefix="/api", tags=["nutrition"])

_logger = logging.getLogger(__name__)


@contextmanager
def _handler_boundary(message: str) -> Iterator[None]:
    """Turn unexpected exceptions into an upstream failure with a fixed message."""
    try:
        yield
    except NutriAIError:
        raise
    except Exception as exc:
        _logger.exception(message)
        raise UpstreamFailure(message) from exc


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(tz=UTC).isoformat()}


@router.post("/calculate-bmr")
async def calculate_bmr(payload: CalculateBmrRequest) -> dict[str, object]:
    """Return BMR, TDEE, target calories and macro targets."""
    with _handler_boundary("Failed to calculate BMR"):
        profile = build_profile(
            age=payload.age,
            gender=payload.gender,
            height=payload.height,
            weight=payload.weight,
            activity=payload.activity,
            goal=payload.goal,
        )
        result = compute_nutrition(profile)
    return {
        "success": True,
        "bmr": result.bmr,
        "tdee": result.tdee,
        "targetCalories": result.target_calories,
        "macros": {
            "protein": result.macros.protein_g,
            "carbs": result.macros.carbs_g,
            "fat": result.macros.fat_g,
        },
        "recommendations": result.recommendation,
    }


@router.post("/analyze-food")
async def analyze_food(
    request: Request, image: UploadFile | None = File(default=None)
) -> dict[str, object]:
    """Store an uploaded food photo and return its nutrition record."""
    if image is None:
        raise ValidationError("No image file provided")
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to analyze food image"):
        container.food_analysis_service.check_declared_size(image.size)
        content = await image.read()
        analysis = await container.food_analysis_service.analyze(
            filename=image.filename or "",
            content_type=image.content_type,
            content=content,
        )
    return {
        "success": True,
        "food": _food_record_payload(analysis.food),
        "imageUrl": analysis.image_url,
    }


@router.post("/chat")
async def chat(payload: ChatRequest, request: Request) -> dict[str, object]:
    """Answer a coach message and store it in the user's chat history."""
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to process message"):
        exchange = container.chat_service.reply(payload.user_id, payload.message)
    return {
        "success": True,
        "response": exchange.ai_response,
        "timestamp": exchange.timestamp.isoformat(),
    }


@router.get("/chat-history/{user_id}")
async def chat_history(
    user_id: str, request: Request, limit: int = 50
) -> dict[str, object]:
    """Return recent coach exchanges for a user."""
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to retrieve chat history"):
        history = container.log_service.get_chat_history(user_id, limit)
    return {"success": True, "history": [_chat_payload(item) for item in history]}


@router.post("/log-food")
async def log_food(payload: LogFoodRequest, request: Request) -> dict[str, object]:
    """Append a food entry to the user's log."""
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to log food"):
        entry = container.log_service.log_food(
            user_id=payload.user_id,
            food=payload.food,
            calories=payload.calories,
            protein_g=payload.protein,
            carbs_g=payload.carbs,
            fat_g=payload.fat,
            meal=payload.meal,
        )
    return {"success": True, "entry": _food_entry_payload(entry)}


@router.get("/food-logs/{user_id}")
async def food_logs(user_id: str, request: Request) -> dict[str, object]:
    """Return today's food entries and totals for a user."""
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to retrieve food logs"):
        entries, totals = container.log_service.get_today_food(user_id)
    return {
        "success": True,
        "logs": [_food_entry_payload(entry) for entry in entries],
        "totals": {
            "calories": totals.calories,
            "protein": totals.protein_g,
            "carbs": totals.carbs_g,
            "fat": totals.fat_g,
        },
    }


@router.post("/log-workout")
async def log_workout(
    payload: LogWorkoutRequest, request: Request
) -> dict[str, object]:
    """Append a workout entry to the user's log."""
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to log workout"):
        entry = container.log_service.log_workout(
            user_id=payload.user_id,
            exercise=payload.exercise,
            duration_min=payload.duration,
            calories_burned=payload.calories_burned,
            intensity=payload.intensity,
        )
    return {"success": True, "entry": _workout_payload(entry)}


@router.get("/workout-logs/{user_id}")
async def workout_logs(user_id: str, request: Request) -> dict[str, object]:
    """Return today's workouts and totals for a user."""
    container: AppContainer = request.app.state.container
    with _handler_boundary("Failed to retrieve workout logs"):
        entries, totals = container.log_service.get_today_workouts(user_id)
    return {
        "success": True,
        "logs": [_workout_payload(entry) for entry in entries],
        "totals": {
            "duration": totals.duration_min,
            "caloriesBurned": totals.calories_burned,
        },
    }


@router.get("/daily-food")
async def get_daily_food() -> dict[str, object]:
    """Return the featured food of the day."""
    with _handler_boundary("Failed to get daily food"):
        food = daily_food()
    return {"success": True, "food": _daily_food_payload(food)}


@router.get("/daily-motivation")
async def get_daily_motivation() -> dict[str, object]:
    """Return the motivational quote of the day."""
    with _handler_boundary("Failed to get motivation"):
        quote = daily_motivation()
    return {"success": True, "quote": quote}


def _food_record_payload(food: FoodRecord) -> dict[str, object]:
    return {
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein_g,
        "carbs": food.carbs_g,
        "fat": food.fat_g,
        "fiber": food.fiber_g,
        "vitamins": food.vitamins,
        "minerals": food.minerals,
        "benefits": food.benefits,
        "tips": food.tips,
    }


def _daily_food_payload(food: DailyFood) -> dict[str, object]:
    return {
        "name": food.name,
        "emoji": food.emoji,
        "description": food.description,
        "calories": food.calories,
        "fat": food.fat,
        "fiber": food.fiber,
        "protein": food.protein,
    }


def _food_entry_payload(entry: FoodLogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "food": entry.food,
        "calories": entry.calories,
        "protein": entry.protein_g,
        "carbs": entry.carbs_g,
        "fat": entry.fat_g,
        "meal": entry.meal,
        "timestamp": entry.timestamp.isoformat(),
    }


def _workout_payload(entry: WorkoutEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "exercise": entry.exercise,
        "duration": entry.duration_min,
        "caloriesBurned": entry.calories_burned,
        "intensity": entry.intensity,
        "timestamp": entry.timestamp.isoformat(),
    }


def _chat_payload(exchange: ChatExchange) -> dict[str, object]:
    return {
        "userMessage": exchange.user_message,
        "aiResponse": exchange.ai_response,
        "timestamp": exchange.timestamp.isoformat(),
    }
