"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutriai.adapters.local_upload_storage import LocalUploadStorage
from nutriai.adapters.memory_log_repository import InMemoryLogRepository
from nutriai.adapters.supabase_log_repository import SupabaseLogRepository
from nutriai.config import Settings
from nutriai.services.analysis import FoodAnalysisService, RandomFoodClassifier
from nutriai.services.coach import ChatService
from nutriai.services.logs import LogRepository, LogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    log_service: LogService
    chat_service: ChatService
    food_analysis_service: FoodAnalysisService


def build_log_repository(settings: Settings) -> LogRepository:
    """Return the log repository selected by settings."""
    if settings.log_backend == "memory":
        return InMemoryLogRepository()
    if settings.log_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase log backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseLogRepository(client)
    raise ValueError(f"Unknown log backend: {settings.log_backend}")


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    log_service = LogService(
        build_log_repository(resolved_settings),
        timezone_name=resolved_settings.timezone,
    )
    chat_service = ChatService(log_service)
    food_analysis_service = FoodAnalysisService(
        classifier=RandomFoodClassifier(
            delay_seconds=resolved_settings.analysis_delay_seconds
        ),
        storage=LocalUploadStorage.create(resolved_settings.upload_dir),
        max_upload_bytes=resolved_settings.max_upload_bytes,
    )

    return AppContainer(
        settings=resolved_settings,
        log_service=log_service,
        chat_service=chat_service,
        food_analysis_service=food_analysis_service,
    )
