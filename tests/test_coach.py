"""Tests for the keyword coach."""

import pytest

from nutriai.adapters.memory_log_repository import InMemoryLogRepository
from nutriai.domain.errors import ValidationError
from nutriai.services.coach import (
    COACH_TOPICS,
    DEFAULT_RESPONSE,
    ChatService,
    match_topic,
    respond,
)
from nutriai.services.logs import LogService


def _topic_response(name: str) -> str:
    return next(topic.response for topic in COACH_TOPICS if topic.name == name)


def test_protein_question_gets_protein_answer() -> None:
    reply = respond("How much protein do I need?")

    assert reply == _topic_response("protein")
    assert "Protein is crucial" in reply


def test_unmatched_message_gets_default_help() -> None:
    assert respond("xyz") == DEFAULT_RESPONSE


def test_matching_is_case_insensitive() -> None:
    assert respond("HYDRATION tips?") == _topic_response("hydration")


def test_declaration_order_breaks_ties() -> None:
    # "muscle" is a protein keyword and the protein topic is declared first.
    assert match_topic("build muscle").name == "protein"
    assert match_topic("I want to bulk up").name == "muscle"


def test_topic_order() -> None:
    assert [topic.name for topic in COACH_TOPICS] == [
        "protein",
        "weight_loss",
        "carbs",
        "hydration",
        "muscle",
        "meal_plan",
        "supplements",
        "fasting",
        "cardio",
        "sleep",
    ]


def test_chat_service_records_exchange() -> None:
    repository = InMemoryLogRepository()
    service = ChatService(LogService(repository))

    exchange = service.reply("u1", "Any cardio advice?")

    assert exchange.ai_response == _topic_response("cardio")
    assert repository.chat_history["u1"][0].user_message == "Any cardio advice?"


@pytest.mark.parametrize("message", [None, "", "   "])
def test_chat_service_rejects_empty_message(message: str | None) -> None:
    service = ChatService(LogService(InMemoryLogRepository()))

    with pytest.raises(ValidationError, match="Message is required"):
        service.reply("u1", message)
