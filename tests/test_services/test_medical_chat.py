"""
Tests for chat routing.
"""

import pytest

from symptom_engine.schemas.chat import ChatTurn, ReplySource
from symptom_engine.services.medical_chat import (
    AI_ERROR_REPLY,
    NON_MEDICAL_REPLY,
    MedicalChatService,
    detect_emergency,
    enhance_prompt,
    is_medical_query,
    system_context,
)


@pytest.mark.asyncio
async def test_symptom_question_uses_classifier(chat_service: MedicalChatService, fake_responder):
    reply = await chat_service.process_message("I have a headache and feel dizzy")

    assert reply.source == ReplySource.SYMPTOM_ANALYZER
    assert reply.is_emergency is False
    assert reply.response.startswith("I've identified these symptoms")
    assert fake_responder.calls == []


@pytest.mark.asyncio
async def test_symptom_emergency_is_flagged(chat_service: MedicalChatService):
    reply = await chat_service.process_message("I'm having severe chest pain and shortness of breath")

    assert reply.source == ReplySource.SYMPTOM_ANALYZER
    assert reply.is_emergency is True


@pytest.mark.asyncio
async def test_emergency_gate(chat_service: MedicalChatService, fake_responder):
    reply = await chat_service.process_message("My father is having a cardiac arrest")

    assert reply.source == ReplySource.EMERGENCY_GATE
    assert reply.is_emergency is True
    assert reply.response.startswith("EMERGENCY_DETECTED:")
    assert "999" in reply.response
    assert fake_responder.calls == []


@pytest.mark.asyncio
async def test_non_medical_question(chat_service: MedicalChatService, fake_responder):
    reply = await chat_service.process_message("What is the capital of France?")

    assert reply.source == ReplySource.NON_MEDICAL
    assert reply.response == NON_MEDICAL_REPLY
    assert fake_responder.calls == []


@pytest.mark.asyncio
async def test_general_health_question_goes_to_responder(
    chat_service: MedicalChatService,
    fake_responder,
):
    reply = await chat_service.process_message("How much water should I drink every day for good health")

    assert reply.source == ReplySource.AI_RESPONDER
    assert reply.response == "Drink plenty of water."
    assert reply.is_emergency is False

    call = fake_responder.calls[0]
    assert call["prompt"] == "How much water should I drink every day for good health?"
    assert "999" in call["system_context"]


@pytest.mark.asyncio
async def test_history_is_trimmed(chat_service: MedicalChatService, fake_responder):
    history = [ChatTurn(sender="user" if i % 2 == 0 else "bot", text=f"turn {i}") for i in range(6)]

    await chat_service.process_message("What vitamins help with healthy skin", history)

    sent = fake_responder.calls[0]["history"]
    assert [turn.text for turn in sent] == ["turn 2", "turn 3", "turn 4", "turn 5"]


@pytest.mark.asyncio
async def test_responder_failure_returns_apology(classifier, make_responder):
    service = MedicalChatService(classifier=classifier, responder=make_responder(error=True))

    reply = await service.process_message("What vitamins help with healthy skin")

    assert reply.source == ReplySource.AI_ERROR
    assert reply.response == AI_ERROR_REPLY


def test_detect_emergency():
    assert detect_emergency("Someone is CHOKING")
    assert not detect_emergency("I stubbed my toe")
    assert not detect_emergency(None)


def test_is_medical_query():
    assert is_medical_query("I feel sick today")
    assert is_medical_query("Which vaccine do kids need?")
    assert not is_medical_query("What is the capital of France?")
    assert not is_medical_query("")


@pytest.mark.parametrize("message,expected", [
    (None, ""),
    ("  back pain ", 'Regarding: "back pain". Can you provide some general health information about this?'),
    ("Is it safe to exercise daily", "Is it safe to exercise daily?"),
    ("tell me about healthy sleep habits", "tell me about healthy sleep habits?"),
    ("I want to learn about nutrition.", "I want to learn about nutrition."),
    ("What should I eat after surgery?", "What should I eat after surgery?"),
])
def test_enhance_prompt(message, expected):
    assert enhance_prompt(message) == expected


def test_system_context_names_number():
    assert "call 999 or your local emergency number" in system_context("999")
    assert "call your local emergency number immediately" in system_context("your local emergency number")
