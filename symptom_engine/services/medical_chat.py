"""
Medical chat routing.

Decides who answers a chat message: the symptom classifier first, then a
chat-level emergency keyword gate, a medical-topic gate, and finally the AI
responder for general health questions.
"""

import re
from typing import Optional, Protocol, Sequence

from symptom_engine.config import get_settings
from symptom_engine.core.logging import get_logger
from symptom_engine.schemas.chat import ChatReply, ChatTurn, ReplySource
from symptom_engine.services.gemini_client import AIResponderError, get_gemini_client
from symptom_engine.services.symptom_classifier import SymptomClassifier, get_symptom_classifier

logger = get_logger(__name__)


EMERGENCY_KEYWORDS: tuple[str, ...] = (
    "stroke", "heart attack", "cardiac arrest", "severe bleeding", "unconscious",
    "not breathing", "difficulty breathing", "choking", "drowning", "severe burn",
    "poisoning", "overdose", "seizure", "anaphylaxis", "allergic reaction",
    "suicide", "chest pain", "severe pain", "cannot move", "paralysis", "emergency",
    "dying", "life threatening", "999", "ambulance",
)

MEDICAL_TOPICS: tuple[str, ...] = (
    # Symptoms
    "headache", "pain", "fever", "cough", "nausea", "vomiting", "diarrhea", "rash",
    "dizzy", "dizziness", "tired", "fatigue", "swelling", "shortness of breath",
    # Vitals and conditions
    "blood pressure", "heart rate", "pulse", "temperature", "weight", "height", "bmi",
    "diabetes", "hypertension", "asthma", "arthritis", "cancer", "cold", "flu",
    "covid", "infection", "allergy", "disease", "condition", "disorder", "syndrome",
    # Body parts
    "head", "chest", "stomach", "back", "leg", "arm", "foot", "hand", "eye", "ear",
    "nose", "throat", "skin", "heart", "lung", "liver", "kidney", "bone", "joint",
    "muscle", "blood", "brain", "nerve",
    # Procedures
    "surgery", "operation", "procedure", "test", "scan", "x-ray", "mri", "ct scan",
    "ultrasound", "biopsy", "vaccine", "vaccination", "immunization", "shot",
    # Medication
    "medicine", "medication", "drug", "pill", "tablet", "capsule", "injection",
    "antibiotic", "painkiller", "pain reliever", "vitamin", "supplement", "therapy",
    "treatment", "prescription", "dose", "dosage",
    # Care
    "doctor", "physician", "nurse", "specialist", "hospital", "clinic", "emergency room",
    "pharmacy", "medical", "healthcare", "health", "appointment",
    "symptom", "diagnosis", "prognosis", "chronic", "acute", "prevention", "risk factor",
    "side effect", "contraindication", "recovery",
)

_MEDICAL_WORDS = re.compile(
    r"\b(health|medical|sick|hurt|ill|diagnos|treat|prescribe|doctor|nurse)\b",
    re.IGNORECASE,
)
_QUESTION_LEAD = re.compile(r"^(what|how|why|can|is|are|should|tell me about)", re.IGNORECASE)

NON_MEDICAL_REPLY = (
    "I can only answer health and medical-related questions. "
    "How can I help you with a health topic?"
)
AI_ERROR_REPLY = "I'm sorry, there was an error trying to get an answer. Please try again later."


class AIResponder(Protocol):
    """Anything that can answer a general health question."""

    async def generate(self, prompt: str, system_context: str, history: Sequence[ChatTurn] = ()) -> str:
        ...


def detect_emergency(message: Optional[str]) -> bool:
    """Check a message against the chat-level emergency keywords."""
    if not message:
        return False
    lowered = message.lower()
    return any(keyword in lowered for keyword in EMERGENCY_KEYWORDS)


def is_medical_query(message: Optional[str]) -> bool:
    """Check whether a message is about health at all."""
    if not message:
        return False
    lowered = message.lower()
    return any(topic in lowered for topic in MEDICAL_TOPICS) or bool(_MEDICAL_WORDS.search(lowered))


def enhance_prompt(message: Optional[str]) -> str:
    """
    Reshape a user message into a clearer prompt.

    Very short messages are wrapped into a request for general information;
    questions missing a question mark get one.
    """
    if not message:
        return ""

    trimmed = message.strip()
    if len(trimmed.split(" ")) < 4:
        return f'Regarding: "{trimmed}". Can you provide some general health information about this?'

    if not trimmed.endswith("?") and _QUESTION_LEAD.match(trimmed):
        return f"{trimmed}?"

    return trimmed


def _call_instruction(emergency_number: str) -> str:
    if emergency_number.startswith("your "):
        return f"Please call {emergency_number} immediately for help."
    return f"Please call {emergency_number} or your local emergency number immediately for help."


def emergency_reply(emergency_number: str) -> str:
    """Fixed reply for messages caught by the emergency gate."""
    return (
        "EMERGENCY_DETECTED: It sounds like you might be describing a serious situation. "
        + _call_instruction(emergency_number)
    )


def system_context(emergency_number: str) -> str:
    """Instructions sent to the AI responder with every prompt."""
    return f"""
You are "HealthBot", a helpful AI medical assistant.
Your purpose is to provide general health information and answer medical-related questions.
Guidelines:
1.  **Disclaimer First:** ALWAYS start your response by stating: "Disclaimer: I am an AI assistant and cannot provide medical advice. Consult a healthcare professional for any health concerns."
2.  **Emergency Detection:** If the user's query seems like an emergency (e.g., mentions "chest pain", "stroke", "severe bleeding"), DO NOT attempt to answer. Instead, respond ONLY with: "{emergency_reply(emergency_number)}"
3.  **Medical Questions Only:** Only answer questions related to health, medicine, symptoms, treatments, etc. If the question is clearly non-medical, respond politely with: "{NON_MEDICAL_REPLY}"
4.  **No Diagnosis/Treatment:** Do NOT provide specific diagnoses or treatment plans. Offer general information only.
5.  **No Dosages:** Do NOT recommend specific medication dosages.
6.  **Professional Consultation:** Encourage users to consult healthcare professionals for personalized advice.
7.  **Concise & Factual:** Keep answers concise, factual, and easy to understand. Avoid jargon where possible.
8.  **Safety:** Do not provide information that could be harmful or encourage dangerous practices.
"""


class MedicalChatService:
    """Routes chat messages to the classifier, fixed replies or the AI responder."""

    def __init__(
        self,
        classifier: Optional[SymptomClassifier] = None,
        responder: Optional[AIResponder] = None,
        history_limit: Optional[int] = None,
    ):
        self._classifier = classifier or get_symptom_classifier()
        self._responder = responder or get_gemini_client()
        self._history_limit = history_limit if history_limit is not None else get_settings().CHAT_HISTORY_LIMIT

    async def process_message(
        self,
        message: str,
        history: Sequence[ChatTurn] = (),
        locale: Optional[str] = None,
    ) -> ChatReply:
        """
        Produce a reply for the latest user message.

        Args:
            message: Latest user message.
            history: Earlier turns, oldest first.
            locale: Advisory locale for symptom responses.

        Returns:
            Reply text, emergency flag and the routing branch taken.
        """
        symptom_result = self._classifier.process_symptom_message(message, locale)
        if symptom_result.is_symptom_question:
            return ChatReply(
                response=symptom_result.response,
                is_emergency=symptom_result.is_emergency,
                source=ReplySource.SYMPTOM_ANALYZER,
            )

        emergency_number = self._classifier.advisory_text(locale).emergency_number

        if detect_emergency(message):
            logger.warning("Emergency keyword detected in chat message")
            return ChatReply(
                response=emergency_reply(emergency_number),
                is_emergency=True,
                source=ReplySource.EMERGENCY_GATE,
            )

        if not is_medical_query(message):
            return ChatReply(response=NON_MEDICAL_REPLY, source=ReplySource.NON_MEDICAL)

        recent = list(history)[-self._history_limit:] if self._history_limit > 0 else []

        try:
            answer = await self._responder.generate(
                enhance_prompt(message),
                system_context(emergency_number),
                recent,
            )
        except AIResponderError as e:
            logger.error(f"Error processing message via AI responder: {e}", exc_info=True)
            return ChatReply(response=AI_ERROR_REPLY, source=ReplySource.AI_ERROR)

        return ChatReply(response=answer, source=ReplySource.AI_RESPONDER)


# Singleton instance
_chat_instance: Optional[MedicalChatService] = None


def get_medical_chat_service() -> MedicalChatService:
    """Get or create MedicalChatService instance."""
    global _chat_instance
    if _chat_instance is None:
        _chat_instance = MedicalChatService()
    return _chat_instance
