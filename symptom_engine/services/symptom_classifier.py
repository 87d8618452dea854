"""
Symptom Classifier Service

Rule-based classification of free-text chat messages into recognized
symptoms, ranked possible conditions and an emergency verdict, plus the
advisory text shown to the user.

Every operation is a pure function of the input text and the static tables
in ``symptom_data`` and ``rules``; the classifier holds no per-call state and
is safe to share between concurrent requests.
"""

from collections import Counter
from typing import Mapping, Optional

from symptom_engine.config import get_settings
from symptom_engine.core.logging import get_logger
from symptom_engine.schemas.symptoms import (
    AnalysisResult,
    SeverityLevel,
    SymptomMessageResult,
)
from symptom_engine.services.rules import COMBINATION_RULES, CombinationRule, triggered_rules
from symptom_engine.services.symptom_data import (
    ADVISORY_LOCALES,
    EMERGENCY_SYMPTOMS,
    EMERGENCY_TERMS,
    GENERIC_DISCLAIMER,
    NO_CONDITIONS_MESSAGE,
    SYMPTOM_QUESTION_PHRASES,
    SYMPTOM_SYNONYMS,
    SYMPTOM_TABLE,
    UNIDENTIFIED_SYMPTOMS_MESSAGE,
    AdvisoryText,
    SymptomRecord,
)

logger = get_logger(__name__)

MAX_CONDITIONS_SHOWN = 5
MAX_ADVICE_SHOWN = 3
FALLBACK_LOCALE = "generic"


def _normalize(text: Optional[str]) -> str:
    """Lowercase the message; ``None`` becomes the empty string."""
    return text.lower() if text else ""


def _bullets(items) -> str:
    return "".join(f"• {item}\n" for item in items)


class SymptomClassifier:
    """
    Keyword-driven symptom and emergency classifier.

    Features:
    - Direct and synonym symptom recognition in table order
    - Emergency detection from flat terms, severe-symptom synonyms,
      combination rules and symptom severity
    - Condition ranking by mention frequency
    - Locale-aware advisory rendering
    """

    def __init__(
        self,
        symptom_table: tuple[SymptomRecord, ...] = SYMPTOM_TABLE,
        rules: tuple[CombinationRule, ...] = COMBINATION_RULES,
        default_locale: Optional[str] = None,
        synonyms: Mapping[str, tuple[str, ...]] = SYMPTOM_SYNONYMS,
    ):
        self._table = symptom_table
        self._synonyms = synonyms
        self._rules = rules
        self._default_locale = default_locale or get_settings().DEFAULT_LOCALE
        self._logger = logger

    @property
    def default_locale(self) -> str:
        return self._default_locale

    # ------------------------------------------------------------------
    # Recognition
    # ------------------------------------------------------------------

    def _mentions(self, record: SymptomRecord, lowered: str) -> bool:
        if record.key in lowered:
            return True
        return any(synonym in lowered for synonym in self._synonyms.get(record.key, ()))

    def _recognize(self, lowered: str) -> list[SymptomRecord]:
        return [record for record in self._table if self._mentions(record, lowered)]

    def is_symptom_question(self, text: Optional[str]) -> bool:
        """
        Decide whether a message is asking about symptoms.

        A message qualifies if it names a known symptom (directly or by
        synonym) or contains one of the symptom-question phrases.
        """
        lowered = _normalize(text)
        if not lowered:
            return False

        if any(self._mentions(record, lowered) for record in self._table):
            return True

        return any(phrase in lowered for phrase in SYMPTOM_QUESTION_PHRASES)

    def extract_symptoms(self, text: Optional[str]) -> list[str]:
        """Return recognized symptom keys in table order, each at most once."""
        return [record.key for record in self._recognize(_normalize(text))]

    # ------------------------------------------------------------------
    # Emergency checks
    # ------------------------------------------------------------------

    def _has_emergency_term(self, lowered: str) -> bool:
        return any(term in lowered for term in EMERGENCY_TERMS)

    def _has_severe_synonym(self, lowered: str) -> bool:
        # Only symptoms listed as emergencies take part, and only their synonyms
        for key, synonyms in self._synonyms.items():
            if key in EMERGENCY_SYMPTOMS and any(synonym in lowered for synonym in synonyms):
                return True
        return False

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def analyze_symptoms(self, text: Optional[str]) -> AnalysisResult:
        """
        Analyze a message for symptoms, conditions and emergency signs.

        Args:
            text: Raw user message. ``None`` and empty strings are allowed.

        Returns:
            Analysis with recognized symptoms, ranked conditions, unique
            advice and the emergency flag.
        """
        lowered = _normalize(text)

        emergency_term = self._has_emergency_term(lowered)
        severe_synonym = self._has_severe_synonym(lowered)
        fired_rules = triggered_rules(lowered, self._rules)

        recognized = self._recognize(lowered)

        # Counter keeps first-insertion order, and sorted() is stable, so
        # equal counts stay in discovery order
        condition_counts: Counter[str] = Counter()
        advice: list[str] = []
        has_severe_symptom = False

        for record in recognized:
            if record.severity == SeverityLevel.SEVERE:
                has_severe_symptom = True
            condition_counts.update(record.possible_conditions)
            advice.append(record.follow_up_advice)

        ranked_conditions = sorted(
            condition_counts,
            key=lambda condition: condition_counts[condition],
            reverse=True,
        )
        unique_advice = list(dict.fromkeys(advice))

        is_emergency = emergency_term or severe_synonym or bool(fired_rules) or has_severe_symptom

        self._logger.debug(
            "Symptom analysis complete",
            extra={
                "recognized": len(recognized),
                "conditions": len(ranked_conditions),
                "is_emergency": is_emergency,
                "emergency_term": emergency_term,
                "severe_synonym": severe_synonym,
                "triggered_rules": fired_rules,
            }
        )

        return AnalysisResult(
            recognized_symptoms=[record.key for record in recognized],
            possible_conditions=ranked_conditions,
            follow_up_advice=unique_advice,
            is_emergency=is_emergency,
            triggered_rules=fired_rules,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def advisory_text(self, locale: Optional[str] = None) -> AdvisoryText:
        """Resolve locale strings, falling back to the default then to generic."""
        for candidate in (locale, self._default_locale, FALLBACK_LOCALE):
            if candidate and candidate in ADVISORY_LOCALES:
                return ADVISORY_LOCALES[candidate]
        return ADVISORY_LOCALES[FALLBACK_LOCALE]

    def format_symptom_response(self, analysis: AnalysisResult, locale: Optional[str] = None) -> str:
        """
        Render an analysis as a user-facing advisory message.

        Args:
            analysis: Result of ``analyze_symptoms``.
            locale: Advisory locale key; defaults to the configured one.

        Returns:
            Formatted message ending with a disclaimer.
        """
        text = self.advisory_text(locale)
        response = ""

        if analysis.is_emergency:
            response += f"{text.emergency_banner}\n\n"

        if not analysis.recognized_symptoms:
            response += f"{UNIDENTIFIED_SYMPTOMS_MESSAGE}\n\n"
            return response + GENERIC_DISCLAIMER

        response += f"I've identified these symptoms: {', '.join(analysis.recognized_symptoms)}.\n\n"

        if analysis.possible_conditions:
            response += "Based on these symptoms, some possible conditions might include:\n"
            response += _bullets(analysis.possible_conditions[:MAX_CONDITIONS_SHOWN])
            response += "\n"
        else:
            response += f"{NO_CONDITIONS_MESSAGE}\n\n"

        if analysis.follow_up_advice:
            if analysis.is_emergency:
                response += "EMERGENCY ACTION REQUIRED:\n"
                response += _bullets(text.emergency_actions)
            else:
                response += "Follow-up advice:\n"
                response += _bullets(analysis.follow_up_advice[:MAX_ADVICE_SHOWN])
            response += "\n"

        return response + text.disclaimer

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def process_symptom_message(self, text: Optional[str], locale: Optional[str] = None) -> SymptomMessageResult:
        """
        Classify and answer a chat message in one step.

        Returns ``is_symptom_question=False`` alone when the message is not
        about symptoms, so the caller can hand it to another responder.
        """
        if not self.is_symptom_question(text):
            return SymptomMessageResult(is_symptom_question=False)

        analysis = self.analyze_symptoms(text)
        response = self.format_symptom_response(analysis, locale)

        if analysis.is_emergency:
            self._logger.warning(
                "Emergency detected in symptom message",
                extra={
                    "recognized_symptoms": analysis.recognized_symptoms,
                    "triggered_rules": analysis.triggered_rules,
                }
            )

        return SymptomMessageResult(
            is_symptom_question=True,
            is_emergency=analysis.is_emergency,
            recognized_symptoms=analysis.recognized_symptoms,
            response=response,
        )


# Singleton instance
_classifier_instance: Optional[SymptomClassifier] = None


def get_symptom_classifier() -> SymptomClassifier:
    """Get or create SymptomClassifier instance."""
    global _classifier_instance
    if _classifier_instance is None:
        _classifier_instance = SymptomClassifier()
    return _classifier_instance
