"""
Combination rules for emergency patterns.

A rule is a small predicate tree over the lowercased message: ``Contains``
leaves joined by ``AllOf`` / ``AnyOf`` nodes. Rules catch emergencies that no
single symptom key describes, such as "face drooping" with "arm weak".
New rules are added as data in ``COMBINATION_RULES``.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Contains:
    """True when ``term`` occurs anywhere in the text."""

    term: str

    def matches(self, text: str) -> bool:
        return self.term in text


@dataclass(frozen=True)
class AllOf:
    """True when every child matches."""

    children: tuple["Predicate", ...]

    def __init__(self, *children: "Predicate"):
        object.__setattr__(self, "children", children)

    def matches(self, text: str) -> bool:
        return all(child.matches(text) for child in self.children)


@dataclass(frozen=True)
class AnyOf:
    """True when at least one child matches."""

    children: tuple["Predicate", ...]

    def __init__(self, *children: "Predicate"):
        object.__setattr__(self, "children", children)

    def matches(self, text: str) -> bool:
        return any(child.matches(text) for child in self.children)


Predicate = Union[Contains, AllOf, AnyOf]


def any_term(*terms: str) -> AnyOf:
    """Shorthand for an ``AnyOf`` over plain substrings."""
    return AnyOf(*(Contains(term) for term in terms))


@dataclass(frozen=True)
class CombinationRule:
    """A named emergency pattern."""

    name: str
    description: str
    predicate: Predicate

    def evaluate(self, lowered_text: str) -> bool:
        """
        Evaluate the rule against already-lowercased text.

        Args:
            lowered_text: Message text, lowercased by the caller.

        Returns:
            True if the pattern is present.
        """
        return self.predicate.matches(lowered_text)


# ============================================================================
# RULE SET
# ============================================================================

HEART_ATTACK_RULE = CombinationRule(
    name="heart_attack_pattern",
    description="Chest pain or pressure with radiating or autonomic symptoms",
    predicate=AllOf(
        Contains("chest"),
        any_term("pain", "pressure", "squeeze", "heavy"),
        any_term("arm", "jaw", "sweat", "nausea", "breathless"),
    ),
)

STROKE_FAST_RULE = CombinationRule(
    name="stroke_fast_pattern",
    description="F.A.S.T. stroke signs: face, arm, speech, sudden onset",
    predicate=AnyOf(
        AllOf(Contains("face"), Contains("droop")),
        AllOf(Contains("arm"), Contains("weak")),
        AllOf(Contains("speech"), any_term("slur", "confused")),
        AllOf(
            any_term("sudden", "all of a sudden"),
            any_term("numb", "weak", "dizzy", "vision", "trouble walk"),
        ),
    ),
)

COMBINATION_RULES: tuple[CombinationRule, ...] = (
    HEART_ATTACK_RULE,
    STROKE_FAST_RULE,
)


def triggered_rules(lowered_text: str, rules: tuple[CombinationRule, ...] = COMBINATION_RULES) -> list[str]:
    """Names of the rules that fire on ``lowered_text``, in rule order."""
    return [rule.name for rule in rules if rule.evaluate(lowered_text)]
