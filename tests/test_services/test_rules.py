"""
Tests for combination rule predicates.
"""

import pytest

from symptom_engine.services.rules import (
    COMBINATION_RULES,
    HEART_ATTACK_RULE,
    STROKE_FAST_RULE,
    AllOf,
    AnyOf,
    CombinationRule,
    Contains,
    any_term,
    triggered_rules,
)
from symptom_engine.services.symptom_classifier import SymptomClassifier


def test_predicate_nodes():
    tree = AllOf(Contains("chest"), AnyOf(Contains("pain"), Contains("pressure")))

    assert tree.matches("chest pressure")
    assert not tree.matches("chest")
    assert not tree.matches("back pain")


def test_any_term_shorthand():
    assert any_term("a", "b") == AnyOf(Contains("a"), Contains("b"))


@pytest.mark.parametrize("text", [
    "crushing chest pain down my arm",
    "chest pressure and i'm drenched in sweat",
    "my chest feels heavy and i feel breathless",
    "chest squeeze with nausea",
])
def test_heart_attack_pattern_fires(text):
    assert HEART_ATTACK_RULE.evaluate(text)


@pytest.mark.parametrize("text", [
    "chest pain",
    "my arm hurts",
    "chest congestion with nausea",
])
def test_heart_attack_pattern_needs_all_clauses(text):
    assert not HEART_ATTACK_RULE.evaluate(text)


@pytest.mark.parametrize("text", [
    "her face is drooping",
    "my arm is weak",
    "his speech is slurred",
    "speech sounds confused",
    "suddenly i went numb",
    "all of a sudden my vision went blurry",
    "sudden trouble walking",
])
def test_stroke_pattern_fires(text):
    assert STROKE_FAST_RULE.evaluate(text)


@pytest.mark.parametrize("text", [
    "my face is sunburnt",
    "i gave a speech today",
    "numb toes from the cold",
])
def test_stroke_pattern_negative(text):
    assert not STROKE_FAST_RULE.evaluate(text)


def test_triggered_rules_in_rule_order():
    text = "sudden chest pain and my arm is weak"

    assert triggered_rules(text) == ["heart_attack_pattern", "stroke_fast_pattern"]
    assert [rule.name for rule in COMBINATION_RULES] == ["heart_attack_pattern", "stroke_fast_pattern"]


def test_rules_can_be_added_as_data():
    meningitis = CombinationRule(
        name="meningitis_pattern",
        description="Fever with a stiff neck",
        predicate=AllOf(Contains("fever"), Contains("stiff"), Contains("neck")),
    )
    classifier = SymptomClassifier(rules=COMBINATION_RULES + (meningitis,), default_locale="bd")

    result = classifier.analyze_symptoms("fever and my neck is stiff")

    assert result.triggered_rules == ["meningitis_pattern"]
    assert result.is_emergency is True
