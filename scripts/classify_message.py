#!/usr/bin/env python3
"""
Run the symptom classifier on messages from the command line.

Usage:
    python scripts/classify_message.py "I have a headache and feel dizzy"
    python scripts/classify_message.py --json --locale generic "my chest hurts"
    echo "sore throat and fever" | python scripts/classify_message.py

Prints the formatted advisory response, or the raw analysis with --json.
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from symptom_engine.core.logging import get_logger, setup_logging
from symptom_engine.services.symptom_classifier import SymptomClassifier

setup_logging()
logger = get_logger(__name__)


def classify(classifier: SymptomClassifier, message: str, as_json: bool, locale: str | None) -> str:
    """Classify one message and render the output."""
    if as_json:
        analysis = classifier.analyze_symptoms(message)
        output = analysis.model_dump()
        output["is_symptom_question"] = classifier.is_symptom_question(message)
        return json.dumps(output, indent=2, ensure_ascii=False)

    result = classifier.process_symptom_message(message, locale)
    if not result.is_symptom_question:
        return "Not a symptom question; route to the general responder."
    return result.response


def main():
    parser = argparse.ArgumentParser(
        description="Classify chat messages with the rule-based symptom engine"
    )
    parser.add_argument(
        "messages",
        nargs="*",
        help="Messages to classify (reads stdin lines when omitted)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the structured analysis instead of the advisory text"
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Advisory locale (bd, generic)"
    )

    args = parser.parse_args()

    messages = args.messages or [line.strip() for line in sys.stdin if line.strip()]
    if not messages:
        parser.error("no messages given")

    classifier = SymptomClassifier(default_locale=args.locale)

    for index, message in enumerate(messages):
        if index:
            print("-" * 60)
        print(classify(classifier, message, args.json, args.locale))

    logger.debug(f"Classified {len(messages)} messages")


if __name__ == "__main__":
    main()
