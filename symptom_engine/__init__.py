"""Symptom Triage Engine: rule-based symptom and emergency detection for health chat."""

__version__ = "1.0.0"
