"""
Prometheus counters for classifier and chat traffic.
"""

from prometheus_client import Counter

SYMPTOM_ANALYSES = Counter(
    "symptom_analyses_total",
    "Messages run through the symptom classifier",
)

EMERGENCY_DETECTIONS = Counter(
    "emergency_detections_total",
    "Messages flagged as a medical emergency",
    ["source"],
)

CHAT_REPLIES = Counter(
    "chat_replies_total",
    "Chat replies by routing outcome",
    ["source"],
)
