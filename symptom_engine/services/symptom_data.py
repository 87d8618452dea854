"""
Static lookup tables for the symptom classifier.

Everything here is built once at import time and never mutated: tuples for
ordered collections, read-only mappings for keyed ones. Table order matters,
it decides the order of recognized symptoms and breaks ties between
equally-ranked conditions.
"""

from dataclasses import dataclass
from types import MappingProxyType

from symptom_engine.schemas.symptoms import SeverityLevel


@dataclass(frozen=True)
class SymptomRecord:
    """A known symptom and what it suggests."""

    key: str
    possible_conditions: tuple[str, ...]
    severity: SeverityLevel
    follow_up_advice: str
    emergency_sign: bool = False


@dataclass(frozen=True)
class AdvisoryText:
    """Locale-specific strings used when rendering a response."""

    emergency_number: str
    emergency_banner: str
    emergency_actions: tuple[str, ...]
    disclaimer: str


# ============================================================================
# SYMPTOM DATABASE
# ============================================================================

SYMPTOM_TABLE: tuple[SymptomRecord, ...] = (
    SymptomRecord(
        key="headache",
        possible_conditions=("Tension headache", "Migraine", "Sinusitis", "Dehydration", "Stress"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If headaches persist for more than a few days or are accompanied by fever, seek medical attention.",
    ),
    SymptomRecord(
        key="fever",
        possible_conditions=("Common cold", "Influenza", "COVID-19", "Infection", "Inflammatory conditions"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="For high fevers (above 103°F/39.4°C), seek immediate medical attention. Otherwise, stay hydrated and rest.",
    ),
    SymptomRecord(
        key="cough",
        possible_conditions=("Common cold", "Bronchitis", "Asthma", "Allergies", "COVID-19", "Pneumonia"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If cough persists for more than two weeks or you cough up blood, see a doctor.",
    ),
    SymptomRecord(
        key="chest pain",
        possible_conditions=("Angina", "Heart attack", "Pulmonary embolism", "Anxiety", "Acid reflux"),
        severity=SeverityLevel.SEVERE,
        follow_up_advice="Chest pain, especially if sudden or severe, requires immediate medical attention.",
        emergency_sign=True,
    ),
    SymptomRecord(
        key="shortness of breath",
        possible_conditions=("Asthma", "Anxiety", "Heart failure", "Pulmonary embolism", "COVID-19", "Pneumonia"),
        severity=SeverityLevel.SEVERE,
        follow_up_advice="Sudden or severe difficulty breathing requires immediate medical attention.",
        emergency_sign=True,
    ),
    SymptomRecord(
        key="dizziness",
        possible_conditions=("Vertigo", "Low blood pressure", "Dehydration", "Inner ear problems", "Anxiety"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If dizziness persists or is accompanied by fainting, seek medical attention.",
    ),
    SymptomRecord(
        key="fatigue",
        possible_conditions=(
            "Stress", "Depression", "Anemia", "Hypothyroidism", "Sleep disorders", "Chronic fatigue syndrome",
        ),
        severity=SeverityLevel.MILD,
        follow_up_advice="If fatigue persists for more than two weeks despite adequate rest, consult a doctor.",
    ),
    SymptomRecord(
        key="nausea",
        possible_conditions=("Food poisoning", "Gastroenteritis", "Pregnancy", "Migraine", "Medication side effect"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If nausea persists for more than a day or is accompanied by severe abdominal pain, seek medical attention.",
    ),
    SymptomRecord(
        key="vomiting",
        possible_conditions=("Food poisoning", "Gastroenteritis", "Migraine", "Medication side effect", "Appendicitis"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If vomiting is severe, contains blood, or lasts more than 24 hours, seek medical attention.",
    ),
    SymptomRecord(
        key="abdominal pain",
        possible_conditions=(
            "Gastritis", "Irritable bowel syndrome", "Appendicitis", "Gallstones", "Ulcers", "Pancreatitis",
        ),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If pain is severe, persistent, or accompanied by fever, seek immediate medical attention.",
    ),
    SymptomRecord(
        key="rash",
        possible_conditions=(
            "Allergic reaction", "Eczema", "Psoriasis", "Contact dermatitis", "Viral infection",
        ),
        severity=SeverityLevel.MILD,
        follow_up_advice="If rash is widespread, painful, or accompanies a fever, consult a doctor.",
    ),
    SymptomRecord(
        key="joint pain",
        possible_conditions=("Arthritis", "Injury", "Fibromyalgia", "Lupus", "Gout"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If joint pain is accompanied by swelling or limited movement, consult a doctor.",
    ),
    SymptomRecord(
        key="sore throat",
        possible_conditions=("Common cold", "Strep throat", "Tonsillitis", "Allergies", "Acid reflux"),
        severity=SeverityLevel.MILD,
        follow_up_advice="If sore throat is severe, lasts more than a week, or makes swallowing difficult, see a doctor.",
    ),
    SymptomRecord(
        key="runny nose",
        possible_conditions=("Common cold", "Allergies", "Sinusitis", "Flu"),
        severity=SeverityLevel.MILD,
        follow_up_advice="If symptoms persist for more than 10 days or are accompanied by high fever, consult a doctor.",
    ),
    SymptomRecord(
        key="back pain",
        possible_conditions=("Muscle strain", "Herniated disc", "Sciatica", "Kidney infection", "Arthritis"),
        severity=SeverityLevel.MODERATE,
        follow_up_advice="If pain is severe, radiates down the legs, or is accompanied by numbness, see a doctor.",
    ),
)


# Alternate phrasings that count as a mention of the symptom
SYMPTOM_SYNONYMS = MappingProxyType({
    "headache": ("migraine", "head pain", "head ache", "head hurts", "head is pounding"),
    "fever": ("temperature", "high temperature", "running a fever", "febrile"),
    "cough": ("coughing", "hack", "coughing fit"),
    "chest pain": ("chest discomfort", "chest tightness", "chest pressure", "heart pain"),
    "shortness of breath": (
        "difficulty breathing", "can't breathe", "breathlessness", "sob", "trouble breathing",
    ),
    "dizziness": ("lightheaded", "vertigo", "feeling dizzy", "dizzy", "room spinning"),
    "fatigue": ("tired", "exhaustion", "no energy", "weakness", "lethargic"),
    "nausea": ("feeling sick", "queasy", "upset stomach", "want to throw up"),
    "vomiting": ("throwing up", "puking", "getting sick", "emesis"),
    "abdominal pain": ("stomach ache", "stomach pain", "belly pain", "tummy ache", "abdominal cramps"),
    "rash": ("skin irritation", "hives", "breakout", "skin eruption", "red spots"),
    "joint pain": ("arthralgia", "aching joints", "painful joints", "stiff joints"),
    "sore throat": ("throat pain", "pharyngitis", "scratchy throat", "painful throat"),
    "runny nose": ("rhinorrhea", "nasal discharge", "nose running", "nose dripping"),
    "back pain": ("backache", "pain in back", "spinal pain", "lumbar pain"),
})


# ============================================================================
# EMERGENCY TERMS
# ============================================================================

EMERGENCY_SYMPTOMS: tuple[str, ...] = (
    "chest pain",
    "shortness of breath",
    "severe bleeding",
    "sudden severe headache",
    "sudden confusion",
    "sudden numbness",
    "sudden weakness",
    "loss of consciousness",
    "seizure",
    "severe burn",
    "poisoning",
    "suicidal thoughts",
    "heart attack",
    "severe chest pressure",
    "stroke",
    "brain stroke",
    "unable to breathe",
    "coughing up blood",
    "vomiting blood",
    "severe abdominal pain",
    "head injury",
    "spinal injury",
    "drowning",
    "choking",
    "severe allergic reaction",
    "anaphylaxis",
    "unresponsive",
    "unconscious",
    "not breathing",
    "paralysis",
    "snakebite",
    "gunshot",
    "stabbing",
    "major trauma",
    "high fever with stiff neck",
    "severe dehydration",
    "heat stroke",
    "frostbite",
    "electrical shock",
    "severe eye injury",
    "suicide attempt",
)

# Transliterated phrases, keyed by language
TRANSLITERATED_EMERGENCY_PHRASES = MappingProxyType({
    "bn": (
        "hridroger aakromon",  # heart attack
        "rokto jomte thaka",   # blood clotting
        "matha betha",         # severe headache
        "bukh beytha",         # chest pain
        "shwashkoshto",        # breathing difficulty
        "songga heen",         # unconscious
        "nishash bondho",      # not breathing
        "jor komchhe na",      # fever not reducing
        "hospital dorkar",     # need hospital
        "doctor dorkar",       # need doctor
        "joruri",
        "sonkat",
        "bipod",
        "khub oshustho",       # very sick
        "rog barlo",           # condition worsening
        "pran jacche",         # life threatening
    ),
})

EMERGENCY_MARKERS: tuple[str, ...] = (
    "999",
    "emergency",
    "ambulance",
    "need help now",
    "dying",
    "death",
    "critical",
)

EMERGENCY_TERMS: tuple[str, ...] = (
    EMERGENCY_SYMPTOMS
    + tuple(phrase for phrases in TRANSLITERATED_EMERGENCY_PHRASES.values() for phrase in phrases)
    + EMERGENCY_MARKERS
)


# Phrases that mark a message as a symptom question even without a known symptom
SYMPTOM_QUESTION_PHRASES: tuple[str, ...] = (
    "what could be causing",
    "why do i feel",
    "why am i feeling",
    "what's wrong with me",
    "what is wrong with me",
    "what could this be",
    "my symptoms",
    "having symptoms",
    "might have",
    "suffering from",
    "diagnosed with",
    "do i have",
    "could i have",
    "is this",
    "should i see a doctor",
    "should i be worried",
    "is this serious",
    "health concern",
    "medical concern",
    "what condition",
)


# ============================================================================
# ADVISORY TEXT
# ============================================================================

GENERIC_DISCLAIMER = (
    "DISCLAIMER: This information is provided for educational purposes only and is not a "
    "substitute for professional medical advice, diagnosis, or treatment. Always seek the advice "
    "of your physician or other qualified health provider with any questions you may have "
    "regarding a medical condition. Never disregard professional medical advice or delay in "
    "seeking it because of something you have read here."
)

UNIDENTIFIED_SYMPTOMS_MESSAGE = (
    "I couldn't clearly identify specific symptoms from your description. "
    "Please provide more details about what you're experiencing."
)

NO_CONDITIONS_MESSAGE = "I couldn't determine specific conditions based on these symptoms alone."

ADVISORY_LOCALES = MappingProxyType({
    "bd": AdvisoryText(
        emergency_number="999",
        emergency_banner=(
            "⚠️ MEDICAL EMERGENCY DETECTED ⚠️\n\n"
            "Based on the symptoms you've described, you should seek IMMEDIATE medical attention. "
            "EMERGENCY SERVICES (999) IN BANGLADESH WILL BE CONTACTED."
        ),
        emergency_actions=(
            "Call 999 immediately (Bangladesh emergency services)",
            "Do not drive yourself to the hospital",
            "Stay on the phone with emergency operators",
            "If possible, have someone stay with you",
        ),
        disclaimer=(
            "DISCLAIMER: This information is provided for educational purposes only and is not a "
            "substitute for professional medical advice, diagnosis, or treatment. In case of "
            "emergency in Bangladesh, call 999 immediately. For non-emergencies, please consult "
            "with a qualified healthcare provider at your nearest hospital or clinic."
        ),
    ),
    "generic": AdvisoryText(
        emergency_number="your local emergency number",
        emergency_banner=(
            "⚠️ MEDICAL EMERGENCY DETECTED ⚠️\n\n"
            "Based on the symptoms you've described, you should seek IMMEDIATE medical attention. "
            "Call your local emergency number now."
        ),
        emergency_actions=(
            "Call your local emergency number immediately",
            "Do not drive yourself to the hospital",
            "Stay on the phone with emergency operators",
            "If possible, have someone stay with you",
        ),
        disclaimer=GENERIC_DISCLAIMER,
    ),
})
