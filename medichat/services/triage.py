"""Rule-based symptom urgency assessment.

- assess_urgency: ordered cascade, first matching tier wins.
- get_red_flags: de-duplicated red flags of the reported symptoms.
- find_relevant_conditions: catalog conditions with enough overlapping symptoms.

Everything here is a pure function of its arguments and the static catalogs.
"""
from typing import FrozenSet, Iterable, List, Optional, Tuple

from medichat.schemas.symptoms import MedicalCondition, UrgencyAssessment, UrgencyLevel
from medichat.services.catalog import MEDICAL_CONDITIONS, find_symptom_by_id

EMERGENCY_SYMPTOMS: FrozenSet[str] = frozenset({"chest_pain", "shortness_of_breath"})

HIGH_RISK_COMBOS: Tuple[FrozenSet[str], ...] = (
    frozenset({"fever", "headache"}),
    frozenset({"abdominal_pain", "nausea"}),
    frozenset({"chest_pain", "dizziness"}),
    frozenset({"fever", "chest_pain"}),
    frozenset({"shortness_of_breath", "chest_pain"}),
)

COLD_SYMPTOMS: FrozenSet[str] = frozenset({"cough", "runny_nose", "sore_throat", "congestion", "sneezing"})

ELDERLY_AGE = 65

# (tier, reasoning, immediate actions, relevant conditions)
_Outcome = Tuple[UrgencyLevel, str, Tuple[str, ...], Tuple[str, ...]]

EMERGENCY_OUTCOME: _Outcome = (
    "emergency",
    "Symptoms suggest potential life-threatening condition",
    ("Call 911 immediately", "Do not drive yourself", "Stay with someone if possible"),
    ("Heart attack", "Pulmonary embolism", "Severe asthma attack"),
)
HIGH_OUTCOME: _Outcome = (
    "high",
    "Symptom combination or demographics suggest serious condition requiring prompt medical attention",
    ("Seek medical care within 2-4 hours", "Monitor symptoms closely", "Have someone drive you"),
    ("Serious infection", "Appendicitis", "Cardiac issues"),
)
COLD_OUTCOME: _Outcome = (
    "low",
    "Symptoms consistent with common cold or upper respiratory infection",
    ("Rest and hydration", "Over-the-counter cold medications", "Monitor for worsening symptoms"),
    ("Common cold", "Viral upper respiratory infection", "Allergies"),
)
MEDIUM_OUTCOME: _Outcome = (
    "medium",
    "Multiple symptoms warrant medical evaluation",
    ("Schedule appointment with healthcare provider within 24-48 hours", "Monitor for worsening", "Rest and hydration"),
    ("Viral infection", "Bacterial infection", "Inflammatory condition"),
)
DEFAULT_OUTCOME: _Outcome = (
    "low",
    "Symptoms are mild and likely self-limiting",
    ("Self-care measures", "Monitor symptoms", "Schedule routine appointment if persistent"),
    ("Common cold", "Minor strain", "Stress-related symptoms"),
)

CARE_TIMEFRAMES = {
    "emergency": "CALL 911 IMMEDIATELY",
    "high": "Seek care within 2-4 hours",
    "medium": "Schedule appointment within 24-48 hours",
    "low": "Monitor symptoms and seek care if worsening",
}


def _build(outcome: _Outcome) -> UrgencyAssessment:
    level, reasoning, actions, conditions = outcome
    return UrgencyAssessment(
        urgency_level=level,
        reasoning=reasoning,
        immediate_actions=list(actions),
        relevant_conditions=list(conditions),
    )


def _select_outcome(reported: FrozenSet[str], age: Optional[int]) -> _Outcome:
    if reported & EMERGENCY_SYMPTOMS:
        return EMERGENCY_OUTCOME

    has_combo = any(combo <= reported for combo in HIGH_RISK_COMBOS)
    elderly_multi = age is not None and age > ELDERLY_AGE and len(reported) > 2
    if has_combo or elderly_multi:
        return HIGH_OUTCOME

    if reported & COLD_SYMPTOMS and len(reported) <= 3:
        return COLD_OUTCOME

    if len(reported) > 3 or "fever" in reported:
        return MEDIUM_OUTCOME

    return DEFAULT_OUTCOME


def assess_urgency(symptom_ids: Iterable[str], age: Optional[int] = None) -> UrgencyAssessment:
    """Classify reported symptoms into an urgency tier.

    Unknown ids are allowed and an empty collection falls through to the
    default low tier. Size checks count distinct ids, so repeated ids do not
    change the outcome. Age only matters for the elderly multi-symptom rule.
    """
    reported = frozenset(symptom_ids or ())
    return _build(_select_outcome(reported, age))


def care_timeframe(level: UrgencyLevel) -> str:
    return CARE_TIMEFRAMES[level]


def get_red_flags(symptom_ids: Iterable[str]) -> List[str]:
    """Union of catalog red flags, first-seen order, unknown ids skipped."""
    seen: set[str] = set()
    flags: List[str] = []
    for symptom_id in symptom_ids or ():
        symptom = find_symptom_by_id(symptom_id)
        if symptom is None:
            continue
        for flag in symptom.red_flags:
            if flag not in seen:
                seen.add(flag)
                flags.append(flag)
    return flags


def find_relevant_conditions(symptom_ids: Iterable[str]) -> List[MedicalCondition]:
    """Catalog conditions sharing at least min(2, len(common_symptoms)) symptoms.

    Results keep catalog order; they are not ranked by match count.
    """
    reported = frozenset(symptom_ids or ())
    relevant: List[MedicalCondition] = []
    for condition in MEDICAL_CONDITIONS:
        matches = sum(1 for s in condition.common_symptoms if s in reported)
        if matches >= min(2, len(condition.common_symptoms)):
            relevant.append(condition)
    return relevant
