import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from medichat.schemas.symptoms import (
    DatabaseAssessment,
    PatientInfo,
    SymptomCheckContext,
    SymptomCheckRequest,
    SymptomCheckResponse,
)
from medichat.services.catalog import find_symptom_by_id
from medichat.services.triage import assess_urgency, find_relevant_conditions, get_red_flags
from medichat.utils.exceptions import InvalidRequestError

logger = logging.getLogger("medichat")

NOT_SPECIFIED = "Not specified"


def parse_request(payload: Optional[Dict[str, Any]]) -> SymptomCheckRequest:
    """Validate an inbound symptom-check payload.

    An absent or empty symptom list is a 400; any other schema violation
    (negative age, wrong types) is a 422 with pydantic's error list.
    """
    if not isinstance(payload, dict) or not payload.get("symptoms"):
        raise InvalidRequestError("Symptoms are required")
    try:
        return SymptomCheckRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRequestError(
            "Invalid symptom check request",
            details=exc.errors(include_url=False, include_context=False),
            status_code=422,
        ) from exc


def resolve_symptom_names(symptom_ids: Iterable[str]) -> List[str]:
    """Display names for known ids; unknown ids are echoed back as-is."""
    names: List[str] = []
    for symptom_id in symptom_ids:
        symptom = find_symptom_by_id(symptom_id)
        names.append(symptom.name if symptom else symptom_id)
    return names


def collect_common_conditions(symptom_ids: Iterable[str]) -> List[str]:
    # dict preserves first-seen order while dropping duplicates
    conditions: Dict[str, None] = {}
    for symptom_id in symptom_ids:
        symptom = find_symptom_by_id(symptom_id)
        if symptom is None:
            continue
        for name in symptom.common_conditions:
            conditions.setdefault(name, None)
    return list(conditions)


def build_context(request: SymptomCheckRequest) -> SymptomCheckContext:
    """Run the triage engine and gather everything the analysis prompt needs."""
    request_id = str(uuid.uuid4())
    ids = list(dict.fromkeys(request.symptoms))

    assessment = assess_urgency(ids, request.age)
    red_flags = get_red_flags(ids)
    matched = find_relevant_conditions(ids)

    context = SymptomCheckContext(
        request_id=request_id,
        symptom_ids=ids,
        symptom_names=resolve_symptom_names(ids),
        assessment=assessment,
        red_flags=red_flags,
        possible_conditions=collect_common_conditions(ids),
        matched_conditions=matched,
        age=request.age,
        gender=request.gender,
        duration=request.duration,
        severity=request.severity,
    )

    logger.info({
        "function": "build_context",
        "request_id": request_id,
        "symptom_count": len(ids),
        "unknown_symptoms": [i for i in ids if find_symptom_by_id(i) is None],
        "urgency": assessment.urgency_level,
        "red_flags": len(red_flags),
        "matched_conditions": [c.id for c in matched],
    })
    return context


def _or_not_specified(value: Any) -> Any:
    if value is None or value == "":
        return NOT_SPECIFIED
    return value


def build_response(
    context: SymptomCheckContext,
    analysis: str,
    now: Optional[datetime] = None,
) -> SymptomCheckResponse:
    """Assemble the response payload around the generated analysis text."""
    assessment = context.assessment
    return SymptomCheckResponse(
        analysis=analysis or "",
        database_assessment=DatabaseAssessment(
            urgency_level=assessment.urgency_level,
            reasoning=assessment.reasoning,
            immediate_actions=list(assessment.immediate_actions),
            relevant_conditions=list(assessment.relevant_conditions),
            red_flags=list(context.red_flags),
        ),
        timestamp=now or datetime.now(timezone.utc),
        patient_info=PatientInfo(
            age=_or_not_specified(context.age),
            gender=_or_not_specified(context.gender),
            symptoms=list(context.symptom_names),
            duration=_or_not_specified(context.duration),
            severity=_or_not_specified(context.severity),
        ),
    )


def check_symptoms(payload: Optional[Dict[str, Any]]) -> SymptomCheckContext:
    """Validate a raw payload and build its triage context in one step."""
    return build_context(parse_request(payload))


__all__ = [
    "parse_request",
    "resolve_symptom_names",
    "collect_common_conditions",
    "build_context",
    "build_response",
    "check_symptoms",
]
