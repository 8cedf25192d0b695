# medichat/schemas/symptoms.py
from datetime import datetime
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

UrgencyLevel = Literal["low", "medium", "high", "emergency"]
Severity = Literal["mild", "moderate", "severe"]


class Symptom(BaseModel):
    """A reference symptom shipped with the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable short identifier, e.g. 'chest_pain'.")
    name: str = Field(..., description="Display name.")
    category: str = Field(..., description="Body-system label, e.g. 'Respiratory'.")
    severity: Severity
    urgency: UrgencyLevel
    common_conditions: Tuple[str, ...] = Field(default_factory=tuple)
    red_flags: Tuple[str, ...] = Field(default_factory=tuple)


class MedicalCondition(BaseModel):
    """A reference condition with its expected symptoms and care guidance."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icd10: str = Field(..., description="ICD-10 classification code.")
    common_symptoms: Tuple[str, ...] = Field(default_factory=tuple, description="Symptom ids.")
    risk_factors: Tuple[str, ...] = Field(default_factory=tuple)
    urgency_level: UrgencyLevel
    self_care: Tuple[str, ...] = Field(default_factory=tuple)
    seek_care_if: Tuple[str, ...] = Field(default_factory=tuple)


class UrgencyAssessment(BaseModel):
    """Result of the rule cascade; allocated fresh on every call."""

    model_config = ConfigDict(frozen=True)

    urgency_level: UrgencyLevel
    reasoning: str
    immediate_actions: List[str]
    relevant_conditions: List[str]


class SymptomCheckRequest(BaseModel):
    """Inbound symptom-check payload as posted by the chat client."""

    symptoms: List[str] = Field(..., min_length=1, description="Reported symptom ids.")
    age: Optional[int] = Field(None, ge=0)
    gender: Optional[str] = None
    duration: Optional[str] = Field(None, max_length=200)
    severity: Optional[str] = Field(None, max_length=200)


class SymptomCheckContext(BaseModel):
    """Structured context handed to the text-generation collaborator."""

    request_id: str
    symptom_ids: List[str]
    symptom_names: List[str]
    assessment: UrgencyAssessment
    red_flags: List[str]
    possible_conditions: List[str] = Field(
        default_factory=list,
        description="Union of common conditions attached to the reported symptoms.",
    )
    matched_conditions: List[MedicalCondition] = Field(default_factory=list)
    age: Optional[int] = None
    gender: Optional[str] = None
    duration: Optional[str] = None
    severity: Optional[str] = None


# --- response payload (camelCase on the wire) ---------------------------------
class DatabaseAssessment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    urgency_level: UrgencyLevel = Field(..., alias="urgencyLevel")
    reasoning: str
    immediate_actions: List[str] = Field(..., alias="immediateActions")
    relevant_conditions: List[str] = Field(..., alias="relevantConditions")
    red_flags: List[str] = Field(..., alias="redFlags")


class PatientInfo(BaseModel):
    age: Union[int, str] = "Not specified"
    gender: str = "Not specified"
    symptoms: List[str]
    duration: str = "Not specified"
    severity: str = "Not specified"


class SymptomCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    analysis: str
    database_assessment: DatabaseAssessment = Field(..., alias="databaseAssessment")
    timestamp: datetime
    patient_info: PatientInfo = Field(..., alias="patientInfo")
