# medichat/schemas/vitals.py
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field

GlucoseUnit = Literal["mg/dL", "mmol/L"]
MeasurementType = Literal["fasting", "postprandial", "random", "bedtime"]
WeightUnit = Literal["kg", "lbs"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BloodPressureReading(BaseModel):
    systolic: int = Field(..., ge=50, le=300)
    diastolic: int = Field(..., ge=30, le=200)
    heart_rate: Optional[int] = Field(None, ge=30, le=220)
    notes: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class BloodSugarReading(BaseModel):
    glucose: float = Field(..., ge=20, le=800)
    unit: GlucoseUnit = "mg/dL"
    measurement_type: MeasurementType
    notes: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class WeightReading(BaseModel):
    weight: float = Field(..., ge=20, le=1000)
    unit: WeightUnit = "kg"
    body_fat: Optional[float] = Field(None, ge=0, le=100)
    muscle_mass: Optional[float] = Field(None, ge=0, le=200)
    notes: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class VitalCategory(BaseModel):
    """Classification label for a reading or an average of readings."""

    category: str
    value: float


class BloodPressureSummary(BaseModel):
    count: int
    avg_systolic: float
    avg_diastolic: float
    avg_heart_rate: Optional[float] = None
    category: str


class BloodSugarSummary(BaseModel):
    count: int
    avg_fasting: Optional[VitalCategory] = None
    avg_postprandial: Optional[VitalCategory] = None
    avg_overall_mg_dl: float


class WeightSummary(BaseModel):
    count: int
    avg_kg: float
    min_kg: float
    max_kg: float
    latest_kg: float
    change_kg: float = Field(..., description="Latest minus earliest reading, in kg.")
