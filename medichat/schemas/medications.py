# medichat/schemas/medications.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Frequency = Literal[
    "once_daily",
    "twice_daily",
    "three_times_daily",
    "four_times_daily",
    "as_needed",
    "weekly",
    "monthly",
]
DoseStatus = Literal["taken", "missed", "delayed"]


class Medication(BaseModel):
    name: str = Field(..., min_length=1)
    dosage: str = Field(..., min_length=1)
    frequency: Frequency
    times: List[str] = Field(..., min_length=1, description="Scheduled dose times as HH:MM.")
    start_date: datetime
    end_date: Optional[datetime] = None
    is_active: bool = True
    reminder_enabled: bool = True
    notes: Optional[str] = None
    prescribed_by: Optional[str] = None
    side_effects: List[str] = Field(default_factory=list)


class MedicationLog(BaseModel):
    """One scheduled dose and what happened to it."""

    medication_name: str
    dosage: str
    scheduled_time: datetime
    actual_time: Optional[datetime] = None
    status: DoseStatus = "taken"
    notes: Optional[str] = None


class AdherenceSummary(BaseModel):
    total: int
    taken: int
    missed: int
    delayed: int
    adherence_pct: float = Field(..., description="Taken doses as a percentage of logged doses.")
