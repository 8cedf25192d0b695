"""Display labels and dose-log summaries for tracked medications."""
from datetime import datetime, timezone
from typing import Optional, Sequence

from medichat.schemas.medications import AdherenceSummary, DoseStatus, Medication, MedicationLog

FREQUENCY_LABELS = {
    "once_daily": "Once Daily",
    "twice_daily": "Twice Daily",
    "three_times_daily": "Three Times Daily",
    "four_times_daily": "Four Times Daily",
    "as_needed": "As Needed",
    "weekly": "Weekly",
    "monthly": "Monthly",
}

# default number of dose times offered when a frequency is picked
DOSES_PER_DAY = {
    "once_daily": 1,
    "twice_daily": 2,
    "three_times_daily": 3,
    "four_times_daily": 4,
    "as_needed": 1,
    "weekly": 1,
    "monthly": 1,
}


def frequency_label(frequency: str) -> str:
    """Human label for a frequency code; unknown codes are shown as-is."""
    return FREQUENCY_LABELS.get(frequency, frequency)


def default_dose_count(frequency: str) -> int:
    return DOSES_PER_DAY.get(frequency, 1)


def summarize_adherence(logs: Sequence[MedicationLog]) -> Optional[AdherenceSummary]:
    if not logs:
        return None
    counts = {"taken": 0, "missed": 0, "delayed": 0}
    for log in logs:
        counts[log.status] += 1
    return AdherenceSummary(
        total=len(logs),
        taken=counts["taken"],
        missed=counts["missed"],
        delayed=counts["delayed"],
        adherence_pct=round(100 * counts["taken"] / len(logs), 1),
    )


def new_dose_log(medication: Medication, status: DoseStatus, now: Optional[datetime] = None) -> MedicationLog:
    """Log a dose scheduled for now; only taken doses carry an actual time."""
    now = now or datetime.now(timezone.utc)
    return MedicationLog(
        medication_name=medication.name,
        dosage=medication.dosage,
        scheduled_time=now,
        actual_time=now if status == "taken" else None,
        status=status,
    )
