"""Classification and summaries for recorded vital-sign readings.

Categories follow the bands shown on the metrics dashboard:
- blood pressure: Normal / Elevated / Stage 1 High / Stage 2 High / Hypertensive Crisis
- glucose (mg/dL): thresholds depend on the measurement type
"""
import math
from statistics import mean
from typing import List, Optional, Sequence

from medichat.schemas.vitals import (
    BloodPressureReading,
    BloodPressureSummary,
    BloodSugarReading,
    BloodSugarSummary,
    VitalCategory,
    WeightReading,
    WeightSummary,
)

MMOL_TO_MG_DL = 18
LBS_TO_KG = 0.453592


def classify_blood_pressure(systolic: float, diastolic: float) -> str:
    # Checked in order; the stage bands use "or" across the two values
    if systolic < 120 and diastolic < 80:
        return "Normal"
    if systolic < 130 and diastolic < 80:
        return "Elevated"
    if systolic < 140 or diastolic < 90:
        return "Stage 1 High"
    if systolic < 180 or diastolic < 120:
        return "Stage 2 High"
    return "Hypertensive Crisis"


def glucose_to_mg_dl(value: float, unit: str) -> float:
    return value * MMOL_TO_MG_DL if unit == "mmol/L" else value


def classify_glucose(mg_dl: float, measurement_type: str) -> str:
    if measurement_type == "fasting":
        if mg_dl < 100:
            return "Normal"
        if mg_dl < 126:
            return "Prediabetes"
        return "Diabetes"
    if measurement_type == "postprandial":
        if mg_dl < 140:
            return "Normal"
        if mg_dl < 200:
            return "Prediabetes"
        return "Diabetes"
    if mg_dl < 140:
        return "Normal"
    if mg_dl < 200:
        return "Elevated"
    return "High"


def _round_half_up(value: float) -> int:
    # whole-number averages round .5 upwards, not to even
    return int(math.floor(value + 0.5))


def weight_to_kg(value: float, unit: str) -> float:
    return value * LBS_TO_KG if unit == "lbs" else value


def summarize_blood_pressure(readings: Sequence[BloodPressureReading]) -> Optional[BloodPressureSummary]:
    if not readings:
        return None
    avg_sys = _round_half_up(mean(r.systolic for r in readings))
    avg_dia = _round_half_up(mean(r.diastolic for r in readings))
    rates = [r.heart_rate for r in readings if r.heart_rate is not None]
    return BloodPressureSummary(
        count=len(readings),
        avg_systolic=avg_sys,
        avg_diastolic=avg_dia,
        avg_heart_rate=_round_half_up(mean(rates)) if rates else None,
        category=classify_blood_pressure(avg_sys, avg_dia),
    )


def _avg_category(values: List[float], measurement_type: str) -> Optional[VitalCategory]:
    if not values:
        return None
    avg = _round_half_up(mean(values))
    return VitalCategory(category=classify_glucose(avg, measurement_type), value=avg)


def summarize_blood_sugar(readings: Sequence[BloodSugarReading]) -> Optional[BloodSugarSummary]:
    """Averages in mg/dL, split by fasting and postprandial readings."""
    if not readings:
        return None
    normalized = [(glucose_to_mg_dl(r.glucose, r.unit), r.measurement_type) for r in readings]
    fasting = [v for v, t in normalized if t == "fasting"]
    postprandial = [v for v, t in normalized if t == "postprandial"]
    return BloodSugarSummary(
        count=len(readings),
        avg_fasting=_avg_category(fasting, "fasting"),
        avg_postprandial=_avg_category(postprandial, "postprandial"),
        avg_overall_mg_dl=round(mean(v for v, _ in normalized), 1),
    )


def summarize_weight(readings: Sequence[WeightReading]) -> Optional[WeightSummary]:
    if not readings:
        return None
    ordered = sorted(readings, key=lambda r: r.timestamp)
    kg = [weight_to_kg(r.weight, r.unit) for r in ordered]
    return WeightSummary(
        count=len(kg),
        avg_kg=round(mean(kg), 1),
        min_kg=round(min(kg), 1),
        max_kg=round(max(kg), 1),
        latest_kg=round(kg[-1], 1),
        change_kg=round(kg[-1] - kg[0], 1),
    )
