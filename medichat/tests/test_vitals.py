from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from medichat.schemas.vitals import BloodPressureReading, BloodSugarReading, WeightReading
from medichat.services import vitals


@pytest.mark.parametrize(
    "systolic,diastolic,expected",
    [
        (119, 79, "Normal"),
        (125, 79, "Elevated"),
        (120, 80, "Stage 1 High"),
        (135, 95, "Stage 1 High"),
        (150, 95, "Stage 2 High"),
        (185, 100, "Stage 2 High"),
        (185, 125, "Hypertensive Crisis"),
    ],
)
def test_blood_pressure_bands(systolic, diastolic, expected):
    assert vitals.classify_blood_pressure(systolic, diastolic) == expected


def test_glucose_bands_by_measurement_type():
    assert vitals.classify_glucose(99, "fasting") == "Normal"
    assert vitals.classify_glucose(100, "fasting") == "Prediabetes"
    assert vitals.classify_glucose(126, "fasting") == "Diabetes"
    assert vitals.classify_glucose(139, "postprandial") == "Normal"
    assert vitals.classify_glucose(140, "postprandial") == "Prediabetes"
    assert vitals.classify_glucose(200, "postprandial") == "Diabetes"
    assert vitals.classify_glucose(150, "random") == "Elevated"
    assert vitals.classify_glucose(250, "bedtime") == "High"


def test_unit_conversions():
    assert vitals.glucose_to_mg_dl(5.5, "mmol/L") == pytest.approx(99.0)
    assert vitals.glucose_to_mg_dl(5.5, "mg/dL") == 5.5
    assert vitals.weight_to_kg(100, "lbs") == pytest.approx(45.3592)
    assert vitals.weight_to_kg(70, "kg") == 70


def test_reading_bounds_are_enforced():
    with pytest.raises(ValidationError):
        BloodPressureReading(systolic=40, diastolic=80)
    with pytest.raises(ValidationError):
        BloodSugarReading(glucose=900, measurement_type="fasting")
    with pytest.raises(ValidationError):
        BloodSugarReading(glucose=100, measurement_type="after_lunch")
    with pytest.raises(ValidationError):
        WeightReading(weight=70, unit="stone")


def test_summaries_empty_return_none():
    assert vitals.summarize_blood_pressure([]) is None
    assert vitals.summarize_blood_sugar([]) is None
    assert vitals.summarize_weight([]) is None


def test_blood_pressure_summary_uses_averages():
    summary = vitals.summarize_blood_pressure([
        BloodPressureReading(systolic=120, diastolic=80, heart_rate=70),
        BloodPressureReading(systolic=130, diastolic=90),
    ])
    assert summary.count == 2
    assert (summary.avg_systolic, summary.avg_diastolic) == (125, 85)
    assert summary.avg_heart_rate == 70
    assert summary.category == "Stage 1 High"


def test_blood_sugar_summary_normalizes_units():
    summary = vitals.summarize_blood_sugar([
        BloodSugarReading(glucose=92, measurement_type="fasting"),
        BloodSugarReading(glucose=6.0, unit="mmol/L", measurement_type="fasting"),
        BloodSugarReading(glucose=180, measurement_type="postprandial"),
    ])
    assert summary.avg_fasting.value == 100
    assert summary.avg_fasting.category == "Prediabetes"
    assert summary.avg_postprandial.category == "Prediabetes"
    assert summary.avg_overall_mg_dl == pytest.approx(126.7)


def test_blood_sugar_summary_without_fasting():
    summary = vitals.summarize_blood_sugar([BloodSugarReading(glucose=110, measurement_type="random")])
    assert summary.avg_fasting is None
    assert summary.avg_postprandial is None
    assert summary.avg_overall_mg_dl == 110


def test_weight_summary_orders_by_timestamp():
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    summary = vitals.summarize_weight([
        WeightReading(weight=80, timestamp=t0 + timedelta(days=7)),
        WeightReading(weight=176, unit="lbs", timestamp=t0),
    ])
    assert summary.count == 2
    assert summary.latest_kg == 80.0
    assert summary.min_kg == pytest.approx(79.8)
    assert summary.change_kg == pytest.approx(0.2)
    assert summary.avg_kg == pytest.approx(79.9)


def test_whole_number_averages_round_half_up():
    summary = vitals.summarize_blood_pressure([
        BloodPressureReading(systolic=120, diastolic=70, heart_rate=60),
        BloodPressureReading(systolic=121, diastolic=71, heart_rate=61),
    ])
    assert (summary.avg_systolic, summary.avg_diastolic) == (121, 71)
    assert summary.avg_heart_rate == 61
    assert summary.category == "Elevated"

    sugar = vitals.summarize_blood_sugar([
        BloodSugarReading(glucose=124, measurement_type="fasting"),
        BloodSugarReading(glucose=125, measurement_type="fasting"),
    ])
    assert sugar.avg_fasting.value == 125
    assert sugar.avg_fasting.category == "Prediabetes"
