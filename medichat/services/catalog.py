"""Static symptom and condition reference data.

Both catalogs are built once at import and never mutated; lookups go through
precomputed id indexes. Unknown ids resolve to None rather than raising.
"""
from typing import Dict, List, Optional, Tuple

from medichat.schemas.symptoms import MedicalCondition, Symptom

SYMPTOM_DATABASE: Tuple[Symptom, ...] = (
    Symptom(
        id="fever",
        name="Fever",
        category="Constitutional",
        severity="moderate",
        urgency="medium",
        common_conditions=["Viral infection", "Bacterial infection", "COVID-19", "Influenza"],
        red_flags=["Temperature >103°F (39.4°C)", "Fever lasting >3 days", "Severe headache with fever", "Difficulty breathing"],
    ),
    Symptom(
        id="chest_pain",
        name="Chest Pain",
        category="Cardiovascular",
        severity="severe",
        urgency="high",
        common_conditions=["Heart attack", "Angina", "Pulmonary embolism", "Muscle strain"],
        red_flags=["Crushing chest pain", "Pain radiating to arm/jaw", "Shortness of breath", "Sweating with chest pain"],
    ),
    Symptom(
        id="headache",
        name="Headache",
        category="Neurological",
        severity="mild",
        urgency="low",
        common_conditions=["Tension headache", "Migraine", "Cluster headache", "Sinus headache"],
        red_flags=["Sudden severe headache", "Headache with fever and neck stiffness", "Vision changes", "Confusion"],
    ),
    Symptom(
        id="shortness_of_breath",
        name="Shortness of Breath",
        category="Respiratory",
        severity="severe",
        urgency="high",
        common_conditions=["Asthma", "Pneumonia", "Heart failure", "Pulmonary embolism"],
        red_flags=["Severe difficulty breathing", "Blue lips or fingernails", "Cannot speak in full sentences", "Chest pain with breathing"],
    ),
    Symptom(
        id="abdominal_pain",
        name="Abdominal Pain",
        category="Gastrointestinal",
        severity="moderate",
        urgency="medium",
        common_conditions=["Gastritis", "Appendicitis", "Gallstones", "Kidney stones"],
        red_flags=["Severe right lower quadrant pain", "Pain with vomiting", "Rigid abdomen", "Blood in stool"],
    ),
    Symptom(
        id="cough",
        name="Cough",
        category="Respiratory",
        severity="mild",
        urgency="low",
        common_conditions=["Common cold", "Bronchitis", "Pneumonia", "COVID-19"],
        red_flags=["Coughing up blood", "Severe difficulty breathing", "High fever with cough", "Chest pain with cough"],
    ),
    Symptom(
        id="nausea",
        name="Nausea",
        category="Gastrointestinal",
        severity="mild",
        urgency="low",
        common_conditions=["Gastroenteritis", "Food poisoning", "Migraine", "Pregnancy"],
        red_flags=["Severe dehydration", "Blood in vomit", "Severe abdominal pain", "High fever"],
    ),
    Symptom(
        id="dizziness",
        name="Dizziness",
        category="Neurological",
        severity="moderate",
        urgency="medium",
        common_conditions=["Inner ear infection", "Low blood pressure", "Dehydration", "Medication side effect"],
        red_flags=["Sudden severe dizziness", "Dizziness with chest pain", "Loss of consciousness", "Severe headache"],
    ),
    Symptom(
        id="fatigue",
        name="Fatigue",
        category="Constitutional",
        severity="mild",
        urgency="low",
        common_conditions=["Viral infection", "Anemia", "Depression", "Sleep disorders"],
        red_flags=["Extreme weakness", "Difficulty breathing", "Chest pain", "Confusion"],
    ),
    Symptom(
        id="rash",
        name="Rash",
        category="Dermatological",
        severity="mild",
        urgency="low",
        common_conditions=["Allergic reaction", "Eczema", "Contact dermatitis", "Viral infection"],
        red_flags=["Difficulty breathing", "Swelling of face/throat", "Widespread blistering", "High fever with rash"],
    ),
    Symptom(
        id="runny_nose",
        name="Runny Nose",
        category="Respiratory",
        severity="mild",
        urgency="low",
        common_conditions=["Common cold", "Allergies", "Sinusitis", "COVID-19"],
        red_flags=["Severe difficulty breathing", "High fever with runny nose", "Blood in nasal discharge"],
    ),
    Symptom(
        id="sore_throat",
        name="Sore Throat",
        category="Respiratory",
        severity="mild",
        urgency="low",
        common_conditions=["Viral infection", "Strep throat", "Allergies", "COVID-19"],
        red_flags=["Severe difficulty swallowing", "High fever with sore throat", "Swollen lymph nodes", "Difficulty breathing"],
    ),
    Symptom(
        id="congestion",
        name="Nasal Congestion",
        category="Respiratory",
        severity="mild",
        urgency="low",
        common_conditions=["Common cold", "Allergies", "Sinusitis", "COVID-19"],
        red_flags=["Severe difficulty breathing", "High fever with congestion", "Facial pain or pressure"],
    ),
    Symptom(
        id="sneezing",
        name="Sneezing",
        category="Respiratory",
        severity="mild",
        urgency="low",
        common_conditions=["Allergies", "Common cold", "Viral infection", "Environmental irritants"],
        red_flags=["Severe difficulty breathing", "High fever with sneezing", "Anaphylaxis symptoms"],
    ),
    Symptom(
        id="body_aches",
        name="Body Aches",
        category="Constitutional",
        severity="mild",
        urgency="low",
        common_conditions=["Viral infection", "Influenza", "COVID-19", "Overexertion"],
        red_flags=["Severe muscle weakness", "Difficulty moving", "High fever with body aches", "Chest pain"],
    ),
    Symptom(
        id="chills",
        name="Chills",
        category="Constitutional",
        severity="moderate",
        urgency="medium",
        common_conditions=["Fever", "Viral infection", "Bacterial infection", "COVID-19"],
        red_flags=["Severe chills with high fever", "Difficulty breathing", "Chest pain", "Altered mental status"],
    ),
    Symptom(
        id="loss_of_appetite",
        name="Loss of Appetite",
        category="Gastrointestinal",
        severity="mild",
        urgency="low",
        common_conditions=["Viral infection", "Stress", "Depression", "Medication side effect"],
        red_flags=["Severe weight loss", "Difficulty swallowing", "Severe abdominal pain", "High fever"],
    ),
    Symptom(
        id="vomiting",
        name="Vomiting",
        category="Gastrointestinal",
        severity="moderate",
        urgency="medium",
        common_conditions=["Gastroenteritis", "Food poisoning", "Viral infection", "Pregnancy"],
        red_flags=["Blood in vomit", "Severe dehydration", "Severe abdominal pain", "High fever with vomiting"],
    ),
    Symptom(
        id="diarrhea",
        name="Diarrhea",
        category="Gastrointestinal",
        severity="moderate",
        urgency="medium",
        common_conditions=["Gastroenteritis", "Food poisoning", "Viral infection", "Medication side effect"],
        red_flags=["Blood in stool", "Severe dehydration", "Severe abdominal pain", "High fever with diarrhea"],
    ),
)

MEDICAL_CONDITIONS: Tuple[MedicalCondition, ...] = (
    MedicalCondition(
        id="common_cold",
        name="Common Cold",
        icd10="J00",
        common_symptoms=["cough", "runny_nose", "sore_throat", "congestion", "sneezing"],
        risk_factors=["Recent exposure to sick individuals", "Seasonal changes", "Stress", "Poor sleep", "Weakened immune system"],
        urgency_level="low",
        self_care=["Rest and hydration", "Over-the-counter cold medications", "Warm salt water gargling", "Humidifier use", "Nasal saline rinses"],
        seek_care_if=["Fever >101.3°F for >3 days", "Difficulty breathing", "Severe headache", "Ear pain", "Symptoms lasting >10 days"],
    ),
    MedicalCondition(
        id="viral_infection",
        name="Viral Upper Respiratory Infection",
        icd10="J06.9",
        common_symptoms=["fever", "cough", "fatigue", "headache"],
        risk_factors=["Recent exposure", "Seasonal changes", "Stress", "Poor sleep"],
        urgency_level="low",
        self_care=["Rest and hydration", "Over-the-counter pain relievers", "Warm salt water gargling", "Humidifier use"],
        seek_care_if=["Fever >101.3°F for >3 days", "Difficulty breathing", "Severe headache", "Ear pain"],
    ),
    MedicalCondition(
        id="heart_attack",
        name="Acute Myocardial Infarction",
        icd10="I21.9",
        common_symptoms=["chest_pain", "shortness_of_breath", "nausea"],
        risk_factors=["Age >45 (men) or >55 (women)", "Smoking", "High blood pressure", "Diabetes", "Family history"],
        urgency_level="emergency",
        self_care=["Call 911 immediately", "Chew aspirin if not allergic", "Stay calm and rest"],
        seek_care_if=["Any chest pain with risk factors", "Crushing chest pain", "Pain with sweating/nausea"],
    ),
)

_SYMPTOM_INDEX: Dict[str, Symptom] = {s.id: s for s in SYMPTOM_DATABASE}
_CONDITION_INDEX: Dict[str, MedicalCondition] = {c.id: c for c in MEDICAL_CONDITIONS}


def find_symptom_by_id(symptom_id: str) -> Optional[Symptom]:
    return _SYMPTOM_INDEX.get(symptom_id)


def find_condition_by_id(condition_id: str) -> Optional[MedicalCondition]:
    return _CONDITION_INDEX.get(condition_id)


def get_symptoms_by_category() -> Dict[str, List[Symptom]]:
    """Group catalog symptoms by category.

    Categories appear in order of first occurrence; symptoms keep catalog
    order within each group. A new dict is returned on every call.
    """
    categories: Dict[str, List[Symptom]] = {}
    for symptom in SYMPTOM_DATABASE:
        categories.setdefault(symptom.category, []).append(symptom)
    return categories
