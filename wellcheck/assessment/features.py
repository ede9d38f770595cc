# assessment/features.py
from .config import BMI_NORMAL_MIN, BMI_OBESE_MIN, BMI_OVERWEIGHT_MIN


class InvalidRecordError(ValueError):
    """Raised when a record is outside the domain the scoring rules are defined on."""


def calculate_bmi(height: float, weight: float) -> float:
    """Body-mass index from height in cm and weight in kg. Not rounded."""
    height_m = height / 100
    return weight / (height_m * height_m)

def bmi_category(bmi: float) -> str:
    if bmi < BMI_NORMAL_MIN:
        return "underweight"
    if bmi < BMI_OVERWEIGHT_MIN:
        return "normal"
    if bmi < BMI_OBESE_MIN:
        return "overweight"
    return "obese"

def validate_record(record) -> None:
    """
    Reject records the rules are not defined on.

    LifestyleRecord already enforces these at construction, but records built
    with model_construct() or copied with update= skip validation.
    """
    checks = (
        ("age", record.age > 0, "must be positive"),
        ("height", record.height > 0, "must be positive"),
        ("weight", record.weight > 0, "must be positive"),
        ("sleep_duration", record.sleep_duration > 0, "must be positive"),
        ("screen_time", record.screen_time >= 0, "must not be negative"),
        ("resting_heart_rate",
         record.resting_heart_rate is None or record.resting_heart_rate > 0,
         "must be positive when provided"),
    )
    for field, ok, msg in checks:
        if not ok:
            raise InvalidRecordError(f"Invalid input: {field} {msg} (got {getattr(record, field)!r})")

def extract_lifestyle_features(record) -> dict:
    """Flatten a record plus its derived values into the dict every rule reads."""
    bmi = calculate_bmi(record.height, record.weight)
    features = {
        "age": record.age,
        "biological_sex": record.biological_sex,
        "bmi": bmi,
        "bmi_category": bmi_category(bmi),
        "activity_level": record.activity_level,
        "sleep_duration": record.sleep_duration,
        "sleep_quality": record.sleep_quality,
        "stress_level": record.stress_level,
        "diet_pattern": record.diet_pattern,
        "water_intake": record.water_intake,
        "smoking_alcohol": record.smoking_alcohol,
        "resting_heart_rate": record.resting_heart_rate,
        "screen_time": record.screen_time,
        "has_symptoms": bool(record.current_symptoms.strip()),
    }
    return features
