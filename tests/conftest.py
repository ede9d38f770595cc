import pytest

from wellcheck.assessment.models import LifestyleRecord


HEALTHY = dict(
    age=25,
    biological_sex="female",
    height=165,
    weight=60,
    activity_level="high",
    sleep_duration=8,
    sleep_quality="good",
    stress_level="low",
    diet_pattern="balanced",
    water_intake="adequate",
    smoking_alcohol="none",
    existing_conditions="",
    current_symptoms="",
    resting_heart_rate=None,
    screen_time=3,
)

AT_RISK = dict(
    age=50,
    biological_sex="male",
    height=175,
    weight=95,
    activity_level="low",
    sleep_duration=5,
    sleep_quality="poor",
    stress_level="high",
    diet_pattern="high_sugar",
    water_intake="low",
    smoking_alcohol="frequent",
    existing_conditions="",
    current_symptoms="",
    resting_heart_rate=105,
    screen_time=11,
)


def make_record(base=HEALTHY, **overrides) -> LifestyleRecord:
    return LifestyleRecord(**{**base, **overrides})


@pytest.fixture
def healthy_record() -> LifestyleRecord:
    return make_record()


@pytest.fixture
def at_risk_record() -> LifestyleRecord:
    return make_record(AT_RISK)
