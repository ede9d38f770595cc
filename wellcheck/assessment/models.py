# assessment/models.py
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RiskLevel = Literal["low", "moderate", "high"]


class _Frozen(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LifestyleRecord(_Frozen):
    """One self-reported submission from the intake form."""
    age: int = Field(gt=0)
    biological_sex: Literal["male", "female", "other"]
    height: float = Field(gt=0, description="centimeters")
    weight: float = Field(gt=0, description="kilograms")
    activity_level: Literal["low", "moderate", "high"]
    sleep_duration: float = Field(gt=0, description="hours per night")
    sleep_quality: Literal["poor", "fair", "good", "excellent"]
    stress_level: Literal["low", "medium", "high"]
    diet_pattern: Literal["balanced", "high_sugar", "high_fat", "irregular"]
    water_intake: Literal["low", "adequate", "high"]
    smoking_alcohol: Literal["none", "occasional", "frequent"]
    existing_conditions: str = ""
    current_symptoms: str = ""
    resting_heart_rate: Optional[int] = Field(default=None, gt=0)
    screen_time: float = Field(ge=0, description="hours per day")


class CategoryResult(_Frozen):
    name: str
    score: int = Field(ge=0, le=100)
    level: RiskLevel
    factors: Tuple[str, ...] = ()
    icon: str


class Assessment(_Frozen):
    overall_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    categories: Tuple[CategoryResult, ...] = ()
    recommendations: Tuple[str, ...] = ()
    should_consult_professional: bool
