# assessment/categories.py
from .config import CATEGORY_ICONS, CATEGORY_NAMES
from .models import CategoryResult
from .rules import evaluate_rules, factors_from_reasons, level_from_score, score_from_reasons


def _hr(f):
    return f["resting_heart_rate"] or 0

# ---------- rule tables: (predicate, points, factor) ----------
# A factor of None adds points silently. Branches of the same check are
# mutually exclusive through their predicates.

CARDIOVASCULAR_RULES = [
    (lambda f: f["age"] > 45, 15, "Age over 45 years"),
    (lambda f: 35 < f["age"] <= 45, 8, None),
    (lambda f: f["bmi_category"] == "obese", 25, "BMI indicates obesity"),
    (lambda f: f["bmi_category"] == "overweight", 15, "BMI indicates overweight"),
    (lambda f: f["activity_level"] == "low", 20, "Low physical activity"),
    (lambda f: f["activity_level"] == "moderate", 8, None),
    (lambda f: f["smoking_alcohol"] == "frequent", 25, "Frequent smoking or alcohol use"),
    (lambda f: f["smoking_alcohol"] == "occasional", 10, None),
    (lambda f: _hr(f) > 100, 15, "Elevated resting heart rate"),
    (lambda f: 80 < _hr(f) <= 100, 8, None),
]

METABOLIC_RULES = [
    (lambda f: f["diet_pattern"] == "high_sugar", 30, "High sugar diet"),
    (lambda f: f["diet_pattern"] == "high_fat", 25, "High fat diet"),
    (lambda f: f["diet_pattern"] == "irregular", 20, "Irregular eating patterns"),
    (lambda f: f["bmi_category"] == "obese", 25, "BMI in obesity range"),
    (lambda f: f["bmi_category"] == "overweight", 15, None),
    (lambda f: f["bmi_category"] == "underweight", 15, "BMI indicates underweight"),
    (lambda f: f["water_intake"] == "low", 15, "Low water intake"),
    (lambda f: f["activity_level"] == "low", 15, "Sedentary lifestyle"),
]

MENTAL_HEALTH_RULES = [
    (lambda f: f["stress_level"] == "high", 35, "High stress levels"),
    (lambda f: f["stress_level"] == "medium", 15, "Moderate stress"),
    (lambda f: f["screen_time"] > 10, 25, "Excessive screen time (10+ hours)"),
    (lambda f: 6 < f["screen_time"] <= 10, 15, "High screen time"),
    (lambda f: f["sleep_quality"] == "poor", 20, "Poor sleep quality affects mood"),
    (lambda f: f["sleep_quality"] == "fair", 10, None),
    (lambda f: f["activity_level"] == "low", 15, "Limited physical activity"),
]

SLEEP_FATIGUE_RULES = [
    (lambda f: f["sleep_duration"] < 6, 35, "Insufficient sleep (under 6 hours)"),
    (lambda f: 6 <= f["sleep_duration"] < 7, 20, "Slightly low sleep duration"),
    (lambda f: f["sleep_duration"] > 9, 15, "Excessive sleep may indicate issues"),
    (lambda f: f["sleep_quality"] == "poor", 30, "Poor sleep quality"),
    (lambda f: f["sleep_quality"] == "fair", 15, "Fair sleep quality"),
    (lambda f: f["screen_time"] > 8, 15, "High screen time may affect sleep"),
    (lambda f: f["stress_level"] == "high", 15, "High stress can disrupt sleep"),
]

LIFESTYLE_RULES = [
    (lambda f: f["activity_level"] == "low", 25, "Low daily physical activity"),
    (lambda f: f["activity_level"] == "moderate", 10, None),
    (lambda f: f["diet_pattern"] != "balanced", 20, "Unbalanced diet pattern"),
    (lambda f: f["water_intake"] == "low", 15, "Insufficient hydration"),
    (lambda f: f["smoking_alcohol"] == "frequent", 30, "Frequent substance use"),
    (lambda f: f["smoking_alcohol"] == "occasional", 12, "Occasional substance use"),
    (lambda f: f["screen_time"] > 8, 15, "Extended screen time"),
]

CATEGORY_RULES = {
    "cardiovascular": CARDIOVASCULAR_RULES,
    "metabolic": METABOLIC_RULES,
    "mental_health": MENTAL_HEALTH_RULES,
    "sleep_fatigue": SLEEP_FATIGUE_RULES,
    "lifestyle": LIFESTYLE_RULES,
}

# ---------- scorers ----------
def score_category(key: str, features: dict) -> CategoryResult:
    reasons = evaluate_rules(CATEGORY_RULES[key], features)
    score = score_from_reasons(reasons)
    return CategoryResult(
        name=CATEGORY_NAMES[key],
        score=score,
        level=level_from_score(score),
        factors=tuple(factors_from_reasons(reasons)),
        icon=CATEGORY_ICONS[key],
    )

def score_cardiovascular(features: dict) -> CategoryResult:
    return score_category("cardiovascular", features)

def score_metabolic(features: dict) -> CategoryResult:
    return score_category("metabolic", features)

def score_mental_health(features: dict) -> CategoryResult:
    return score_category("mental_health", features)

def score_sleep_fatigue(features: dict) -> CategoryResult:
    return score_category("sleep_fatigue", features)

def score_lifestyle(features: dict) -> CategoryResult:
    return score_category("lifestyle", features)

# Fixed display order
CATEGORY_SCORERS = [
    ("cardiovascular", score_cardiovascular),
    ("metabolic", score_metabolic),
    ("mental_health", score_mental_health),
    ("sleep_fatigue", score_sleep_fatigue),
    ("lifestyle", score_lifestyle),
]
