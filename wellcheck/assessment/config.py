import os

# Weights for the overall score, in category order. Must sum to 1.0
CATEGORY_WEIGHTS = {
    "cardiovascular": 0.25,
    "metabolic": 0.20,
    "mental_health": 0.20,
    "sleep_fatigue": 0.15,
    "lifestyle": 0.20,
}

CATEGORY_NAMES = {
    "cardiovascular": "Cardiovascular",
    "metabolic": "Metabolic",
    "mental_health": "Mental Health & Stress",
    "sleep_fatigue": "Sleep & Fatigue",
    "lifestyle": "Lifestyle",
}

CATEGORY_ICONS = {
    "cardiovascular": "❤️",
    "metabolic": "⚡",
    "mental_health": "🧠",
    "sleep_fatigue": "😴",
    "lifestyle": "🌿",
}

# Tier cutoffs (inclusive upper bounds)
LOW_MAX = 30
MODERATE_MAX = 60

SCORE_MIN = 0
SCORE_MAX = 100

# BMI category cutoffs (lower bounds)
BMI_NORMAL_MIN = 18.5
BMI_OVERWEIGHT_MIN = 25.0
BMI_OBESE_MIN = 30.0

MAX_RECOMMENDATIONS = 5

RISK_LABELS = {
    "low": "Low Risk",
    "moderate": "Moderate Risk",
    "high": "High Risk",
}

CONSULT_MESSAGE = "Please consider consulting a qualified healthcare professional."

DISCLAIMER = (
    "This assessment is for health awareness only and is not a medical diagnosis. "
    "For medical concerns, consult a licensed healthcare professional."
)

# Deployment settings, overridable from the environment
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get("WELLCHECK_CORS_ORIGINS", "http://localhost:3000").split(",")
    if o.strip()
]
LOG_LEVEL = os.environ.get("WELLCHECK_LOG_LEVEL", "INFO").upper()
