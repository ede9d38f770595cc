# assessment/recommendations.py
from .config import MAX_RECOMMENDATIONS

# Blocks run in this order and only append. The cap keeps the first
# MAX_RECOMMENDATIONS, so reordering blocks changes which advice survives.
RECOMMENDATION_BLOCKS = [
    (lambda f: f["activity_level"] == "low",
     ["Start with 10-15 minute daily walks and gradually increase"]),
    (lambda f: f["activity_level"] == "moderate",
     ["Consider adding strength training 2-3 times per week"]),
    (lambda f: f["sleep_duration"] < 7 or f["sleep_quality"] == "poor",
     ["Establish a consistent sleep schedule, aim for 7-9 hours",
      "Reduce screen time 1 hour before bed"]),
    (lambda f: f["diet_pattern"] != "balanced",
     ["Focus on adding more vegetables and whole grains to meals"]),
    (lambda f: f["water_intake"] == "low",
     ["Aim for 8 glasses of water daily, keep a bottle nearby"]),
    (lambda f: f["stress_level"] == "high",
     ["Try 5-10 minutes of deep breathing or meditation daily",
      "Consider scheduling regular breaks during work"]),
    (lambda f: f["screen_time"] > 8,
     ["Take a 5-minute break from screens every hour"]),
    (lambda f: f["bmi_category"] in ("overweight", "obese"),
     ["Small portion adjustments can make a big difference over time"]),
    (lambda f: f["smoking_alcohol"] == "frequent",
     ["Consider speaking with a healthcare provider about reducing use"]),
]


def generate_recommendations(features: dict, limit: int = MAX_RECOMMENDATIONS) -> list:
    recommendations = []
    for predicate, messages in RECOMMENDATION_BLOCKS:
        if predicate(features):
            recommendations.extend(messages)
    return recommendations[:limit]
