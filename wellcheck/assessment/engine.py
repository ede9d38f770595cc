# assessment/engine.py
import logging
from typing import Mapping

from .categories import CATEGORY_SCORERS
from .config import CATEGORY_WEIGHTS, MODERATE_MAX
from .features import extract_lifestyle_features, validate_record
from .models import Assessment, LifestyleRecord
from .recommendations import generate_recommendations
from .rules import level_from_score, round_half_up

logger = logging.getLogger(__name__)


def overall_score(scores: dict) -> int:
    """Weighted sum of the (already clamped) category scores, rounded half-up."""
    total = 0.0
    for key, weight in CATEGORY_WEIGHTS.items():
        total += scores[key] * weight
    return round_half_up(total)

def should_consult(score: int, features: dict, results) -> bool:
    # results must be every category, not just the displayed ones
    return (
        score > MODERATE_MAX
        or features["has_symptoms"]
        or any(r.level == "high" for r in results)
    )

def assess(record: LifestyleRecord) -> Assessment:
    """
    Score one lifestyle record.

    Pure function of the record: no I/O and no shared state, so it is safe to
    call concurrently. Raises InvalidRecordError if the record is out of domain.
    """
    validate_record(record)
    f = extract_lifestyle_features(record)

    results = [(key, scorer(f)) for key, scorer in CATEGORY_SCORERS]
    score = overall_score({key: r.score for key, r in results})
    all_results = [r for _, r in results]

    assessment = Assessment(
        overall_score=score,
        risk_level=level_from_score(score),
        categories=tuple(r for r in all_results if len(r.factors) > 0),
        recommendations=tuple(generate_recommendations(f)),
        should_consult_professional=should_consult(score, f, all_results),
    )
    logger.debug(
        "assessment overall=%s level=%s consult=%s",
        assessment.overall_score, assessment.risk_level, assessment.should_consult_professional,
    )
    return assessment

def assess_payload(data: Mapping) -> Assessment:
    """Validate a raw mapping (camelCase or snake_case keys) and assess it."""
    return assess(LifestyleRecord.model_validate(dict(data)))
