import math

from .config import LOW_MAX, MODERATE_MAX, SCORE_MAX, SCORE_MIN


def round_half_up(x):
    return int(math.floor(x + 0.5))

def clamp(x, lo=SCORE_MIN, hi=SCORE_MAX):
    return max(lo, min(hi, round_half_up(x)))

def evaluate_rules(rules, features) -> list:
    """
    Run an ordered rule table against a feature dict.

    Each rule is a (predicate, points, factor) tuple. Every rule whose predicate
    holds contributes one reason {"reason": factor, "points": points}; factor may
    be None for rules that add points without an explanation. Rules never
    short-circuit each other, so mutually exclusive branches must be encoded in
    the predicates themselves.
    """
    reasons = []
    for predicate, points, factor in rules:
        if predicate(features):
            reasons.append({"reason": factor, "points": points})
    return reasons

def score_from_reasons(reasons):
    score = sum(r["points"] for r in reasons)
    return clamp(score)

def factors_from_reasons(reasons):
    return [r["reason"] for r in reasons if r["reason"]]

def level_from_score(score):
    if score <= LOW_MAX: return "low"
    if score <= MODERATE_MAX: return "moderate"
    return "high"
