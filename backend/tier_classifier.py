"""
Stress tier classification from aggregated signals.
"""
from models import StressTier

HIGH_STRESS_SCORE = 6
HIGH_STRESS_MOOD = 2.2
MEDIUM_STRESS_SCORE = 3
MEDIUM_STRESS_MOOD = 3.2
ENCOURAGEMENT_POSITIVITY = 2


def classify_tier(stress_score: int, average_mood: float) -> StressTier:
    """
    Map a stress score and average mood to a stress tier.

    Cutoffs are exact: a score of 6 or a mood of 2.2 is already high.
    """
    if stress_score >= HIGH_STRESS_SCORE or average_mood <= HIGH_STRESS_MOOD:
        return StressTier.HIGH
    if stress_score >= MEDIUM_STRESS_SCORE or average_mood < MEDIUM_STRESS_MOOD:
        return StressTier.MEDIUM
    return StressTier.LOW


def needs_encouragement(positivity_score: int) -> bool:
    # Independent of the tier
    return positivity_score < ENCOURAGEMENT_POSITIVITY
