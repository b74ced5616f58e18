import pytest

from models import StressTier
from tier_classifier import classify_tier, needs_encouragement


@pytest.mark.parametrize(
    "stress_score, average_mood, expected",
    [
        (6, 5.0, StressTier.HIGH),
        (5, 2.2, StressTier.HIGH),
        (0, 1.0, StressTier.HIGH),
        (5, 2.21, StressTier.MEDIUM),
        (3, 3.5, StressTier.MEDIUM),
        (0, 3.19, StressTier.MEDIUM),
        (2, 3.2, StressTier.LOW),
        (2, 3.5, StressTier.LOW),
    ],
)
def test_tier_boundaries(stress_score, average_mood, expected):
    assert classify_tier(stress_score, average_mood) == expected


def test_score_of_three_with_low_mood_is_medium_not_high():
    assert classify_tier(3, 2.5) == StressTier.MEDIUM


def test_neutral_default_mood_without_stress_is_medium():
    # 3.0 is below the 3.2 cutoff
    assert classify_tier(0, 3.0) == StressTier.MEDIUM


def test_needs_encouragement():
    assert needs_encouragement(0) is True
    assert needs_encouragement(1) is True
    assert needs_encouragement(2) is False
    assert needs_encouragement(10) is False
