"""
Mood aggregation - turns categorical mood samples into numbers.
"""
import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence

from models import MoodSample, MoodTrendPoint, MoodTrends, StressPattern, as_utc

logger = logging.getLogger(__name__)

MOOD_VALUES = {
    "very_low": 1,
    "low": 2,
    "neutral": 3,
    "good": 4,
    "excellent": 5,
}
NEUTRAL_MOOD = 3
MAX_MOOD_SAMPLES = 30
DEFAULT_TREND_DAYS = 30

LOW_MOODS = ("very_low", "low")
STRESS_PATTERN_WINDOW = 20
STRESS_PATTERN_MIN_RUN = 3
STRESS_PATTERN_MAX_SEVERITY = 10
STRESS_PATTERN_RECOMMENDATION = "Consider taking a break and trying a breathing exercise"


def mood_value(label: Optional[str]) -> int:
    return MOOD_VALUES.get(label or "", NEUTRAL_MOOD)


def average_mood(samples: Iterable[MoodSample], limit: int = MAX_MOOD_SAMPLES) -> float:
    """
    Mean mood on the 1-5 scale over the most recent samples.

    Args:
        samples: Mood samples, most recent first
        limit: Only the first `limit` samples are used

    Returns:
        Arithmetic mean, or exactly 3.0 when there are no samples
    """
    total = 0
    count = 0
    for sample in samples:
        if count >= limit:
            break
        total += mood_value(sample.label)
        count += 1

    if count == 0:
        return float(NEUTRAL_MOOD)
    return total / count


def mood_trends(
    samples: Iterable[MoodSample],
    days: int = DEFAULT_TREND_DAYS,
    now: Optional[datetime] = None,
) -> MoodTrends:
    """
    Build dashboard trend points, average and distribution for the last `days` days.

    Samples arrive most recent first; trend points are returned oldest first.
    A non-positive `days` falls back to DEFAULT_TREND_DAYS.
    """
    if days <= 0:
        days = DEFAULT_TREND_DAYS
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=days)

    recent = [s for s in samples if as_utc(s.occurredAt) >= cutoff]
    recent.reverse()
    trends = [
        MoodTrendPoint(
            date=as_utc(s.occurredAt).date().isoformat(),
            mood=s.label,
            value=mood_value(s.label),
            intensity=s.intensity,
        )
        for s in recent
    ]

    average = sum(t.value for t in trends) / len(trends) if trends else float(NEUTRAL_MOOD)
    distribution = dict(Counter(s.label for s in recent))

    return MoodTrends(trends=trends, averageMood=average, moodDistribution=distribution)


def detect_stress_patterns(samples: Sequence[MoodSample]) -> List[StressPattern]:
    """
    Look for runs of consecutive low moods among the most recent samples.

    A run counts once a non-low mood closes it. A run that is still open at the
    end of the window is not reported.
    """
    patterns = []
    consecutive_low = 0

    for sample in list(samples)[:STRESS_PATTERN_WINDOW]:
        if sample.label in LOW_MOODS:
            consecutive_low += 1
            continue

        if consecutive_low >= STRESS_PATTERN_MIN_RUN:
            patterns.append(StressPattern(
                severity=min(consecutive_low, STRESS_PATTERN_MAX_SEVERITY),
                recommendation=STRESS_PATTERN_RECOMMENDATION,
            ))
        consecutive_low = 0

    if patterns:
        logger.info(f"Detected {len(patterns)} low-mood patterns")
    return patterns

