"""
Recommendation assembly - merges tier and intent pools into a short, varied list.
"""
import logging
import random
from typing import Iterable, List, Optional, Sequence

from models import IntentFlags, Recommendation, StressTier
from recommendation_pools import (
    EXAM_POOL,
    FALLBACK_POOL,
    FILM_POOL,
    GAME_POOL,
    LONELY_POOL,
    MOTIVATIONAL_NUDGE,
    MUSIC_POOL,
    SLEEP_POOL,
    TIER_POOLS,
    WALK_POOL,
)

logger = logging.getLogger(__name__)

MIN_RECOMMENDATIONS = 6
MAX_RECOMMENDATIONS = 6


def unique_by_title(items: Iterable[Recommendation]) -> List[Recommendation]:
    """Drop repeated titles, keeping the first occurrence and the original order."""
    seen = set()
    unique = []
    for item in items:
        if item.title in seen:
            continue
        seen.add(item.title)
        unique.append(item)
    return unique


def fill_to_minimum(
    items: Sequence[Recommendation],
    pool: Sequence[Recommendation],
    minimum: int,
) -> List[Recommendation]:
    """
    Top up a list from a fallback pool.

    Pool items are appended in pool order, skipping titles already present,
    until the list holds `minimum` items or the pool runs out.

    Args:
        items: Recommendations with unique titles
        pool: Fallback recommendations
        minimum: Target length

    Returns:
        A new list with unique titles. Lists already at `minimum` come back unchanged.
    """
    filled = list(items)
    titles = {item.title for item in filled}
    for candidate in pool:
        if len(filled) >= minimum:
            break
        if candidate.title in titles:
            continue
        filled.append(candidate)
        titles.add(candidate.title)
    return filled


def shuffle_recommendations(items: Sequence[Recommendation], rng: random.Random) -> List[Recommendation]:
    """Fisher-Yates shuffle into a new list, drawing only from `rng`."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def intent_recommendations(intents: IntentFlags) -> List[Recommendation]:
    """Collect intent pools in priority order. Pools add up; several may fire together."""
    items: List[Recommendation] = []
    if intents.wants_film:
        items.extend(FILM_POOL)
    if intents.wants_music or intents.topic_focus:
        items.extend(MUSIC_POOL)
    if intents.wants_walk or intents.topic_burnout:
        items.extend(WALK_POOL)
    if intents.wants_game:
        items.extend(GAME_POOL)
    if intents.topic_exam:
        items.extend(EXAM_POOL)
    if intents.topic_sleep:
        items.extend(SLEEP_POOL)
    if intents.topic_lonely:
        items.extend(LONELY_POOL)
    return items


def tier_recommendations(tier: StressTier, encouragement: bool) -> List[Recommendation]:
    items = list(TIER_POOLS[tier])
    if encouragement:
        items.append(MOTIVATIONAL_NUDGE)
    return items


def assemble_recommendations(
    tier: StressTier,
    encouragement: bool,
    intents: Optional[IntentFlags] = None,
    rng: Optional[random.Random] = None,
) -> List[Recommendation]:
    """
    Build the final recommendation list.

    Intent items come before tier items so they win title collisions. The
    merged list is topped up from the fallback pool, shuffled and capped.

    Args:
        tier: Stress tier selecting the primary pool
        encouragement: Whether to add the motivational nudge
        intents: Flags detected in the live text, if any
        rng: Random source for the shuffle; a fresh one is made when omitted

    Returns:
        Between 3 and 6 recommendations with unique titles
    """
    intents = intents or IntentFlags()
    rng = rng or random.Random()

    combined = unique_by_title(intent_recommendations(intents) + tier_recommendations(tier, encouragement))
    combined = fill_to_minimum(combined, FALLBACK_POOL, MIN_RECOMMENDATIONS)

    logger.debug(
        f"Assembled {len(combined)} candidates: tier={tier.value}, "
        f"encouragement={encouragement}, intents={intents.active()}"
    )

    return shuffle_recommendations(combined, rng)[:MAX_RECOMMENDATIONS]
