"""
Personalized recommendations - the entry point of the recommendation engine.
"""
import logging
from random import Random
from typing import List, Optional

from intent_detector import detect_intents
from models import Identity, Recommendation
from recommendation_assembler import assemble_recommendations
from recommendation_pools import (
    ANONYMOUS_RECOMMENDATIONS,
    NO_CONTACT_RECOMMENDATIONS,
    UNKNOWN_PROFILE_RECOMMENDATIONS,
)
from signal_aggregator import aggregate_signals
from store import WellnessStore
from tier_classifier import classify_tier, needs_encouragement

logger = logging.getLogger(__name__)


async def get_personalized_recommendations(
    identity: Optional[Identity],
    user_text: Optional[str] = None,
    *,
    store: WellnessStore,
    rng: Optional[Random] = None,
) -> List[Recommendation]:
    """
    Recommend wellness activities for the current user.

    Users we cannot resolve get a fixed, non-personalized list: one for no
    identity, one for an identity without an email and one for an email with
    no stored profile.

    Args:
        identity: Identity from the auth layer, or None when signed out
        user_text: Optional "what's on your mind" text
        store: Source of the user's history
        rng: Random source for the shuffle; a fresh one per call when omitted

    Returns:
        3-6 recommendations with unique titles
    """
    if identity is None:
        logger.info("No identity, returning anonymous recommendations")
        return list(ANONYMOUS_RECOMMENDATIONS)

    if not identity.email:
        logger.info(f"Identity {identity.subject} has no email, returning general recommendations")
        return list(NO_CONTACT_RECOMMENDATIONS)

    user = await store.get_user_by_email(identity.email)
    if user is None:
        logger.info(f"No profile for identity {identity.subject}, returning starter recommendations")
        return list(UNKNOWN_PROFILE_RECOMMENDATIONS)

    signals = await aggregate_signals(store, user.userId, user_text)
    tier = classify_tier(signals.stressScore, signals.averageMood)
    encouragement = needs_encouragement(signals.positivityScore)
    intents = detect_intents(user_text)

    logger.info(
        f"User {user.userId}: tier={tier.value}, encouragement={encouragement}, "
        f"intents={intents.active()}"
    )

    return assemble_recommendations(tier, encouragement, intents, rng=rng)
