"""
Signal aggregation - scores a user's recent history and live input.
"""
import logging
from typing import List, Optional

from models import MoodSample, Signals, TextScore, TextUnit
from mood_aggregator import MAX_MOOD_SAMPLES, average_mood
from store import WellnessStore
from text_scorer import score_text

logger = logging.getLogger(__name__)

MAX_JOURNALS = 20
MAX_CONVERSATION_MESSAGES = 300
MESSAGES_PER_CONVERSATION = 10
LIVE_INPUT_STRESS_WEIGHT = 2


async def collect_text_units(store: WellnessStore, user_id: str) -> List[TextUnit]:
    """
    Read the recent journals and conversation messages for a user.

    Journals are capped at MAX_JOURNALS. Conversations are walked newest first,
    taking each one's last MESSAGES_PER_CONVERSATION messages, until at least
    MAX_CONVERSATION_MESSAGES messages have been gathered.
    """
    units: List[TextUnit] = []

    journal_count = 0
    async for journal in store.iter_journals(user_id):
        if journal_count >= MAX_JOURNALS:
            break
        units.append(TextUnit(text=f"{journal.title} {journal.content}", sourceKind="journal"))
        journal_count += 1

    message_count = 0
    async for conversation in store.iter_conversations(user_id):
        for message in conversation.messages[-MESSAGES_PER_CONVERSATION:]:
            units.append(TextUnit(text=message.content, sourceKind="conversationMessage"))
            message_count += 1
        if message_count >= MAX_CONVERSATION_MESSAGES:
            break

    return units


async def collect_moods(store: WellnessStore, user_id: str, limit: int = MAX_MOOD_SAMPLES) -> List[MoodSample]:
    samples: List[MoodSample] = []
    async for sample in store.iter_moods(user_id):
        if len(samples) >= limit:
            break
        samples.append(sample)
    return samples


async def aggregate_signals(store: WellnessStore, user_id: str, live_text: Optional[str] = None) -> Signals:
    """
    Combine live input, journals, conversations and moods into one signal.

    Live input counts double on the stress axis only. Store errors are not
    caught: a partial history would give a misleading tier.

    Args:
        store: Where the user's history lives
        user_id: Resolved user id
        live_text: Optional text the user just typed

    Returns:
        Signals with stress score, positivity score and average mood
    """
    totals = TextScore()

    if live_text and live_text.strip():
        totals.add(score_text(live_text), stress_weight=LIVE_INPUT_STRESS_WEIGHT)

    units = await collect_text_units(store, user_id)
    for unit in units:
        totals.add(score_text(unit.text))

    moods = await collect_moods(store, user_id)
    avg = average_mood(moods)

    logger.debug(
        f"Signals for user {user_id}: units={len(units)}, moods={len(moods)}, "
        f"stress={totals.stress}, positivity={totals.positivity}, avg_mood={avg:.2f}"
    )

    return Signals(stressScore=totals.stress, positivityScore=totals.positivity, averageMood=avg)
