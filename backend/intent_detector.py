"""
Intent detection over the user's live input.
"""
import re
from typing import Optional

from models import IntentFlags

INTENT_PATTERNS = {
    "wants_film": re.compile(r"movie|film|watch|series|anime"),
    "wants_music": re.compile(r"music|song|listen|playlist|lofi|lo-?fi"),
    "wants_walk": re.compile(r"walk|outside|fresh air|sunlight|stroll|stretch"),
    "wants_game": re.compile(r"game|play|mini-?game|fun"),
    "topic_exam": re.compile(r"exam|test|study|assignment|deadline"),
    "topic_sleep": re.compile(r"sleep|insomnia|bed|night|rest"),
    "topic_focus": re.compile(r"focus|concentrat|distract|procrastinat"),
    "topic_lonely": re.compile(r"alone|lonely|isolat|no one"),
    "topic_burnout": re.compile(r"burnout|burned out|exhaust|tired|drained"),
}


def detect_intents(live_text: Optional[str]) -> IntentFlags:
    """Run every intent pattern over the lower-cased live text. No text means no intents."""
    if not live_text or not live_text.strip():
        return IntentFlags()

    text = live_text.lower()
    return IntentFlags(**{
        name: pattern.search(text) is not None
        for name, pattern in INTENT_PATTERNS.items()
    })
