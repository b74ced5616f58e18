"""
Keyword lexicon used to score free text.
Entries are lower-case substrings; matching is case-insensitive.
"""

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "stress", "stressed", "anxious", "anxiety", "overwhelm", "overwhelmed",
    "burnout", "burned out", "tired", "exhausted", "panic", "worried",
    "pressure", "fear", "nervous", "sad", "low", "down",
)

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "grateful", "gratitude", "calm", "focus", "focused", "happy", "good",
    "win", "progress", "energy", "motivated",
)
