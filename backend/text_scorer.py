"""
Text scorer - counts stress and positivity keyword hits in a blob of text.
"""
from typing import Optional

from lexicon import NEGATIVE_KEYWORDS, POSITIVE_KEYWORDS
from models import TextScore


def score_text(text: Optional[str]) -> TextScore:
    """
    Score text against the keyword lexicon.

    Each keyword adds one point if it appears anywhere in the text, no matter
    how many times it appears. Overlapping keywords ("stress" and "stressed")
    each count on their own.

    Args:
        text: Free text; None and blank strings score zero

    Returns:
        TextScore with stress and positivity hit counts
    """
    if not text or not text.strip():
        return TextScore()

    lowered = text.lower()
    stress = sum(1 for keyword in NEGATIVE_KEYWORDS if keyword in lowered)
    positivity = sum(1 for keyword in POSITIVE_KEYWORDS if keyword in lowered)
    return TextScore(stress=stress, positivity=positivity)
