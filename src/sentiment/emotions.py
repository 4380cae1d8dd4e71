"""Keyword-based emotion intensity detection."""

from typing import Dict, Sequence

from src.sentiment.lexicon import EMOTION_KEYWORDS, EMOTIONS


def empty_emotions() -> Dict[str, float]:
    """Get the emotion map with every category at zero."""
    return {emotion: 0.0 for emotion in EMOTIONS}


def detect_emotions(tokens: Sequence[str]) -> Dict[str, float]:
    """
    Detect emotion intensities from a token sequence.

    Intensity per category is ``min(1.0, matches / max(len(tokens) * 0.1, 1))``
    where matches counts tokens in the category's keyword set.

    Returns:
        Dict with all six emotion keys, each in [0, 1]
    """
    emotions = empty_emotions()
    if not tokens:
        return emotions

    scale = max(len(tokens) * 0.1, 1)
    for emotion, keywords in EMOTION_KEYWORDS.items():
        matches = sum(1 for token in tokens if token in keywords)
        emotions[emotion] = min(1.0, matches / scale)

    return emotions
