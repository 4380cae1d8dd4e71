"""
Lexicon-driven heuristic mood scoring.

Scores a token sequence by summing sentiment tier weights, inverting
polarity inside negation windows and scaling by intensifier words.
"""

from typing import List, Sequence, Set

from src.sentiment.lexicon import (
    INTENSIFIERS_HIGH,
    INTENSIFIERS_LOW,
    NEGATORS,
    TIER_LOOKUP,
)

MIN_INTENSITY = 0.1
MAX_INTENSITY = 2.0


def find_negated_indices(tokens: Sequence[str], window: int = 3) -> Set[int]:
    """
    Find token positions inside the scope of a negator.

    Each negator at index i marks i+1 .. i+window (clipped to the end).
    Overlapping windows are unioned.
    """
    negated: Set[int] = set()
    for i, token in enumerate(tokens):
        if token in NEGATORS:
            end = min(i + window + 1, len(tokens))
            negated.update(range(i + 1, end))
    return negated


def calculate_intensity(tokens: Sequence[str], weight: float = 0.3) -> float:
    """
    Compute the intensity modifier for a token sequence.

    Starts at 1.0; each high intensifier adds ``weight`` and each low
    intensifier subtracts half of it. Clamped to [0.1, 2.0].
    """
    modifier = 1.0
    for token in tokens:
        if token in INTENSIFIERS_HIGH:
            modifier += weight
        elif token in INTENSIFIERS_LOW:
            modifier -= weight * 0.5
    return max(MIN_INTENSITY, min(MAX_INTENSITY, modifier))


def score_heuristic(
    tokens: List[str],
    negation_window: int = 3,
    intensifier_weight: float = 0.3,
) -> float:
    """
    Score tokens with the sentiment lexicon.

    Args:
        tokens: Normalized token sequence
        negation_window: Tokens after a negator whose polarity flips
        intensifier_weight: Per-intensifier modifier step

    Returns:
        Heuristic score in [-1, 1] (0.0 for empty input or no lexicon hits)
    """
    if not tokens:
        return 0.0

    negated = find_negated_indices(tokens, negation_window)
    raw_score = 0
    matched = 0

    for i, token in enumerate(tokens):
        weight = TIER_LOOKUP.get(token)
        if weight is None:
            continue
        raw_score += -weight if i in negated else weight
        matched += 1

    normalized = raw_score / matched if matched else 0.0
    modifier = calculate_intensity(tokens, intensifier_weight)

    return max(-1.0, min(1.0, normalized * modifier))
