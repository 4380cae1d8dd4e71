"""
Batch mood aggregation.

Summarizes a batch of analyses into a mood distribution, average score
and most common mood.

Usage:
    from src.sentiment.aggregation import summarize_results

    stats = summarize_results([r.result for r in analyzer.analyze_batch(texts)])
    print(stats.most_common_sentiment, stats.sentiment_distribution)
"""

from typing import Dict, List, Optional, Sequence

import numpy as np

from src.sentiment.schemas import MOOD_NEUTRAL, AnalysisResult, MoodStatistics

PREVIEW_LENGTH = 100


def preview_text(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Truncate text for batch display, appending '...' when cut."""
    if not isinstance(text, str):
        return ""
    if len(text) > length:
        return text[:length] + "..."
    return text


def mood_distribution(results: Sequence[AnalysisResult]) -> Dict[str, int]:
    """Count results per mood, keyed in order of first appearance."""
    counts: Dict[str, int] = {}
    for result in results:
        counts[result.mood] = counts.get(result.mood, 0) + 1
    return counts


def most_common_mood(distribution: Dict[str, int]) -> str:
    """
    Get the mood with the highest count.

    Ties go to the mood that appeared first. Neutral for an empty batch.
    """
    if not distribution:
        return MOOD_NEUTRAL
    # max() keeps the first maximal key in insertion order
    return max(distribution, key=distribution.__getitem__)


def summarize_results(results: List[AnalysisResult]) -> Optional[MoodStatistics]:
    """
    Aggregate analyses into batch statistics.

    Returns:
        MoodStatistics, or None for an empty batch
    """
    if not results:
        return None

    scores = np.array([result.score for result in results], dtype=np.float64)
    distribution = mood_distribution(results)

    return MoodStatistics(
        total=len(results),
        average_score=round(float(scores.mean()), 3),
        sentiment_distribution=distribution,
        most_common_sentiment=most_common_mood(distribution),
    )
