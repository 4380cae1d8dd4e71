"""Schema definitions for mood analysis results.

Provides frozen dataclasses for analysis results, batch items and batch
statistics, with serialization methods for the journal layer.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from src.sentiment.bayes import DEFAULT_PROBS
from src.sentiment.emotions import empty_emotions

# Mood labels, from most to least positive
MOOD_VERY_HAPPY = "😄"
MOOD_HAPPY = "😊"
MOOD_SLIGHTLY_HAPPY = "🙂"
MOOD_NEUTRAL = "😐"
MOOD_SAD = "😢"

MOODS = (MOOD_VERY_HAPPY, MOOD_HAPPY, MOOD_SLIGHTLY_HAPPY, MOOD_NEUTRAL, MOOD_SAD)


def _frozen_mapping(values: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copy a mapping into a read-only view so results cannot change after creation."""
    return MappingProxyType(dict(values))


def score_to_mood(score: float) -> str:
    """
    Map a final score to a mood emoji.

    Thresholds are asymmetric: the positive side is more graduated.
    """
    if score >= 0.4:
        return MOOD_VERY_HAPPY
    if score >= 0.15:
        return MOOD_HAPPY
    if score >= 0.05:
        return MOOD_SLIGHTLY_HAPPY
    if score <= -0.2:
        return MOOD_SAD
    return MOOD_NEUTRAL


@dataclass(frozen=True)
class AnalysisDetails:
    """Intermediate scores behind an analysis result."""

    heuristic_score: float
    bayes_score: float
    bayes_probs: Mapping[str, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bayes_probs", _frozen_mapping(self.bayes_probs))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heuristicScore": self.heuristic_score,
            "bayesScore": self.bayes_score,
            "bayesProbs": dict(self.bayes_probs),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Mood analysis of a single text.

    Attributes:
        mood: Mood emoji derived from the final score
        score: Fused score in [-1, 1], rounded to 3 decimals
        confidence: Blended agreement/certainty in [0, 1], rounded to 3 decimals
        word_count: Number of normalized tokens
        emotions: Intensity per emotion category (all six keys present)
        details: Heuristic score, Bayes score and Bayes probabilities
    """

    mood: str
    score: float
    confidence: float
    word_count: int
    emotions: Mapping[str, float]
    details: AnalysisDetails

    def __post_init__(self) -> None:
        object.__setattr__(self, "emotions", _frozen_mapping(self.emotions))

    @property
    def sentiment(self) -> str:
        """Alias of mood."""
        return self.mood

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert result to dictionary for JSON serialization.

        Keys follow the journal layer's camelCase naming.
        """
        return {
            "mood": self.mood,
            "sentiment": self.mood,
            "score": self.score,
            "confidence": self.confidence,
            "wordCount": self.word_count,
            "emotions": dict(self.emotions),
            "details": self.details.to_dict(),
        }


def default_result() -> AnalysisResult:
    """Neutral result returned when the text carries too little signal."""
    return AnalysisResult(
        mood=MOOD_NEUTRAL,
        score=0.0,
        confidence=0.0,
        word_count=0,
        emotions=empty_emotions(),
        details=AnalysisDetails(
            heuristic_score=0.0,
            bayes_score=0.0,
            bayes_probs=dict(DEFAULT_PROBS),
        ),
    )


@dataclass(frozen=True)
class BatchItem:
    """A batch entry: display text (truncated) and its analysis."""

    text: str
    result: AnalysisResult

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "result": self.result.to_dict()}


@dataclass(frozen=True)
class MoodStatistics:
    """
    Aggregate summary over a batch of texts.

    Attributes:
        total: Number of texts analyzed
        average_score: Mean final score, rounded to 3 decimals
        sentiment_distribution: Mood -> count (counts sum to total)
        most_common_sentiment: Mood with the highest count
    """

    total: int
    average_score: float
    sentiment_distribution: Mapping[str, int] = field(default_factory=dict)
    most_common_sentiment: str = MOOD_NEUTRAL

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "sentiment_distribution", _frozen_mapping(self.sentiment_distribution)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "averageScore": self.average_score,
            "sentimentDistribution": dict(self.sentiment_distribution),
            "mostCommonSentiment": self.most_common_sentiment,
        }
