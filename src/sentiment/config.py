"""
Mood analyzer configuration.

Provides Pydantic settings for the hybrid mood inference engine including
heuristic tuning, Naive Bayes smoothing, fusion weights, caching and the
sensitivity presets callers use to decide whether to apply a detected mood.
"""

import math
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Sensitivity = Literal["low", "medium", "high"]

DEFAULT_HEURISTIC_WEIGHT = 0.7
DEFAULT_BAYES_WEIGHT = 0.3


def _usable_weight(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)


class SentimentConfig(BaseSettings):
    """
    Configuration for the mood analyzer.

    Settings can be overridden via environment variables prefixed with SENTIMENT_.

    Example:
        SENTIMENT_MIN_WORDS=3
        SENTIMENT_NEGATION_WINDOW=4
        SENTIMENT_CACHE_MAX_SIZE=500
    """

    model_config = SettingsConfigDict(
        env_prefix="SENTIMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input gating
    min_words: int = Field(
        default=2,
        ge=1,
        le=50,
        description="Minimum token count below which the neutral default is returned",
    )

    # Heuristic scorer
    intensifier_weight: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Modifier added per high intensifier (half subtracted per low one)",
    )
    negation_window: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Number of tokens after a negator whose polarity is inverted",
    )

    # Naive Bayes classifier
    smoothing: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="Probability used for words missing from a class's word map",
    )

    # Fusion weights (normalized to sum to 1)
    heuristic_weight: float = Field(
        default=DEFAULT_HEURISTIC_WEIGHT,
        description="Weight of the heuristic score in the final score",
    )
    bayes_weight: float = Field(
        default=DEFAULT_BAYES_WEIGHT,
        description="Weight of the Bayes score in the final score",
    )

    # Caching configuration
    cache_enabled: bool = Field(
        default=True,
        description="Memoize analysis results by raw input text",
    )
    cache_max_size: int = Field(
        default=100,
        ge=1,
        le=100_000,
        description="Maximum cached results before FIFO eviction",
    )

    # Sensitivity presets (caller-side decision whether to apply a mood)
    confidence_threshold_low: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Low sensitivity: only very evident moods are applied",
    )
    confidence_threshold_medium: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Medium sensitivity: balanced",
    )
    confidence_threshold_high: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="High sensitivity: subtle moods are applied too",
    )
    default_sensitivity: Sensitivity = Field(
        default="medium",
        description="Sensitivity used when the caller does not pass one",
    )

    # Observability
    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus metrics for analyses",
    )

    @model_validator(mode="after")
    def _normalize_fusion_weights(self) -> "SentimentConfig":
        """
        Clamp weights to zero when negative or non-finite, then rescale so they sum to 1.

        If nothing usable remains, the default split is restored.
        """
        heuristic = _usable_weight(self.heuristic_weight)
        bayes = _usable_weight(self.bayes_weight)
        total = heuristic + bayes

        if total == 0 or not math.isfinite(total):
            heuristic, bayes = DEFAULT_HEURISTIC_WEIGHT, DEFAULT_BAYES_WEIGHT
            total = 1.0

        self.heuristic_weight = heuristic / total
        self.bayes_weight = bayes / total
        return self

    @property
    def fusion_weights(self) -> tuple[float, float]:
        """Get (heuristic_weight, bayes_weight)."""
        return self.heuristic_weight, self.bayes_weight

    def confidence_threshold(self, sensitivity: str | None = None) -> float:
        """
        Get the confidence threshold for a sensitivity preset.

        Unknown values fall back to the medium preset.
        """
        thresholds = {
            "low": self.confidence_threshold_low,
            "medium": self.confidence_threshold_medium,
            "high": self.confidence_threshold_high,
        }
        return thresholds.get(
            sensitivity or self.default_sensitivity,
            self.confidence_threshold_medium,
        )
