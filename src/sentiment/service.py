"""
Hybrid mood inference for Spanish diary entries.

Combines two independent scorers over the same normalized tokens:
- A lexicon heuristic with negation scope and intensifier modulation
- A fixed-prior Naive Bayes classifier computed in log-space

and fuses them into a final score, a mood emoji and a confidence value.
Emotion intensities are extracted alongside. Results are memoized by raw
input text in a bounded FIFO cache owned by the analyzer instance.
"""

import time
from typing import Any, Iterable, List

import structlog

from src.observability.metrics import MetricsCollector, get_metrics
from src.sentiment.aggregation import preview_text, summarize_results
from src.sentiment.bayes import NaiveBayesModel
from src.sentiment.cache import ResultCache
from src.sentiment.config import SentimentConfig
from src.sentiment.emotions import detect_emotions
from src.sentiment.heuristic import score_heuristic
from src.sentiment.lexicon import get_tier_sizes
from src.sentiment.preprocessing import normalize
from src.sentiment.schemas import (
    AnalysisDetails,
    AnalysisResult,
    BatchItem,
    MoodStatistics,
    default_result,
    score_to_mood,
)

logger = structlog.get_logger(__name__)

# Confidence blend: agreement between scorers vs. Bayes certainty
CONSISTENCY_WEIGHT = 0.4
CERTAINTY_WEIGHT = 0.6


def _round3(value: float) -> float:
    return round(value, 3)


def calculate_confidence(heuristic_score: float, bayes_probs: dict[str, float]) -> float:
    """
    Blend scorer agreement and classifier certainty into a confidence value.

    consistency = max(0, 1 - |heuristic - bayes|)
    certainty = max(bayes probabilities)
    """
    bayes_score = bayes_probs["positive"] - bayes_probs["negative"]
    consistency = max(0.0, 1.0 - abs(heuristic_score - bayes_score))
    certainty = max(bayes_probs.values())
    return consistency * CONSISTENCY_WEIGHT + certainty * CERTAINTY_WEIGHT


class MoodAnalyzer:
    """
    Mood analyzer for short informal Spanish text.

    All tunables come from the SentimentConfig passed at construction; the
    analyzer never reads ambient state. The lexicon and Bayes model are
    read-only; the result cache is the only mutable state.

    Usage:
        analyzer = MoodAnalyzer()

        result = analyzer.analyze("Hoy fue un día excelente, me siento feliz")
        print(result.mood, result.score, result.confidence)

        if analyzer.should_apply_mood(result, "medium"):
            ...  # caller updates the entry's mood
    """

    def __init__(
        self,
        config: SentimentConfig | None = None,
        model: NaiveBayesModel | None = None,
        metrics: MetricsCollector | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            config: Analyzer configuration (uses defaults if None)
            model: Naive Bayes model (default seeded model with the
                configured smoothing if None)
            metrics: Metrics collector (global collector if None and
                metrics are enabled)
        """
        self._config = config or SentimentConfig()
        self._model = model or NaiveBayesModel(smoothing=self._config.smoothing)
        self._cache: ResultCache[str, AnalysisResult] = ResultCache(
            max_size=self._config.cache_max_size
        )

        if metrics is not None:
            self._metrics: MetricsCollector | None = metrics
        elif self._config.metrics_enabled:
            self._metrics = get_metrics()
        else:
            self._metrics = None

        logger.info(
            "MoodAnalyzer created",
            min_words=self._config.min_words,
            cache_enabled=self._config.cache_enabled,
            cache_max_size=self._config.cache_max_size,
        )

    @property
    def config(self) -> SentimentConfig:
        return self._config

    @property
    def model(self) -> NaiveBayesModel:
        return self._model

    def _score_tokens(self, tokens: List[str]) -> AnalysisResult:
        """Run both scorers and the emotion extractor, then fuse."""
        heuristic_score = score_heuristic(
            tokens,
            negation_window=self._config.negation_window,
            intensifier_weight=self._config.intensifier_weight,
        )
        bayes_probs = self._model.predict(tokens)
        emotions = detect_emotions(tokens)

        bayes_score = bayes_probs["positive"] - bayes_probs["negative"]
        heuristic_weight, bayes_weight = self._config.fusion_weights
        final_score = heuristic_score * heuristic_weight + bayes_score * bayes_weight
        final_score = max(-1.0, min(1.0, final_score))

        confidence = calculate_confidence(heuristic_score, bayes_probs)

        return AnalysisResult(
            mood=score_to_mood(final_score),
            score=_round3(final_score),
            confidence=_round3(confidence),
            word_count=len(tokens),
            emotions=emotions,
            details=AnalysisDetails(
                heuristic_score=_round3(heuristic_score),
                bayes_score=_round3(bayes_score),
                bayes_probs={label: _round3(p) for label, p in bayes_probs.items()},
            ),
        )

    def analyze(self, text: Any) -> AnalysisResult:
        """
        Analyze the mood of a text.

        Never raises for malformed input: None, blank and non-string values
        yield the neutral default result. Texts with fewer tokens than
        ``min_words`` also yield the default and are not cached.

        Args:
            text: Raw diary text

        Returns:
            AnalysisResult (the cached instance on a repeated call)
        """
        if not isinstance(text, str) or not text.strip():
            return default_result()

        start_time = time.perf_counter()

        if self._config.cache_enabled:
            cached = self._cache.get(text)
            if self._metrics is not None:
                self._metrics.record_cache(hit=cached is not None)
            if cached is not None:
                logger.debug("Cache hit for mood analysis", word_count=cached.word_count)
                return cached

        tokens = normalize(text)

        if len(tokens) < self._config.min_words:
            logger.debug(
                "Text below minimum word count",
                word_count=len(tokens),
                min_words=self._config.min_words,
            )
            if self._metrics is not None:
                self._metrics.record_short_text()
            return default_result()

        result = self._score_tokens(tokens)

        if self._config.cache_enabled:
            self._cache.put(text, result)

        if self._metrics is not None:
            self._metrics.record_mood_analyzed(result.mood, result.confidence)
            self._metrics.record_analysis_latency("single", time.perf_counter() - start_time)

        return result

    def get_mood(self, text: Any) -> str:
        """Get only the mood emoji for a text."""
        return self.analyze(text).mood

    def analyze_batch(self, texts: Iterable[str]) -> List[BatchItem]:
        """
        Analyze texts independently.

        Returns:
            One BatchItem per input, with the text truncated for display
        """
        start_time = time.perf_counter()
        items = [BatchItem(text=preview_text(text), result=self.analyze(text)) for text in texts]

        if self._metrics is not None and items:
            self._metrics.record_analysis_latency("batch", time.perf_counter() - start_time)

        return items

    def get_statistics(self, texts: List[str] | None) -> MoodStatistics | None:
        """
        Summarize the moods of a batch of texts.

        Returns:
            MoodStatistics, or None when no texts are given
        """
        if not texts:
            return None

        items = self.analyze_batch(texts)
        return summarize_results([item.result for item in items])

    def should_apply_mood(self, result: AnalysisResult, sensitivity: str | None = None) -> bool:
        """
        Decide whether a detected mood is confident enough to apply.

        Args:
            result: Analysis result
            sensitivity: "low", "medium" or "high" (config default if None)

        Returns:
            True if the result's confidence exceeds the preset's threshold
        """
        return result.confidence > self._config.confidence_threshold(sensitivity)

    def clear_cache(self) -> None:
        """Remove all cached results."""
        self._cache.clear()
        logger.info("Mood analysis cache cleared")

    def get_stats(self) -> dict[str, Any]:
        """Get analyzer statistics."""
        return {
            "cache_enabled": self._config.cache_enabled,
            "cache_size": len(self._cache),
            "max_cache_size": self._cache.max_size,
            "total_words": get_tier_sizes(),
        }
