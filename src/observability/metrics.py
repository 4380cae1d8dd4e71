"""
Prometheus metrics for monitoring the mood analyzer.

Defines and exposes metrics for:
- Analyses performed, by mood
- Analysis latency
- Confidence distribution
- Cache hits and misses
- Short-text skips

Metrics are exposed via HTTP endpoint for Prometheus scraping.
"""

import logging

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    start_http_server,
)

from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# Buckets for latency histograms (in seconds); analyses are pure CPU work
LATENCY_BUCKETS = (0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5)

CONFIDENCE_BUCKETS = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0)


class MetricsCollector:
    """
    Prometheus metrics collector for the mood analyzer.

    Usage:
        metrics = MetricsCollector()
        metrics.start_server()

        metrics.record_mood_analyzed("😊", confidence=0.72)
        metrics.record_analysis_latency("single", 0.0004)
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """
        Initialize Prometheus metrics.

        Args:
            registry: Registry to register metrics in (default global REGISTRY)
        """
        self._registry = registry or REGISTRY

        self.moods_analyzed = Counter(
            "diario_mood_analyzed_total",
            "Total mood analyses performed",
            ["mood"],
            registry=self._registry,
        )

        self.analysis_latency = Histogram(
            "diario_mood_analysis_latency_seconds",
            "Time to analyze a text",
            ["operation"],  # single, batch
            buckets=LATENCY_BUCKETS,
            registry=self._registry,
        )

        self.analysis_confidence = Histogram(
            "diario_mood_confidence",
            "Distribution of analysis confidence scores",
            ["mood"],
            buckets=CONFIDENCE_BUCKETS,
            registry=self._registry,
        )

        self.cache_hits = Counter(
            "diario_mood_cache_hits_total",
            "Total analysis cache hits",
            registry=self._registry,
        )

        self.cache_misses = Counter(
            "diario_mood_cache_misses_total",
            "Total analysis cache misses",
            registry=self._registry,
        )

        self.short_text_skips = Counter(
            "diario_mood_short_text_total",
            "Texts below the minimum word count",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to expose metrics on (default from settings)
        """
        settings = get_settings()
        port = port or settings.metrics_port

        start_http_server(port, registry=self._registry)
        logger.info(f"Prometheus metrics server started on port {port}")

    # Convenience methods

    def record_mood_analyzed(self, mood: str, confidence: float | None = None) -> None:
        """
        Record a completed analysis.

        Args:
            mood: Mood emoji of the result
            confidence: Optional confidence score to record
        """
        self.moods_analyzed.labels(mood=mood).inc()

        if confidence is not None:
            self.analysis_confidence.labels(mood=mood).observe(confidence)

    def record_analysis_latency(self, operation: str, latency: float) -> None:
        """
        Record analysis latency.

        Args:
            operation: Operation type (single, batch)
            latency: Latency in seconds
        """
        self.analysis_latency.labels(operation=operation).observe(latency)

    def record_cache(self, hit: bool) -> None:
        """
        Record cache hit or miss.

        Args:
            hit: True for cache hit, False for miss
        """
        if hit:
            self.cache_hits.inc()
        else:
            self.cache_misses.inc()

    def record_short_text(self) -> None:
        """Record a text skipped for having too few words."""
        self.short_text_skips.inc()


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
