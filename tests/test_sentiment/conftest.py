"""Test fixtures for the mood analyzer."""

import pytest
from prometheus_client import CollectorRegistry

from src.observability.metrics import MetricsCollector
from src.sentiment.config import SentimentConfig
from src.sentiment.service import MoodAnalyzer


@pytest.fixture
def sentiment_config() -> SentimentConfig:
    """Create test analyzer configuration."""
    return SentimentConfig(
        min_words=2,
        cache_enabled=True,
        cache_max_size=100,
        metrics_enabled=False,
    )


@pytest.fixture
def analyzer(sentiment_config: SentimentConfig) -> MoodAnalyzer:
    """Create analyzer without metrics."""
    return MoodAnalyzer(config=sentiment_config)


@pytest.fixture
def metrics_registry() -> CollectorRegistry:
    """Isolated Prometheus registry."""
    return CollectorRegistry()


@pytest.fixture
def metrics(metrics_registry: CollectorRegistry) -> MetricsCollector:
    """Metrics collector bound to an isolated registry."""
    return MetricsCollector(registry=metrics_registry)


@pytest.fixture
def instrumented_analyzer(
    sentiment_config: SentimentConfig,
    metrics: MetricsCollector,
) -> MoodAnalyzer:
    """Create analyzer that records metrics into an isolated registry."""
    return MoodAnalyzer(config=sentiment_config, metrics=metrics)
