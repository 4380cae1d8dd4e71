"""Tests for Prometheus metrics collection."""

from unittest.mock import patch

import pytest
from prometheus_client import CollectorRegistry

from src.observability.metrics import MetricsCollector, get_metrics


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def collector(registry: CollectorRegistry) -> MetricsCollector:
    return MetricsCollector(registry=registry)


class TestMetricsCollector:
    """Tests for MetricsCollector."""

    def test_record_mood_analyzed(self, collector, registry):
        """Test analyses and confidence are recorded per mood."""
        collector.record_mood_analyzed("😊", confidence=0.72)
        collector.record_mood_analyzed("😊")

        assert registry.get_sample_value("diario_mood_analyzed_total", {"mood": "😊"}) == 2.0
        assert registry.get_sample_value("diario_mood_confidence_count", {"mood": "😊"}) == 1.0

    def test_record_cache(self, collector, registry):
        """Test cache hits and misses are counted separately."""
        collector.record_cache(hit=True)
        collector.record_cache(hit=False)
        collector.record_cache(hit=False)

        assert registry.get_sample_value("diario_mood_cache_hits_total") == 1.0
        assert registry.get_sample_value("diario_mood_cache_misses_total") == 2.0

    def test_record_latency(self, collector, registry):
        """Test latency observations are recorded per operation."""
        collector.record_analysis_latency("single", 0.0003)

        value = registry.get_sample_value(
            "diario_mood_analysis_latency_seconds_count", {"operation": "single"}
        )
        assert value == 1.0

    def test_record_short_text(self, collector, registry):
        """Test short-text skips are counted."""
        collector.record_short_text()
        assert registry.get_sample_value("diario_mood_short_text_total") == 1.0

    def test_start_server_uses_settings_port(self, collector, registry):
        """Test the HTTP server starts on the configured port."""
        with patch("src.observability.metrics.start_http_server") as start:
            collector.start_server()
        start.assert_called_once_with(8000, registry=registry)

    def test_start_server_explicit_port(self, collector, registry):
        """Test an explicit port overrides settings."""
        with patch("src.observability.metrics.start_http_server") as start:
            collector.start_server(port=9100)
        start.assert_called_once_with(9100, registry=registry)


class TestGetMetrics:
    """Tests for the global collector."""

    def test_singleton(self):
        """Test get_metrics returns one shared collector."""
        assert get_metrics() is get_metrics()
