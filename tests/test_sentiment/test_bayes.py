"""Tests for the Naive Bayes mood classifier."""

import math

import pytest

from src.sentiment.bayes import (
    CLASSES,
    DEFAULT_PRIORS,
    DEFAULT_PROBS,
    NaiveBayesModel,
    normalize_log_probs,
    predict_naive_bayes,
)


@pytest.fixture
def model() -> NaiveBayesModel:
    return NaiveBayesModel()


class TestModel:
    """Tests for the seeded model tables."""

    def test_priors_sum_to_one(self):
        """Test class priors sum to 1."""
        assert sum(DEFAULT_PRIORS.values()) == pytest.approx(1.0)

    def test_word_probability_lookup(self, model):
        """Test known words use their seeded probability."""
        assert model.word_probability("feliz", "positive") == 0.35
        assert model.word_probability("odio", "negative") == 0.50

    def test_word_probability_smoothing(self, model):
        """Test unseen words fall back to the smoothing constant."""
        assert model.word_probability("feliz", "negative") == 0.01
        assert NaiveBayesModel(smoothing=0.05).word_probability("mesa", "neutral") == 0.05

    def test_log_likelihoods(self, model):
        """Test log posterior accumulates prior and word terms."""
        log_probs = model.log_likelihoods(["feliz"])
        assert log_probs["positive"] == pytest.approx(math.log(0.32) + math.log(0.35))
        assert log_probs["negative"] == pytest.approx(math.log(0.35) + math.log(0.01))


class TestModelValidation:
    """Tests for model construction checks."""

    def test_missing_class(self):
        """Test priors must cover all three classes."""
        with pytest.raises(ValueError, match="Priors"):
            NaiveBayesModel(priors={"positive": 0.5, "negative": 0.5})

    def test_non_positive_prior(self):
        """Test zero priors are rejected."""
        with pytest.raises(ValueError, match="positive"):
            NaiveBayesModel(priors={"positive": 0.0, "negative": 0.5, "neutral": 0.5})

    def test_invalid_word_probability(self):
        """Test word probabilities must be in (0, 1]."""
        with pytest.raises(ValueError):
            NaiveBayesModel(word_probs={"positive": {"bien": 1.5}})

    def test_unknown_class_in_word_probs(self):
        """Test word maps must use known classes."""
        with pytest.raises(ValueError, match="Unknown class"):
            NaiveBayesModel(word_probs={"joyful": {"bien": 0.2}})

    def test_invalid_smoothing(self):
        """Test smoothing must be positive."""
        with pytest.raises(ValueError, match="Smoothing"):
            NaiveBayesModel(smoothing=0.0)


class TestPredict:
    """Tests for class probability prediction."""

    def test_empty_returns_default(self, model):
        """Test empty input returns the fixed default distribution."""
        assert model.predict([]) == dict(DEFAULT_PROBS)

    def test_probabilities_sum_to_one(self, model):
        """Test the distribution always sums to 1."""
        for tokens in (
            ["feliz"],
            ["odio", "triste"],
            ["el", "día", "de", "hoy", "fue", "normal"],
            ["palabra"] * 200,
        ):
            probs = model.predict(tokens)
            assert set(probs) == set(CLASSES)
            assert sum(probs.values()) == pytest.approx(1.0, abs=1e-6)

    def test_positive_text(self, model):
        """Test positive vocabulary favors the positive class."""
        probs = model.predict(["feliz", "genial"])
        assert max(probs, key=probs.get) == "positive"

    def test_negative_text(self, model):
        """Test negative vocabulary favors the negative class."""
        probs = model.predict(["odio", "triste"])
        assert max(probs, key=probs.get) == "negative"

    def test_neutral_text(self, model):
        """Test function words favor the neutral class."""
        probs = model.predict(["el", "día"])
        assert max(probs, key=probs.get) == "neutral"

    def test_unseen_words_follow_priors(self, model):
        """Test all-unseen input reproduces the prior proportions."""
        probs = model.predict(["zzz", "qqq"])
        for label in CLASSES:
            assert probs[label] == pytest.approx(DEFAULT_PRIORS[label])

    def test_long_input_does_not_underflow(self, model):
        """Test log-space inference survives very long inputs."""
        probs = model.predict(["feliz"] * 1000)
        assert probs["positive"] == pytest.approx(1.0)

    def test_module_level_helper(self):
        """Test predict_naive_bayes uses the default model."""
        assert predict_naive_bayes(["feliz"]) == NaiveBayesModel().predict(["feliz"])


class TestNormalizeLogProbs:
    """Tests for log-probability normalization."""

    def test_equal_logs(self):
        """Test equal log values give a uniform distribution."""
        probs = normalize_log_probs({"a": -1000.0, "b": -1000.0})
        assert probs == {"a": pytest.approx(0.5), "b": pytest.approx(0.5)}

    def test_relative_scale(self):
        """Test a difference of log(3) gives a 3:1 ratio."""
        probs = normalize_log_probs({"a": math.log(3.0), "b": 0.0})
        assert probs["a"] == pytest.approx(0.75)
        assert probs["b"] == pytest.approx(0.25)
