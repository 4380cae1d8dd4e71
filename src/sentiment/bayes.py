"""
Fixed-prior Naive Bayes mood classifier.

The model is a small hand-seeded vocabulary over three classes
(positive, negative, neutral). It is never trained at runtime.

Inference runs in log-space to avoid underflow on longer entries:

    log P(c | w1..wn) ~ log P(c) + sum(log P(wi | c))

Words missing from a class's map use the smoothing constant instead of
zero, so a single unseen word never collapses a class to probability 0.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Sequence

import numpy as np

CLASSES = ("positive", "negative", "neutral")

DEFAULT_PROBS: Mapping[str, float] = MappingProxyType(
    {"positive": 0.33, "negative": 0.33, "neutral": 0.34}
)

DEFAULT_PRIORS: Mapping[str, float] = MappingProxyType(
    {"positive": 0.32, "negative": 0.35, "neutral": 0.33}
)

DEFAULT_WORD_PROBS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "positive": MappingProxyType({
        "me": 0.18, "gusta": 0.32, "bien": 0.28, "bueno": 0.25, "feliz": 0.35,
        "genial": 0.40, "perfecto": 0.45, "excelente": 0.48, "increíble": 0.42,
        "amor": 0.38, "alegría": 0.38, "gracias": 0.25, "hermoso": 0.38,
        "éxito": 0.38, "lograr": 0.32, "ganar": 0.34, "disfrutar": 0.37,
    }),
    "negative": MappingProxyType({
        "no": 0.15, "mal": 0.32, "terrible": 0.42, "odio": 0.50, "triste": 0.38,
        "problema": 0.28, "error": 0.25, "fracaso": 0.42, "miedo": 0.38,
        "llorar": 0.38, "imposible": 0.35, "difícil": 0.22, "nunca": 0.25,
    }),
    "neutral": MappingProxyType({
        "el": 0.05, "la": 0.05, "de": 0.04, "en": 0.04, "que": 0.06,
        "es": 0.05, "son": 0.05, "tiempo": 0.08, "persona": 0.09, "día": 0.07,
    }),
})


@dataclass(frozen=True)
class NaiveBayesModel:
    """
    Immutable Naive Bayes model over the positive/negative/neutral classes.

    Attributes:
        priors: Class prior probabilities (should sum to ~1)
        word_probs: Sparse per-class map of word -> P(word | class)
        smoothing: Probability substituted for words absent from a class map
    """

    priors: Mapping[str, float] = field(default_factory=lambda: DEFAULT_PRIORS)
    word_probs: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: DEFAULT_WORD_PROBS
    )
    smoothing: float = 0.01

    def __post_init__(self) -> None:
        """Validate model tables after initialization."""
        if set(self.priors) != set(CLASSES):
            raise ValueError(f"Priors must cover exactly {CLASSES}, got {sorted(self.priors)}")
        for label, prior in self.priors.items():
            if prior <= 0:
                raise ValueError(f"Prior for {label} must be positive, got {prior}")
        for label, probs in self.word_probs.items():
            if label not in CLASSES:
                raise ValueError(f"Unknown class in word probabilities: {label}")
            for word, prob in probs.items():
                if not (0.0 < prob <= 1.0):
                    raise ValueError(f"P({word}|{label}) must be in (0, 1], got {prob}")
        if not (0.0 < self.smoothing <= 1.0):
            raise ValueError(f"Smoothing must be in (0, 1], got {self.smoothing}")

    def word_probability(self, word: str, label: str) -> float:
        """Get P(word | label), falling back to the smoothing constant."""
        return self.word_probs.get(label, {}).get(word, self.smoothing)

    def log_likelihoods(self, tokens: Sequence[str]) -> Dict[str, float]:
        """Compute the unnormalized log posterior for each class."""
        log_probs: Dict[str, float] = {}
        for label in CLASSES:
            log_prob = math.log(self.priors[label])
            for token in tokens:
                log_prob += math.log(self.word_probability(token, label))
            log_probs[label] = log_prob
        return log_probs

    def predict(self, tokens: Sequence[str]) -> Dict[str, float]:
        """
        Predict the class probability distribution for a token sequence.

        Returns:
            {"positive": p, "negative": n, "neutral": u} summing to 1.
            The fixed default distribution for empty input.
        """
        if not tokens:
            return dict(DEFAULT_PROBS)
        return normalize_log_probs(self.log_likelihoods(tokens))


def normalize_log_probs(log_probs: Mapping[str, float]) -> Dict[str, float]:
    """
    Convert log-probabilities to a normalized distribution.

    Subtracts the maximum before exponentiating for numerical stability.
    """
    labels = list(log_probs)
    values = np.array([log_probs[label] for label in labels], dtype=np.float64)
    exp_values = np.exp(values - values.max())
    probs = exp_values / exp_values.sum()
    return {label: float(prob) for label, prob in zip(labels, probs)}


def predict_naive_bayes(
    tokens: Sequence[str],
    model: NaiveBayesModel | None = None,
) -> Dict[str, float]:
    """Predict class probabilities with the given (or default) model."""
    return (model or NaiveBayesModel()).predict(tokens)
