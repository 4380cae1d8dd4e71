"""
Hybrid mood inference for Spanish diary text.

Provides mood detection for journal entries with:
- Lexicon heuristic with negation windows and intensifiers
- Fixed-prior Naive Bayes classifier (log-space inference)
- Fusion of both scores into a mood emoji and a confidence value
- Keyword-based emotion intensities (joy, sadness, anger, fear, surprise, love)
- Bounded FIFO caching of results by raw text
- Batch analysis and mood statistics

Usage:
    from src.sentiment import MoodAnalyzer

    analyzer = MoodAnalyzer()
    result = analyzer.analyze("Hoy fue un día excelente, me siento feliz y agradecido")
    print(f"{result.mood} score={result.score} confidence={result.confidence}")

    stats = analyzer.get_statistics(["me siento muy bien", "estoy triste hoy"])
    print(stats.sentiment_distribution)
"""

from src.sentiment.aggregation import summarize_results
from src.sentiment.bayes import NaiveBayesModel, predict_naive_bayes
from src.sentiment.cache import ResultCache
from src.sentiment.config import SentimentConfig
from src.sentiment.emotions import detect_emotions
from src.sentiment.heuristic import score_heuristic
from src.sentiment.preprocessing import normalize
from src.sentiment.schemas import (
    MOOD_HAPPY,
    MOOD_NEUTRAL,
    MOOD_SAD,
    MOOD_SLIGHTLY_HAPPY,
    MOOD_VERY_HAPPY,
    AnalysisDetails,
    AnalysisResult,
    BatchItem,
    MoodStatistics,
    score_to_mood,
)
from src.sentiment.service import MoodAnalyzer

__all__ = [
    # Core service
    "MoodAnalyzer",
    "SentimentConfig",
    # Results
    "AnalysisDetails",
    "AnalysisResult",
    "BatchItem",
    "MoodStatistics",
    "MOOD_VERY_HAPPY",
    "MOOD_HAPPY",
    "MOOD_SLIGHTLY_HAPPY",
    "MOOD_NEUTRAL",
    "MOOD_SAD",
    "score_to_mood",
    # Components
    "NaiveBayesModel",
    "ResultCache",
    "detect_emotions",
    "normalize",
    "predict_naive_bayes",
    "score_heuristic",
    "summarize_results",
]
