"""Sentiment services package - classification and progress analysis."""

from sahara.services.sentiment.classifier import SentimentClassifier, classify
from sahara.services.sentiment.emotion_analyzer import EmotionAnalyzer, analyze_emotions
from sahara.services.sentiment.progress_analyzer import ProgressAnalyzer, analyze_progress

__all__ = [
    "SentimentClassifier",
    "classify",
    "EmotionAnalyzer",
    "analyze_emotions",
    "ProgressAnalyzer",
    "analyze_progress",
]
