"""Shared enums and types for the wellness tracker."""

from enum import StrEnum


class SentimentLabel(StrEnum):
    POSITIVE = "positive"
    MIXED = "mixed"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class MoodTrend(StrEnum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
