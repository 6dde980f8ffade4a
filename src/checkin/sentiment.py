"""Lexicon-based sentiment scoring for check-in notes."""

from shared_types import SentimentLabel

# Each term counts at most once per text.
POSITIVE_WORDS = (
    "happy",
    "joy",
    "great",
    "good",
    "content",
    "excited",
    "calm",
    "relaxed",
    "hope",
    "love",
    "grateful",
)

NEGATIVE_WORDS = (
    "sad",
    "depressed",
    "angry",
    "anxious",
    "stressed",
    "upset",
    "lonely",
    "worried",
    "tired",
    "hopeless",
)

SHORT_EXCLAMATION_MAX_LEN = 50
SHORT_EXCLAMATION_SCORE = 0.5


def _count_hits(normalized: str, lexicon: tuple[str, ...]) -> int:
    """Count lexicon terms present as substrings (presence, not occurrences)."""
    return sum(1 for term in lexicon if term in normalized)


def _analyze(text) -> tuple[int, int, float]:
    """Return (positive hits, negative hits, score) for text."""
    if not text or not isinstance(text, str):
        return 0, 0, 0.0

    normalized = text.lower()
    pos = _count_hits(normalized, POSITIVE_WORDS)
    neg = _count_hits(normalized, NEGATIVE_WORDS)

    if pos > neg:
        return pos, neg, min(1.0, pos / len(POSITIVE_WORDS))
    if neg > pos:
        return pos, neg, -min(1.0, neg / len(NEGATIVE_WORDS))
    if "!" in normalized and len(text) < SHORT_EXCLAMATION_MAX_LEN:
        return pos, neg, SHORT_EXCLAMATION_SCORE
    return pos, neg, 0.0


def score(text) -> float:
    """Score free text into [-1, 1].

    Non-string or empty input scores 0. Positive and negative hits are
    counted as substring matches, then normalized by the size of the
    winning side's lexicon. A tie falls back to a short-exclamation check.
    """
    return _analyze(text)[2]


def label_for(value: float, positive_count: int = 0, negative_count: int = 0) -> SentimentLabel:
    """Bucket a sentiment score into a display label.

    Notes that hit both lexicons are "mixed" whatever the sign of the score.
    """
    if positive_count and negative_count:
        return SentimentLabel.MIXED
    if value > 0:
        return SentimentLabel.POSITIVE
    if value < 0:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def analyze_sentiment(text) -> dict:
    """Analyze sentiment of text using keyword matching.

    Returns:
        {score: float (-1 to 1), label: str, positive_count: int, negative_count: int}
    """
    pos, neg, value = _analyze(text)

    return {
        "score": round(value, 2),
        "label": str(label_for(value, pos, neg)),
        "positive_count": pos,
        "negative_count": neg,
    }
