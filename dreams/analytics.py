"""
Chart-ready summaries over serialized dream records.

Both functions take the dicts produced by ``DreamSerializer`` (or any
mapping with the same keys) and never modify them.
"""
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal

from .models import SentimentLabel

ALL_SENTIMENTS = "all"
TOP_EMOTIONS = 10


def _round_half_up(value, places):
    """Round a Decimal with ties going away from zero, like JavaScript's toFixed."""
    return float(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def effective_label(record):
    """Sentiment label used for grouping and filtering; unlabelled dreams count as neutral."""
    return record.get("sentiment_label") or SentimentLabel.NEUTRAL.value


def _tags(records, key):
    for record in records:
        for tag in record.get(key) or ():
            yield tag


def aggregate(records):
    """
    Summarize a list of dreams for the analytics view.

    Returns None when there is nothing to summarize.
    """
    total = len(records)
    if not total:
        return None

    sentiment_counts = Counter(effective_label(r) for r in records)
    sentiment_data = [
        {
            "sentiment": label,
            "count": count,
            "percentage": _round_half_up(Decimal(count * 100) / total, 1),
        }
        for label, count in sentiment_counts.items()
    ]

    score_sum = sum(Decimal(r.get("sentiment_score") or 0) for r in records)

    # most_common keeps first-seen order among equal counts
    emotion_counts = Counter(_tags(records, "emotions"))
    top_emotions = [
        {"emotion": emotion, "count": count}
        for emotion, count in emotion_counts.most_common(TOP_EMOTIONS)
    ]

    category_counts = Counter(_tags(records, "categories"))
    category_data = [{"category": c, "count": n} for c, n in category_counts.items()]

    return {
        "total_dreams": total,
        "avg_sentiment": _round_half_up(score_sum / total, 3),
        "sentiment_data": sentiment_data,
        "top_emotions": top_emotions,
        "category_data": category_data,
        "mental_health_indicators": sum(1 for r in records if r.get("mental_health_indicators")),
    }


def filter_dreams(records, search_term="", sentiment_label=ALL_SENTIMENTS):
    """Narrow a dream list by text search and sentiment, keeping input order."""
    filtered = list(records)

    term = (search_term or "").strip().lower()
    if term:
        filtered = [
            r for r in filtered
            if term in (r.get("title") or "").lower() or term in (r.get("content") or "").lower()
        ]

    if sentiment_label and sentiment_label != ALL_SENTIMENTS:
        filtered = [r for r in filtered if effective_label(r) == sentiment_label]

    return filtered
