# models.py
from uuid import uuid4
from django.db import models

ANONYMOUS = "anonymous"


class SentimentLabel(models.TextChoices):
    VERY_NEGATIVE = "very_negative", "Very negative"
    NEGATIVE = "negative", "Negative"
    NEUTRAL = "neutral", "Neutral"
    POSITIVE = "positive", "Positive"
    VERY_POSITIVE = "very_positive", "Very positive"


class Dream(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=255, default=ANONYMOUS)
    title = models.CharField(max_length=255)
    content = models.TextField()
    is_anonymous = models.BooleanField(default=False)

    # Analysis output, filled in once at creation
    sentiment_score = models.FloatField(null=True, blank=True)
    sentiment_label = models.CharField(max_length=32, choices=SentimentLabel.choices, null=True, blank=True)
    emotions = models.JSONField(default=list, blank=True)
    categories = models.JSONField(default=list, blank=True)
    symbolism = models.JSONField(default=list, blank=True)
    mental_health_indicators = models.JSONField(default=list, blank=True)
    global_trends_correlation = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="dream_created_at_idx"),
            models.Index(fields=["sentiment_label"], name="dream_sentiment_label_idx"),
        ]

    def __str__(self):
        return f'{self.title} • {self.created_by} • {self.created_at:%Y-%m-%d}'


class GlobalTrend(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    event_name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    event_type = models.CharField(max_length=64)
    sentiment_impact = models.FloatField(default=0)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.event_name
