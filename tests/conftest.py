"""Shared fixtures for record service tests."""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_dream(db):
    """Create a Dream; each call is stamped one minute after the previous one."""
    from dreams.models import Dream

    base = timezone.now() - timedelta(days=1)
    created = []

    def _make(**fields):
        fields.setdefault("title", f"Dream {len(created) + 1}")
        fields.setdefault("content", "I was somewhere else")
        dream = Dream.objects.create(**fields)
        stamp = base + timedelta(minutes=len(created))
        Dream.objects.filter(pk=dream.pk).update(created_at=stamp)
        dream.refresh_from_db()
        created.append(dream)
        return dream

    return _make


@pytest.fixture
def failing_save(db):
    """Make every Dream insert fail after the row is written."""
    from django.db import DatabaseError
    from django.db.models.signals import post_save
    from dreams.models import Dream

    def explode(sender, instance, created, **kwargs):
        raise DatabaseError("disk full")

    post_save.connect(explode, sender=Dream, dispatch_uid="failing_save")
    yield
    post_save.disconnect(sender=Dream, dispatch_uid="failing_save")


@pytest.fixture
def make_trend(db):
    from dreams.models import GlobalTrend

    base = timezone.now() - timedelta(days=1)
    created = []

    def _make(**fields):
        fields.setdefault("event_name", f"Event {len(created) + 1}")
        fields.setdefault("event_type", "social")
        trend = GlobalTrend.objects.create(**fields)
        GlobalTrend.objects.filter(pk=trend.pk).update(created_at=base + timedelta(minutes=len(created)))
        trend.refresh_from_db()
        created.append(trend)
        return trend

    return _make


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


ANALYSIS_PAYLOAD = {
    "sentiment_score": 0.6,
    "sentiment_label": "positive",
    "emotions": ["joy", "wonder"],
    "categories": ["flying"],
    "symbolism": [{"symbol": "mountains", "interpretation": "obstacles overcome"}],
    "mental_health_indicators": [],
    "global_trends_correlation": ["desire for freedom"],
}
