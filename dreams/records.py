"""Listing and creation of stored records."""
import asyncio
import logging

from asgiref.sync import async_to_sync, sync_to_async
from django.conf import settings
from django.db import transaction

from .exceptions import InvalidLimit, InvalidSortSpec
from .models import Dream, GlobalTrend
from .serializers import DreamSerializer, GlobalTrendSerializer

logger = logging.getLogger(__name__)

SERIALIZERS = {
    Dream: DreamSerializer,
    GlobalTrend: GlobalTrendSerializer,
}


def parse_sort_spec(model, sort_spec):
    """Validate a "field" / "-field" ordering against the model's concrete fields."""
    sort_spec = sort_spec or ""
    field_name = sort_spec[1:] if sort_spec.startswith("-") else sort_spec
    if field_name not in {f.name for f in model._meta.concrete_fields}:
        raise InvalidSortSpec(f"Cannot sort {model.__name__} by {sort_spec!r}")
    return sort_spec


def parse_limit(limit):
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        raise InvalidLimit(f"Invalid limit {limit!r}")
    if limit < 1:
        raise InvalidLimit("limit must be a positive integer")
    return min(limit, settings.RECORD_LIST_MAX_LIMIT)


def list_records(model, sort_spec, limit):
    ordering = parse_sort_spec(model, sort_spec)
    queryset = model.objects.order_by(ordering)[:parse_limit(limit)]
    return list(SERIALIZERS[model](queryset, many=True).data)


alist_records = sync_to_async(list_records)


async def _gather_analytics_data():
    return await asyncio.gather(
        alist_records(Dream, "-created_at", settings.DREAM_ANALYTICS_LIMIT),
        alist_records(GlobalTrend, "-created_at", settings.TREND_LIMIT),
    )


def load_analytics_data():
    """Fetch the dream and trend lists together; a failure in either fails both."""
    dreams, trends = async_to_sync(_gather_analytics_data)()
    return dreams, trends


def create_dream(fields):
    """Persist a dream merged from user input and its analysis, return it serialized."""
    with transaction.atomic():
        dream = Dream.objects.create(**fields)
    logger.info("Stored dream %s (%s)", dream.id, dream.sentiment_label)
    return DreamSerializer(dream).data
