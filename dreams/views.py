import logging

from django.conf import settings
from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .analysis_client import request_analysis
from .analytics import ALL_SENTIMENTS, aggregate, filter_dreams
from .exceptions import AnalysisError, InvalidLimit, InvalidSortSpec
from .models import ANONYMOUS, Dream, GlobalTrend
from .records import create_dream, list_records, load_analytics_data
from .serializers import VALIDATION_MESSAGE, DreamSerializer, DreamSubmissionSerializer

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_MESSAGE = "Failed to analyze your dream. Please try again."


def _list_response(request, model, default_limit):
    try:
        records = list_records(
            model,
            request.query_params.get('sort', '-created_at'),
            request.query_params.get('limit', default_limit),
        )
    except (InvalidSortSpec, InvalidLimit) as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(records)


@api_view(['GET'])
@permission_classes([AllowAny])
def list_dreams(request):
    return _list_response(request, Dream, settings.DREAM_GALLERY_LIMIT)


@api_view(['GET'])
@permission_classes([AllowAny])
def list_trends(request):
    return _list_response(request, GlobalTrend, settings.TREND_LIMIT)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_dream(request, id):
    try:
        dream = Dream.objects.get(id=id)
    except Dream.DoesNotExist:
        return Response({"detail": "Not found."}, status=status.HTTP_404_NOT_FOUND)
    return Response(DreamSerializer(dream).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def gallery(request):
    """Latest dreams narrowed by ?search= and ?sentiment=."""
    try:
        dreams = list_records(Dream, '-created_at', settings.DREAM_GALLERY_LIMIT)
    except DatabaseError:
        logger.exception("Failed to load dreams")
        dreams = []

    results = filter_dreams(
        dreams,
        search_term=request.query_params.get('search', ''),
        sentiment_label=request.query_params.get('sentiment', ALL_SENTIMENTS),
    )
    return Response({"count": len(results), "results": results})


@api_view(['GET'])
@permission_classes([AllowAny])
def analytics(request):
    """Aggregate view over the latest dreams plus recent global trends."""
    try:
        dreams, trends = load_analytics_data()
    except DatabaseError:
        logger.exception("Failed to load analytics data")
        dreams, trends = [], []

    return Response({
        "analytics": aggregate(dreams),
        "active_dreamers": len({d["created_by"] for d in dreams}),
        "trends": trends,
    })


def _submission_error(errors):
    if 'non_field_errors' in errors:
        return VALIDATION_MESSAGE
    field, messages = next(iter(errors.items()))
    return f"{field}: {messages[0]}"


@api_view(['POST'])
@permission_classes([AllowAny])
def submit_dream(request):
    """Analyze a new dream and store it together with its analysis."""
    submission = DreamSubmissionSerializer(data=request.data)
    if not submission.is_valid():
        return Response(
            {"detail": _submission_error(submission.errors), "errors": submission.errors},
            status=status.HTTP_400_BAD_REQUEST,
        )
    data = submission.validated_data

    if request.user.is_authenticated and not data['is_anonymous']:
        created_by = request.user.get_username()
    else:
        created_by = ANONYMOUS

    try:
        analysis = request_analysis(data['title'], data['content'])
        dream = create_dream({**data, **analysis, 'created_by': created_by})
    except AnalysisError as e:
        logger.warning("Dream analysis failed: %s", e)
        return Response({"detail": ANALYSIS_FAILED_MESSAGE}, status=status.HTTP_502_BAD_GATEWAY)
    except DatabaseError:
        logger.exception("Failed to store analyzed dream")
        return Response({"detail": ANALYSIS_FAILED_MESSAGE}, status=status.HTTP_502_BAD_GATEWAY)

    return Response({**analysis, "id": dream["id"]}, status=status.HTTP_201_CREATED)
