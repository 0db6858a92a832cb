import logging

import requests
from django.conf import settings

from .exceptions import AnalysisError
from .serializers import AnalysisResultSerializer

logger = logging.getLogger(__name__)


def request_analysis(title, content):
    """Ask the analysis service for a structured reading of one dream."""
    url = f"{settings.ANALYSIS_SERVICE_URL.rstrip('/')}/analyze"
    try:
        response = requests.post(
            url,
            json={"title": title, "content": content},
            timeout=settings.ANALYSIS_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.warning("Failed to connect to analysis service: %s", e)
        raise AnalysisError("analysis service unreachable") from e

    if response.status_code != 200:
        logger.warning("Analysis failed (%s): %s", response.status_code, response.text[:200])
        raise AnalysisError(f"analysis service returned {response.status_code}")

    try:
        payload = response.json()
    except ValueError as e:
        raise AnalysisError("analysis service returned invalid JSON") from e

    serializer = AnalysisResultSerializer(data=payload)
    if not serializer.is_valid():
        logger.warning("Analysis did not match schema: %s", serializer.errors)
        raise AnalysisError("analysis result did not match schema")
    result = dict(serializer.validated_data)
    result["symbolism"] = [dict(item) for item in result["symbolism"]]
    return result
