"""Tests for the LLM-backed dream analyzer."""

import asyncio
import json

import pytest
from langchain_core.language_models import FakeListChatModel

from dream_analysis_api.core.dream_analyzer import (
    AnalysisFailed,
    DreamAnalyzer,
    SentimentLabel,
)

from .conftest import ANALYSIS_PAYLOAD


def analyze(reply, title="Flying", content="I flew over mountains"):
    analyzer = DreamAnalyzer(FakeListChatModel(responses=[reply]))
    return asyncio.run(analyzer.analyze_dream(title, content))


def test_parses_schema_conforming_reply():
    result = analyze(json.dumps(ANALYSIS_PAYLOAD))

    assert result.sentiment_label is SentimentLabel.POSITIVE
    assert result.sentiment_score == 0.6
    assert result.symbolism[0].symbol == "mountains"
    assert result.model_dump(mode="json") == ANALYSIS_PAYLOAD


def test_parses_fenced_json():
    result = analyze("```json\n" + json.dumps(ANALYSIS_PAYLOAD) + "\n```")
    assert result.emotions == ["joy", "wonder"]


def test_missing_lists_default_to_empty():
    result = analyze(json.dumps({"sentiment_score": 0, "sentiment_label": "neutral"}))
    assert result.emotions == []
    assert result.mental_health_indicators == []


@pytest.mark.parametrize("reply", [
    "I could not analyze this dream.",
    json.dumps(dict(ANALYSIS_PAYLOAD, sentiment_label="ecstatic")),
    json.dumps(dict(ANALYSIS_PAYLOAD, sentiment_score=3)),
    json.dumps({"emotions": ["joy"]}),
])
def test_schema_violations_fail(reply):
    with pytest.raises(AnalysisFailed):
        analyze(reply)


def test_prompt_carries_dream_and_schema():
    analyzer = DreamAnalyzer(FakeListChatModel(responses=["{}"]))

    prompt = analyzer.prompt.format(title="Flying", content="I flew over mountains")

    assert 'Dream Title: "Flying"' in prompt
    assert 'Dream Content: "I flew over mountains"' in prompt
    assert "very_positive" in prompt
    assert "mental_health_indicators" in prompt
