import logging
from enum import Enum
from typing import List

from pydantic import BaseModel, Field
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)


class SentimentLabel(str, Enum):
    VERY_NEGATIVE = "very_negative"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    VERY_POSITIVE = "very_positive"


class Symbol(BaseModel):
    symbol: str = Field(description="a symbol or image that appears in the dream")
    interpretation: str = Field(description="what the symbol may mean for the dreamer")


# Structured output schema; the parser embeds its JSON schema in the prompt
class DreamAnalysis(BaseModel):
    sentiment_score: float = Field(ge=-1, le=1, description="overall sentiment of the dream from -1 (very negative) to 1 (very positive)")
    sentiment_label: SentimentLabel = Field(description="sentiment label matching the score")
    emotions: List[str] = Field(default_factory=list, description="emotions identified in the dream")
    categories: List[str] = Field(default_factory=list, description="dream categories or themes")
    symbolism: List[Symbol] = Field(default_factory=list, description="symbolic interpretations")
    mental_health_indicators: List[str] = Field(default_factory=list, description="mental health indicators, if any")
    global_trends_correlation: List[str] = Field(default_factory=list, description="possible correlations with global trends or collective concerns")


ANALYSIS_PROMPT = """
Analyze this dream for sentiment, emotions, symbolism, and mental health insights.
Dream Title: "{title}"
Dream Content: "{content}"

Provide a comprehensive analysis including:
1. Overall sentiment score (-1 to 1)
2. Sentiment label (very_negative, negative, neutral, positive, very_positive)
3. Identified emotions
4. Dream categories/themes
5. Symbolic interpretations
6. Mental health indicators (if any)
7. Possible correlations with global trends or collective concerns

Be thorough but sensitive in your analysis.

{format_instructions}
"""


class AnalysisFailed(Exception):
    pass


class DreamAnalyzer:
    def __init__(self, llm: BaseChatModel):
        self.llm = llm
        self.parser = PydanticOutputParser(pydantic_object=DreamAnalysis)
        self.prompt = PromptTemplate(
            template=ANALYSIS_PROMPT,
            input_variables=["title", "content"],
            partial_variables={"format_instructions": self.parser.get_format_instructions()},
        )
        self.chain = self.prompt | self.llm | self.parser

    async def analyze_dream(self, title: str, content: str) -> DreamAnalysis:
        """Run the structured analysis for one dream."""
        logger.info("Analyzing dream %r (%d chars): %s...", title, len(content), content[:60])
        try:
            result = await self.chain.ainvoke({"title": title, "content": content})
        except Exception as error:
            logger.error("Failed to analyze dream %r: %s", title, error)
            raise AnalysisFailed("Failed to analyze dream") from error

        logger.info("Dream %r analyzed as %s (%.2f)", title, result.sentiment_label.value, result.sentiment_score)
        return result


class DreamAnalysisService:
    def __init__(self, openai_api_key: str, model: str = "gpt-4o-mini", temperature: float = 0.3):
        llm = ChatOpenAI(api_key=openai_api_key, model=model, temperature=temperature)
        self.analyzer = DreamAnalyzer(llm)

    async def analyze(self, title: str, content: str) -> DreamAnalysis:
        return await self.analyzer.analyze_dream(title, content)
