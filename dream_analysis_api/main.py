from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
import logging
import os
from contextlib import asynccontextmanager

from dream_analysis_api.core.dream_analyzer import (
    AnalysisFailed,
    DreamAnalysis,
    DreamAnalysisService,
    SentimentLabel,
)

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Global service instance
service: Optional[DreamAnalysisService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global service
    load_dotenv()
    openai_api_key = os.getenv("OPENAI_API_KEY")
    if not openai_api_key:
        raise ValueError("OPENAI_API_KEY environment variable is required")

    service = DreamAnalysisService(
        openai_api_key,
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.3")),
    )
    logger.info("Dream analysis service ready")
    yield
    service = None


app = FastAPI(
    title="Dream Analysis API",
    description="Structured sentiment, emotion and symbolism analysis of dreams",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalyzeDreamRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


def get_service() -> DreamAnalysisService:
    if service is None:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return service


@app.get("/")
async def root():
    return {"message": "Dream Analysis API", "version": "1.0.0"}


@app.post("/analyze", response_model=DreamAnalysis)
async def analyze_dream(
    request: AnalyzeDreamRequest,
    analysis_service: DreamAnalysisService = Depends(get_service)
):
    """Analyze a single dream and return the structured analysis."""
    try:
        return await analysis_service.analyze(request.title, request.content)
    except AnalysisFailed as e:
        raise HTTPException(status_code=502, detail=f"Analysis failed: {e}")


@app.get("/sentiments", response_model=List[str])
async def get_sentiments():
    """Sentiment labels an analysis can return."""
    return [label.value for label in SentimentLabel]


@app.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dream_analysis_api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
        log_level="info"
    )
