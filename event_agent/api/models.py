"""
Pydantic models para request e response da API
"""
from pydantic import BaseModel
from typing import Dict, List, Literal, Optional, Any

from event_agent.extraction.models import ScrapedEventData, ScrapeMeta


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


class ScrapeApiResponse(BaseModel):
    success: Literal[True] = True
    data: ScrapedEventData
    meta: ScrapeMeta


class ScrapeApiError(BaseModel):
    success: Literal[False] = False
    error: str
    error_code: str
    timestamp: float


class HealthResponse(BaseModel):
    status: str
    extraction_pipeline: str
    llm_model: Optional[str] = None
    stats: Optional[Dict[str, Any]] = None


class VocabularyOption(BaseModel):
    value: str
    label: str


class VocabularyResponse(BaseModel):
    categories: List[VocabularyOption]
    formats: List[VocabularyOption]
    topics: List[VocabularyOption]
