"""
Pydantic models for the extraction result
"""
from datetime import date, datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from .constants import Confidence, EventCategory, EventFormat, PriceType


class ScrapedEventData(BaseModel):
    """Validated event record used to pre-fill the submission form"""
    title: str
    description: str = ""
    start_date: date
    end_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    address: Optional[str] = None
    venue_name: Optional[str] = None
    category: EventCategory
    topics: List[str] = Field(default_factory=list)
    is_free: bool = False
    price_type: Optional[PriceType] = None
    price_value: Optional[float] = None
    ticket_url: Optional[str] = None
    event_url: str
    image_url: Optional[str] = None
    organizer_name: str
    organizer_url: Optional[str] = None
    format: EventFormat = EventFormat.PRESENCIAL
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    slug: str


class ScrapeMeta(BaseModel):
    """Diagnostics shown to the human reviewer next to the record"""
    source_url: str
    extracted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    has_jsonld: bool
    has_og_tags: bool
    confidence: Confidence


class ExtractionResult(BaseModel):
    data: ScrapedEventData
    meta: ScrapeMeta
