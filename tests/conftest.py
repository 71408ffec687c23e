"""
Shared fixtures for the extraction agent test suite
"""

import json
from typing import Any, Dict, List, Optional

import pytest

from event_agent.crawl.models import RenderedPage


ARTICLE_TEXT = (
    "Growth Summit 2026 reúne os principais nomes de growth e marketing de performance "
    "do Brasil em dois dias de palestras, workshops e networking no Expo Center Norte."
)

EVENT_JSONLD = json.dumps({
    "@context": "https://schema.org",
    "@type": "Event",
    "name": "Growth Summit 2026",
    "startDate": "2026-03-15T09:00",
    "location": {"@type": "Place", "name": "Expo Center Norte"},
})

ORG_JSONLD = json.dumps({
    "@context": "https://schema.org",
    "@type": "Organization",
    "name": "Growth Co",
})


def build_html(body: str, head: str = "") -> str:
    return f"<html><head><title>Growth Summit 2026</title>{head}</head><body>{body}</body></html>"


def make_page(html: Optional[str] = None, visible_text: str = "",
              jsonld_blocks: tuple = (), meta_tags: Optional[Dict[str, str]] = None,
              url: str = "https://example.com/evento") -> RenderedPage:
    return RenderedPage(
        url=url,
        html=html if html is not None else build_html(f"<main><p>{ARTICLE_TEXT}</p></main>"),
        visible_text=visible_text,
        title="Growth Summit 2026",
        meta_tags=meta_tags or {},
        jsonld_blocks=jsonld_blocks,
        status_code=200
    )


def full_payload(**overrides) -> Dict[str, Any]:
    """Model reply with every field filled"""
    payload = {
        "title": "Growth Summit 2026",
        "description": "<p>Dois dias de growth.</p>",
        "start_date": "2026-03-15",
        "end_date": "2026-03-16",
        "start_time": "09:00",
        "end_time": "18:00",
        "city": "São Paulo",
        "state": "SP",
        "address": "Av. Otto Baumgart, 1000",
        "venue_name": "Expo Center Norte",
        "category": "CONFERENCIA",
        "topics": ["growth", "performance"],
        "is_free": False,
        "price_type": "a_partir_de",
        "price_value": 497.0,
        "ticket_url": "https://www.sympla.com.br/growth-summit-2026",
        "event_url": "https://growthsummit.com.br",
        "image_url": "https://growthsummit.com.br/banner.png",
        "organizer_name": "Growth Co",
        "organizer_url": "https://growth.co",
        "format": "PRESENCIAL",
        "latitude": -23.5,
        "longitude": -46.6,
    }
    payload.update(overrides)
    return payload


def minimal_payload(**overrides) -> Dict[str, Any]:
    """Model reply with only the required fields"""
    payload = {
        "title": "Growth Summit 2026",
        "start_date": "2026-03-15",
        "category": "CONFERENCIA",
    }
    payload.update(overrides)
    return payload


class FakeModel:
    """Extraction model double that records its calls"""

    model_name = "fake-model"

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, str]] = []

    def complete(self, system: str, user: str) -> str:
        self.calls.append({"system": system, "user": user})
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def source_url() -> str:
    return "https://example.com/evento"


@pytest.fixture
def rendered_page() -> RenderedPage:
    return make_page(
        visible_text=ARTICLE_TEXT,
        jsonld_blocks=(ORG_JSONLD, EVENT_JSONLD),
        meta_tags={"og:title": "Growth Summit 2026", "description": "Evento de growth"}
    )
