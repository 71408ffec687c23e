"""
Response validator and normalizer

The model reply is untrusted: nothing from it reaches ``ScrapedEventData``
without passing through the checks and fallbacks below.
"""
import json
import logging
import math
import re
from datetime import date
from typing import Any, Dict, List, Optional

from event_agent.errors import MissingRequiredField, UnparsableResponse
from .constants import (
    DEFAULT_ORGANIZER_NAME,
    EventFormat,
    VALID_CATEGORIES,
    VALID_FORMATS,
    VALID_PRICE_TYPES,
    VALID_TOPICS,
)
from .models import ScrapedEventData
from .slug import generate_slug

logger = logging.getLogger(__name__)

FENCED_BLOCK_PATTERN = re.compile(r'```(?:json)?\s*([\s\S]*?)```', re.IGNORECASE)
DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})$')


def parse_model_reply(raw: str) -> Dict[str, Any]:
    """
    Parse the model reply as a JSON object

    Tries the text as-is first, then the interior of the first fenced code
    block (optionally tagged ``json``).

    Raises:
        UnparsableResponse: neither attempt yields a JSON object
    """
    raw = (raw or "").strip()
    # ValueError also covers the int digit limit; deep nesting hits RecursionError
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        match = FENCED_BLOCK_PATTERN.search(raw)
        if not match:
            raise UnparsableResponse()
        try:
            parsed = json.loads(match.group(1).strip())
        except (ValueError, RecursionError) as e:
            raise UnparsableResponse() from e

    if not isinstance(parsed, dict):
        raise UnparsableResponse("A resposta do modelo não é um objeto JSON.")
    return parsed


def _clean_str(value: Any) -> Optional[str]:
    """Non-empty stripped string or None"""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _parse_date(value: Any) -> Optional[date]:
    value = _clean_str(value)
    if not value or not DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _parse_time(value: Any) -> Optional[str]:
    value = _clean_str(value)
    match = TIME_PATTERN.match(value) if value else None
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def _coordinate(value: Any, limit: float) -> Optional[float]:
    if _is_number(value) and -limit <= value <= limit:
        return float(value)
    return None


def _filter_topics(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    topics = []
    for topic in value:
        if isinstance(topic, str):
            topic = topic.strip().lower()
            if topic in VALID_TOPICS and topic not in topics:
                topics.append(topic)
    return topics


def _require_title(payload: Dict[str, Any]) -> str:
    title = _clean_str(payload.get("title"))
    if not title:
        raise MissingRequiredField("title")
    return title


def _require_start_date(payload: Dict[str, Any]) -> date:
    raw = payload.get("start_date")
    if raw is None or _clean_str(raw) is None:
        raise MissingRequiredField("start_date")
    start_date = _parse_date(raw)
    if start_date is None:
        raise MissingRequiredField("start_date", "inválido (esperado YYYY-MM-DD)")
    return start_date


def _require_category(payload: Dict[str, Any]) -> str:
    raw = _clean_str(payload.get("category"))
    if raw is None:
        raise MissingRequiredField("category")
    category = raw.upper()
    if category not in VALID_CATEGORIES:
        raise MissingRequiredField("category", "inválido")
    return category


def validate_event(payload: Dict[str, Any], source_url: str) -> ScrapedEventData:
    """
    Enforce required fields, coerce optional ones and compute the slug

    Args:
        payload: JSON object produced by the model
        source_url: URL the user submitted

    Returns:
        Validated event record

    Raises:
        MissingRequiredField: title, start_date or category absent or invalid
    """
    title = _require_title(payload)
    start_date = _require_start_date(payload)
    category = _require_category(payload)

    fmt = (_clean_str(payload.get("format")) or "").upper()
    if fmt not in VALID_FORMATS:
        fmt = EventFormat.PRESENCIAL.value

    is_free = payload.get("is_free") is True
    price_type = payload.get("price_type")
    if is_free or not isinstance(price_type, str) or price_type not in VALID_PRICE_TYPES:
        price_type = None
    price_value = payload.get("price_value")
    if is_free or not (_is_number(price_value) and price_value > 0):
        price_value = None

    city = _clean_str(payload.get("city"))
    description = payload.get("description")

    data = ScrapedEventData(
        title=title,
        description=description.strip() if isinstance(description, str) else "",
        start_date=start_date,
        end_date=_parse_date(payload.get("end_date")),
        start_time=_parse_time(payload.get("start_time")),
        end_time=_parse_time(payload.get("end_time")),
        city=city,
        state=_clean_str(payload.get("state")),
        address=_clean_str(payload.get("address")),
        venue_name=_clean_str(payload.get("venue_name")),
        category=category,
        topics=_filter_topics(payload.get("topics")),
        is_free=is_free,
        price_type=price_type,
        price_value=price_value,
        ticket_url=_clean_str(payload.get("ticket_url")),
        event_url=_clean_str(payload.get("event_url")) or source_url,
        image_url=_clean_str(payload.get("image_url")),
        organizer_name=_clean_str(payload.get("organizer_name")) or DEFAULT_ORGANIZER_NAME,
        organizer_url=_clean_str(payload.get("organizer_url")),
        format=fmt,
        latitude=_coordinate(payload.get("latitude"), 90),
        longitude=_coordinate(payload.get("longitude"), 180),
        slug=generate_slug(title, city)
    )
    logger.debug(f"Validated event '{data.title}' ({data.category.value}, {data.start_date})")
    return data


def validate(raw: str, source_url: str) -> ScrapedEventData:
    """Parse the raw model reply and validate it"""
    return validate_event(parse_model_reply(raw), source_url)
