"""
Advisory confidence level based on how many optional fields were filled
"""
from .constants import (
    CONFIDENCE_FIELDS,
    Confidence,
    HIGH_CONFIDENCE_MIN_FIELDS,
    MEDIUM_CONFIDENCE_MIN_FIELDS,
)
from .models import ScrapedEventData


def count_filled_fields(data: ScrapedEventData) -> int:
    filled = 0
    for name in CONFIDENCE_FIELDS:
        value = getattr(data, name)
        if value is not None and value != "":
            filled += 1
    return filled


def score(data: ScrapedEventData) -> Confidence:
    """Never blocks or alters the record"""
    filled = count_filled_fields(data)
    if filled >= HIGH_CONFIDENCE_MIN_FIELDS:
        return Confidence.HIGH
    if filled >= MEDIUM_CONFIDENCE_MIN_FIELDS:
        return Confidence.MEDIUM
    return Confidence.LOW
