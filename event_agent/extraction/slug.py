"""
URL-safe slug suggestion for extracted events
"""
import re
import unicodedata
from typing import Optional

from .constants import SLUG_MAX_LENGTH

_non_alnum_pattern = re.compile(r'[^a-z0-9]+')


def strip_accents(text: str) -> str:
    """Drop combining marks after NFD decomposition ("São" -> "Sao")"""
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def generate_slug(title: str, city: Optional[str] = None,
                  max_length: int = SLUG_MAX_LENGTH) -> str:
    """
    Build a slug from title and, when known, city

    Not guaranteed to be unique; the submission system resolves collisions.
    """
    base = f"{title} {city}" if city else title
    slug = _non_alnum_pattern.sub('-', strip_accents(base.lower())).strip('-')
    return slug[:max_length].rstrip('-')
