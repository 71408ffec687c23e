"""
Data models for the fetcher and distiller
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class RenderedPage:
    """Snapshot of a page after the browser finished rendering it"""
    url: str
    html: str
    visible_text: str
    title: str = ""
    meta_tags: Dict[str, str] = field(default_factory=dict)
    jsonld_blocks: Tuple[str, ...] = ()
    status_code: Optional[int] = None


@dataclass(frozen=True)
class DistilledContent:
    """Bounded, content-only view of a page, ready to be put into a prompt"""
    text: str
    meta_tags: Dict[str, str] = field(default_factory=dict)
    jsonld: Optional[str] = None

    @property
    def has_structured_data(self) -> bool:
        return self.jsonld is not None

    @property
    def has_social_tags(self) -> bool:
        return any(key.startswith('og:') for key in self.meta_tags)

