"""
Content distillation: reduce a rendered page to prompt-sized, content-only text
"""

import logging
import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup

from event_agent.errors import InsufficientContent
from .config import FetchConfig
from .models import DistilledContent, RenderedPage

logger = logging.getLogger(__name__)


class ContentDistiller:
    """Strips non-content markup and picks the best text and structured data"""

    def __init__(self, config: Optional[FetchConfig] = None):
        self.config = config or FetchConfig()

        # Compiled regex patterns
        self.horizontal_space_pattern = re.compile(r'[^\S\n]+')
        self.line_edge_pattern = re.compile(r' ?\n ?')
        self.blank_lines_pattern = re.compile(r'\n{3,}')
        self.noise_pattern = re.compile(
            '|'.join(re.escape(marker) for marker in self.config.noise_markers),
            re.IGNORECASE
        )

    def find_event_block(self, blocks: Iterable[str]) -> Optional[str]:
        """Return the first block mentioning ``Event``, or None"""
        marker = self.config.structured_data_marker
        for block in blocks:
            if marker in block:
                return block
        return None

    def _jsonld_from_html(self, html: str) -> Iterable[str]:
        soup = BeautifulSoup(html, 'html.parser')
        for script in soup.find_all('script', attrs={'type': 'application/ld+json'}):
            text = script.string or script.get_text()
            if text and text.strip():
                yield text

    def _is_noise(self, element) -> bool:
        classes = element.get('class') or []
        if isinstance(classes, str):
            classes = [classes]
        candidates = [' '.join(classes), element.get('id') or '']
        return any(self.noise_pattern.search(value) for value in candidates if value)

    def clean_html(self, html: str) -> str:
        """Remove non-content subtrees and return normalized body text"""
        soup = BeautifulSoup(html, 'html.parser')

        for element in soup(self.config.removable_tags):
            element.decompose()

        # Materialize first; decomposing a parent invalidates its descendants
        for element in [el for el in soup.find_all(True) if self._is_noise(el)]:
            if not element.decomposed:
                element.decompose()

        root = soup.body or soup
        return self.normalize_whitespace(root.get_text())

    def normalize_whitespace(self, text: str) -> str:
        if not text:
            return ""
        text = self.horizontal_space_pattern.sub(' ', text)
        text = self.line_edge_pattern.sub('\n', text)
        text = self.blank_lines_pattern.sub('\n\n', text)
        return text.strip()

    def distill(self, page: RenderedPage) -> DistilledContent:
        """
        Distill a rendered page

        Args:
            page: Snapshot produced by the fetcher

        Returns:
            Bounded text, meta tags and the event-flavored JSON-LD block

        Raises:
            InsufficientContent: the chosen text is shorter than the minimum
        """
        jsonld = self.find_event_block(page.jsonld_blocks)
        if jsonld is None:
            jsonld = self.find_event_block(self._jsonld_from_html(page.html))

        cleaned_text = self.clean_html(page.html)
        visible_text = self.normalize_whitespace(page.visible_text)

        text = visible_text if len(visible_text) > len(cleaned_text) else cleaned_text
        text = text[:self.config.max_text_length]

        if len(text) < self.config.min_content_length:
            logger.warning(
                f"Insufficient content for {page.url}: {len(text)} chars "
                f"(minimum {self.config.min_content_length})"
            )
            raise InsufficientContent(len(text), self.config.min_content_length)

        content = DistilledContent(
            text=text,
            meta_tags=dict(page.meta_tags),
            jsonld=jsonld
        )
        logger.debug(
            f"Distilled {page.url}: {len(text)} chars, jsonld={content.has_structured_data}, "
            f"og={content.has_social_tags}"
        )
        return content
