"""
Headless browser page fetcher

Renders a single URL in an isolated Chromium session and captures everything
the distiller needs. The session never outlives one ``fetch`` call.
"""

import logging
from urllib.parse import urlparse
from typing import Optional

from playwright.async_api import (
    async_playwright,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeout,
)

from event_agent.errors import FetchError, FetchTimeout
from .config import FetchConfig
from .models import RenderedPage

logger = logging.getLogger(__name__)

# Evaluated inside the page after it settled; returns plain data only
CAPTURE_SCRIPT = """
() => {
    const metaTags = {};
    document.querySelectorAll('meta[property^="og:"], meta[name^="og:"]').forEach((el) => {
        const key = el.getAttribute('property') || el.getAttribute('name') || '';
        const value = el.getAttribute('content') || '';
        if (key && value) metaTags[key] = value;
    });
    const description = document.querySelector('meta[name="description"]');
    if (description && description.getAttribute('content')) {
        metaTags['description'] = description.getAttribute('content');
    }
    const jsonld = [];
    document.querySelectorAll('script[type="application/ld+json"]').forEach((el) => {
        const text = el.textContent || '';
        if (text.trim()) jsonld.push(text);
    });
    return { metaTags, jsonld };
}
"""


class PageFetcher:
    """Loads one URL in a short-lived browser session and snapshots the result"""

    def __init__(self, config: Optional[FetchConfig] = None):
        self.config = config or FetchConfig()

    def _check_url(self, url: str) -> None:
        parsed = urlparse(url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise FetchError(f"URL inválida: {url}")

    def _check_anti_bot(self, final_url: str) -> None:
        if any(domain in final_url for domain in self.config.anti_bot_domains):
            raise FetchError(
                "Este site usa proteção anti-bot que impede a extração automática. "
                "Por favor, preencha as informações do evento manualmente."
            )

    def _check_landing(self, url: str, final_url: str, status: Optional[int]) -> None:
        """Reject anti-bot walls and error statuses instead of distilling them"""
        self._check_anti_bot(final_url)

        if status is None or status < 400:
            return

        if status in self.config.blocked_statuses:
            raise FetchError(
                f"Este site bloqueou o acesso automático (HTTP {status}). "
                "Por favor, preencha as informações do evento manualmente."
            )
        raise FetchError(f"Não foi possível acessar a página: HTTP {status}")

    async def fetch(self, url: str) -> RenderedPage:
        """
        Render ``url`` and capture HTML, visible text, meta tags and JSON-LD

        Args:
            url: Absolute http(s) URL supplied by the user

        Returns:
            Immutable snapshot of the rendered page

        Raises:
            FetchTimeout: initial load did not finish in time
            FetchError: any other navigation failure
        """
        self._check_url(url)
        logger.info(f"Fetching {url}")

        async with async_playwright() as p:
            try:
                browser = await p.chromium.launch(
                    headless=self.config.headless,
                    args=self.config.launch_args
                )
            except PlaywrightError as e:
                raise FetchError(f"Não foi possível iniciar o navegador: {e}") from e

            try:
                width, height = self.config.viewport
                context = await browser.new_context(
                    user_agent=self.config.user_agent,
                    locale=self.config.locale,
                    viewport={'width': width, 'height': height},
                    extra_http_headers={'Accept-Language': self.config.accept_language}
                )
                page = await context.new_page()

                try:
                    response = await page.goto(
                        url,
                        wait_until="load",
                        timeout=self.config.navigation_timeout_ms
                    )
                except PlaywrightTimeout as e:
                    logger.warning(f"Timeout loading {url}")
                    raise FetchTimeout(url, self.config.navigation_timeout_ms) from e
                except PlaywrightError as e:
                    logger.warning(f"Navigation failed for {url}: {e}")
                    raise FetchError(
                        f"Não foi possível acessar a página: {e.message}"
                    ) from e

                status = response.status if response else None
                self._check_landing(url, page.url, status)

                # Client-side rendered pages keep populating the DOM after "load"
                await page.wait_for_timeout(self.config.settle_ms)
                # Queue and challenge walls may redirect from script after "load"
                self._check_anti_bot(page.url)

                html = await page.content()
                visible_text = await page.inner_text("body")
                captured = await page.evaluate(CAPTURE_SCRIPT)
                title = (await page.title()).strip()
            except PlaywrightError as e:
                raise FetchError(f"Falha ao capturar o conteúdo da página: {e.message}") from e
            finally:
                try:
                    await browser.close()
                except PlaywrightError as e:
                    logger.warning(f"Failed to close browser for {url}: {e}")

        meta_tags = dict(captured.get('metaTags') or {})
        if not title:
            title = meta_tags.get('og:title', '')

        page_data = RenderedPage(
            url=url,
            html=html,
            visible_text=visible_text,
            title=title,
            meta_tags=meta_tags,
            jsonld_blocks=tuple(captured.get('jsonld') or ()),
            status_code=status
        )
        logger.info(
            f"Fetched {url}: {len(html)} bytes html, {len(visible_text)} chars text, "
            f"{len(page_data.jsonld_blocks)} JSON-LD blocks"
        )
        return page_data
