"""
Event extraction pipeline: fetch -> distill -> prompt -> model -> validate
"""

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional

from event_agent.config import Settings, settings as default_settings
from event_agent.crawl import ContentDistiller, FetchConfig, PageFetcher
from event_agent.errors import ExtractionError, ModelCallError
from .confidence import score
from .model import ExtractionModel, GeminiExtractionModel
from .models import ExtractionResult, ScrapeMeta
from .prompt import build_prompt, PromptPayload
from .validator import validate

logger = logging.getLogger(__name__)


class ExtractionPipeline:
    """
    Turns one event-listing URL into a validated ``ScrapedEventData``

    Each ``extract`` call is independent: it owns its browser session and
    shares nothing with concurrent calls except the model client, the
    executor the blocking model call runs on and the aggregate counters
    reported by ``get_performance_stats``.
    """

    def __init__(self, model: ExtractionModel,
                 fetch_config: Optional[FetchConfig] = None,
                 fetcher: Optional[PageFetcher] = None,
                 distiller: Optional[ContentDistiller] = None):
        self.fetch_config = fetch_config or FetchConfig()
        self.fetcher = fetcher or PageFetcher(self.fetch_config)
        self.distiller = distiller or ContentDistiller(self.fetch_config)
        self.model = model

        # Aggregate counters shared by concurrent calls; only touched on the
        # event loop thread, never across an await
        self.performance_metrics = {
            'total_extractions': 0,
            'successful_extractions': 0,
            'failed_extractions': 0,
            'failures_by_kind': {},
            'avg_response_time': 0.0,
            'total_response_time': 0.0
        }

        # Thread pool for the blocking model call
        self.thread_pool = ThreadPoolExecutor(max_workers=4)

        logger.info("Extraction pipeline initialized")

    async def _complete(self, prompt: PromptPayload) -> str:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                self.thread_pool,
                self.model.complete,
                prompt.system,
                prompt.user
            )
        except ModelCallError:
            raise
        except Exception as e:
            raise ModelCallError(f"Falha ao consultar o modelo de extração: {e}") from e

    async def extract(self, url: str) -> ExtractionResult:
        """
        Run the whole pipeline for ``url``

        Raises:
            ExtractionError: one of the typed stage failures; no partial
                result is ever returned
        """
        start_time = time.time()
        self.performance_metrics['total_extractions'] += 1

        try:
            page = await self.fetcher.fetch(url)
            content = self.distiller.distill(page)

            prompt = build_prompt(url, content)
            raw_reply = await self._complete(prompt)

            data = validate(raw_reply, url)
        except ExtractionError as e:
            self._record_failure(e, time.time() - start_time)
            logger.warning(f"Extraction failed for {url}: {e.error_code} - {e.message}")
            raise

        meta = ScrapeMeta(
            source_url=url,
            has_jsonld=content.has_structured_data,
            has_og_tags=content.has_social_tags,
            confidence=score(data)
        )

        response_time = time.time() - start_time
        self.performance_metrics['successful_extractions'] += 1
        self._update_performance_metrics(response_time)
        logger.info(
            f"Extracted '{data.title}' from {url} in {response_time:.2f}s "
            f"(confidence: {meta.confidence.value})"
        )
        return ExtractionResult(data=data, meta=meta)

    def extract_sync(self, url: str) -> ExtractionResult:
        """Synchronous wrapper for callers without an event loop"""
        return asyncio.run(self.extract(url))

    def _record_failure(self, error: ExtractionError, response_time: float):
        self.performance_metrics['failed_extractions'] += 1
        failures = self.performance_metrics['failures_by_kind']
        failures[error.error_code] = failures.get(error.error_code, 0) + 1
        self._update_performance_metrics(response_time)

    def _update_performance_metrics(self, response_time: float):
        """Update performance metrics"""
        self.performance_metrics['total_response_time'] += response_time
        self.performance_metrics['avg_response_time'] = (
            self.performance_metrics['total_response_time'] /
            self.performance_metrics['total_extractions']
        )

    def get_performance_stats(self) -> Dict[str, Any]:
        """Get performance statistics"""
        performance_stats = dict(self.performance_metrics)
        performance_stats['failures_by_kind'] = dict(self.performance_metrics['failures_by_kind'])
        performance_stats['avg_response_time'] = round(performance_stats['avg_response_time'], 3)

        return {
            "performance": performance_stats,
            "configuration": {
                "llm_model": getattr(self.model, 'model_name', type(self.model).__name__),
                "navigation_timeout_ms": self.fetch_config.navigation_timeout_ms,
                "settle_ms": self.fetch_config.settle_ms,
                "max_text_length": self.fetch_config.max_text_length
            }
        }

    def cleanup(self):
        """Cleanup resources"""
        self.thread_pool.shutdown(wait=True)
        logger.info("Extraction pipeline cleanup completed")


# Factory function
def create_extraction_pipeline(settings: Optional[Settings] = None) -> ExtractionPipeline:
    """
    Build the production pipeline from environment settings

    Args:
        settings: Settings to use; the module-level instance by default

    Returns:
        Pipeline wired to Playwright and Google Gemini
    """
    settings = settings or default_settings

    fetch_config = FetchConfig(
        headless=settings.BROWSER_HEADLESS,
        navigation_timeout_ms=settings.FETCH_TIMEOUT_MS,
        settle_ms=settings.FETCH_SETTLE_MS
    )
    model = GeminiExtractionModel(
        model=settings.LLM_MODEL,
        google_api_key=settings.GOOGLE_API_KEY,
        max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS
    )
    return ExtractionPipeline(model=model, fetch_config=fetch_config)
