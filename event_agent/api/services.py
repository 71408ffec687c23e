"""
Business logic services para as operações de extração
"""
import logging
from typing import Dict, Any

from event_agent.api.models import ScrapeApiResponse
from event_agent.api.exceptions import InternalServerError
from event_agent.errors import ExtractionError

logger = logging.getLogger(__name__)


class ScrapeService:
    """Service para extração de eventos a partir de uma URL"""

    @staticmethod
    async def scrape_event(extraction_pipeline, url: str) -> ScrapeApiResponse:
        """Run the pipeline; typed extraction failures propagate to the handler"""
        try:
            result = await extraction_pipeline.extract(url)
        except ExtractionError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error extracting {url}: {e}")
            raise InternalServerError(str(e))

        return ScrapeApiResponse(data=result.data, meta=result.meta)


class HealthService:
    """Service para health check"""

    @staticmethod
    def check_pipeline_health(extraction_pipeline) -> Dict[str, Any]:
        """Report pipeline readiness and basic statistics"""
        stats = {}
        if hasattr(extraction_pipeline, 'get_performance_stats'):
            stats = extraction_pipeline.get_performance_stats()

        model = getattr(extraction_pipeline, 'model', None)
        return {
            "status": "healthy",
            "extraction_pipeline": "ready",
            "llm_model": getattr(model, 'model_name', None),
            "stats": stats
        }
