"""
Routes para extração de eventos
"""
from fastapi import APIRouter, Depends

from event_agent.api.models import ScrapeRequest, ScrapeApiResponse, ScrapeApiError
from event_agent.api.dependencies import get_extraction_pipeline
from event_agent.api.services import ScrapeService
from event_agent.api.exceptions import InvalidUrlError
from event_agent.api.validators import UrlValidator

router = APIRouter(prefix="/api/v1/agent", tags=["agent"])


@router.post(
    "/scrape",
    response_model=ScrapeApiResponse,
    responses={
        400: {"model": ScrapeApiError},
        422: {"model": ScrapeApiError},
        502: {"model": ScrapeApiError},
        504: {"model": ScrapeApiError},
    }
)
async def scrape_event(
    request: ScrapeRequest,
    extraction_pipeline=Depends(get_extraction_pipeline)
):
    """Extrai os dados do evento de uma URL para pré-preencher o formulário"""
    try:
        url = UrlValidator.validate(request.url)
    except ValueError as e:
        raise InvalidUrlError(str(e))

    return await ScrapeService.scrape_event(
        extraction_pipeline=extraction_pipeline,
        url=url
    )
