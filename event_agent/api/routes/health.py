"""
Routes para health check e monitoramento
"""
from fastapi import APIRouter, Depends

from event_agent.api.models import HealthResponse
from event_agent.api.dependencies import get_extraction_pipeline
from event_agent.api.services import HealthService

router = APIRouter(tags=["health"])


@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check(extraction_pipeline=Depends(get_extraction_pipeline)):
    """Health check endpoint"""
    health_data = HealthService.check_pipeline_health(extraction_pipeline)

    return HealthResponse(
        status=health_data["status"],
        extraction_pipeline=health_data["extraction_pipeline"],
        llm_model=health_data["llm_model"],
        stats=health_data["stats"]
    )
