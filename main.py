"""
Entry point da API do agente de extração de eventos
"""
import uvicorn

from event_agent.api.app import create_app
from event_agent.config import settings

# Create FastAPI app instance
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
