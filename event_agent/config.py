"""
Configuração do agente de eventos
"""
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings a partir das environment variables"""

    # Server configuration
    PORT: int = int(os.getenv("PORT", 8000))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    RELOAD: bool = _env_bool("RELOAD", "false")

    # Extraction model configuration
    GOOGLE_API_KEY: Optional[str] = os.getenv("GOOGLE_API_KEY")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_MAX_OUTPUT_TOKENS: int = int(os.getenv("LLM_MAX_OUTPUT_TOKENS", 2048))

    # Browser configuration
    FETCH_TIMEOUT_MS: int = int(os.getenv("FETCH_TIMEOUT_MS", 30_000))
    FETCH_SETTLE_MS: int = int(os.getenv("FETCH_SETTLE_MS", 3_000))
    BROWSER_HEADLESS: bool = _env_bool("BROWSER_HEADLESS", "true")

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # API configuration
    API_TITLE: str = "Eventos de Marketing - Extraction Agent"
    API_DESCRIPTION: str = "Extrai dados estruturados de eventos a partir de uma URL para pré-preencher o formulário de cadastro"
    API_VERSION: str = "1.0.0"

    # CORS configuration
    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    @classmethod
    def get_example_urls(cls) -> List[str]:
        """Get example URLs for API documentation"""
        return [
            "https://www.sympla.com.br/evento/growth-summit-2026/123456",
            "https://www.eventbrite.com.br/e/workshop-de-seo-tickets-987654",
        ]


# Global settings instance
settings = Settings()
