"""
Crawl module para o agente de extração de eventos

Este módulo contém os componentes que tocam a página alvo: o page fetcher
baseado em Playwright e o content distiller baseado em BeautifulSoup.
"""

from .config import FetchConfig
from .models import RenderedPage, DistilledContent
from .fetcher import PageFetcher
from .distiller import ContentDistiller

__all__ = [
    # Configuration
    'FetchConfig',

    # Data models
    'RenderedPage',
    'DistilledContent',

    # Core components
    'PageFetcher',
    'ContentDistiller'
]
