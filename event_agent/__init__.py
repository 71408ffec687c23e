"""
Agente de extração de eventos de marketing

Este package contém os módulos principais:
- crawl: page fetcher (Playwright) e content distiller
- extraction: prompt, modelo de extração, validação e pipeline
- api: FastAPI application e routes
"""

from . import crawl, extraction, api

__version__ = "1.0.0"

__all__ = [
    'crawl',
    'extraction',
    'api',
    '__version__'
]
