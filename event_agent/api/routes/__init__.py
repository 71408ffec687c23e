"""
API routes module

Este módulo contém todos os route handlers dos endpoints da API.
"""

from . import scrape, health, root

# Import routers para acesso direto
from .scrape import router as scrape_router
from .health import router as health_router
from .root import router as root_router

__all__ = [
    # Modules
    'scrape',
    'health',
    'root',

    # Routers
    'scrape_router',
    'health_router',
    'root_router'
]
