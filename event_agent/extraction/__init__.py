"""
Extraction module para o agente de eventos

Este módulo contém o prompt builder, o adaptador do modelo de extração,
o validador/normalizador da resposta, o cálculo de confiança e o pipeline
que encadeia todas as etapas.
"""

from .constants import EventCategory, EventFormat, PriceType, Confidence
from .models import ScrapedEventData, ScrapeMeta, ExtractionResult
from .prompt import PromptPayload, build_prompt
from .model import ExtractionModel, GeminiExtractionModel
from .validator import parse_model_reply, validate_event, validate
from .slug import generate_slug
from .confidence import score
from .pipeline import ExtractionPipeline, create_extraction_pipeline

__all__ = [
    # Main pipeline
    'ExtractionPipeline',
    'create_extraction_pipeline',

    # Vocabularies
    'EventCategory',
    'EventFormat',
    'PriceType',
    'Confidence',

    # Data models
    'ScrapedEventData',
    'ScrapeMeta',
    'ExtractionResult',

    # Stages
    'PromptPayload',
    'build_prompt',
    'ExtractionModel',
    'GeminiExtractionModel',
    'parse_model_reply',
    'validate_event',
    'validate',
    'generate_slug',
    'score'
]
