"""
Prompt builder for the extraction model
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from event_agent.crawl.models import DistilledContent
from .constants import EventCategory, EventFormat, PriceType, TOPIC_LABELS


@dataclass(frozen=True)
class PromptPayload:
    system: str
    user: str


def _join(values) -> str:
    return ", ".join(values)


SYSTEM_PROMPT = f"""Você é um agente especializado em extrair informações de eventos de marketing a partir do conteúdo de páginas web.

**Instruções Importantes**

* Analise TODOS os dados fornecidos: texto visível, meta tags e dados estruturados (JSON-LD)
* Cruze informações de diferentes fontes para maior precisão
* Se a data estiver em formato relativo ("próximo sábado"), converta para data absoluta considerando a data atual informada
* Datas sempre no formato YYYY-MM-DD e horários no formato HH:MM
* Para preços: defina price_type como "a_partir_de" (menor valor disponível), "unico" (valor fixo único) ou "nao_informado" (sem info); price_value deve ser o valor numérico em reais (ex: 1490.00 para R$1.490,00); se is_free=true, price_type e price_value devem ser null
* Para ticket_url, priorize links de compra de ingressos (Sympla, Eventbrite, etc.) em vez de links genéricos
* Se o evento tiver múltiplos dias, use start_date e end_date
* Para a descrição, retorne o conteúdo em HTML simples. Preserve a estrutura: parágrafos como <p>, listas como <ul>/<li>, negritos como <strong>, itálicos como <em>, headings como <h2>/<h3>. NÃO inclua tags <html>, <body>, <head> ou estilos inline. Capture o máximo de detalhes (programação, palestrantes, público-alvo)
* Se alguma informação não estiver disponível, use null
* NUNCA invente informações que não estejam na página

**Vocabulários**

Para "topics", identifique quais se aplicam:
{_join(TOPIC_LABELS)}

Para "category":
{_join(c.value for c in EventCategory)}

Para "format": {_join(f.value for f in EventFormat)}

Para "price_type": {_join(p.value for p in PriceType)}

Retorne APENAS o JSON válido, sem explicações ou markdown."""


RESPONSE_SHAPE = f"""{{
  "title": "string",
  "description": "string (descrição completa em HTML: <p>, <ul>/<li>, <strong>, <em>, <h2>/<h3>, sem <html>/<body>/<head> ou estilos inline)",
  "start_date": "YYYY-MM-DD",
  "end_date": "YYYY-MM-DD ou null",
  "start_time": "HH:MM ou null",
  "end_time": "HH:MM ou null",
  "city": "string ou null",
  "state": "string (UF, 2 letras) ou null",
  "address": "string (endereço completo) ou null",
  "venue_name": "string (nome do local) ou null",
  "category": "{'|'.join(c.value for c in EventCategory)}",
  "topics": ["array de topics aplicáveis"],
  "is_free": true/false,
  "price_type": "{'|'.join(p.value for p in PriceType)} ou null se is_free=true",
  "price_value": number (valor em reais, ex: 97.00) ou null,
  "ticket_url": "string (URL para compra) ou null",
  "event_url": "string (URL oficial do evento)",
  "image_url": "string (URL da imagem/banner) ou null",
  "organizer_name": "string",
  "organizer_url": "string ou null",
  "format": "{'|'.join(f.value for f in EventFormat)}",
  "latitude": null,
  "longitude": null
}}"""


def build_user_message(url: str, content: DistilledContent, today: date) -> str:
    meta_str = "\n".join(f"{key}: {value}" for key, value in content.meta_tags.items())

    return f"""URL do evento: {url}

Data atual: {today.isoformat()}

Meta tags encontradas:
{meta_str or '(nenhuma)'}

Dados estruturados encontrados:
{content.jsonld or '(nenhum)'}

Conteúdo da página:
{content.text}

Extraia as informações no seguinte formato JSON:
{RESPONSE_SHAPE}"""


def build_prompt(url: str, content: DistilledContent,
                 today: Optional[date] = None) -> PromptPayload:
    """Assemble the fixed system instruction and the per-call user message"""
    return PromptPayload(
        system=SYSTEM_PROMPT,
        user=build_user_message(url, content, today or date.today())
    )
