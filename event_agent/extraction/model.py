"""
Extraction model adapters

The pipeline only depends on ``complete(system, user) -> str``; the Gemini
adapter is the production implementation.
"""
import logging
from typing import Optional, Protocol

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from event_agent.errors import ModelCallError

logger = logging.getLogger(__name__)


class ExtractionModel(Protocol):
    """Synchronous text-completion service, no retry"""

    def complete(self, system: str, user: str) -> str:
        ...


def _message_text(content) -> str:
    """Flatten LangChain message content (str or list of parts) into text"""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GeminiExtractionModel:
    """Google Gemini through LangChain"""

    def __init__(self, model: str, google_api_key: Optional[str] = None,
                 max_output_tokens: int = 2048, temperature: float = 0.0):
        self.model_name = model
        self.llm = ChatGoogleGenerativeAI(
            model=model,
            google_api_key=google_api_key,
            temperature=temperature,
            max_output_tokens=max_output_tokens
        )

    def complete(self, system: str, user: str) -> str:
        try:
            response = self.llm.invoke([
                SystemMessage(content=system),
                HumanMessage(content=user)
            ])
        except Exception as e:
            logger.error(f"Extraction model call failed ({self.model_name}): {e}")
            raise ModelCallError(f"Falha ao consultar o modelo de extração: {e}") from e

        text = _message_text(response.content).strip()
        if not text:
            raise ModelCallError("Resposta vazia do modelo")
        return text
