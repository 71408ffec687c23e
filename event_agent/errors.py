"""
Typed failures of the extraction pipeline

Every stage raises one of these and the whole invocation is aborted; callers
show ``message`` to the operator and fall back to manual data entry.
"""
from typing import Optional


class ExtractionError(Exception):
    """Base class for all pipeline failures"""

    error_code: str = "EXTRACTION_ERROR"
    status_code: int = 500
    default_message: str = "Não foi possível extrair os dados do evento."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class FetchTimeout(ExtractionError):
    error_code = "FETCH_TIMEOUT"
    status_code = 504
    default_message = "Tempo esgotado ao acessar a página. Verifique se a URL está correta."

    def __init__(self, url: str, timeout_ms: int):
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timeout ao acessar {url} ({timeout_ms // 1000}s). Verifique se a URL está correta."
        )


class FetchError(ExtractionError):
    error_code = "FETCH_ERROR"
    status_code = 502
    default_message = "Não foi possível acessar a página."


class InsufficientContent(ExtractionError):
    error_code = "INSUFFICIENT_CONTENT"
    status_code = 422
    default_message = (
        "Conteúdo da página muito curto; a URL pode estar bloqueando scraping ou ser inválida."
    )

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__()


class ModelCallError(ExtractionError):
    error_code = "MODEL_CALL_ERROR"
    status_code = 502
    default_message = "Falha ao consultar o modelo de extração."


class UnparsableResponse(ExtractionError):
    error_code = "UNPARSABLE_RESPONSE"
    status_code = 502
    default_message = "Não foi possível extrair JSON da resposta do modelo."


class MissingRequiredField(ExtractionError):
    error_code = "MISSING_REQUIRED_FIELD"
    status_code = 422

    def __init__(self, field: str, reason: str = "ausente"):
        self.field = field
        self.reason = reason
        super().__init__(f"Campo obrigatório {reason}: {field}")
