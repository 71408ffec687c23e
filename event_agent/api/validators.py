"""
Custom validators para validação de requests
"""
from typing import Optional
from urllib.parse import urlparse


class UrlValidator:
    """Validator para a URL do evento"""

    @staticmethod
    def validate_url_present(url: Optional[str]) -> str:
        """Validate that url was sent and is not blank"""
        if not url or not isinstance(url, str) or not url.strip():
            raise ValueError('Campo "url" é obrigatório')
        return url.strip()

    @staticmethod
    def validate_url_format(url: str, max_length: int = 2048) -> str:
        """Validate absolute http(s) URL"""
        if len(url) > max_length:
            raise ValueError(f"URL muito longa. Máximo de {max_length} caracteres")

        parsed = urlparse(url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError(f"URL inválida: {url}")
        return url

    @classmethod
    def validate(cls, url: Optional[str]) -> str:
        return cls.validate_url_format(cls.validate_url_present(url))
