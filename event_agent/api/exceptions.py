"""
Exceções customizadas da API
"""
from fastapi import HTTPException


class ApiError(HTTPException):
    """HTTP error rendered in the same envelope as extraction failures"""
    error_code: str = "API_ERROR"


class InvalidUrlError(ApiError):
    error_code = "INVALID_URL"

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class ExtractionPipelineNotInitialized(ApiError):
    error_code = "PIPELINE_NOT_INITIALIZED"

    def __init__(self):
        super().__init__(status_code=503, detail="Extraction pipeline not initialized")


class ApplicationStartupIncomplete(ApiError):
    error_code = "STARTUP_INCOMPLETE"

    def __init__(self):
        super().__init__(status_code=503, detail="Application is still starting up")


class InternalServerError(ApiError):
    error_code = "INTERNAL_ERROR"

    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=f"Internal server error: {detail}")
