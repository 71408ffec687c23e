"""
Utility functions para a API
"""
import time
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


def format_response_time(start_time: float) -> float:
    """Format response time com precisão de 3 casas decimais"""
    return round(time.time() - start_time, 3)


def create_error_response(message: str, error_code: str = "INTERNAL_ERROR") -> Dict[str, Any]:
    """Create standardized error response"""
    return {
        "success": False,
        "error": message,
        "error_code": error_code,
        "timestamp": time.time()
    }


def log_performance_metrics(
    operation: str,
    execution_time: float,
    additional_metrics: Optional[Dict[str, Any]] = None
):
    """Log performance metrics"""
    metrics = {
        "operation": operation,
        "execution_time": execution_time,
        "timestamp": time.time()
    }

    if additional_metrics:
        metrics.update(additional_metrics)

    logger.info(f"Performance metrics: {metrics}")
