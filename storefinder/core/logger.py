from __future__ import annotations
import logging
from typing import Any, Dict

from storefinder.core.config import settings


class StructuredLogger:
    def __init__(self, name: str = "storefinder.service", level: str = settings.LOG_LEVEL):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        # Own handler only; root handlers configured by the host must not repeat each line.
        self.logger.propagate = False
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            self.logger.addHandler(handler)

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        request_id: str | None = None,
        extra: Dict[str, Any] | None = None,
    ) -> None:
        """Logs an API request with structured fields."""
        log_data = {
            "type": "api_request",
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
            "request_id": request_id,
        }
        if extra:
            log_data.update(extra)
        self.logger.info(f"Structured log: {log_data}")

    def log_filter(
        self,
        criteria: Dict[str, Any],
        total_stores: int,
        matched: int,
        request_id: str | None = None,
    ) -> None:
        """Logs the outcome of one store filtering pass."""
        log_data = {
            "type": "store_filter",
            "criteria": criteria,
            "total_stores": total_stores,
            "matched": matched,
            "request_id": request_id,
        }
        self.logger.debug(f"Structured log: {log_data}")

    def log_error(
        self,
        message: str,
        error: Exception | None = None,
        request_id: str | None = None,
        extra: Dict[str, Any] | None = None,
    ) -> None:
        """Logs an error with the exception type and message if available."""
        log_data = {
            "type": "api_error",
            "message": message,
            "request_id": request_id,
            "error_type": type(error).__name__ if error else None,
            "error": str(error) if error else None,
        }
        if extra:
            log_data.update(extra)
        self.logger.error(f"Structured error: {log_data}")


service_logger = StructuredLogger()
