"""Logging configuration with per-request ids."""
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional


request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def new_request_id() -> str:
    """Generate a short request id."""
    return uuid.uuid4().hex[:12]


class RequestIdFilter(logging.Filter):
    """Log filter that stamps records with the current request id."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        """Attach request_id to the log record."""
        record.request_id = request_id_var.get() or "-"
        return True


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    
    # Add request id filter to all handlers
    request_id_filter = RequestIdFilter()
    for handler in logging.root.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(request_id_filter)
