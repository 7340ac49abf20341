"""미들웨어 모듈"""

from app.core.middlewares.context import (
    REQUEST_ID_HEADER,
    get_request_id,
    set_request_id,
)
from app.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "REQUEST_ID_HEADER",
    "get_request_id",
    "set_request_id",
]
