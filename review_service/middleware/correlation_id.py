"""
Request correlation for log entries.

Each request is tagged with an id taken from the configured header when the
client sends a usable one, otherwise a fresh UUID4. The id is visible to the
logger for the lifetime of the request only and is echoed on the response.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from review_service.core.config import config

# Client-supplied ids end up in every log line of the request
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}", re.ASCII)

_current_id: ContextVar[Optional[str]] = ContextVar("review_request_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the request being served, None outside a request"""
    return _current_id.get()


def resolve_correlation_id(supplied: Optional[str]) -> str:
    """Keep a well-formed client id, replace anything else with a new UUID4"""
    if supplied and _ACCEPTED_ID.fullmatch(supplied):
        return supplied
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id to the request context and the response headers"""

    async def dispatch(self, request: Request, call_next):
        header = config.correlation_id_header
        correlation_id = resolve_correlation_id(request.headers.get(header))
        request.state.correlation_id = correlation_id

        token = _current_id.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            _current_id.reset(token)

        response.headers[header] = correlation_id
        return response
