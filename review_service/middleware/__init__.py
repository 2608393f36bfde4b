"""
Middleware modules for the Review Service
"""

from .correlation_id import CorrelationIdMiddleware, get_correlation_id, resolve_correlation_id

__all__ = ["CorrelationIdMiddleware", "get_correlation_id", "resolve_correlation_id"]
