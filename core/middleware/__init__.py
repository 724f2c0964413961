"""Middleware components for the admin service."""

from core.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
