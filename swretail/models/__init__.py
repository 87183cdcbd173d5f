"""Request models for the SWRetail API client."""

from .options import BODY, HEADERS, JSON, QUERY, TIMEOUT, RequestOptions

__all__ = ["BODY", "HEADERS", "JSON", "QUERY", "TIMEOUT", "RequestOptions"]
