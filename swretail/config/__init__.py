"""Configuration helpers for the SWRetail API client."""

from .settings import get_settings, Settings

__all__ = ["get_settings", "Settings"]
