"""Typed wrapper around raw SWRetail HTTP responses."""

from __future__ import annotations

from typing import Any, Optional

import httpx


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


class Response:
    """Read-only view of an ``httpx.Response`` with its JSON body parsed once."""

    __slots__ = ("raw", "status_code", "headers", "content", "json")

    def __init__(self, raw: httpx.Response):
        object.__setattr__(self, "raw", raw)
        object.__setattr__(self, "status_code", raw.status_code)
        object.__setattr__(self, "headers", raw.headers)
        object.__setattr__(self, "content", raw.content)
        object.__setattr__(self, "json", None)
        self._parse_json_body()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.url}>"

    def _parse_json_body(self) -> None:
        """Decode the body as JSON; leave ``json`` as None when it is not JSON."""
        if not self.content:
            return
        try:
            parsed = self.raw.json(parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return
        object.__setattr__(self, "json", parsed)

    @property
    def text(self) -> str:
        return self.raw.text

    @property
    def url(self) -> str:
        return str(self.raw.url)

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return a top-level field of an object body."""
        if isinstance(self.json, dict):
            return self.json.get(key, default)
        return default
