import json
from typing import Callable, List

import httpx
import pytest

from swretail.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        SWRETAIL_ENDPOINT="https://api.example.com/v1//",
        SWRETAIL_USERNAME="user",
        SWRETAIL_PASSWORD="secret",
    )


@pytest.fixture()
def sent() -> List[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture()
def mock_api(sent) -> Callable[..., dict]:
    """Build client parameters routing every request to a canned reply."""

    def build(status: int = 200, body=None, raises: Exception = None) -> dict:
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if raises is not None:
                raise raises
            if body is None:
                return httpx.Response(status)
            if isinstance(body, bytes):
                return httpx.Response(status, content=body)
            return httpx.Response(status, content=json.dumps(body).encode())

        return {"transport": httpx.MockTransport(handler)}

    return build
