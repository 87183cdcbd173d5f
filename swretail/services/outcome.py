"""Classification of transport failures and the request result type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

import httpx

from swretail.exceptions import ApiException
from swretail.services.response import Response

T = TypeVar("T")


class TransportOutcome(str, Enum):
    """Kinds of failure a transport call can end with."""

    CONNECT_ERROR = "connect_error"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    OTHER_ERROR = "other_error"


def classify_failure(exception: Exception) -> TransportOutcome:
    """Map an ``httpx`` exception onto a transport outcome."""
    if isinstance(exception, (httpx.ConnectError, httpx.ConnectTimeout)):
        return TransportOutcome.CONNECT_ERROR
    if isinstance(exception, httpx.HTTPStatusError):
        status = exception.response.status_code
        if 400 <= status < 500:
            return TransportOutcome.CLIENT_ERROR
        if status >= 500:
            return TransportOutcome.SERVER_ERROR
    return TransportOutcome.OTHER_ERROR


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful request result."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed request result carrying the ApiException."""

    error: ApiException

    @property
    def is_ok(self) -> bool:
        return False


RequestResult = Union[Ok[Response], Err]
