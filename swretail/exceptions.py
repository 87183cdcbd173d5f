"""Exceptions raised by the SWRetail API client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from swretail.services.response import Response

_DETAIL_FIELDS = ("message", "extended", "error")


class ApiException(Exception):
    """Raised when the SWRetail API cannot be reached or reports an error."""

    def __init__(
        self,
        message: str,
        *,
        api_response: Optional["Response"] = None,
        error_code: Any = None,
    ):
        self.message = message
        self.api_response = api_response
        self.error_code = error_code
        super().__init__(message)

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status of the offending response, if any."""
        if self.api_response is None:
            return None
        return self.api_response.status_code

    @classmethod
    def from_response(cls, response: "Response") -> "ApiException":
        """Build an exception from a response carrying an ``errorcode`` body."""
        error_code = response.get("errorcode")
        detail = next(
            (response.get(name) for name in _DETAIL_FIELDS if response.get(name)),
            None,
        )
        message = f"API error {error_code}"
        if detail:
            message = f"{message}: {detail}"
        return cls(message, api_response=response, error_code=error_code)
