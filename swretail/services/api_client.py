"""HTTP client wrapper around the SWRetail REST API."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx
from loguru import logger

from swretail.config import Settings, get_settings
from swretail.exceptions import ApiException
from swretail.models.options import RequestOptions
from swretail.services.outcome import (
    Err,
    Ok,
    RequestResult,
    TransportOutcome,
    classify_failure,
)
from swretail.services.response import Response


def merge_parameters(
    defaults: Mapping[str, Any], overrides: Mapping[str, Any]
) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into ``defaults``; overrides win at the leaves."""
    merged: Dict[str, Any] = dict(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_parameters(current, value)
        else:
            merged[key] = value
    return merged


class Client:
    """Synchronous SWRetail client handling auth, response mapping and errors."""

    def __init__(
        self,
        parameters: Optional[Mapping[str, Any]] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._request_options: Dict[str, Any] = {}
        self.request_exception: Optional[Exception] = None

        defaults: Dict[str, Any] = {
            "base_url": self._settings.base_url,
            "auth": (self._settings.username, self._settings.password),
            "headers": {"Accept": "application/json"},
            "timeout": self._settings.timeout,
            "follow_redirects": True,
        }
        merged = merge_parameters(defaults, parameters or {})

        event_hooks = {
            name: list(hooks) for name, hooks in merged.pop("event_hooks", {}).items()
        }
        event_hooks.setdefault("response", []).append(self._on_response)

        self._client = httpx.Client(event_hooks=event_hooks, **merged)

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _on_response(self, response: httpx.Response) -> None:
        """Response hook: load the body and raise for 4xx/5xx statuses."""
        response.read()
        logger.debug(
            "SWRetail response {status} from {url}",
            status=response.status_code,
            url=str(response.url),
        )
        if response.is_error:
            response.raise_for_status()

    def _map_response(self, response: httpx.Response) -> Response:
        return Response(response)

    def set_option(self, key: str, value: Any) -> "Client":
        """Set a request option (unconditionally) for every call on this client."""
        self._request_options[key] = value
        return self

    def api_request(
        self, method: str, path: str, options: Optional[RequestOptions] = None
    ) -> Response:
        """Make the request with the configured options, relative to the base URL."""
        method = method.upper()
        path = path.lstrip("/")

        kwargs = dict(self._request_options)
        if options is not None:
            kwargs.update(options.to_request_kwargs())

        logger.debug("SWRetail request {method} {path}", method=method, path=path)
        raw = self._client.request(method, path, **kwargs)
        return self._map_response(raw)

    def get_api_response(
        self, method: str, path: str, query: Any = None, data: Any = None
    ) -> Response:
        """Do a request with an optional query string and JSON body."""
        options = RequestOptions.build(query=query, data=data)
        return self.api_request(method, path, options)

    @classmethod
    def request_api(
        cls,
        method: str,
        path: str,
        query: Any = None,
        data: Any = None,
        *,
        parameters: Optional[Mapping[str, Any]] = None,
        settings: Optional[Settings] = None,
    ) -> Response:
        """Create a new client, do the request and handle common failures.

        Raises ``ApiException`` on connection faults and on error bodies.
        Other transport failures propagate unchanged.
        """
        with cls(parameters, settings) as client:
            try:
                response = client.get_api_response(method, path, query, data)
            except httpx.HTTPError as exc:
                response = client.handle_request_exception(exc)

            client.handle_response_errors(response)
        return response

    @classmethod
    def try_request_api(
        cls,
        method: str,
        path: str,
        query: Any = None,
        data: Any = None,
        *,
        parameters: Optional[Mapping[str, Any]] = None,
        settings: Optional[Settings] = None,
    ) -> RequestResult:
        """Like ``request_api`` but return ``Ok``/``Err`` instead of raising ``ApiException``."""
        try:
            response = cls.request_api(
                method, path, query, data, parameters=parameters, settings=settings
            )
        except ApiException as exc:
            return Err(exc)
        return Ok(response)

    def handle_request_exception(self, exception: httpx.HTTPError) -> Response:
        """Recover the response from a 4xx/5xx failure, or raise."""
        self.request_exception = exception

        outcome = classify_failure(exception)
        if outcome is TransportOutcome.CONNECT_ERROR:
            logger.error("SWRetail connection failed: {error}", error=str(exception))
            raise ApiException(str(exception)) from exception
        if outcome in (TransportOutcome.CLIENT_ERROR, TransportOutcome.SERVER_ERROR):
            raw = exception.response  # type: ignore[attr-defined]
            logger.warning(
                "SWRetail returned {status} ({outcome})",
                status=raw.status_code,
                outcome=outcome.value,
            )
            return self._map_response(raw)
        raise exception

    def handle_response_errors(self, response: Response) -> None:
        """Raise ``ApiException`` when the body reports an error."""
        code = response.get("errorcode")
        if code and code != "0":
            logger.warning(
                "SWRetail error code {code} from {url}",
                code=code,
                url=response.url,
            )
            raise ApiException.from_response(response)
        if response.get("status") == "error":
            extended = response.get("extended")
            logger.warning("SWRetail status error: {extended}", extended=extended)
            raise ApiException(f"Status Error: {extended}", api_response=response)
