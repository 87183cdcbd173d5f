"""Client for the SWRetail REST API."""

from swretail.exceptions import ApiException
from swretail.services import Client, Err, Ok, Response

request_api = Client.request_api
try_request_api = Client.try_request_api

__all__ = [
    "ApiException",
    "Client",
    "Err",
    "Ok",
    "Response",
    "request_api",
    "try_request_api",
]
