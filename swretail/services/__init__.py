"""HTTP services for the SWRetail API."""

from .api_client import Client, merge_parameters
from .outcome import Err, Ok, TransportOutcome, classify_failure
from .response import Response

__all__ = [
    "Client",
    "Err",
    "Ok",
    "Response",
    "TransportOutcome",
    "classify_failure",
    "merge_parameters",
]
