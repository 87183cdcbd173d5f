"""Request option keys and the per-call options model."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Option keys understood by ``httpx.Client.request``.
QUERY = "params"
JSON = "json"
HEADERS = "headers"
TIMEOUT = "timeout"
BODY = "content"


class RequestOptions(BaseModel):
    """Options that apply to a single API call only."""

    model_config = ConfigDict(frozen=True)

    query: Optional[Any] = Field(default=None, description="Query string")
    data: Optional[Any] = Field(default=None, description="JSON body")

    @classmethod
    def build(cls, query: Any = None, data: Any = None) -> "RequestOptions":
        """Keep only the non-empty parts of a call's query and body."""
        return cls(query=query or None, data=data or None)

    def to_request_kwargs(self) -> Dict[str, Any]:
        """Serialize into ``httpx`` request keyword arguments."""
        kwargs: Dict[str, Any] = {}
        if self.query:
            kwargs[QUERY] = self.query
        if self.data:
            kwargs[JSON] = self.data
        return kwargs
