"""
Pydantic models for catch-all responses.

Defines the echo envelope and the tagged choice between it and a
caller-supplied override body.
"""
import json  # Parseo del override ?body=
from datetime import datetime, timezone  # Timestamps en UTC
from enum import Enum  # Enumeración del tipo de cuerpo
from typing import Any, Callable, Dict, Optional  # Type hints

from pydantic import BaseModel, Field


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with milliseconds and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EchoEnvelope(BaseModel):
    """Default catch-all body reflecting the incoming request."""
    ok: bool = Field(True, description="Always true")
    method: str = Field(..., description="Request method")
    url: str = Field(..., description="Raw path plus query string")
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    body: Any = Field(None, description="Parsed request payload, null when empty")
    query: Dict[str, Any] = Field(default_factory=dict, description="Query parameters")
    timestamp: str = Field(default_factory=utc_timestamp, description="Response build time")
    delay: int = Field(0, description="Effective delay in milliseconds")

    def to_json(self) -> dict:
        """Wire form; ``delay`` is left out entirely when zero."""
        data = self.model_dump()
        if not self.delay:
            data.pop("delay")
        return data


class ResponseBodyKind(str, Enum):
    """Where a catch-all response body came from."""
    DEFAULT = "default"
    OVERRIDE = "override"
    OVERRIDE_TEXT = "override_text"


class ResponseBody(BaseModel):
    """Resolved catch-all body, ready to serialize."""
    kind: ResponseBodyKind
    content: Any = None

    @classmethod
    def default(cls, envelope: EchoEnvelope) -> "ResponseBody":
        return cls(kind=ResponseBodyKind.DEFAULT, content=envelope.to_json())

    @classmethod
    def override(cls, value: Any) -> "ResponseBody":
        return cls(kind=ResponseBodyKind.OVERRIDE, content=value)

    @classmethod
    def override_text(cls, raw: str) -> "ResponseBody":
        return cls(kind=ResponseBodyKind.OVERRIDE_TEXT, content={"message": raw})


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """json.loads that refuses the non-standard NaN/Infinity literals."""
    return json.loads(text, parse_constant=_reject_constant)


def resolve_response_body(
    raw_body: Optional[str],
    envelope_factory: Callable[[], EchoEnvelope]
) -> ResponseBody:
    """
    Decide the catch-all body.

    An absent or empty ``raw_body`` keeps the echo envelope. Otherwise the
    value is parsed as JSON and replaces the envelope; text that is not
    JSON is wrapped as ``{"message": raw_body}``.

    Args:
        raw_body: Raw ?body= value
        envelope_factory: Builds the echo envelope; only called when needed

    Returns:
        ResponseBody tagged with its origin
    """
    if not raw_body:
        return ResponseBody.default(envelope_factory())

    try:
        parsed = loads_strict(raw_body)
    except ValueError:
        return ResponseBody.override_text(raw_body)

    return ResponseBody.override(parsed)
