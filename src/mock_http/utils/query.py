"""
Query directive parsing.

Malformed values never raise: they resolve to the endpoint default.
"""
import asyncio
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

DEFAULT_STATUS = 200

# Longest wait pause() will honour, in milliseconds (about 24.8 days)
MAX_DELAY_MS = 2**31 - 1


class QueryDirectives(BaseModel):
    """Delay, status and body override read from one request's query string."""
    delay_ms: int = Field(0, description="Milliseconds to wait before responding")
    status: int = Field(DEFAULT_STATUS, description="HTTP status code to send")
    body: Optional[str] = Field(None, description="Raw ?body= value, if any")


def parse_int_param(raw: Optional[str], default: int) -> int:
    """
    Read an integer query value.

    Only the leading digits count ("12abc" -> 12, "2.5" -> 2). A missing
    value, one without leading digits, one too long to convert, or one
    that reads as zero resolves to ``default``.

    Args:
        raw: Raw query value (None when absent)
        default: Value used when ``raw`` yields nothing usable

    Returns:
        Parsed integer or the default
    """
    if raw is None:
        return default

    match = _LEADING_INT.match(raw)
    if not match:
        return default

    try:
        value = int(match.group(1))
    except ValueError:
        # past the interpreter's int digit limit
        return default
    return value or default


def resolve_directives(
    query: Mapping[str, str],
    default_delay_ms: int = 0,
    default_status: int = DEFAULT_STATUS
) -> QueryDirectives:
    """Resolve the delay/status/body directives independently of each other."""
    return QueryDirectives(
        delay_ms=parse_int_param(query.get("delay"), default_delay_ms),
        status=parse_int_param(query.get("status"), default_status),
        body=query.get("body"),
    )


def query_mapping(items: List[tuple]) -> Dict[str, Union[str, List[str]]]:
    """
    Collapse query pairs into a mapping.

    A key seen once maps to its value; a repeated key maps to the list of
    its values in order.
    """
    result: Dict[str, Any] = {}
    for key, value in items:
        if key not in result:
            result[key] = value
        elif isinstance(result[key], list):
            result[key].append(value)
        else:
            result[key] = [result[key], value]
    return result


def delay_seconds(delay_ms: int) -> float:
    """Seconds to wait for ``delay_ms``, clamped to 0..MAX_DELAY_MS."""
    return min(max(delay_ms, 0), MAX_DELAY_MS) / 1000


async def pause(delay_ms: int) -> None:
    """Suspend the current request for ``delay_ms`` milliseconds."""
    await asyncio.sleep(delay_seconds(delay_ms))
