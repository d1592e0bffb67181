"""
Typed network events built from raw Chrome DevTools Protocol payloads
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

REQUEST_EVENT = "requestWillBeSentExtraInfo"
RESPONSE_EVENT = "responseReceivedExtraInfo"
SUBSCRIBED_EVENTS = [f"Network.{REQUEST_EVENT}", f"Network.{RESPONSE_EVENT}"]


@dataclass(frozen=True)
class RequestSent:
    """A request hop. authority + path make up the URL that was requested."""
    request_id: Optional[str]
    authority: Optional[str] = None
    path: Optional[str] = None


@dataclass(frozen=True)
class ResponseReceived:
    request_id: Optional[str]
    status_code: Optional[int] = None


NetworkEvent = Union[RequestSent, ResponseReceived]


def _as_mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _as_status(value: Any) -> Optional[int]:
    # bool is an int subclass but never a status code
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def classify_event(name: str, payload: Any) -> Optional[NetworkEvent]:
    """
    Turn a raw protocol event into a RequestSent or ResponseReceived

    Missing fields come back as None instead of raising, so a partial
    payload still produces an event.

    Args:
        name: Event name, with or without the "Network." domain prefix
        payload: Event parameters as delivered by the CDP session

    Returns:
        The typed event, or None for event names we do not track
    """
    if not name:
        return None
    method = name.split(".", 1)[1] if name.startswith("Network.") else name

    params = _as_mapping(payload)
    request_id = _as_text(params.get("requestId"))

    if method == REQUEST_EVENT:
        headers = _as_mapping(params.get("headers"))
        return RequestSent(
            request_id=request_id,
            authority=_as_text(headers.get(":authority")),
            path=_as_text(headers.get(":path")),
        )

    if method == RESPONSE_EVENT:
        return ResponseReceived(
            request_id=request_id,
            status_code=_as_status(params.get("statusCode")),
        )

    return None
