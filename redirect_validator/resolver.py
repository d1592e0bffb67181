"""
Reduce a correlated redirect chain to the final URL
"""
from typing import List, Optional

from redirect_validator.correlator import CorrelationState
from redirect_validator.events import RequestSent

def _hop_url(request: Optional[RequestSent]) -> str:
    # Absent header values count as empty, never as the text "None"
    if request is None:
        return ""
    return (request.authority or "") + (request.path or "")

def resolve_final(state: CorrelationState) -> str:
    """
    Final URL reached by the navigation

    The last retained request is the last hop of the redirect chain. Its
    authority and path are joined without a separator, so the result has
    no scheme ("example.com/page").

    Args:
        state: Snapshot of a sealed correlator

    Returns:
        Final URL, or "" if no request was retained
    """
    last_request = state.requests[-1] if state.requests else None
    return _hop_url(last_request)

def redirect_chain(state: CorrelationState) -> List[str]:
    """Every retained hop in arrival order"""
    return [_hop_url(request) for request in state.requests]
