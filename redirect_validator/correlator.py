"""
Decide which network events belong to the navigation under test

The browser reports every request of the page: the navigation itself, but
also ads, trackers and prefetches, all interleaved. There is no explicit
"this is the navigation" marker in the ExtraInfo events, so the correlator
latches on to the identifier of the first event it sees and treats that as
the navigation. Redirect hops of one navigation reuse the same identifier,
so they accumulate in arrival order. As soon as a request with another
identifier shows up the request side is closed for good.

Responses are kept for every identifier, even after closing. This
asymmetry is how the validator has always behaved and changing it would
change which traffic is reported as the chain.

The decision depends on arrival order: replaying the same events in a
different order can latch a different identifier.
"""
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from redirect_validator.events import NetworkEvent, RequestSent, ResponseReceived
from redirect_validator.utils import setup_logging

logger = setup_logging(__name__)


@dataclass(frozen=True)
class CorrelationState:
    """Immutable view of what a correlator retained"""
    primary_request_id: Optional[str] = None
    requests: Tuple[RequestSent, ...] = ()
    responses: Tuple[ResponseReceived, ...] = ()
    closed: bool = False

    def responses_for(self, request_id: Optional[str]) -> List[ResponseReceived]:
        return [response for response in self.responses if response.request_id == request_id]


class NavigationCorrelator:
    """Latch-on-first correlator for a single navigation attempt"""

    def __init__(self):
        self._lock = threading.Lock()
        self._primary_request_id: Optional[str] = None
        self._latched = False
        self._requests: List[RequestSent] = []
        self._responses: List[ResponseReceived] = []
        self._closed = False
        self._sealed = False

    @property
    def primary_request_id(self) -> Optional[str]:
        return self._primary_request_id

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def sealed(self) -> bool:
        return self._sealed

    def ingest(self, event: NetworkEvent) -> bool:
        """
        Feed one event, in arrival order

        Args:
            event: Classified network event

        Returns:
            True if the event was retained
        """
        with self._lock:
            if self._sealed:
                logger.debug(f"Window closed, dropping {event}")
                return False

            if not self._latched:
                self._latched = True
                self._primary_request_id = event.request_id
                logger.debug(f"Primary request id: {event.request_id}")
                self._retain(event)
                return True

            if isinstance(event, ResponseReceived):
                self._responses.append(event)
                return True

            if self._closed:
                return False

            if event.request_id != self._primary_request_id:
                self._closed = True
                logger.debug(
                    f"Request {event.request_id} is not {self._primary_request_id}, "
                    f"closing after {len(self._requests)} hop(s)"
                )
                return False

            self._requests.append(event)
            return True

    def _retain(self, event: NetworkEvent):
        if isinstance(event, RequestSent):
            self._requests.append(event)
        else:
            self._responses.append(event)

    def seal(self):
        """End the observation window. Later events are dropped."""
        with self._lock:
            self._sealed = True

    def snapshot(self) -> CorrelationState:
        with self._lock:
            return CorrelationState(
                primary_request_id=self._primary_request_id,
                requests=tuple(self._requests),
                responses=tuple(self._responses),
                closed=self._closed,
            )
