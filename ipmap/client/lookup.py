"""
Lookup orchestration between the input, the geolocation provider and history.

Only the digit grouping of a subject is checked: "999.999.999.999" is
accepted and sent to the provider, which is left to reject it.

Each request takes a generation number. When several lookups overlap,
only the response for the most recently issued request is applied;
older ones are dropped.
"""

import logging
import re
from typing import Awaitable, Callable, Optional, Tuple

from ipmap.client.errors import NetworkError, SubjectValidationError
from ipmap.client.geo_client import GeoLookupClient
from ipmap.client.history import HistoryStore
from ipmap.client.notices import NoticeBoard
from ipmap.schemas.geo import GeoLocation

logger = logging.getLogger(__name__)

DOTTED_QUAD = re.compile(r"^(?:\d{1,3}\.){3}\d{1,3}$")


def is_dotted_quad(subject: str) -> bool:
    """Four dot-separated groups of 1-3 digits. Octet values are not range-checked."""
    return DOTTED_QUAD.fullmatch(subject) is not None


class LookupOrchestrator:
    """Drives the search panel: current location, search, clear, history re-lookup."""

    def __init__(
        self,
        geo_client: GeoLookupClient,
        history: HistoryStore,
        notices: NoticeBoard,
    ):
        self._geo_client = geo_client
        self._history = history
        self._notices = notices
        self._generation = 0

        self.location: Optional[GeoLocation] = None
        self.pending_input = ""

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    async def _resolve(
        self,
        fetch: Callable[[], Awaitable[GeoLocation]],
    ) -> Tuple[GeoLocation, bool]:
        """
        Run ``fetch`` and display its result if no newer request was issued.

        Returns the location and whether it was applied.

        Raises:
            NetworkError: The request failed (a notice has been shown)
        """
        generation = self._next_generation()
        try:
            location = await fetch()
        except NetworkError:
            if generation == self._generation:
                self._notices.show(NetworkError.notice)
            raise

        if generation != self._generation:
            logger.debug(f"Discarding stale lookup response (generation {generation} < {self._generation})")
            return location, False

        self.location = location
        return location, True

    async def load_current_location(self) -> Optional[GeoLocation]:
        """Center on the requester's own location (initial view)."""
        location, applied = await self._resolve(self._geo_client.current_location)
        return location if applied else None

    async def search(self, subject: Optional[str] = None) -> Optional[GeoLocation]:
        """
        Look up ``subject`` (or the pending input) and record it in history.

        Raises:
            SubjectValidationError: Not a dotted quad; nothing was requested
            NetworkError: The provider call failed; history is unchanged
        """
        if subject is not None:
            self.pending_input = subject
        ip = self.pending_input

        if not is_dotted_quad(ip):
            self._notices.show(SubjectValidationError.notice)
            raise SubjectValidationError(ip)

        location, applied = await self._resolve(lambda: self._geo_client.lookup(ip))

        # Superseded lookups are still recorded; only the display skips them
        self._history.add(ip)
        if not applied:
            return None

        self.pending_input = ""
        return location

    async def reset(self) -> Optional[GeoLocation]:
        """Clear the input and go back to the requester's own location."""
        self.pending_input = ""
        return await self.load_current_location()

    async def show_history_entry(self, ip: str) -> Optional[GeoLocation]:
        """Re-display a history entry. History itself is not touched."""
        location, applied = await self._resolve(lambda: self._geo_client.lookup(ip))
        return location if applied else None
