"""
Transient user-facing notices.

A notice replaces any notice already showing and is dismissed after a
fixed interval on the running event loop.
"""

import asyncio
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DISMISS_SECONDS = 3.0


class NoticeBoard:
    """Holds at most one notice at a time."""

    def __init__(self, dismiss_after: float = DEFAULT_DISMISS_SECONDS):
        self.dismiss_after = dismiss_after
        self.current: Optional[str] = None
        self._timer: Optional[asyncio.TimerHandle] = None

    def show(self, message: str) -> None:
        """Display ``message``; it clears itself after ``dismiss_after`` seconds."""
        self._cancel_timer()
        self.current = message
        logger.info(f"Notice: {message}")

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop (synchronous caller): the notice stays until replaced or dismissed
            return
        self._timer = loop.call_later(self.dismiss_after, self.dismiss)

    def dismiss(self) -> None:
        self._cancel_timer()
        self.current = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
