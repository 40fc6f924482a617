"""
Transient multi-select state for deleting history entries.
"""

import logging
from typing import Container, FrozenSet, Set

logger = logging.getLogger(__name__)


class SelectionState:
    """
    Entries marked for deletion, plus whether delete mode is on.

    Never persisted. Leaving delete mode always empties the selection.
    """

    def __init__(self, history: Container[str]):
        """
        Args:
            history: Current history; only its members can be selected
        """
        self._history = history
        self._selected: Set[str] = set()
        self.delete_mode = False

    def _prune(self) -> None:
        # History may shrink without going through this object
        self._selected = {ip for ip in self._selected if ip in self._history}

    @property
    def selected(self) -> FrozenSet[str]:
        self._prune()
        return frozenset(self._selected)

    def toggle(self, ip: str) -> bool:
        """Flip membership of ``ip``. Returns whether it is now selected."""
        self._prune()
        if ip in self._selected:
            self._selected.discard(ip)
            return False
        if ip not in self._history:
            logger.debug(f"Ignoring selection of {ip}: not in history")
            return False
        self._selected.add(ip)
        return True

    def clear(self) -> None:
        self._selected.clear()

    def enter_delete_mode(self) -> None:
        self.delete_mode = True

    def exit_delete_mode(self) -> None:
        self.delete_mode = False
        self.clear()

    def toggle_delete_mode(self) -> bool:
        if self.delete_mode:
            self.exit_delete_mode()
        else:
            self.enter_delete_mode()
        return self.delete_mode

    def __len__(self) -> int:
        return len(self.selected)

    def __contains__(self, ip: object) -> bool:
        return ip in self.selected
