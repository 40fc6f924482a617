"""
Client session context.

Owns everything the authenticated view needs: persisted login, history,
delete selection, notices and the lookup orchestrator. Created once per
client process, hydrated from storage, and handed to whatever drives the
UI (the CLI here).

Login and logout are explicit state transitions rather than navigation:
``enter_authenticated_session`` stores the login response under "user",
``end_session`` removes it. History survives logout.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from ipmap.client.auth_client import AuthClient
from ipmap.client.errors import LoginFailedError, NotAuthenticatedError
from ipmap.client.geo_client import GeoLookupClient
from ipmap.client.history import HistoryStore
from ipmap.client.lookup import LookupOrchestrator
from ipmap.client.notices import NoticeBoard
from ipmap.client.selection import SelectionState
from ipmap.client.storage import KeyValueStorage
from ipmap.schemas.auth import LoginResponse, PublicUser

logger = logging.getLogger(__name__)

USER_KEY = "user"


class ClientSession:
    """Lifecycle and state of one client."""

    def __init__(
        self,
        storage: KeyValueStorage,
        auth_client: AuthClient,
        geo_client: GeoLookupClient,
        notice_seconds: float = 3.0,
    ):
        self._storage = storage
        self._auth_client = auth_client

        self.notices = NoticeBoard(dismiss_after=notice_seconds)
        self.history = HistoryStore(storage)
        self.selection = SelectionState(self.history)
        self.lookup = LookupOrchestrator(geo_client, self.history, self.notices)

        self.login_state: Optional[LoginResponse] = None

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────

    def hydrate(self) -> "ClientSession":
        """Restore the stored login, if any. A malformed entry counts as logged out."""
        raw = self._storage.get(USER_KEY)
        if raw is None:
            self.login_state = None
            return self

        try:
            self.login_state = LoginResponse.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed stored session: {e.error_count()} errors")
            self.login_state = None
        return self

    @property
    def is_authenticated(self) -> bool:
        return self.login_state is not None

    @property
    def user(self) -> Optional[PublicUser]:
        return self.login_state.user if self.login_state else None

    def require_authenticated(self) -> LoginResponse:
        if self.login_state is None:
            raise NotAuthenticatedError("No stored session")
        return self.login_state

    def enter_authenticated_session(self, response: LoginResponse) -> None:
        self._storage.set(USER_KEY, response.model_dump_json())
        self.login_state = response
        logger.info(f"Entered session for {response.user.email}")

    def end_session(self) -> None:
        """Forget the stored login and any transient view state."""
        self._storage.remove(USER_KEY)
        self.login_state = None
        self.selection.exit_delete_mode()
        self.notices.dismiss()
        logger.info("Session ended")

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Authenticate and enter the session.

        Raises:
            LoginFailedError: Any failure; a single notice is shown and no state changes
        """
        try:
            response = await self._auth_client.login(email, password)
        except LoginFailedError:
            self.notices.show(LoginFailedError.notice)
            raise
        self.enter_authenticated_session(response)
        return response

    # ─────────────────────────────────────────────────────────────────
    # History deletion
    # ─────────────────────────────────────────────────────────────────

    def delete_selected(self) -> List[str]:
        """Remove the selected entries, then clear the selection and leave delete mode."""
        remaining = self.history.remove(self.selection.selected)
        self.selection.exit_delete_mode()
        return remaining
