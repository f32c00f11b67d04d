"""One dashboard controller per admin session."""

import logging
from typing import Dict, Optional

from podsurvey.auth.identity import IdentityProvider
from podsurvey.dashboard.controller import DashboardController
from podsurvey.store import SurveyStore
from podsurvey.theme import ThemeState

logger = logging.getLogger("PodSurvey.dashboard")


class DashboardRegistry:
    """
    Keeps each session's controller alive between requests.

    Nothing is shared across sessions. A controller is dropped on logout,
    or once its session has expired in the identity store.
    """

    def __init__(self, store: SurveyStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity
        self._controllers: Dict[str, DashboardController] = {}

    def get(self, session_id: str) -> Optional[DashboardController]:
        return self._controllers.get(session_id)

    async def open(
        self,
        session_id: str,
        theme: Optional[ThemeState] = None,
        reload: bool = False,
    ) -> DashboardController:
        """
        Return the session's controller, creating and loading it on first use.

        With ``reload`` a cached controller fetches the surveys again.
        Controllers whose first load failed are not kept, so the next
        request starts over.
        """
        controller = self._controllers.get(session_id)
        if controller is not None:
            if theme is not None:
                controller.theme = theme
            if reload and not await controller.load():
                self.discard(session_id)
            return controller

        await self.prune()
        controller = DashboardController(self.store, self.identity, session_id, theme=theme)
        if await controller.load() and controller.loaded:
            self._controllers[session_id] = controller
            logger.debug(f"Dashboard opened for session {session_id[:8]}...")
        return controller

    async def prune(self) -> int:
        """Drop controllers whose session no longer exists. Returns how many went."""
        expired = [
            session_id
            for session_id in list(self._controllers)
            if await self.identity.get_session(session_id) is None
        ]
        for session_id in expired:
            self.discard(session_id)
        if expired:
            logger.info(f"Dropped {len(expired)} dashboards with expired sessions")
        return len(expired)

    def discard(self, session_id: str) -> None:
        self._controllers.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._controllers)
