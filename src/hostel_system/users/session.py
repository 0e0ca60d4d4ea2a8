from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional

from ..core.constants import DEFAULT_SESSION_KEY
from ..core.enums import SessionState
from .model import SessionUser

logger = logging.getLogger(__name__)


class SessionManager:
    """Session state machine: LOADING -> ANONYMOUS | AUTHENTICATED.

    ``storage`` is any mutable mapping; in the web app it is Flask's signed
    cookie session, in tests a plain dict.
    """

    def __init__(self, storage: MutableMapping[str, Any], *, key: str = DEFAULT_SESSION_KEY):
        self._storage = storage
        self._key = key
        self.state = SessionState.LOADING
        self.user: Optional[SessionUser] = None

    def load(self) -> Optional[SessionUser]:
        raw = self._storage.get(self._key)
        if raw is None:
            return self._to_anonymous()

        try:
            user = SessionUser.from_record(raw)
        except (KeyError, TypeError, ValueError):
            logger.warning("Discarding malformed session record")
            self._storage.pop(self._key, None)
            return self._to_anonymous()

        self.user = user
        self.state = SessionState.AUTHENTICATED
        return user

    def login(self, user: SessionUser) -> SessionUser:
        self._storage[self._key] = user.to_record()
        self.user = user
        self.state = SessionState.AUTHENTICATED
        return user

    def logout(self) -> None:
        self._storage.pop(self._key, None)
        self._to_anonymous()

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED

    def _to_anonymous(self) -> None:
        self.user = None
        self.state = SessionState.ANONYMOUS
        return None
