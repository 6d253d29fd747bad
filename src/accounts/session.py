"""
Active session.

A Session holds at most one signed-in UserProfile. It is a cached copy
persisted under the session key so a restart can restore the previous login.
It is not the source of truth: it only changes when the auth service begins or
ends a session or refreshes it after a profile update.

Lifecycle:
    session = Session(store)
    session.restore()   # at startup
    ...
    session.end()       # sign-out / teardown
"""

import logging

from src.store.exceptions import StoreCorrupt
from src.store.models import Collection
from src.store.store import KeyValueStore
from .types import UserAccount, UserProfile

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.key = store.key_for(Collection.SESSION)
        self._user: UserProfile | None = None

    @property
    def user(self) -> UserProfile | None:
        return self._user

    @property
    def is_signed_in(self) -> bool:
        return self._user is not None

    def restore(self) -> UserProfile | None:
        """Load the persisted session marker, discarding it if unreadable."""
        try:
            self._user = self.store.get(self.key, UserProfile)
        except StoreCorrupt as e:
            logger.warning(f"Discarding unreadable session marker: {e.reason}")
            self.store.clear(self.key)
            self._user = None
        return self._user

    def begin(self, user: UserProfile) -> None:
        if isinstance(user, UserAccount):
            user = user.profile
        self.store.set(self.key, user)
        self._user = user

    def end(self) -> None:
        self.store.clear(self.key)
        self._user = None
