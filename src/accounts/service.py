"""
Auth Service

Sign-up, sign-in and sign-out over the users collection, plus profile
updates. The service owns no state of its own: the signed-in user lives on
the Session passed in at construction.

States:
    SignedOut --sign_up / sign_in--> SignedIn(user) --sign_out--> SignedOut
"""

import logging

from asgiref.sync import sync_to_async
from django.contrib.auth.hashers import check_password, make_password

from src.store.models import Collection
from src.store.store import KeyValueStore, simulate_latency
from .exceptions import DuplicateUser, InvalidCredentials, UserNotFound
from .session import Session
from .types import ProfilePatch, UserAccount, UserProfile, merge_profile, normalize_email

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: KeyValueStore, session: Session):
        self.store = store
        self.session = session

    def _load_users(self) -> list[UserAccount]:
        return self.store.load(Collection.USERS, UserAccount)

    def _save_users(self, users: list[UserAccount]) -> None:
        self.store.save(Collection.USERS, users)

    async def sign_up(self, email: str, password: str) -> UserProfile:
        """
        Create an account and sign it in.

        Args:
            email: Account email, matched case-insensitively
            password: Plain password, stored hashed

        Returns:
            The new user's profile

        Raises:
            DuplicateUser: If an account with this email exists
            InvalidCredentials: If email or password is empty
        """
        await simulate_latency("auth")
        email = normalize_email(email or "")
        if not email or not password:
            raise InvalidCredentials()
        return await sync_to_async(self._sign_up)(email, password)

    def _sign_up(self, email: str, password: str) -> UserProfile:
        users = self._load_users()
        if any(u.email == email for u in users):
            raise DuplicateUser(email)

        account = UserAccount(
            email=email,
            username=email.split("@")[0],
            password_hash=make_password(password),
        )
        users.append(account)
        self._save_users(users)

        profile = account.profile
        self.session.begin(profile)
        logger.info(f"Signed up user {profile.id}")
        return profile

    async def sign_in(self, email: str, password: str) -> UserProfile:
        """Sign in an existing account. Raises InvalidCredentials on any mismatch."""
        await simulate_latency("auth")
        return await sync_to_async(self._sign_in)(normalize_email(email or ""), password)

    def _sign_in(self, email: str, password: str) -> UserProfile:
        account = next((u for u in self._load_users() if u.email == email), None)
        if account is None or not password or not check_password(password, account.password_hash):
            logger.info("Rejected sign-in attempt")
            raise InvalidCredentials()

        profile = account.profile
        self.session.begin(profile)
        logger.info(f"Signed in user {profile.id}")
        return profile

    async def sign_out(self) -> None:
        await sync_to_async(self.session.end)()

    def get_session(self) -> UserProfile | None:
        """The cached signed-in user, not re-checked against the users collection."""
        return self.session.user

    async def update_profile(self, user_id: str, patch: ProfilePatch) -> UserProfile:
        """
        Merge a patch into a stored profile.

        Refreshes the session copy when the patched user is the one signed in.

        Raises:
            UserNotFound: If no account has this id
        """
        await simulate_latency("update")
        return await sync_to_async(self._update_profile)(user_id, patch)

    def _update_profile(self, user_id: str, patch: ProfilePatch) -> UserProfile:
        users = self._load_users()
        for i, account in enumerate(users):
            if account.id == user_id:
                break
        else:
            raise UserNotFound(user_id)

        updated = merge_profile(account, patch)
        users[i] = updated
        self._save_users(users)

        profile = updated.profile
        current = self.session.user
        if current is not None and current.id == user_id:
            self.session.begin(profile)
        return profile
