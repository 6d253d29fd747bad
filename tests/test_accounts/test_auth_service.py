# tests/test_accounts/test_auth_service.py
import pytest
from asgiref.sync import sync_to_async
from django.test import TestCase

from src.accounts.exceptions import DuplicateUser, InvalidCredentials, UserNotFound
from src.accounts.service import AuthService
from src.accounts.session import Session
from src.accounts.types import ProfilePatch, UserAccount
from src.compositions.choices import Complexity, Instrument, SubscriptionTier
from src.store.models import Collection
from src.store.store import KeyValueStore


class TestAuthService(TestCase):
    """Tests for sign-up, sign-in, sign-out and profile updates."""

    def setUp(self):
        self.store = KeyValueStore(key_prefix="ariomuse_")
        self.session = Session(self.store)
        self.auth = AuthService(self.store, self.session)

    async def stored_users(self) -> list[UserAccount]:
        return await sync_to_async(self.store.load)(Collection.USERS, UserAccount)

    async def test_sign_up_creates_free_unonboarded_user(self):
        user = await self.auth.sign_up("a@x.com", "pw")

        assert user.email == "a@x.com"
        assert user.username == "a"
        assert user.onboarding_completed is False
        assert user.subscription_tier == SubscriptionTier.FREE

    async def test_sign_up_then_get_session_returns_same_user(self):
        user = await self.auth.sign_up("a@x.com", "pw")
        assert self.auth.get_session() == user

    async def test_sign_up_stores_hashed_password(self):
        await self.auth.sign_up("a@x.com", "pw")
        users = await self.stored_users()
        assert len(users) == 1
        assert users[0].password_hash
        assert users[0].password_hash != "pw"

    async def test_sign_up_duplicate_raises_without_writing(self):
        await self.auth.sign_up("a@x.com", "pw")
        before = await self.stored_users()

        with pytest.raises(DuplicateUser):
            await self.auth.sign_up("a@x.com", "other")

        assert await self.stored_users() == before

    async def test_sign_up_duplicate_ignores_case(self):
        await self.auth.sign_up("a@x.com", "pw")
        with pytest.raises(DuplicateUser):
            await self.auth.sign_up("A@X.COM", "pw")

    async def test_sign_up_requires_email_and_password(self):
        with pytest.raises(InvalidCredentials):
            await self.auth.sign_up("", "pw")
        with pytest.raises(InvalidCredentials):
            await self.auth.sign_up("a@x.com", "")

    async def test_sign_out_then_get_session_returns_none(self):
        await self.auth.sign_up("a@x.com", "pw")
        await self.auth.sign_out()
        assert self.auth.get_session() is None

    async def test_sign_out_when_signed_out_is_noop(self):
        await self.auth.sign_out()
        assert self.auth.get_session() is None

    async def test_sign_in_with_correct_password(self):
        created = await self.auth.sign_up("a@x.com", "pw")
        await self.auth.sign_out()

        user = await self.auth.sign_in("A@x.com", "pw")

        assert user.id == created.id
        assert self.auth.get_session().id == created.id

    async def test_sign_in_unknown_email_raises(self):
        with pytest.raises(InvalidCredentials):
            await self.auth.sign_in("nobody@x.com", "pw")

    async def test_sign_in_wrong_password_raises(self):
        await self.auth.sign_up("a@x.com", "pw")
        await self.auth.sign_out()

        with pytest.raises(InvalidCredentials):
            await self.auth.sign_in("a@x.com", "wrong")
        assert self.auth.get_session() is None

    async def test_update_profile_merges_and_persists(self):
        user = await self.auth.sign_up("a@x.com", "pw")

        updated = await self.auth.update_profile(
            user.id,
            ProfilePatch(
                primary_instrument=Instrument.PIANO,
                experience_level=Complexity.INTERMEDIATE,
                onboarding_completed=True,
            ),
        )

        assert updated.primary_instrument == Instrument.PIANO
        assert updated.onboarding_completed is True
        assert updated.email == "a@x.com"
        stored = (await self.stored_users())[0]
        assert stored.experience_level == Complexity.INTERMEDIATE
        assert stored.password_hash

    async def test_update_profile_refreshes_active_session(self):
        user = await self.auth.sign_up("a@x.com", "pw")
        await self.auth.update_profile(user.id, ProfilePatch(username="composer"))

        assert self.auth.get_session().username == "composer"
        restored = await sync_to_async(Session(self.store).restore)()
        assert restored.username == "composer"

    async def test_update_profile_leaves_other_session_alone(self):
        other = await self.auth.sign_up("b@x.com", "pw")
        await self.auth.sign_up("a@x.com", "pw")

        await self.auth.update_profile(other.id, ProfilePatch(username="bee"))

        assert self.auth.get_session().email == "a@x.com"
        assert self.auth.get_session().username == "a"

    async def test_update_profile_unknown_user_raises(self):
        with pytest.raises(UserNotFound):
            await self.auth.update_profile("missing", ProfilePatch(username="x"))
