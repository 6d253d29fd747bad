"""
Account records.

UserProfile is what clients and the session see. UserAccount is the stored
form and adds the password hash, which never leaves the users collection.
"""

import uuid
from datetime import datetime

from django.utils import timezone
from pydantic import BaseModel, Field

from src.compositions.choices import Complexity, Instrument, SubscriptionTier


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively and without surrounding blanks."""
    return email.strip().lower()


class UserProfile(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    email: str
    username: str
    avatar_url: str | None = None
    primary_instrument: Instrument | None = None
    experience_level: Complexity | None = None
    goals: list[str] | None = None
    onboarding_completed: bool = False
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE
    created_at: datetime = Field(default_factory=timezone.now)


class UserAccount(UserProfile):
    password_hash: str = ""

    @property
    def profile(self) -> UserProfile:
        return UserProfile.model_validate(self.model_dump(exclude={"password_hash"}))


class ProfilePatch(BaseModel):
    """
    Partial profile update.

    Only fields explicitly set on the patch are applied; id, email and
    created_at cannot be patched.
    """

    username: str | None = None
    avatar_url: str | None = None
    primary_instrument: Instrument | None = None
    experience_level: Complexity | None = None
    goals: list[str] | None = None
    onboarding_completed: bool | None = None
    subscription_tier: SubscriptionTier | None = None


def merge_profile(account: UserAccount, patch: ProfilePatch) -> UserAccount:
    """
    Apply a patch to a stored account.

    Field-by-field rule: a field set on the patch replaces the stored value
    (lists replace wholesale, an explicit None clears an optional field);
    a field left unset keeps its stored value. Required fields ignore an
    explicit None.
    """
    changes = patch.model_dump(exclude_unset=True)
    for required in ("username", "onboarding_completed", "subscription_tier"):
        if changes.get(required, ...) is None:
            del changes[required]
    return account.model_copy(update=changes)
