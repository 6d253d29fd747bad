# tests/test_accounts/test_account_types.py
from src.accounts.types import (
    ProfilePatch,
    UserAccount,
    UserProfile,
    merge_profile,
    normalize_email,
)
from src.compositions.choices import Complexity, Instrument, SubscriptionTier


def make_account(**overrides) -> UserAccount:
    fields = {"email": "a@x.com", "username": "a", "password_hash": "hash"}
    fields.update(overrides)
    return UserAccount(**fields)


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  A@X.Com ") == "a@x.com"


def test_new_profile_defaults():
    profile = UserProfile(email="a@x.com", username="a")
    assert profile.onboarding_completed is False
    assert profile.subscription_tier == SubscriptionTier.FREE
    assert profile.goals is None
    assert profile.id


def test_profile_property_drops_password_hash():
    account = make_account()
    profile = account.profile
    assert type(profile) is UserProfile
    assert "password_hash" not in profile.model_dump()
    assert profile.id == account.id


def test_merge_overwrites_provided_fields_only():
    account = make_account(goals=["Learn theory"])
    patch = ProfilePatch(
        primary_instrument=Instrument.PIANO,
        experience_level=Complexity.INTERMEDIATE,
        onboarding_completed=True,
    )

    merged = merge_profile(account, patch)

    assert merged.primary_instrument == Instrument.PIANO
    assert merged.experience_level == Complexity.INTERMEDIATE
    assert merged.onboarding_completed is True
    assert merged.goals == ["Learn theory"]
    assert merged.username == "a"
    assert merged.password_hash == "hash"


def test_merge_replaces_lists_wholesale():
    account = make_account(goals=["Compose", "Practice"])
    merged = merge_profile(account, ProfilePatch(goals=["Teach"]))
    assert merged.goals == ["Teach"]


def test_merge_explicit_none_clears_optional_field():
    account = make_account(avatar_url="https://example.com/a.png")
    merged = merge_profile(account, ProfilePatch(avatar_url=None))
    assert merged.avatar_url is None


def test_merge_ignores_none_for_required_fields():
    account = make_account()
    merged = merge_profile(account, ProfilePatch(username=None, onboarding_completed=None))
    assert merged.username == "a"
    assert merged.onboarding_completed is False


def test_merge_does_not_mutate_input():
    account = make_account()
    merge_profile(account, ProfilePatch(username="renamed"))
    assert account.username == "a"


def test_patch_cannot_change_identity():
    account = make_account()
    patch = ProfilePatch.model_validate({"id": "other", "email": "b@x.com", "username": "b"})
    merged = merge_profile(account, patch)
    assert merged.id == account.id
    assert merged.email == "a@x.com"
    assert merged.username == "b"
