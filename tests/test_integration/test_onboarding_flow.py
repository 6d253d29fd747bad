"""End-to-end flow through the services: sign up, onboard, generate, save."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

from django.test import TestCase

from src.accounts.service import AuthService
from src.accounts.session import Session
from src.accounts.types import ProfilePatch
from src.compositions.choices import Complexity, Instrument, Mood
from src.compositions.presets import default_settings_for
from src.compositions.service import CompositionService
from src.compositions.types import Composition
from src.generation.client import CompositionGenerator
from src.store.store import KeyValueStore
from tests.test_compositions.factories import ABC


class TestOnboardingToLibrary(TestCase):

    async def test_first_piece_lands_in_library(self):
        store = KeyValueStore()
        auth = AuthService(store, Session(store))
        compositions = CompositionService(store)
        generator = CompositionGenerator(model="test-model", api_key="key", enable_tracing=False)

        user = await auth.sign_up("a@x.com", "pw")
        user = await auth.update_profile(user.id, ProfilePatch(
            primary_instrument=Instrument.PIANO,
            experience_level=Complexity.INTERMEDIATE,
            onboarding_completed=True,
        ))

        settings = default_settings_for(user).model_copy(update={"tempo": 100, "mood": Mood.HAPPY})

        reply = MagicMock()
        reply.choices = [MagicMock()]
        reply.choices[0].message.content = json.dumps(
            {"title": "Morning Light", "abc": ABC, "commentary": "Bright."}
        )
        with patch("src.generation.client.litellm") as mock_litellm:
            mock_litellm.acompletion = AsyncMock(return_value=reply)
            result = await generator.request_composition(settings)

        await compositions.save(Composition.start(
            user.id, settings, title=result.title, notation=result.abc, commentary=result.commentary,
        ))

        library = await compositions.list_by_user(user.id)
        assert len(library) == 1
        assert len(library[0].versions) == 1
        assert library[0].settings == settings
        assert library[0].settings.instrument == Instrument.PIANO
        assert library[0].title == "Morning Light"
