from unittest.mock import AsyncMock, Mock

from rest_framework.test import APIClient

from src.api.deps import get_services
from src.generation.client import CompositionGenerator
from src.generation.types import GenerationResult
from tests.test_compositions.factories import ABC

SETTINGS_BODY = {
    "prompt": "A cheerful morning tune",
    "instrument": "Piano",
    "complexity": "Intermediate",
    "key": "C Major",
    "time_signature": "4/4",
    "tempo": 100,
    "mood": "Happy",
}

RESULT = GenerationResult(title="Morning Light", abc=ABC, commentary="Bright and simple.")


class APITestMixin:
    """Fresh services per test with the generator replaced by a mock."""

    def setUp(self):
        get_services.cache_clear()
        self.services = get_services()
        self.generator = Mock(spec=CompositionGenerator)
        self.generator.model = "test-model"
        self.generator.has_credential = True
        self.generator.request_composition = AsyncMock(return_value=RESULT)
        self.generator.request_idea = AsyncMock(return_value="A harp lullaby.")
        self.services.generator = self.generator
        self.client = APIClient()

    def tearDown(self):
        get_services.cache_clear()

    def sign_up(self, email="a@x.com", password="pw"):
        response = self.client.post(
            "/api/auth/signup/", {"email": email, "password": password}, format="json"
        )
        assert response.status_code == 201
        return response.json()

    def save_piece(self, **overrides):
        body = {"settings": SETTINGS_BODY, "title": RESULT.title, "abc": RESULT.abc,
                "commentary": RESULT.commentary}
        body.update(overrides)
        response = self.client.post("/api/compositions/", body, format="json")
        assert response.status_code == 201
        return response.json()
