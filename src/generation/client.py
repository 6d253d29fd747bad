"""
Composition Generator - LiteLLM Implementation

Turns CompositionSettings into a request for the external text model and
validates the reply against the response contract ({title, abc, commentary}).

LiteLLM keeps the call provider-agnostic; the default model is Gemini:

    generator = CompositionGenerator()
    result = await generator.request_composition(settings)

    generator = CompositionGenerator(model="gpt-4o", api_key="...")

The two operations fail differently. request_composition raises, because a
silently substituted piece would be misleading. request_idea never raises and
falls back to a canned suggestion.
"""

import json
import logging

import litellm
from django.conf import settings as django_settings
from pydantic import ValidationError

from src.compositions.types import CompositionSettings
from src.observability.tracing import init_tracing, trace_llm_call
from .exceptions import GenerationFailed, MissingCredential
from .prompts import (
    EMPTY_REPLY_IDEA,
    FALLBACK_IDEA,
    IDEA_PROMPT,
    NO_CREDENTIAL_IDEA,
    build_messages,
)
from .types import GenerationResult

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini/gemini-2.5-flash"


class CompositionGenerator:
    """Requests compositions and prompt ideas from an LLM via LiteLLM."""

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        enable_tracing: bool = True,
        project_name: str = "ariomuse-studio",
    ):
        """
        Initialise the generator.

        Args:
            model: LiteLLM model identifier, defaults to settings.GENERATION_MODEL
            api_key: Service credential, defaults to settings.GENERATION_API_KEY
            enable_tracing: Whether to enable Opik tracing
            project_name: Project name for Opik
        """
        self.model = model or getattr(django_settings, "GENERATION_MODEL", DEFAULT_MODEL)
        if api_key is None:
            api_key = getattr(django_settings, "GENERATION_API_KEY", "")
        self.api_key = api_key
        self.enable_tracing = enable_tracing

        if enable_tracing:
            init_tracing(project_name)

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    async def request_composition(self, settings: CompositionSettings) -> GenerationResult:
        """
        Generate a piece for the given settings.

        Args:
            settings: Validated composition settings

        Returns:
            GenerationResult with title, ABC notation and commentary, unmodified

        Raises:
            MissingCredential: If no API key is configured
            GenerationFailed: If the call errors or the reply breaks the contract
        """
        if not self.has_credential:
            raise MissingCredential()

        messages = build_messages(settings)

        with trace_llm_call(self.model, messages[0]["content"], name="compose") as span:
            try:
                response = await litellm.acompletion(
                    model=self.model,
                    messages=messages,
                    api_key=self.api_key,
                    response_format={"type": "json_object"},
                )
            except Exception as e:
                logger.exception(f"Generation call to {self.model} failed")
                raise GenerationFailed(f"Generation service error: {e}") from e

            result = self._parse_composition(self._reply_text(response))
            span.update(output={"title": result.title, "abc_length": len(result.abc)})

        logger.info(f"Generated '{result.title}' with {self.model}")
        return result

    @staticmethod
    def _reply_text(response) -> str | None:
        try:
            return response.choices[0].message.content
        except (IndexError, AttributeError, TypeError) as e:
            raise GenerationFailed("Malformed response from generation service") from e

    @staticmethod
    def _parse_composition(text: str | None) -> GenerationResult:
        if not text:
            raise GenerationFailed("No response from generation service")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise GenerationFailed(f"Response is not JSON: {e}") from e
        if not isinstance(payload, dict):
            raise GenerationFailed("Response is not a JSON object")
        try:
            return GenerationResult.model_validate(payload)
        except ValidationError as e:
            fields = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
            raise GenerationFailed(
                f"Response has missing or blank fields: {', '.join(fields)}"
            ) from e

    async def request_idea(self) -> str:
        """Suggest a one-sentence composition prompt, never raising."""
        if not self.has_credential:
            return NO_CREDENTIAL_IDEA

        try:
            with trace_llm_call(self.model, IDEA_PROMPT, name="idea"):
                response = await litellm.acompletion(
                    model=self.model,
                    messages=[{"role": "user", "content": IDEA_PROMPT}],
                    api_key=self.api_key,
                )
            idea = (response.choices[0].message.content or "").strip()
        except Exception as e:
            logger.warning(f"Idea request failed, using fallback: {e}")
            return FALLBACK_IDEA

        return idea or EMPTY_REPLY_IDEA
