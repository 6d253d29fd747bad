"""
API Views for generation and the composition library.

Composition endpoints act on the signed-in user's library. Compositions owned
by someone else are reported as not found.
"""

import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from src.compositions.choices import option_lists
from src.compositions.presets import (
    PLACEHOLDER_NOTATION,
    PRESETS,
    default_settings_for,
    tempo_marking,
)
from src.compositions.types import MAX_TEMPO, MIN_TEMPO, Composition, CompositionSettings
from .deps import get_services
from .exceptions import error_response
from .schemas import FavoriteRequest, RegenerateRequest, SaveCompositionRequest, TagsRequest

logger = logging.getLogger(__name__)


def _not_signed_in() -> Response:
    return error_response(
        "not_authenticated", "Sign in required", status.HTTP_401_UNAUTHORIZED
    )


def _not_found() -> Response:
    return error_response("not_found", "Composition not found", status.HTTP_404_NOT_FOUND)


def _serialize(composition: Composition) -> dict:
    data = composition.model_dump(mode="json")
    data["tags"] = sorted(composition.tags)
    data["tempo_marking"] = tempo_marking(composition.settings.tempo)
    return data


class SignedInView(APIView):
    """Base view for endpoints that need the signed-in user."""

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.services = get_services()
        self.user = self.services.auth.get_session()

    def get_owned(self, composition_id: str) -> Composition | None:
        composition = async_to_sync(self.services.compositions.get_by_id)(composition_id)
        if composition is None or composition.user_id != self.user.id:
            return None
        return composition


class HealthView(APIView):
    """GET /api/health/ - server availability check."""

    def get(self, request):
        generator = get_services().generator
        return Response({
            "status": "ok",
            "version": getattr(settings, "APP_VERSION", "0.0.0"),
            "model": generator.model,
            "generation_configured": generator.has_credential,
        })


class OptionsView(APIView):
    """GET /api/options/ - option lists and presets for the composer form."""

    def get(self, request):
        user = get_services().auth.get_session()
        return Response({
            **option_lists(),
            "tempo": {"min": MIN_TEMPO, "max": MAX_TEMPO},
            "presets": {
                name: preset.model_dump(mode="json") for name, preset in PRESETS.items()
            },
            "defaults": default_settings_for(user).model_dump(mode="json"),
            "placeholder_notation": PLACEHOLDER_NOTATION,
        })


class GenerateView(APIView):
    """
    Generate a piece without saving it.

    POST /api/generate/
    Body: CompositionSettings

    Returns:
        {"title": "...", "abc": "...", "commentary": "...", "tempo_marking": "..."}
    """

    def post(self, request):
        composition_settings = CompositionSettings.model_validate(request.data)
        result = async_to_sync(get_services().generator.request_composition)(
            composition_settings
        )
        return Response({
            **result.model_dump(),
            "tempo_marking": tempo_marking(composition_settings.tempo),
        })


class IdeaView(APIView):
    """GET /api/generate/idea/ - always returns a prompt suggestion."""

    def get(self, request):
        idea = async_to_sync(get_services().generator.request_idea)()
        return Response({"prompt": idea})


class CompositionListView(SignedInView):
    """
    GET /api/compositions/ - the user's library, most recently updated first.
    POST /api/compositions/ - save a generated result as a new composition.
    """

    def get(self, request):
        if self.user is None:
            return _not_signed_in()
        compositions = async_to_sync(self.services.compositions.list_by_user)(self.user.id)
        return Response([_serialize(c) for c in compositions])

    def post(self, request):
        if self.user is None:
            return _not_signed_in()

        body = SaveCompositionRequest.model_validate(request.data)
        composition = Composition.start(
            self.user.id,
            body.settings,
            title=body.title,
            notation=body.abc,
            commentary=body.commentary,
        )
        async_to_sync(self.services.compositions.save)(composition)
        return Response(_serialize(composition), status=status.HTTP_201_CREATED)


class CompositionDetailView(SignedInView):
    """
    GET /api/compositions/{id}/
    DELETE /api/compositions/{id}/
    """

    def get(self, request, composition_id):
        if self.user is None:
            return _not_signed_in()
        composition = self.get_owned(composition_id)
        if composition is None:
            return _not_found()
        return Response(_serialize(composition))

    def delete(self, request, composition_id):
        if self.user is None:
            return _not_signed_in()
        if self.get_owned(composition_id) is None:
            return _not_found()
        async_to_sync(self.services.compositions.delete_by_id)(composition_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CompositionVersionsView(SignedInView):
    """
    Regenerate a composition and append the result as its current version.

    POST /api/compositions/{id}/versions/
    Body: {"settings": {...}} (optional)

    Nothing is written if generation fails.
    """

    def post(self, request, composition_id):
        if self.user is None:
            return _not_signed_in()
        composition = self.get_owned(composition_id)
        if composition is None:
            return _not_found()

        body = RegenerateRequest.model_validate(request.data or {})
        composition_settings = body.settings or composition.settings
        result = async_to_sync(self.services.generator.request_composition)(
            composition_settings
        )
        updated = async_to_sync(self.services.compositions.add_version)(
            composition_id,
            result.abc,
            result.commentary,
            body.settings,
        )
        logger.info(f"Composition {composition_id} now has {len(updated.versions)} versions")
        return Response(_serialize(updated), status=status.HTTP_201_CREATED)


class CompositionFavoriteView(SignedInView):
    """POST /api/compositions/{id}/favorite/ - set, or toggle when no value is sent."""

    def post(self, request, composition_id):
        if self.user is None:
            return _not_signed_in()
        composition = self.get_owned(composition_id)
        if composition is None:
            return _not_found()

        body = FavoriteRequest.model_validate(request.data or {})
        is_favorite = not composition.is_favorite if body.is_favorite is None else body.is_favorite
        updated = async_to_sync(self.services.compositions.set_favorite)(
            composition_id, is_favorite
        )
        return Response(_serialize(updated))


class CompositionTagsView(SignedInView):
    """PUT /api/compositions/{id}/tags/ - replace the tag set."""

    def put(self, request, composition_id):
        if self.user is None:
            return _not_signed_in()
        if self.get_owned(composition_id) is None:
            return _not_found()

        body = TagsRequest.model_validate(request.data)
        updated = async_to_sync(self.services.compositions.set_tags)(composition_id, body.tags)
        return Response(_serialize(updated))
