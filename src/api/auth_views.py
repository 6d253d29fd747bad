"""
Authentication Views

Endpoints:
- POST /api/auth/signup/ - Create an account and sign it in
- POST /api/auth/signin/ - Sign in with email/password
- POST /api/auth/signout/ - Clear the active session
- GET /api/auth/session/ - Current user, or null when signed out
- PATCH /api/auth/profile/ - Update the signed-in user's profile
"""

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from src.accounts.types import ProfilePatch
from .deps import get_services
from .exceptions import error_response


def _credentials(request):
    if not isinstance(request.data, dict):
        return None, None
    return request.data.get("email"), request.data.get("password")


def _missing_credentials() -> Response:
    return error_response(
        "validation_error",
        "Email and password required",
        status.HTTP_400_BAD_REQUEST,
    )


class SignUpView(APIView):
    """
    Register a new account.

    POST /api/auth/signup/
    Body: {"email": "user@example.com", "password": "secret"}

    Returns:
        201 with the new profile, 409 if the email is taken
    """

    def post(self, request):
        email, password = _credentials(request)
        if not email or not password:
            return _missing_credentials()

        user = async_to_sync(get_services().auth.sign_up)(email, password)
        return Response(user.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class SignInView(APIView):
    """
    Sign in to an existing account.

    POST /api/auth/signin/
    Body: {"email": "user@example.com", "password": "secret"}

    Returns:
        The profile, or 401 on unknown email / wrong password
    """

    def post(self, request):
        email, password = _credentials(request)
        if not email or not password:
            return _missing_credentials()

        user = async_to_sync(get_services().auth.sign_in)(email, password)
        return Response(user.model_dump(mode="json"))


class SignOutView(APIView):
    """POST /api/auth/signout/ - always succeeds."""

    def post(self, request):
        async_to_sync(get_services().auth.sign_out)()
        return Response(status=status.HTTP_204_NO_CONTENT)


class SessionView(APIView):
    """GET /api/auth/session/"""

    def get(self, request):
        user = get_services().auth.get_session()
        return Response({"user": user.model_dump(mode="json") if user else None})


class ProfileView(APIView):
    """
    Patch the signed-in user's profile.

    PATCH /api/auth/profile/
    Body: any subset of username, avatar_url, primary_instrument,
          experience_level, goals, onboarding_completed, subscription_tier
    """

    def patch(self, request):
        services = get_services()
        user = services.auth.get_session()
        if user is None:
            return error_response(
                "not_authenticated", "Sign in required", status.HTTP_401_UNAUTHORIZED
            )

        patch = ProfilePatch.model_validate(request.data)
        updated = async_to_sync(services.auth.update_profile)(user.id, patch)
        return Response(updated.model_dump(mode="json"))
