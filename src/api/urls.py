"""
API URL routing.
"""

from django.urls import path

from .auth_views import ProfileView, SessionView, SignInView, SignOutView, SignUpView
from .views import (
    CompositionDetailView,
    CompositionFavoriteView,
    CompositionListView,
    CompositionTagsView,
    CompositionVersionsView,
    GenerateView,
    HealthView,
    IdeaView,
    OptionsView,
)

urlpatterns = [
    path("health/", HealthView.as_view(), name="health"),
    path("options/", OptionsView.as_view(), name="options"),
    # Auth endpoints
    path("auth/signup/", SignUpView.as_view(), name="auth-signup"),
    path("auth/signin/", SignInView.as_view(), name="auth-signin"),
    path("auth/signout/", SignOutView.as_view(), name="auth-signout"),
    path("auth/session/", SessionView.as_view(), name="auth-session"),
    path("auth/profile/", ProfileView.as_view(), name="auth-profile"),
    # Generation endpoints
    path("generate/", GenerateView.as_view(), name="generate"),
    path("generate/idea/", IdeaView.as_view(), name="generate-idea"),
    # Composition endpoints
    path("compositions/", CompositionListView.as_view(), name="composition-list"),
    path("compositions/<str:composition_id>/", CompositionDetailView.as_view(), name="composition-detail"),
    path("compositions/<str:composition_id>/versions/", CompositionVersionsView.as_view(), name="composition-versions"),
    path("compositions/<str:composition_id>/favorite/", CompositionFavoriteView.as_view(), name="composition-favorite"),
    path("compositions/<str:composition_id>/tags/", CompositionTagsView.as_view(), name="composition-tags"),
]
