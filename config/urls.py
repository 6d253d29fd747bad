"""
URL configuration for ariomuse-studio project.
"""

from django.urls import path, include

urlpatterns = [
    path("api/", include("src.api.urls")),
]
