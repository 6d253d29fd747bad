"""
Django settings for ariomuse-studio project.
"""

import os
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv

load_dotenv()

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

APP_VERSION = "0.1.0"

# Security
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-key-change-in-production")
DEBUG = os.getenv("DJANGO_DEBUG", "true").lower() == "true"
ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

# Application definition
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "src.store",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

# WSGI/ASGI application
WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# Database - PostgreSQL in production, SQLite for local dev
DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=600,
    )
}

# REST Framework
# Single local session: no per-request authentication, the signed-in user
# comes from the shared Session object.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "EXCEPTION_HANDLER": "src.api.exceptions.api_exception_handler",
}

# Key-value store
STORE_KEY_PREFIX = os.getenv("STORE_KEY_PREFIX", "ariomuse_")

# Seconds of artificial latency per operation, mimicking a hosted backend
STORE_SIMULATE_LATENCY = os.getenv("STORE_SIMULATE_LATENCY", "false").lower() == "true"
STORE_SIMULATED_LATENCY = (
    {"auth": 0.8, "update": 0.5, "list": 0.4, "save": 0.6}
    if STORE_SIMULATE_LATENCY
    else {}
)

# Generation service
GENERATION_MODEL = os.getenv("GENERATION_MODEL", "gemini/gemini-2.5-flash")
GENERATION_API_KEY = os.getenv("GEMINI_API_KEY", "")
GENERATION_TRACING = os.getenv("GENERATION_TRACING", "true").lower() == "true"

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "src": {
            "handlers": ["console"],
            "level": "DEBUG" if DEBUG else "INFO",
            "propagate": False,
        },
        "LiteLLM": {
            "level": "WARNING",
        },
    },
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
