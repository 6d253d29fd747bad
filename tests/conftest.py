import django
from django.conf import settings


def pytest_configure():
    """Configure Django settings before tests."""
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY="test-secret-key-for-testing-only",
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": ":memory:",
                }
            },
            INSTALLED_APPS=[
                "django.contrib.auth",
                "django.contrib.contenttypes",
                "rest_framework",
                "src.store",
            ],
            DEFAULT_AUTO_FIELD="django.db.models.BigAutoField",
            USE_TZ=True,
            ROOT_URLCONF="config.urls",
            REST_FRAMEWORK={
                "DEFAULT_AUTHENTICATION_CLASSES": [],
                "DEFAULT_PERMISSION_CLASSES": [],
                "UNAUTHENTICATED_USER": None,
                "EXCEPTION_HANDLER": "src.api.exceptions.api_exception_handler",
            },
            PASSWORD_HASHERS=["django.contrib.auth.hashers.MD5PasswordHasher"],
            STORE_KEY_PREFIX="ariomuse_",
            STORE_SIMULATED_LATENCY={},
            GENERATION_MODEL="gemini/gemini-2.5-flash",
            GENERATION_API_KEY="",
            GENERATION_TRACING=False,
            APP_VERSION="0.1.0",
        )
    django.setup()
