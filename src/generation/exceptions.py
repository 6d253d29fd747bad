"""Errors raised by the generation adapter."""


class GenerationError(Exception):
    """Base class for generation errors."""


class MissingCredential(GenerationError):
    """No API key is configured for the generation service."""

    def __init__(self):
        super().__init__(
            "API key is missing. Set GEMINI_API_KEY in the environment."
        )


class GenerationFailed(GenerationError):
    """The service call failed or its reply broke the response contract."""
