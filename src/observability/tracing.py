"""
Opik Tracing Setup

Provides tracing for generation calls (prompt, model, parsed output, errors).

Usage:
    from src.observability import init_tracing, trace_llm_call

    init_tracing()  # Call once at startup

    with trace_llm_call("gemini/gemini-2.5-flash", prompt="...") as span:
        response = await litellm.acompletion(...)
        span.update(output={"title": result.title})
"""

import logging
import os
from contextlib import contextmanager
from typing import Any

import opik
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Global client reference
_client: opik.Opik | None = None


def init_tracing(project_name: str = "ariomuse-studio") -> opik.Opik | None:
    """
    Initialise Opik tracing.

    Call this once at application startup. Repeated calls reuse the client.

    Args:
        project_name: Name of the project in Opik dashboard

    Returns:
        Opik client instance, or None when OPIK_API_KEY is not set
    """
    global _client

    if _client is not None:
        return _client

    api_key = os.getenv("OPIK_API_KEY")
    if not api_key:
        logger.warning("OPIK_API_KEY not set, tracing disabled")
        return None

    _client = opik.Opik(project_name=project_name)
    logger.info(f"Opik tracing initialised for project: {project_name}")
    return _client


@contextmanager
def trace_llm_call(
    model: str,
    prompt: str,
    name: str = "llm_call",
    metadata: dict[str, Any] | None = None,
):
    """
    Context manager for tracing LLM calls.

    Args:
        model: Model name (e.g., "gemini/gemini-2.5-flash")
        prompt: The prompt sent to the LLM
        name: Trace name shown in the dashboard
        metadata: Additional metadata to attach

    Yields:
        Trace span that can be updated with output
    """
    if _client is None:
        # Tracing disabled, yield a no-op object
        yield _NoOpSpan()
        return

    trace = _client.trace(
        name=name,
        input={"prompt": prompt},
        metadata={"model": model, **(metadata or {})},
    )

    try:
        yield trace
    except Exception as e:
        trace.update(metadata={"error": str(e)})
        raise
    finally:
        trace.end()


class _NoOpSpan:
    """No-op span for when tracing is disabled."""

    def update(self, **kwargs):
        pass

    def end(self):
        pass
