"""Observability module for generation tracing."""

from .tracing import init_tracing, trace_llm_call

__all__ = ["init_tracing", "trace_llm_call"]
