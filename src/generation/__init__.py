"""Prompt compilation and calls to the external composition model."""
