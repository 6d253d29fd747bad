"""User accounts, profile updates and the active session."""
