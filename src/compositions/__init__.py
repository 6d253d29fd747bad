"""User composition libraries with version history."""
