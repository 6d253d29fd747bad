"""Local key-value persistence for sessions, users and compositions."""
