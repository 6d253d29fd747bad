"""
Store Models
"""

from django.db import models


class Collection(models.TextChoices):
    """Named collections kept in the store."""

    SESSION = "session"
    USERS = "users"
    COMPOSITIONS = "compositions"


class StoreEntry(models.Model):
    """One key of the key-value store, holding a JSON document as text."""

    key = models.CharField(max_length=100, unique=True)
    value = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return f"{self.key} ({len(self.value)} bytes)"

    @classmethod
    def get_or_none(cls, key: str) -> "StoreEntry | None":
        """Get entry by key, returning None if not found."""
        try:
            return cls.objects.get(key=key)
        except cls.DoesNotExist:
            return None
