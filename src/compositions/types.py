"""
Composition domain records.

A Composition is owned by one user and keeps an append-only history of
generated versions. Versions are never edited in place: regenerating appends
a new version and points current_version_id at it.
"""

import uuid
from datetime import datetime
from typing import Annotated

from django.utils import timezone
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from .choices import Complexity, Instrument, KeySignature, Mood, TimeSignature

MIN_TEMPO = 40
MAX_TEMPO = 220


def new_id() -> str:
    return str(uuid.uuid4())


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Text that must contain something besides whitespace. The value is kept as is.
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class CompositionSettings(BaseModel):
    """Parameters a piece is generated from."""

    prompt: str = ""
    instrument: Instrument
    complexity: Complexity
    key: KeySignature
    time_signature: TimeSignature
    tempo: int = Field(ge=MIN_TEMPO, le=MAX_TEMPO)
    mood: Mood


class CompositionVersion(BaseModel):
    """One generated notation result. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    created_at: datetime = Field(default_factory=timezone.now)
    notation: NonBlankStr
    commentary: str | None = None


class Composition(BaseModel):
    """A user's saved piece with its settings and version history."""

    id: str = Field(default_factory=new_id)
    user_id: str
    title: str
    settings: CompositionSettings
    current_version_id: str
    versions: list[CompositionVersion]
    created_at: datetime = Field(default_factory=timezone.now)
    updated_at: datetime = Field(default_factory=timezone.now)
    is_favorite: bool = False
    tags: set[str] = Field(default_factory=set)

    @model_validator(mode="after")
    def _check_versions(self) -> "Composition":
        if not self.versions:
            raise ValueError("a composition needs at least one version")
        if not any(v.id == self.current_version_id for v in self.versions):
            raise ValueError(
                f"current_version_id {self.current_version_id!r} is not in versions"
            )
        return self

    @classmethod
    def start(
        cls,
        user_id: str,
        settings: CompositionSettings,
        *,
        title: str,
        notation: str,
        commentary: str | None = None,
    ) -> "Composition":
        """Create a composition whose only version is also its current one."""
        version = CompositionVersion(notation=notation, commentary=commentary or None)
        now = version.created_at
        return cls(
            user_id=user_id,
            title=title,
            settings=settings,
            current_version_id=version.id,
            versions=[version],
            created_at=now,
            updated_at=now,
        )

    @property
    def current_version(self) -> CompositionVersion:
        return next(v for v in self.versions if v.id == self.current_version_id)

    def with_version(
        self,
        notation: str,
        commentary: str | None = None,
        settings: CompositionSettings | None = None,
    ) -> "Composition":
        """
        Return a copy with a new version appended and made current.

        Earlier versions are kept. When settings are given they replace the
        composition's settings, since they produced the new current version.
        """
        version = CompositionVersion(notation=notation, commentary=commentary or None)
        update = {
            "versions": [*self.versions, version],
            "current_version_id": version.id,
            "updated_at": version.created_at,
        }
        if settings is not None:
            update["settings"] = settings
        return self.model_copy(update=update)

    def touched(self, **changes) -> "Composition":
        """Return a copy with `changes` applied and updated_at bumped."""
        return self.model_copy(update={**changes, "updated_at": timezone.now()})
