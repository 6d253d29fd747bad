"""Request bodies accepted by the composition endpoints."""

from pydantic import BaseModel

from src.compositions.types import CompositionSettings, NonBlankStr


class SaveCompositionRequest(BaseModel):
    """A generated result the user chose to keep."""

    settings: CompositionSettings
    title: NonBlankStr
    abc: NonBlankStr
    commentary: str | None = None


class RegenerateRequest(BaseModel):
    """Settings for a new version; the composition's own settings when omitted."""

    settings: CompositionSettings | None = None


class FavoriteRequest(BaseModel):
    is_favorite: bool | None = None


class TagsRequest(BaseModel):
    tags: list[str]
