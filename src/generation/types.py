"""Response contract of the generation service."""

from pydantic import BaseModel

from src.compositions.types import NonBlankStr


class GenerationResult(BaseModel):
    """A generated piece. All three fields must be present and not blank."""

    title: NonBlankStr
    abc: NonBlankStr
    commentary: NonBlankStr
