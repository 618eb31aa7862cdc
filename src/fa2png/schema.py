"""Pydantic v2 models for icon render options and icon listings."""

from typing import Any

from PIL import ImageColor
from pydantic import BaseModel, ConfigDict, field_validator

from fa2png.config import DEFAULT_DIMENSION, DEFAULT_TEXT_COLOR, TRANSPARENT

Color = str | tuple[int, ...]


class RenderOptions(BaseModel):
    """How to draw an icon: output size, colors and trimming."""

    model_config = ConfigDict(frozen=True)

    width: int = DEFAULT_DIMENSION
    height: int = DEFAULT_DIMENSION
    text_color: Color = DEFAULT_TEXT_COLOR
    background_color: Color = TRANSPARENT
    trim: bool = True

    @field_validator("width", "height")
    @classmethod
    def dimension_positive(cls, v: int) -> int:
        if v < 1:
            msg = f"Image dimensions must be >= 1, got {v}"
            raise ValueError(msg)
        return v

    @field_validator("text_color", "background_color", mode="before")
    @classmethod
    def color_parses(cls, v: Any) -> Any:
        if isinstance(v, list):
            v = tuple(v)
        if isinstance(v, str):
            # Raises ValueError for unknown names and malformed hex strings
            ImageColor.getrgb(v)
        elif isinstance(v, tuple):
            if len(v) not in (3, 4) or not all(isinstance(c, int) and 0 <= c <= 255 for c in v):
                msg = f"Color tuples need 3 or 4 channels in 0-255, got {v}"
                raise ValueError(msg)
        return v

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def square(cls, dimension: int, **kwargs: Any) -> "RenderOptions":
        """Options for a square ``dimension`` x ``dimension`` image."""
        return cls(width=dimension, height=dimension, **kwargs)


class IconEntry(BaseModel):
    """One row of the icon listing: CSS code, canonical name and hex codepoint."""

    code: str
    name: str
    codepoint: str
