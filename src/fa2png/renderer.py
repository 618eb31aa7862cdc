"""Render FontAwesome icons to RGBA images using PIL.

The glyph is drawn at ``min(width / FONT_ASPECT_RATIO, height)`` pixels,
horizontally centered with its ascender line at ``(height - font_size) / 2``.
Font metrics leave the ink off-center, so the drawn image then goes through
:func:`fa2png.trimmer.trim_and_center` to crop the transparent margins and
re-center the glyph on a canvas of the requested size.

If the icon font cannot be registered, a placeholder "?" is drawn with PIL's
default font instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageColor, ImageDraw, ImageFont

from fa2png.config import (
    DEFAULT_DIMENSION,
    DEFAULT_TEXT_COLOR,
    FONT_ASPECT_RATIO,
    PLACEHOLDER_CHAR,
    TRANSPARENT,
)
from fa2png.fonts import FontRegistry, font_awesome
from fa2png.icons import FontAwesome, icon_from_code, icon_string
from fa2png.schema import Color, RenderOptions
from fa2png.trimmer import trim_and_center

logger = logging.getLogger(__name__)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    if isinstance(color, str):
        return ImageColor.getcolor(color, "RGBA")
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    return (color[0], color[1], color[2], color[3])


def icon_font_size(size: tuple[int, int]) -> float:
    """Point size that fits a fixed-width icon in ``size``."""
    return min(size[0] / FONT_ASPECT_RATIO, size[1])


def draw_glyph(
    text: str,
    font: ImageFont.FreeTypeFont | ImageFont.ImageFont,
    size: tuple[int, int],
    font_size: float,
    text_color: Color = DEFAULT_TEXT_COLOR,
    background_color: Color = TRANSPARENT,
) -> Image.Image:
    """Draw ``text`` on a transparent RGBA canvas without trimming.

    The background color only fills the text box, like a text-run highlight.
    """
    width, height = size
    img = Image.new("RGBA", size, TRANSPARENT)
    draw = ImageDraw.Draw(img)

    x = (width - draw.textlength(text, font=font)) / 2
    y = (height - font_size) / 2

    background = _rgba(background_color)
    if background[3] > 0:
        draw.rectangle(draw.textbbox((x, y), text, font=font), fill=background)

    draw.text((x, y), text, font=font, fill=_rgba(text_color))
    return img


def render(
    icon: FontAwesome,
    options: RenderOptions,
    registry: FontRegistry | None = None,
) -> Image.Image:
    """Render ``icon`` according to ``options``. Always returns an image of options.size."""
    font_size = icon_font_size(options.size)
    font = font_awesome(font_size, registry)

    if font is None:
        logger.warning("Icon font unavailable, drawing placeholder %r", PLACEHOLDER_CHAR)
        text = PLACEHOLDER_CHAR
        font = ImageFont.load_default(size=font_size)
    else:
        text = icon_string(icon)

    img = draw_glyph(
        text,
        font,
        options.size,
        font_size,
        text_color=options.text_color,
        background_color=options.background_color,
    )

    logger.info("  %s: %dx%d at %.1fpx", icon.name, options.width, options.height, font_size)
    if not options.trim:
        return img
    return trim_and_center(img, options.size)


def render_icon(
    icon: FontAwesome,
    text_color: Color = DEFAULT_TEXT_COLOR,
    size: tuple[int, int] = (DEFAULT_DIMENSION, DEFAULT_DIMENSION),
    background_color: Color = TRANSPARENT,
    *,
    trim: bool = True,
    registry: FontRegistry | None = None,
) -> Image.Image:
    """Render an icon as a ``size`` RGBA image.

    Raises:
        pydantic.ValidationError: If a dimension is below 1 or a color is invalid.
    """
    options = RenderOptions(
        width=size[0],
        height=size[1],
        text_color=text_color,
        background_color=background_color,
        trim=trim,
    )
    return render(icon, options, registry)


def render_icon_square(
    icon: FontAwesome,
    text_color: Color = DEFAULT_TEXT_COLOR,
    dimension: int = DEFAULT_DIMENSION,
    background_color: Color = TRANSPARENT,
    *,
    trim: bool = True,
    registry: FontRegistry | None = None,
) -> Image.Image:
    """Render an icon on a square ``dimension`` x ``dimension`` canvas."""
    return render_icon(
        icon,
        text_color,
        (dimension, dimension),
        background_color,
        trim=trim,
        registry=registry,
    )


def render_icon_for_code(
    code: str,
    text_color: Color = DEFAULT_TEXT_COLOR,
    size: tuple[int, int] = (DEFAULT_DIMENSION, DEFAULT_DIMENSION),
    background_color: Color = TRANSPARENT,
    *,
    trim: bool = True,
    registry: FontRegistry | None = None,
) -> Image.Image | None:
    """Render the icon for a CSS code such as ``fa-github``. Unknown codes return None."""
    icon = icon_from_code(code)
    if icon is None:
        logger.info("Unknown icon code %r", code)
        return None
    return render_icon(icon, text_color, size, background_color, trim=trim, registry=registry)


def render_icon_square_for_code(
    code: str,
    text_color: Color = DEFAULT_TEXT_COLOR,
    dimension: int = DEFAULT_DIMENSION,
    background_color: Color = TRANSPARENT,
    *,
    trim: bool = True,
    registry: FontRegistry | None = None,
) -> Image.Image | None:
    """Square variant of :func:`render_icon_for_code`."""
    return render_icon_for_code(
        code,
        text_color,
        (dimension, dimension),
        background_color,
        trim=trim,
        registry=registry,
    )


def save_icon(image: Image.Image, path: str | Path) -> Path:
    """Write ``image`` as PNG, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    image.save(out, format="PNG")
    return out
