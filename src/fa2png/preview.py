"""ASCII art preview of rendered icon images."""

from __future__ import annotations

from PIL import Image

from fa2png.config import ALPHA_THRESHOLD

FILLED = "\u2588"  # █
EMPTY = "\u00b7"  # ·


def preview_image(
    image: Image.Image,
    label: str | None = None,
    threshold: int = ALPHA_THRESHOLD,
) -> str:
    """Render an image's alpha band as ASCII art.

    Returns a header line followed by one row per pixel row, using █ for
    pixels with alpha above threshold and · for the rest.
    """
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    alpha = rgba.getchannel("A")
    width, height = alpha.size
    pixels = alpha.load()

    lines: list[str] = []
    header = f"({width}\u00d7{height})"
    lines.append(f"'{label}' {header}" if label else header)

    for y in range(height):
        lines.append("".join(FILLED if pixels[x, y] > threshold else EMPTY for x in range(width)))

    return "\n".join(lines)


def preview_icons(images: dict[str, Image.Image], threshold: int = ALPHA_THRESHOLD) -> str:
    """Preview several icons vertically, separated by blank lines."""
    return "\n\n".join(
        preview_image(image, label, threshold) for label, image in images.items()
    )
