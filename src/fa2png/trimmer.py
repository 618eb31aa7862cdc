"""Trim transparent margins from a rendered glyph and re-center it.

Text layout leaves the glyph wherever the font metrics put it, usually
off-center and surrounded by empty space. The trimmer crops the image to the
smallest box containing any pixel with alpha above the threshold, then pastes
that crop centered on a fully transparent canvas of the requested size.

Rounding rule: offsets are floored, so an odd leftover pixel goes to the
right/bottom margin. A fully transparent input yields a fresh fully
transparent canvas (nothing is cropped). Non-positive sizes raise ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from fa2png.config import ALPHA_MODES, ALPHA_THRESHOLD


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive pixel bounds of the visible content."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def as_box(self) -> tuple[int, int, int, int]:
        """Return PIL's (left, upper, right, lower) box, right/lower exclusive."""
        return (self.min_x, self.min_y, self.max_x + 1, self.max_y + 1)


def _check_size(size: tuple[int, int]) -> tuple[int, int]:
    width, height = size
    if width <= 0 or height <= 0:
        msg = f"Canvas size must be positive, got {width}x{height}"
        raise ValueError(msg)
    return int(width), int(height)


def _check_image(image: Image.Image) -> None:
    if image.mode not in ALPHA_MODES:
        modes = ", ".join(ALPHA_MODES)
        msg = f"Image mode must carry an alpha band ({modes}), got {image.mode}"
        raise ValueError(msg)
    if image.width <= 0 or image.height <= 0:
        msg = f"Image must not be empty, got {image.width}x{image.height}"
        raise ValueError(msg)


def compute_bounding_box(
    image: Image.Image,
    threshold: int = ALPHA_THRESHOLD,
) -> BoundingBox | None:
    """Find the smallest box enclosing every pixel with alpha > threshold.

    Returns None when the image is uniformly transparent.
    """
    _check_image(image)
    mask = image.getchannel("A").point(lambda a: 255 if a > threshold else 0)
    bbox = mask.getbbox()
    if bbox is None:
        return None
    left, top, right, bottom = bbox
    return BoundingBox(left, top, right - 1, bottom - 1)


def crop(image: Image.Image, box: BoundingBox) -> Image.Image:
    """Copy the pixels inside ``box`` into a new image of the same mode."""
    inside_x = 0 <= box.min_x <= box.max_x < image.width
    inside_y = 0 <= box.min_y <= box.max_y < image.height
    if not (inside_x and inside_y):
        msg = f"Bounding box {box.as_box()} is outside the {image.width}x{image.height} image"
        raise ValueError(msg)
    return image.crop(box.as_box())


def center_offset(content_size: tuple[int, int], canvas_size: tuple[int, int]) -> tuple[int, int]:
    """Floored offset that centers content on the canvas (negative if it overflows)."""
    return (
        (canvas_size[0] - content_size[0]) // 2,
        (canvas_size[1] - content_size[1]) // 2,
    )


def center_on_canvas(cropped: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Paste ``cropped`` centered on a fully transparent canvas of ``size``.

    Pixels are copied, not blended. Content larger than the canvas is clipped
    symmetrically so it stays centered.
    """
    _check_image(cropped)
    canvas_w, canvas_h = _check_size(size)
    canvas = Image.new(cropped.mode, (canvas_w, canvas_h), 0)

    off_x, off_y = center_offset(cropped.size, (canvas_w, canvas_h))

    # Visible part of the crop, in crop coordinates
    src_left = max(0, -off_x)
    src_top = max(0, -off_y)
    src_right = min(cropped.width, canvas_w - off_x)
    src_bottom = min(cropped.height, canvas_h - off_y)

    region = cropped.crop((src_left, src_top, src_right, src_bottom))
    canvas.paste(region, (off_x + src_left, off_y + src_top))
    return canvas


def trim_and_center(
    image: Image.Image,
    size: tuple[int, int] | None = None,
    threshold: int = ALPHA_THRESHOLD,
) -> Image.Image:
    """Crop ``image`` to its visible content and center it on a ``size`` canvas.

    Args:
        image: RGBA or LA image, typically a freshly drawn glyph.
        size: Output (width, height). Defaults to the input size.
        threshold: Alpha values above this count as content.

    Returns:
        A new image of exactly ``size`` in the input's mode.
    """
    _check_image(image)
    canvas_size = _check_size(size if size is not None else image.size)

    box = compute_bounding_box(image, threshold)
    if box is None:
        return Image.new(image.mode, canvas_size, 0)

    return center_on_canvas(crop(image, box), canvas_size)
