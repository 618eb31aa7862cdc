"""Shared fixtures for fa2png tests."""

import os

import pytest
from PIL import Image, ImageDraw

from fa2png.config import FONT_FAMILY
from fa2png.fonts import FontRegistry

# System font for tests that need a real font file (DejaVu Sans is on most Linux systems)
SYSTEM_FONT = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
HAS_SYSTEM_FONT = os.path.exists(SYSTEM_FONT)

skip_no_font = pytest.mark.skipif(not HAS_SYSTEM_FONT, reason="DejaVu Sans not found")

RED = (255, 0, 0, 255)


# -- Image fixtures ---------------------------------------------------------


@pytest.fixture()
def transparent_image():
    """A 64x64 fully transparent RGBA image."""
    return Image.new("RGBA", (64, 64), (0, 0, 0, 0))


@pytest.fixture()
def single_pixel_image():
    """A 64x64 transparent image with one opaque red pixel at (32, 32)."""
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    img.putpixel((32, 32), RED)
    return img


@pytest.fixture()
def square_image():
    """A 64x64 transparent image with an opaque square over columns 5-15, rows 10-20."""
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rectangle((5, 10, 15, 20), fill=RED)
    return img


@pytest.fixture()
def gradient_glyph_image():
    """A 40x30 image with an irregular, semi-transparent blob off-center."""
    img = Image.new("RGBA", (40, 30), (0, 0, 0, 0))
    for x in range(3, 12):
        for y in range(2, 9):
            img.putpixel((x, y), (x * 10, y * 20, 100, 20 + x * y))
    img.putpixel((14, 12), (1, 2, 3, 1))
    return img


# -- Font registry fixtures -------------------------------------------------


@pytest.fixture()
def missing_font_registry(tmp_path):
    """A registry whose icon font file does not exist (forces the placeholder)."""
    return FontRegistry(resolver=lambda: tmp_path / "missing.otf")


@pytest.fixture()
def system_font_registry():
    """A registry with DejaVu Sans registered under the icon font family."""
    if not HAS_SYSTEM_FONT:
        pytest.skip("DejaVu Sans not found")
    registry = FontRegistry()
    registry.register_file(FONT_FAMILY, SYSTEM_FONT)
    return registry
