"""Font registration for the icon font.

Fonts are registered explicitly from bytes or files into a :class:`FontRegistry`.
A registration is a value that records success or failure; nothing here raises
for a missing or broken font. The registry loads a family lazily on first use
through its resolver and keeps the result for the lifetime of the registry.

Usage:
    registry = FontRegistry()
    registry.register_file("FontAwesome", "fonts/FontAwesome.otf")
    font = registry.get("FontAwesome", 48)  # None if registration failed
"""

from __future__ import annotations

import io
import logging
import os
import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont
from PIL import ImageFont

from fa2png.config import FONT_CACHE_SIZE, FONT_FAMILY, FONT_FILENAME, FONT_PATH_ENV
from fa2png.utils import read_family_name

logger = logging.getLogger(__name__)


class FontLoadError(Exception):
    """Font bytes could not be read or parsed."""


@dataclass
class FontRegistration:
    """Outcome of registering a font under a family name."""

    family: str
    succeeded: bool
    data: bytes | None = None
    source: str | None = None
    error: str | None = None
    font_name: str = ""


def resolve_font_path() -> Path:
    """Font file to load: $FA2PNG_FONT_PATH if set, else the packaged font."""
    override = os.environ.get(FONT_PATH_ENV)
    if override:
        return Path(override)
    return Path(__file__).parent / "fonts" / FONT_FILENAME


def inspect_font_bytes(data: bytes) -> str:
    """Parse font bytes with fontTools and Pillow and return the family name.

    Raises:
        FontLoadError: If either library rejects the data.
    """
    if not data:
        raise FontLoadError("Font data is empty")

    try:
        font = TTFont(io.BytesIO(data), fontNumber=0)
        try:
            if not font.getBestCmap():
                raise FontLoadError("Font has no usable character map")
            family_name = read_family_name(font)
        finally:
            font.close()
    except FontLoadError:
        raise
    except Exception as e:
        msg = f"Invalid font data: {e}"
        raise FontLoadError(msg) from e

    try:
        ImageFont.truetype(io.BytesIO(data), size=12)
    except OSError as e:
        msg = f"FreeType cannot load font: {e}"
        raise FontLoadError(msg) from e

    return family_name


def load_font_bytes(path: str | Path) -> bytes:
    """Read a font file.

    Raises:
        FontLoadError: If the file cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        msg = f"Cannot read font file {path}: {e}"
        raise FontLoadError(msg) from e


class FontRegistry:
    """Thread-safe cache of font registrations keyed by family name."""

    def __init__(self, resolver: Callable[[], Path] = resolve_font_path):
        self._resolver = resolver
        self._registrations: dict[str, FontRegistration] = {}
        self._fonts: dict[tuple[str, float], ImageFont.FreeTypeFont] = {}
        self._lock = threading.RLock()

    def register_bytes(
        self,
        family: str,
        data: bytes,
        source: str | None = None,
    ) -> FontRegistration:
        """Register font bytes under ``family``, replacing any earlier registration."""
        try:
            font_name = inspect_font_bytes(data)
        except FontLoadError as e:
            logger.warning("Font registration failed for %s: %s", family, e)
            registration = FontRegistration(family, False, source=source, error=str(e))
        else:
            logger.info("Registered font %s (%s)", family, font_name or "unnamed")
            registration = FontRegistration(
                family, True, data=data, source=source, font_name=font_name
            )

        with self._lock:
            self._registrations[family] = registration
            for key in [k for k in self._fonts if k[0] == family]:
                del self._fonts[key]
        return registration

    def register_file(self, family: str, path: str | Path) -> FontRegistration:
        """Register a font file under ``family``. A missing file is a failed registration."""
        try:
            data = load_font_bytes(path)
        except FontLoadError as e:
            logger.warning("Font registration failed for %s: %s", family, e)
            registration = FontRegistration(family, False, source=str(path), error=str(e))
            with self._lock:
                self._registrations[family] = registration
            return registration
        return self.register_bytes(family, data, source=str(path))

    def registration(self, family: str = FONT_FAMILY) -> FontRegistration:
        """Return the registration for ``family``.

        The lazy family is loaded via the resolver on first use. Any other family
        that was never registered gets a failed registration, which is not cached.
        """
        with self._lock:
            existing = self._registrations.get(family)
            if existing is not None:
                return existing
            if family != self._lazy_family:
                return FontRegistration(family, False, error=f"Font {family!r} is not registered")
            return self.register_file(family, self._resolver())

    def is_registered(self, family: str = FONT_FAMILY) -> bool:
        """True if ``family`` was registered successfully. Does not trigger loading."""
        with self._lock:
            registration = self._registrations.get(family)
        return registration is not None and registration.succeeded

    def get(self, family: str, size: float) -> ImageFont.FreeTypeFont | None:
        """Return ``family`` at ``size`` pixels, or None if the font is unavailable."""
        registration = self.registration(family)
        if not registration.succeeded or registration.data is None:
            return None

        key = (family, size)
        with self._lock:
            font = self._fonts.get(key)
            if font is not None:
                self._fonts.move_to_end(key)
                return font
            font = ImageFont.truetype(io.BytesIO(registration.data), size=size)
            self._fonts[key] = font
            while len(self._fonts) > self._cache_size:
                self._fonts.popitem(last=False)
        return font

    def clear(self) -> None:
        with self._lock:
            self._registrations.clear()
            self._fonts.clear()


default_registry = FontRegistry()


def font_awesome(
    size: float,
    registry: FontRegistry | None = None,
) -> ImageFont.FreeTypeFont | None:
    """FontAwesome at ``size`` pixels, or None if the font cannot be registered."""
    return (registry or default_registry).get(FONT_FAMILY, size)
