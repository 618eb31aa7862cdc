"""Font metadata helpers and small parsing utilities."""

from __future__ import annotations

import re
from pathlib import Path

from fontTools.ttLib import TTFont

from fa2png.icons import FontAwesome

SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*(?:[xX]\s*(\d+)\s*)?$")


def get_name_entry(font: TTFont, name_id: int) -> str | None:
    """Extract a string from the font's name table by nameID."""
    name_table = font["name"]
    record = name_table.getName(name_id, 3, 1, 0x0409)  # Windows, Unicode BMP, English
    if record is None:
        record = name_table.getName(name_id, 1, 0, 0)  # Mac, Roman, English
    if record is None:
        return None
    return str(record)


def read_family_name(font: TTFont) -> str:
    """Family name of an open font: nameID 16 (typographic family), fallback to 1."""
    name = get_name_entry(font, 16) or get_name_entry(font, 1) or ""
    return name.strip()


def infer_family_name(font_path: str | Path) -> str:
    """Open a font file and return its family name ('' when the name table has none)."""
    font = TTFont(str(font_path), fontNumber=0)
    try:
        return read_family_name(font)
    finally:
        font.close()


def icon_coverage(font_path: str | Path) -> tuple[list[str], list[str]]:
    """Check which icons the font's cmap can draw.

    Aliases are skipped; each glyph is reported once under its canonical name.

    Returns:
        (covered, missing) lists of icon names, in table order.
    """
    font = TTFont(str(font_path), fontNumber=0)
    try:
        cmap = font.getBestCmap() or {}
    finally:
        font.close()

    covered: list[str] = []
    missing: list[str] = []
    for icon in FontAwesome:
        if icon.codepoint in cmap:
            covered.append(icon.name)
        else:
            missing.append(icon.name)
    return covered, missing


def parse_size(text: str) -> tuple[int, int]:
    """Parse "64" -> (64, 64) or "96x64" -> (96, 64).

    Raises:
        ValueError: If text is malformed or a dimension is zero.
    """
    match = SIZE_PATTERN.match(text)
    if match is None:
        msg = f"Invalid size '{text}', expected N or WxH"
        raise ValueError(msg)
    width = int(match.group(1))
    height = int(match.group(2)) if match.group(2) is not None else width
    if width < 1 or height < 1:
        msg = f"Size must be positive, got {width}x{height}"
        raise ValueError(msg)
    return width, height


def codepoint_hex(icon: FontAwesome) -> str:
    """Lowercase hex codepoint as used in FontAwesome's CSS, e.g. 'f09b'."""
    return f"{icon.codepoint:04x}"
