"""CLI helper functions, decorators, and option definitions for fa2png."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fa2png.config import CSS_PREFIX, FONT_FAMILY, TRANSPARENT

if TYPE_CHECKING:
    from PIL import Image

    from fa2png.fonts import FontRegistry
    from fa2png.schema import RenderOptions

# Names of the shared render options (used to split kwargs in commands)
_RENDER_OPTION_NAMES = (
    "size",
    "color",
    "background",
    "font",
    "no_trim",
    "verbose",
)


def shared_render_options(func):
    """Decorator that adds the common rendering options to a command."""
    options = [
        click.option("--size", default="64", help="Image size: N or WxH (default: 64)"),
        click.option("--color", default="black", help="Icon color (name or #hex)"),
        click.option(
            "--background",
            default=None,
            help="Background color behind the glyph (default: transparent)",
        ),
        click.option(
            "--font",
            type=click.Path(dir_okay=False),
            default=None,
            help="Icon font file (default: $FA2PNG_FONT_PATH or the bundled font)",
        ),
        click.option("--no-trim", is_flag=True, help="Keep the glyph where text layout put it"),
        click.option("-v", "--verbose", is_flag=True, help="Verbose output"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _split_render_kwargs(all_kwargs: dict) -> tuple[dict, dict]:
    """Split kwargs into (render_opts, command_opts)."""
    render = {k: all_kwargs[k] for k in _RENDER_OPTION_NAMES}
    cmd = {k: v for k, v in all_kwargs.items() if k not in _RENDER_OPTION_NAMES}
    return render, cmd


def _build_render_options(opts: dict) -> RenderOptions:
    """Build RenderOptions from a CLI option dict."""
    from fa2png.schema import RenderOptions
    from fa2png.utils import parse_size

    width, height = parse_size(opts["size"])
    return RenderOptions(
        width=width,
        height=height,
        text_color=opts["color"],
        background_color=opts["background"] or TRANSPARENT,
        trim=not opts["no_trim"],
    )


def _build_registry(font_path: str | None) -> FontRegistry:
    """Use a private registry for --font, otherwise the process-wide one."""
    from fa2png.fonts import FontRegistry, default_registry

    if font_path is None:
        return default_registry
    return FontRegistry(resolver=lambda: Path(font_path))


def _default_output(code: str, output_dir: str | Path = ".") -> Path:
    """fa-github -> ./github.png"""
    stem = code[len(CSS_PREFIX) :] if code.startswith(CSS_PREFIX) else code
    return Path(output_dir) / f"{stem}.png"


def _print_render_summary(code: str, image: Image.Image, output: Path) -> None:
    """Print standard summary after a successful render."""
    click.secho(f"Wrote {output}", fg="green")
    click.echo(f"  Icon: {code} ({image.width}x{image.height})")


def _warn_if_placeholder(registry: FontRegistry) -> None:
    """Tell the user when the placeholder glyph was drawn instead of the icon."""
    registration = registry.registration(FONT_FAMILY)
    if not registration.succeeded:
        click.secho(
            f"  Icon font unavailable ({registration.error}); drew placeholder instead",
            fg="yellow",
        )
