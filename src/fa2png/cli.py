"""CLI entry point for fa2png - render FontAwesome icons to PNG images."""

from __future__ import annotations

import json
import logging
import sys

import click

from fa2png.cli_helpers import (
    _build_registry,
    _build_render_options,
    _default_output,
    _print_render_summary,
    _split_render_kwargs,
    _warn_if_placeholder,
    shared_render_options,
)

# -- CLI group --------------------------------------------------------------------------


@click.group()
@click.version_option(version="0.1.0", prog_name="fa2png")
@click.option("-v", "--verbose", is_flag=True, hidden=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Render FontAwesome icons to trimmed, centered PNG images.

    The FontAwesome 4.7 font is not bundled. Put FontAwesome.otf in the
    package fonts/ directory, set $FA2PNG_FONT_PATH, or pass --font;
    otherwise icons are drawn as a "?" placeholder.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


# -- render ----------------------------------------------------------------------------


@cli.command("render")
@click.argument("code")
@click.option("-o", "--output", type=click.Path(), default=None, help="Output PNG path")
@click.option("--preview/--no-preview", default=False, help="Show ASCII preview")
@shared_render_options
def render_cmd(code, **all_kwargs):
    """Render one icon, given by CSS code (e.g. fa-github), to a PNG file."""
    opts, cmd = _split_render_kwargs(all_kwargs)
    if opts["verbose"]:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    from fa2png.icons import icon_from_code
    from fa2png.renderer import render, save_icon

    icon = icon_from_code(code)
    if icon is None:
        click.secho(f"Error: unknown icon code '{code}'", fg="red", err=True)
        sys.exit(1)

    registry = _build_registry(opts["font"])
    try:
        options = _build_render_options(opts)
        image = render(icon, options, registry)
        output = save_icon(image, cmd["output"] or _default_output(code))
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    _print_render_summary(code, image, output)
    _warn_if_placeholder(registry)

    if cmd["preview"]:
        from fa2png.preview import preview_image

        click.echo("\n" + preview_image(image, code))


# -- batch -----------------------------------------------------------------------------


@cli.command()
@click.argument("codes", nargs=-1, required=True)
@click.option("-d", "--output-dir", type=click.Path(file_okay=False), default=".")
@shared_render_options
def batch(codes, **all_kwargs):
    """Render several icons into a directory, one PNG per code."""
    opts, cmd = _split_render_kwargs(all_kwargs)
    if opts["verbose"]:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    from fa2png.icons import icon_from_code
    from fa2png.renderer import render, save_icon

    try:
        options = _build_render_options(opts)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    registry = _build_registry(opts["font"])
    click.echo(f"Rendering {len(codes)} icon(s) into {cmd['output_dir']}...\n")

    success, failed = 0, 0
    for code in codes:
        icon = icon_from_code(code)
        if icon is None:
            click.secho(f"  Unknown icon code: {code}", fg="red", err=True)
            failed += 1
            continue

        try:
            image = render(icon, options, registry)
            output = save_icon(image, _default_output(code, cmd["output_dir"]))
        except Exception as e:
            click.secho(f"  Error rendering {code}: {e}", fg="red", err=True)
            failed += 1
            continue

        _print_render_summary(code, image, output)
        success += 1

    _warn_if_placeholder(registry)
    click.echo(f"\nDone: {success} succeeded, {failed} failed out of {len(codes)}.")
    if failed:
        sys.exit(1)


# -- list ------------------------------------------------------------------------------


@cli.command("list")
@click.option("--filter", "term", default=None, help="Only codes containing this text")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array")
def list_cmd(term, as_json):
    """List known icon codes."""
    from fa2png.icons import ICON_CODES, search_icons
    from fa2png.schema import IconEntry
    from fa2png.utils import codepoint_hex

    codes = search_icons(term)
    if as_json:
        entries = [
            IconEntry(
                code=code,
                name=ICON_CODES[code].name,
                codepoint=codepoint_hex(ICON_CODES[code]),
            ).model_dump()
            for code in codes
        ]
        click.echo(json.dumps(entries, indent=2))
        return

    for code in codes:
        click.echo(code)
    click.echo(f"\n{len(codes)} icon code(s)")


# -- lookup ----------------------------------------------------------------------------


@cli.command()
@click.argument("code")
def lookup(code):
    """Show the icon name and codepoint for a CSS code."""
    from fa2png.icons import icon_from_code
    from fa2png.utils import codepoint_hex

    icon = icon_from_code(code)
    if icon is None:
        click.secho(f"Unknown icon code: {code}", fg="yellow", err=True)
        sys.exit(1)

    click.echo(f"{code} -> {icon.name} (U+{codepoint_hex(icon).upper()})")


# -- inspect ---------------------------------------------------------------------------


@cli.command()
@click.argument("font_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--show-missing", is_flag=True, help="List icons the font cannot draw")
def inspect(font_path, show_missing):
    """Analyze a font file: family name and icon coverage."""
    from fa2png.utils import icon_coverage, infer_family_name

    click.echo(f"Inspecting: {font_path}\n")

    try:
        family = infer_family_name(font_path)
        covered, missing = icon_coverage(font_path)
    except Exception as e:
        click.secho(f"Error reading font: {e}", fg="red", err=True)
        sys.exit(1)

    total = len(covered) + len(missing)
    click.echo(f"  Family:   {family or '(unknown)'}")
    click.echo(f"  Coverage: {len(covered)}/{total} icons")

    if missing:
        click.secho(f"  Missing:  {len(missing)} icon(s)", fg="yellow")
        if show_missing:
            for name in missing:
                click.echo(f"    - {name}")
