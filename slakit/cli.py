"""
slakit Command Line Interface.

Thin wrapper over the load / edit / save operations for shell scripting.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

import typer
import yaml

from slakit import __version__
from slakit.config import DEFAULT_CONFIG, SLAConfig
from slakit.core import Document
from slakit.errors import SLAError
from slakit.sla import SLAModifier, SLAValidator, load, save

app = typer.Typer(
    name="slakit",
    help="Scribus SLA document editing",
    add_completion=False,
)

PREVIEW_LENGTH = 40


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _fail(message: str) -> None:
    typer.secho(f"✗ Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _load_config(config_file: Optional[Path]) -> SLAConfig:
    if config_file is None:
        return DEFAULT_CONFIG
    try:
        return SLAConfig.from_yaml(config_file)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        _fail(f"Invalid config {config_file}: {e}")


def _edit(
    sla_file: Path,
    output: Optional[Path],
    config_file: Optional[Path],
    verbose: bool,
    action: Callable[[SLAModifier], None],
) -> None:
    """Load a document, apply one edit and save it (in place by default)."""
    _setup_logging(verbose)
    config = _load_config(config_file)
    target = output or sla_file

    try:
        document = load(sla_file, config)
        action(SLAModifier(document, config))
        save(document, target, config)
    except SLAError as e:
        _fail(str(e))

    typer.secho(f"✓ Saved {target}", fg=typer.colors.GREEN)


def _describe(document: Document, config: SLAConfig) -> List[str]:
    lines = []
    for index, page_object in enumerate(document.page_objects):
        if config.is_text_frame(page_object.ptype):
            story = page_object.story
            text = story.plain_text() if story is not None else ""
            if len(text) > PREVIEW_LENGTH:
                text = text[: PREVIEW_LENGTH - 1] + "…"
            detail = f"text {text!r}"
        elif config.is_picture_frame(page_object.ptype):
            detail = f"image {page_object.image_file or '-'}"
        else:
            detail = f"PTYPE {page_object.ptype}"
        lines.append(
            f"  [{index}] ItemID {page_object.item_id} at "
            f"({page_object.x}, {page_object.y}) page {page_object.own_page}: {detail}"
        )
    return lines


OutputOption = typer.Option(
    None, "--output", "-o", help="Write the result here instead of overwriting the input"
)
ConfigOption = typer.Option(None, "--config", "-c", help="YAML settings file")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose output")


@app.command()
def info(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    List the page objects of a document.

    Example:
        slakit info flyer.sla
    """
    _setup_logging(verbose)
    config = _load_config(config_file)
    try:
        document = load(sla_file, config)
    except SLAError as e:
        _fail(str(e))

    content = document.content
    typer.echo(f"File: {sla_file}")
    typer.echo(f"Version: {document.version}")
    typer.echo(f"Pages: {len(content.pages)}")
    typer.echo(f"Layers: {len(content.layers)}")
    typer.echo(f"Colors: {len(content.colors)}")
    typer.echo(f"Page objects: {len(document.page_objects)}")
    for line in _describe(document, config):
        typer.echo(line)


@app.command()
def duplicate(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    index: int = typer.Argument(..., help="Page object index"),
    fresh_id: bool = typer.Option(False, "--fresh-id", help="Give the copy a new ItemID"),
    output: Optional[Path] = OutputOption,
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    Insert a copy of a page object right after it.

    Example:
        slakit duplicate flyer.sla 0 --fresh-id -o flyer-2.sla
    """
    _edit(
        sla_file,
        output,
        config_file,
        verbose,
        lambda modifier: modifier.duplicate(index, fresh_item_id=fresh_id),
    )


@app.command()
def move(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    index: int = typer.Argument(..., help="Page object index"),
    x: float = typer.Argument(..., help="New XPOS"),
    y: float = typer.Argument(..., help="New YPOS"),
    output: Optional[Path] = OutputOption,
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    Set the position of a page object.

    Example:
        slakit move flyer.sla 1 100 200
    """
    _edit(sla_file, output, config_file, verbose, lambda modifier: modifier.move(index, x, y))


@app.command("set-text")
def set_text(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    index: int = typer.Argument(..., help="Text frame index"),
    text: str = typer.Argument(..., help="New content of the first text run"),
    output: Optional[Path] = OutputOption,
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    Replace the text of a text frame's first run.

    Example:
        slakit set-text flyer.sla 0 "Summer Sale"
    """
    _edit(sla_file, output, config_file, verbose, lambda modifier: modifier.set_text(index, text))


@app.command("set-image")
def set_image(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    index: int = typer.Argument(..., help="Picture frame index"),
    image: str = typer.Argument(..., help="New image file reference"),
    output: Optional[Path] = OutputOption,
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    Point a picture frame at another image file.

    Example:
        slakit set-image flyer.sla 1 images/beach.jpg
    """
    _edit(sla_file, output, config_file, verbose, lambda modifier: modifier.set_image(index, image))


@app.command("set-bullets")
def set_bullets(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    index: int = typer.Argument(..., help="Text frame index"),
    items: List[str] = typer.Argument(..., help="Bullet point texts"),
    output: Optional[Path] = OutputOption,
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    Rebuild a text frame as a bullet list.

    Example:
        slakit set-bullets flyer.sla 0 "Free entry" "Live music"
    """
    _edit(
        sla_file, output, config_file, verbose, lambda modifier: modifier.set_bullets(index, items)
    )


@app.command()
def validate(
    sla_file: Path = typer.Argument(..., help="SLA document"),
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    Check ItemIDs, text-flow links, colors and page references.

    Exits with status 1 when errors are found.

    Example:
        slakit validate flyer.sla
    """
    _setup_logging(verbose)
    config = _load_config(config_file)
    try:
        document = load(sla_file, config)
    except SLAError as e:
        _fail(str(e))

    result = SLAValidator().validate(document)

    for error in result.errors:
        typer.secho(f"  ✗ {error}", fg=typer.colors.RED)
    for warning in result.warnings:
        typer.secho(f"  ⚠ {warning}", fg=typer.colors.YELLOW)

    if not result.is_valid:
        typer.secho(f"✗ {sla_file}: {len(result.errors)} error(s)", fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.secho(f"✓ {sla_file} is valid", fg=typer.colors.GREEN, bold=True)


@app.command()
def version():
    """Show version information."""
    typer.echo(f"slakit v{__version__}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
