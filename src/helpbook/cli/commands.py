"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from helpbook.config import CONFIG_FILE, Settings, default_config_yaml, load_config
from helpbook.core.errors import BuildError
from helpbook.core.pipeline import run_build
from helpbook.core.providers.registry import available_providers


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, config_file: Optional[Path] = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides, config_file=config_file)
    except ValueError as e:
        _fail(str(e))


def build_cmd(
    content: Annotated[Optional[str], typer.Argument(help="Content directory (overrides content_dir)")] = None,
    config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Config file")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", "-o", help="Output directory")] = None,
    assets: Annotated[Optional[str], typer.Option("--assets-dir", help="Separate assets directory")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="URL prefix rewritten to relative links")] = None,
    theme: Annotated[Optional[str], typer.Option("--theme", help="modern, mavericks, tiger, or custom")] = None,
    custom_css: Annotated[Optional[str], typer.Option("--custom-css", help="Stylesheet for the custom theme")] = None,
    provider: Annotated[Optional[str], typer.Option("--provider", help="Content provider identifier")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Help book title")] = None,
    bundle_name: Annotated[Optional[str], typer.Option("--bundle-name", help="Bundle name")] = None,
    bundle_id: Annotated[Optional[str], typer.Option("--bundle-id", help="Bundle identifier")] = None,
    ):
    """Build a help bundle: scan -> compose -> export."""
    if custom_css and theme is None:
        theme = "custom"
    settings = _settings(overrides={
        "content_dir": content, "output_dir": out, "assets_dir": assets,
        "base_url": base_url, "theme": theme, "custom_css": custom_css,
        "provider": provider, "help_book_title": title,
        "bundle_name": bundle_name, "bundle_identifier": bundle_id,
    }, config_file=config)

    typer.echo(f"Content: {settings.content_dir}")
    if settings.assets_dir:
        typer.echo(f"Assets: {settings.assets_dir}")
    typer.echo(f"Output: {settings.output_dir}")

    try:
        result = run_build(settings)
    except BuildError as e:
        _fail("Build failed", e)
    except ValueError as e:
        _fail(str(e))

    typer.echo(
        f"Built {result.bundle_path} - "
        f"{result.documents} document(s), "
        f"{result.pages} page(s), "
        f"{result.assets} asset(s)"
    )


def init_cmd(
    path: Annotated[Path, typer.Argument(help="Config file to create")] = Path(CONFIG_FILE),
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
    ):
    """Write a config file with every setting at its default."""
    if path.exists() and not force:
        _fail(f"{path} already exists (use --force to overwrite)")
    path.write_text(default_config_yaml(), encoding="utf-8")
    typer.echo(f"Configuration written to {path}")


def providers_cmd():
    """List registered content providers."""
    for identifier, cls in available_providers().items():
        typer.echo(f"{identifier}\t{cls.display_name}")
