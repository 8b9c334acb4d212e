"""CLI interface for Docredirect.

Command-line tool for generating redirect pages for relocated documentation.
"""

import logging
import sys
from pathlib import Path

import click

from docredirect.config import CliSettings, Config
from docredirect.generator import RedirectGenerator, RedirectPage


@click.group()
def cli() -> None:
    """Docredirect - keep old documentation URLs working."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docredirect.toml)",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory to write redirect pages to (overrides config)",
)
@click.option(
    "--url-prefix",
    "-u",
    default=None,
    help="Prefix of the redirect target URLs (overrides config)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the pages that would be written without writing them.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every written page)",
)
def generate(
    config_path: Path | None,
    output_dir: Path | None,
    url_prefix: str | None,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Generate redirect pages."""
    _configure_logging(verbose)

    try:
        generator = _load_generator(config_path, output_dir, url_prefix)

        click.echo(f"Output directory: {generator.output_root}")
        click.echo(f"URL prefix: {generator.url_prefix}")

        if dry_run:
            _print_pages(generator.plan())
            click.echo(
                click.style(
                    "\n[DRY RUN] No files written.",
                    fg="cyan",
                    bold=True,
                ),
            )
            return

        result = generator.generate()
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(
        click.style(
            f"\nWrote {result.count} redirect pages.",
            fg="green",
            bold=True,
        ),
    )


@cli.command("list")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docredirect.toml)",
)
@click.option(
    "--url-prefix",
    "-u",
    default=None,
    help="Prefix of the redirect target URLs (overrides config)",
)
def list_pages(config_path: Path | None, url_prefix: str | None) -> None:
    """List configured paths and their redirect targets."""
    try:
        generator = _load_generator(config_path, None, url_prefix)
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    _print_pages(generator.plan())


def _load_generator(
    config_path: Path | None,
    output_dir: Path | None,
    url_prefix: str | None,
) -> RedirectGenerator:
    """Load config with CLI overrides and build a generator from it.

    Raises:
        FileNotFoundError: If the config or template file doesn't exist
        ValueError: If configuration is invalid
    """
    cli_settings = CliSettings(output_dir=output_dir, url_prefix=url_prefix)
    config = Config.load(config_path, cli_settings)
    return RedirectGenerator.from_config(config)


def _print_pages(pages: list[RedirectPage]) -> None:
    for page in pages:
        click.echo(f"  {page.path} -> {page.target_url}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
