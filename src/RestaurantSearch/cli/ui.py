"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from RestaurantSearch.cli.runner import CommandRunner
from RestaurantSearch.config import DEFAULT_CONFIG_PATH, load_config_with_defaults
from RestaurantSearch.config.output import ALLOWED_FORMATS
from RestaurantSearch.services.indexing import DEFAULT_BATCH_SIZE


@click.group(help="RestaurantSearch: full-text restaurant search on Elasticsearch.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged over the defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config.
    """
    load_dotenv()
    ctx.obj = load_config_with_defaults(config_path)


@cli.command("search")
@click.option("--query", "-q", default=None, help="Free-text query. Omit to match every restaurant.")
@click.option("--sort", "-s", default=None, help="Sort field, or 'relevancy' for score order.")
@click.option("--order", "-o", default=None, help="Sort order: asc or desc.")
@click.option("--page", "-p", default="1", show_default=True, help="Page number (1-based).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(ALLOWED_FORMATS, case_sensitive=False),
    default=None,
    help="Output format. Defaults to output.format from config.",
)
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: str | None,
    sort: str | None,
    order: str | None,
    page: str,
    output_format: str | None,
) -> None:
    """Search restaurants and print one page of results."""
    runner = CommandRunner(ctx.obj)
    runner.run_search(
        ctx.command.name,
        {"query": query, "sort": sort, "order": order, "page": page},
        output_format=output_format,
    )


@cli.command("create-index")
@click.option("--force", is_flag=True, help="Delete and recreate the index if it exists.")
@click.pass_context
def create_index_cmd(ctx: click.Context, force: bool) -> None:
    """Create the restaurant index with its mappings."""
    CommandRunner(ctx.obj).run_create_index(ctx.command.name, force=force)


@cli.command("import")
@click.argument("path", type=click.Path(path_type=Path, exists=True, dir_okay=False))
@click.option("--batch-size", type=click.IntRange(min=1), default=DEFAULT_BATCH_SIZE, show_default=True)
@click.option("--create-index", is_flag=True, help="Create the index first if it is missing.")
@click.pass_context
def import_cmd(ctx: click.Context, path: Path, batch_size: int, create_index: bool) -> None:
    """Bulk-index restaurant records from a JSON file."""
    CommandRunner(ctx.obj).run_import(ctx.command.name, path, batch_size=batch_size, create_index=create_index)
