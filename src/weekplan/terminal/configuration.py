# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from weekplan import configuration
from weekplan.configuration import Configuration
from weekplan.repository.configuration import CONFIGURATION_REPO
from weekplan.service.tag import sync_tags
from weekplan.terminal.custom_typer import AliasedTyperGroup
from weekplan.version.version import checkpoint

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _config_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("use_git_versioning", _enabled(config["use_git_versioning"]))
    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("serve_host", config["serve_host"])
    table.add_row("serve_port", str(config["serve_port"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "data_path",
        config["data_path"] or f"None ({configuration.DATA_PATH})",
    )
    return table


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level.upper()


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_config_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}", soft_wrap=True)


@app.command("set, s")
def set(
    use_git_versioning: Annotated[
        Optional[bool],
        typer.Option(
            "--git-versioning/--no-git-versioning",
            help="Commit the data directory to git after every change",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--hide-header",
            help="Print the header before schedules",
        ),
    ] = None,
    serve_host: Annotated[
        Optional[str],
        typer.Option("--serve-host", help="Address the web viewer binds to"),
    ] = None,
    serve_port: Annotated[
        Optional[int],
        typer.Option("--serve-port", min=1, max=65535, help="Web viewer port"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for the entry files (default: platform data directory)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Go back to the platform data directory",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        use_git_versioning=use_git_versioning,
        show_header=show_header,
        serve_host=serve_host,
        serve_port=serve_port,
        log_level=log_level,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )
    CONFIGURATION_REPO.flush()
    logger.info("configuration updated")

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _config_table(CONFIGURATION_REPO.get_config(), title="Updated Configuration")
    )


@app.command("resync-tags, rt")
def resync_tags() -> None:
    """Rebuild the tag completion cache from the stored entries."""
    tags = sync_tags()
    checkpoint("resync tags")

    console = Console()
    console.print(f"[green]Tags resynced successfully![/green] ({len(tags)} tags)")
