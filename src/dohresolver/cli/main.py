"""Main CLI entry point for dohctl."""

import asyncio
import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from dohresolver.config import Settings
from dohresolver.core.models import RecordType

# Create the main app
app = typer.Typer(
    name="dohctl",
    help="doh-resolver - DNS lookups over a JSON HTTP API",
    no_args_is_help=True,
)

console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


# Global options stored in context
class GlobalOptions:
    def __init__(self):
        self.settings: Settings = Settings.from_env()
        self.output: OutputFormat = OutputFormat.TABLE
        self.verbose: bool = False
        self.debug: bool = False


def setup_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


# ============================================================================
# Server Commands
# ============================================================================


@app.command("serve")
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", "-H", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the DoH API server."""
    from dohresolver.cli.commands.serve import serve as run_server

    run_server(host, port, reload, ctx.obj)


# ============================================================================
# Query Commands
# ============================================================================


@app.command("lookup")
def lookup(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Domain name, URL or IP address (PTR)"),
    record_type: RecordType = typer.Option(RecordType.A, "--type", "-t", help="Record type"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="API base URL"),
):
    """Resolve a name through the DoH API."""
    from dohresolver.cli.commands.query import lookup as run_lookup

    ok = asyncio.run(run_lookup(name, record_type, url, ctx.obj))
    if not ok:
        raise typer.Exit(code=1)


# ============================================================================
# Version Command
# ============================================================================


@app.command("version")
def version():
    """Show version information."""
    from dohresolver import __version__

    console.print(f"dohctl version {__version__}")
    console.print("doh-resolver")


# ============================================================================
# Main Callback (Global Options)
# ============================================================================


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--output", "-o", help="Output format"
    ),
):
    """doh-resolver - DNS lookups over a JSON HTTP API."""
    ctx.ensure_object(GlobalOptions)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.output = output

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = ctx.obj.settings.log_level
    setup_logging(level)


if __name__ == "__main__":
    app()
