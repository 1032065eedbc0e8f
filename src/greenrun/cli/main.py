"""
This module is the main entry point for the GreenRun CLI.

It aggregates all commands from the submodules (estimate, regions, serve).
"""

import logging

import typer

from ..core.config import config
from . import estimate

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="greenrun",
    help="Estimate the energy, carbon footprint and cost of request-driven container workloads.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of GreenRun.
    """
    if value:
        from .. import __version__

        typer.echo(f"GreenRun version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of GreenRun.
    """
    from .. import __version__

    typer.echo(f"GreenRun version: {__version__}")


@app.command()
def serve(
    host: str = typer.Option(None, help="Interface to bind (defaults to API_HOST)."),
    port: int = typer.Option(None, help="Port to listen on (defaults to PORT or 8080)."),
):
    """
    Start the HTTP estimation API.
    """
    import uvicorn

    from ..api.app import create_app

    bind_host = host or config.API_HOST
    bind_port = port or config.API_PORT
    logger.info("listening on %s:%s", bind_host, bind_port)
    uvicorn.run(create_app(), host=bind_host, port=bind_port)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    GreenRun CLI main entry point.
    """
    pass


# Register commands
app.command()(estimate.estimate)
app.command()(estimate.regions)


if __name__ == "__main__":
    app()
