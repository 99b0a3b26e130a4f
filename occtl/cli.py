import typer
import logging
from typing import Optional

from occtl.commands import cluster_app
from occtl.logging import setup_logging

app = typer.Typer(help="occtl - log into saved OpenShift clusters.")

app.add_typer(cluster_app, name="cluster")


# Global options callback
@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to the clusters config file"),
):
    """occtl - save OpenShift clusters and log into them with `oc login`."""
    setup_logging(debug)
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Debug mode enabled")
    ctx.obj = {"config_path": config}

