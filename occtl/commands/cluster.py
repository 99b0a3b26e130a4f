from typing import Optional

import typer

from occtl.config import Config
from occtl.exceptions import OcctlError
from occtl.login import get_invoker
from occtl.modules import cluster as cluster_module
from occtl.registry import format_cluster
from occtl.store import ConfigStore

cluster_app = typer.Typer(help="Save clusters and log into them.")


def _store(ctx: typer.Context) -> ConfigStore:
    obj = ctx.obj or {}
    return ConfigStore(obj.get("config_path"))


def _fail(e: Exception):
    typer.echo(f"❌ {e}", err=True)
    raise typer.Exit(code=1)


@cluster_app.command("connect")
def connect_cluster(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Cluster name"),
    cluster_url: Optional[str] = typer.Option(None, "--cluster-url", help="API server URL, saves the cluster"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="User to log in as, saves the cluster"),
):
    """Log into a cluster, saving it first when --cluster-url and --username are given."""
    if (cluster_url is None) != (username is None):
        raise typer.BadParameter("--cluster-url and --username must be given together")

    store = _store(ctx)
    try:
        Config.validate()
        invoker = get_invoker()
        if cluster_url is not None:
            cluster_module.add_and_connect(name, cluster_url, username, store=store, invoker=invoker)
        else:
            cluster_module.connect_by_name(name, store=store, invoker=invoker)
    except (OcctlError, ValueError) as e:
        _fail(e)


@cluster_app.command("list")
def list_clusters(
    ctx: typer.Context,
    wide: bool = typer.Option(False, "--wide", "-w", help="Also show username and URL"),
):
    """List saved clusters."""
    try:
        lines = cluster_module.list_clusters(wide, store=_store(ctx))
    except OcctlError as e:
        _fail(e)
    for line in lines:
        typer.echo(line)


@cluster_app.command("get")
def get_cluster(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Cluster name"),
):
    """Show a saved cluster."""
    try:
        cluster = cluster_module.get_cluster(name, _store(ctx).load())
    except OcctlError as e:
        _fail(e)
    typer.echo(format_cluster(cluster, wide=True))


app = cluster_app
