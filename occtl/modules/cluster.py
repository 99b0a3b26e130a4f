"""Save clusters and connect to them."""
from typing import List, Optional

from occtl.exceptions import NotFoundError
from occtl.logging import get_logger
from occtl.login import LoginInvoker, get_invoker
from occtl.models import CliConfig, ClusterRecord
from occtl.registry import find_cluster, list_lines, upsert_cluster
from occtl.store import ConfigStore

logger = get_logger(__name__)


def add_and_connect(
    name: str,
    url: str,
    username: str,
    store: Optional[ConfigStore] = None,
    invoker: Optional[LoginInvoker] = None,
) -> None:
    """Save the cluster (adding or updating it) and log into it.

    The config file is written before the login tool takes over.
    """
    store = store or ConfigStore()
    cli_config = store.load()
    upsert_cluster(name, url, username, cli_config.clusters)
    cli_config = store.persist(cli_config)
    logger.info(f"Saved cluster {name} ({url})")
    connect(name, cli_config, invoker)


def connect(name: str, cli_config: CliConfig, invoker: Optional[LoginInvoker] = None) -> None:
    """Log into a saved cluster.

    Raises:
        NotFoundError: If no cluster is saved under name
    """
    cluster = get_cluster(name, cli_config)
    invoker = invoker or get_invoker()
    logger.info(f"Logging into {cluster.name} at {cluster.url} as {cluster.username}")
    invoker.invoke(cluster.url, cluster.username)


def connect_by_name(
    name: str,
    store: Optional[ConfigStore] = None,
    invoker: Optional[LoginInvoker] = None,
) -> None:
    store = store or ConfigStore()
    connect(name, store.load(), invoker)


def get_cluster(name: str, cli_config: CliConfig) -> ClusterRecord:
    cluster = find_cluster(name, cli_config.clusters)
    if cluster is None:
        raise NotFoundError(name)
    return cluster


def list_clusters(wide: bool = False, store: Optional[ConfigStore] = None) -> List[str]:
    """Return one display line per saved cluster."""
    store = store or ConfigStore()
    return list_lines(store.load().clusters, wide)
