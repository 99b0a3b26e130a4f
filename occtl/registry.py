"""In-memory operations over the ordered list of saved clusters."""
from typing import List, Optional

from .models import ClusterRecord


def find_cluster(name: str, clusters: List[ClusterRecord]) -> Optional[ClusterRecord]:
    """Return the cluster whose name matches exactly, or None."""
    return next((c for c in clusters if c.name == name), None)


def upsert_cluster(name: str, url: str, username: str, clusters: List[ClusterRecord]) -> List[ClusterRecord]:
    """Add a cluster, or update url and username of the existing one.

    Existing clusters keep their position; new ones are appended.

    Args:
        name: Cluster name, the unique key
        url: API server URL
        username: User to log in as
        clusters: Registry to update in place

    Returns:
        The same list, updated
    """
    cluster = find_cluster(name, clusters)
    if cluster is not None:
        cluster.url = url
        cluster.username = username
    else:
        clusters.append(ClusterRecord(name=name, url=url, username=username))
    return clusters


def format_cluster(cluster: ClusterRecord, wide: bool = False) -> str:
    if wide:
        return f"{cluster.name}\t{cluster.username}\t{cluster.url}"
    return cluster.name


def list_lines(clusters: List[ClusterRecord], wide: bool = False) -> List[str]:
    """Format each cluster as one display line, in registry order."""
    return [format_cluster(c, wide) for c in clusters]
