from .cluster import app as cluster_app

__all__ = ['cluster_app']
