"""occtl - manage saved OpenShift clusters and log into them."""

__version__ = "0.1.0"
