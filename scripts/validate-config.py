#!/usr/bin/env python3
"""Check a hand-edited occtl config file before using it."""
import sys
from collections import Counter

from occtl.exceptions import PersistenceError
from occtl.store import ConfigStore


def fail(msg):
    print(f"❌ {msg}")
    sys.exit(1)


if len(sys.argv) > 2:
    fail("Usage: validate-config.py [path/to/config.yaml]")

store = ConfigStore(sys.argv[1] if len(sys.argv) == 2 else None)

if not store.path.exists():
    fail(f"Config file not found: {store.path}")

# YAML and schema validation
try:
    cli_config = store.load()
except PersistenceError as e:
    fail(str(e))

# Names are the lookup key
counts = Counter(c.name for c in cli_config.clusters)
duplicates = [name for name, count in counts.items() if count > 1]
if duplicates:
    fail(f"Duplicate cluster names: {', '.join(duplicates)}")

for cluster in cli_config.clusters:
    if not cluster.name:
        fail(f"Cluster with url {cluster.url} has an empty name")
    if "\t" in cluster.name:
        print(f"⚠️  Cluster name {cluster.name!r} contains a tab, `cluster list --wide` output will be ambiguous.")
    if not cluster.url.startswith(("https://", "http://")):
        print(f"⚠️  Cluster {cluster.name} url {cluster.url} has no http(s) scheme.")

print(f"✅ {store.path} validation passed ({len(cli_config.clusters)} cluster(s)).")
