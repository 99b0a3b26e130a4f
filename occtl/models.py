"""
Data models for saved clusters.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ClusterRecord:
    """A named cluster endpoint and the user to log in as."""
    name: str
    url: str
    username: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url, "username": self.username}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClusterRecord":
        return cls(name=data["name"], url=data["url"], username=data["username"])


@dataclass
class CliConfig:
    """Contents of the occtl config file."""
    clusters: List[ClusterRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"clusters": [c.to_dict() for c in self.clusters]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CliConfig":
        return cls(clusters=[ClusterRecord.from_dict(c) for c in data.get("clusters") or []])
