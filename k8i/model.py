"""Data types shared across the node reporting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


@dataclass(frozen=True)
class Taint:
    """A node taint: key, optional value and scheduling effect."""

    key: str
    value: str = ""
    effect: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Taint":
        """Build a taint from its API representation."""
        return cls(
            key=str(data.get("key") or ""),
            value=str(data.get("value") or ""),
            effect=str(data.get("effect") or ""),
        )

    def to_dict(self) -> dict[str, str]:
        """Return the API representation of the taint."""
        result = {"key": self.key, "effect": self.effect}
        if self.value:
            result["value"] = self.value
        return result


@dataclass
class NodeInfo:
    """All processed information for a single node."""

    name: str = ""

    pods_used: int = 0
    pods_max: int = 0

    cpu_request_cores: float = 0.0
    cpu_limit_cores: float = 0.0
    cpu_usage_cores: float = 0.0
    cpu_capacity_cores: float = 0.0
    cpu_request_milli: int = 0
    cpu_limit_milli: int = 0
    cpu_usage_milli: int = 0
    cpu_capacity_milli: int = 0
    cpu_load_percent: int = 0

    mem_request_gb: float = 0.0
    mem_limit_gb: float = 0.0
    mem_usage_gb: float = 0.0
    mem_capacity_gb: float = 0.0
    mem_load_percent: int = 0

    ec2_instance_id: str = ""
    instance_type: str = ""
    capacity_type: str = ""
    architecture: str = ""
    zone: str = ""
    nodepool: str = ""
    nodeclaim: str = ""

    autoscaler: str = ""

    creation_time: datetime | None = None
    age: str = ""

    taints: list[Taint] = field(default_factory=list)
    taint_str: str = ""
    taint_sort_key: str = ""


@dataclass
class RunConfig:
    """Options chosen on the command line."""

    context: str = ""
    labels: str = ""
    taints: str = ""
    filter: str = ""
    sort: str = "pool=asc"
    fargate: bool = False
    color: bool | None = None
    debug: bool = False
    group_by: str = ""
    output: str = "table"
    no_headers: bool = False
    deployment: str = ""
    statefulset: str = ""
    namespace: str = ""
    daemonset: str = ""


@dataclass
class PodAggregation:
    """Per-node totals of pod resource requests and limits."""

    pod_count: int = 0
    cpu_request_milli: int = 0
    cpu_limit_milli: int = 0
    mem_request_gb: float = 0.0
    mem_limit_gb: float = 0.0


@dataclass
class ClusterData:
    """Raw objects collected from the cluster API, as plain mappings."""

    nodes: list[dict[str, Any]] = field(default_factory=list)
    metrics: list[dict[str, Any]] = field(default_factory=list)
    pods: list[dict[str, Any]] = field(default_factory=list)
    nodeclaims: list[dict[str, Any]] = field(default_factory=list)