"""Node metadata taken from labels and the provider ID."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

_MISSING = "x"
_EKS_NODEGROUP = "eks.amazonaws.com/nodegroup"

CAPACITY_TYPE_KEYS = (
    "karpenter.sh/capacity-type",
    "karpenter.k8s.aws/capacity-type",
    "spotinst.io/node-lifecycle",
    "eks.amazonaws.com/capacityType",
)

NODEPOOL_KEYS = (
    "karpenter.sh/nodepool",
    "karpenter.k8s.aws/nodepool",
    "spotinst.io/ocean-vng-id",
    _EKS_NODEGROUP,
)

_EC2_ID = re.compile(r"i-[A-Za-z0-9-]+")


@dataclass(frozen=True)
class NodeMetadata:
    """Label-derived values for one node; missing values are "x"."""

    ec2_instance_id: str
    instance_type: str
    capacity_type: str
    architecture: str
    zone: str
    nodepool: str
    nodeclaim: str
    autoscaler: str


def _label(labels: Mapping[str, str], key: str) -> str:
    return labels.get(key) or _MISSING


def _has(labels: Mapping[str, str], key: str) -> bool:
    return bool(labels.get(key))


def _normalize_capacity_type(value: str) -> str:
    squashed = value.lower().replace("-", "").replace("_", "")
    return "od" if squashed == "ondemand" else value


def _zone(labels: Mapping[str, str]) -> str:
    zone = _label(labels, "topology.kubernetes.io/zone")
    if zone == _MISSING or len(zone) < 2:
        return zone
    return zone[-2:]


def _nodeclaim(labels: Mapping[str, str]) -> str:
    value = _label(labels, "karpenter.sh/nodeclaim")
    return value if value == _MISSING else value[:20]


def extract_metadata(labels: Mapping[str, str] | None, provider_id: str) -> NodeMetadata:
    """Extract all metadata from a node's labels and provider ID."""
    labels = labels or {}
    return NodeMetadata(
        ec2_instance_id=extract_ec2_id(provider_id),
        instance_type=_label(labels, "node.kubernetes.io/instance-type"),
        capacity_type=extract_capacity_type(labels),
        architecture=_label(labels, "kubernetes.io/arch"),
        zone=_zone(labels),
        nodepool=extract_nodepool(labels),
        nodeclaim=_nodeclaim(labels),
        autoscaler=detect_autoscaler(labels),
    )


def extract_capacity_type(labels: Mapping[str, str] | None) -> str:
    """Return the capacity type from the highest-priority label, on-demand as "od"."""
    labels = labels or {}
    for key in CAPACITY_TYPE_KEYS:
        value = labels.get(key)
        if value:
            return _normalize_capacity_type(value)
    return _MISSING


def extract_nodepool(labels: Mapping[str, str] | None) -> str:
    """Return the nodepool from the highest-priority label.

    EKS nodegroup names are cut to 15 characters.
    """
    labels = labels or {}
    for key in NODEPOOL_KEYS:
        value = labels.get(key)
        if value:
            return value[:15] if key == _EKS_NODEGROUP else value
    return _MISSING


def extract_ec2_id(provider_id: str) -> str:
    """Return the EC2 instance ID found in a provider ID, or "x"."""
    match = _EC2_ID.search(provider_id or "")
    return match.group(0) if match else _MISSING


def detect_autoscaler(labels: Mapping[str, str] | None) -> str:
    """Name the autoscaler: karpenter, then spotio, then cas, else "x"."""
    labels = labels or {}
    if _has(labels, "karpenter.sh/nodepool") or _has(labels, "karpenter.k8s.aws/nodepool"):
        return "karpenter"
    if _has(labels, "spotinst.io/ocean-vng-id") or _has(labels, "spotinst.io/node-lifecycle"):
        return "spotio"
    if _has(labels, _EKS_NODEGROUP):
        return "cas"
    return _MISSING