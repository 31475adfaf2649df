"""Helpers that turn raw cluster objects into per-node lookups and loads."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def is_node_ready(node: Mapping[str, Any]) -> bool:
    """True when the node's Ready condition has status "True"."""
    status = node.get("status") or {}
    for condition in status.get("conditions") or ():
        if condition.get("type") == "Ready":
            return condition.get("status") == "True"
    return False


def build_metrics_by_node(metrics: Iterable[Mapping[str, Any]] | None) -> dict[str, Mapping[str, Any]]:
    """Map node name to its metrics object."""
    result: dict[str, Mapping[str, Any]] = {}
    for item in metrics or ():
        name = (item.get("metadata") or {}).get("name", "")
        result[name] = item
    return result


def build_nodeclaim_by_node(nodeclaims: Iterable[Mapping[str, Any]] | None) -> dict[str, str]:
    """Map node name to nodeclaim name using each nodeclaim's status.nodeName.

    Nodeclaims without a status mapping or a non-empty node name are skipped.
    """
    result: dict[str, str] = {}
    for claim in nodeclaims or ():
        status = claim.get("status")
        if not isinstance(status, Mapping):
            continue
        node_name = status.get("nodeName")
        if not isinstance(node_name, str) or not node_name:
            continue
        metadata = claim.get("metadata")
        claim_name = metadata.get("name", "") if isinstance(metadata, Mapping) else ""
        result[node_name] = claim_name if isinstance(claim_name, str) else ""
    return result


def calc_load_percent(usage: int, capacity: int) -> int:
    """Return usage as a rounded percentage of capacity (millicores); 0 for zero capacity."""
    if capacity == 0:
        return 0
    return _round_half_away(usage * 100.0 / capacity)


def calc_load_percent_float(usage: float, capacity: float) -> int:
    """Return usage as a rounded percentage of capacity (GB); 0 for zero capacity."""
    if capacity == 0:
        return 0
    return _round_half_away(usage * 100.0 / capacity)