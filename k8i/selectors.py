"""Narrowing nodes to those that run pods of a workload or namespace."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from k8i.model import NodeInfo


def node_names_from_pods(pods: Iterable[Mapping[str, Any]] | None) -> set[str]:
    """Return the set of non-empty spec.nodeName values of the given pods."""
    names: set[str] = set()
    for pod in pods or ():
        node_name = (pod.get("spec") or {}).get("nodeName")
        if node_name:
            names.add(node_name)
    return names


def label_selector_from_match_labels(
    kind: str,
    namespace: str,
    name: str,
    match_labels: Mapping[str, str] | None,
) -> str:
    """Join a workload's matchLabels into a "k=v,k2=v2" label selector.

    Raises ValueError when the workload has no match labels.
    """
    if not match_labels:
        raise ValueError(f"{kind} {namespace}/{name} has no label selector")
    return ",".join(f"{key}={value}" for key, value in match_labels.items())


def keep_nodes_on(nodes: Sequence[NodeInfo] | None, node_names: Iterable[str]) -> list[NodeInfo]:
    """Keep, in order, the nodes whose name is among node_names."""
    wanted = set(node_names)
    return [node for node in nodes or () if node.name in wanted]