"""Selecting nodes by attribute value and hiding Fargate nodes."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from k8i.model import NodeInfo, Taint

SUPPORTED_FILTER_ATTRIBUTES: tuple[str, ...] = (
    "ec2_type",
    "instance_type",
    "arch",
    "zone",
    "pool",
    "nodeclaim",
    "taint",
    "autoscaler",
)

_FARGATE_PREFIX = "fargate-"

_FIELD_FOR_ATTRIBUTE = {
    "ec2_type": "capacity_type",
    "instance_type": "instance_type",
    "arch": "architecture",
    "zone": "zone",
    "pool": "nodepool",
    "nodeclaim": "nodeclaim",
    "autoscaler": "autoscaler",
}

Matcher = Callable[[NodeInfo, str], bool]


def _matches_taint(taints: Iterable[Taint], spec: str) -> bool:
    """True when a taint matches "KEY" or "KEY=VALUE"."""
    if "=" in spec:
        key, value = spec.split("=", 1)
        return any(t.key == key and t.value == value for t in taints)
    return any(t.key == spec for t in taints)


def _field_matcher(field_name: str) -> Matcher:
    def match(node: NodeInfo, value: str) -> bool:
        return getattr(node, field_name).casefold() == value.casefold()

    return match


def _matcher_for(attribute: str) -> Matcher:
    if attribute == "taint":
        return lambda node, value: _matches_taint(node.taints, value)
    field_name = _FIELD_FOR_ATTRIBUTE.get(attribute)
    if field_name is None:
        raise ValueError(
            f'unsupported filter attribute "{attribute}"; supported attributes: '
            + ", ".join(SUPPORTED_FILTER_ATTRIBUTES)
        )
    return _field_matcher(field_name)


def filter_nodes(nodes: Sequence[NodeInfo] | None, attribute: str, value: str) -> list[NodeInfo]:
    """Return the nodes whose attribute matches value, case-insensitively.

    Raises ValueError for an unsupported attribute.
    """
    matcher = _matcher_for(attribute)
    return [node for node in nodes or () if matcher(node, value)]


def hide_fargate_nodes(nodes: Sequence[NodeInfo] | None) -> list[NodeInfo]:
    """Drop nodes whose name starts with "fargate-"."""
    return [node for node in nodes or () if not node.name.startswith(_FARGATE_PREFIX)]