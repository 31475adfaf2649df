"""Structured JSON and YAML output of node data."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Iterable, Mapping, Protocol, TextIO

import yaml

from k8i.model import NodeInfo


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


@dataclass
class NodeOutput:
    """Serializable view of a node; field names are the output keys."""

    name: str
    pods_used: int
    pods_max: int
    cpu_request_cores: float
    cpu_limit_cores: float
    cpu_usage_cores: float
    cpu_capacity_cores: float
    cpu_load_percent: int
    mem_request_gb: float
    mem_limit_gb: float
    mem_usage_gb: float
    mem_capacity_gb: float
    mem_load_percent: int
    ec2_instance_id: str
    instance_type: str
    capacity_type: str
    architecture: str
    zone: str
    nodepool: str
    nodeclaim: str
    autoscaler: str
    age: str
    taints: str

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as an ordered mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NodeOutput":
        """Build a NodeOutput from a parsed JSON or YAML mapping."""
        return cls(**{f.name: data[f.name] for f in fields(cls)})


def to_node_output(node: NodeInfo) -> NodeOutput:
    """Convert a NodeInfo into its serializable form."""
    return NodeOutput(
        name=node.name,
        pods_used=node.pods_used,
        pods_max=node.pods_max,
        cpu_request_cores=node.cpu_request_cores,
        cpu_limit_cores=node.cpu_limit_cores,
        cpu_usage_cores=node.cpu_usage_cores,
        cpu_capacity_cores=node.cpu_capacity_cores,
        cpu_load_percent=node.cpu_load_percent,
        mem_request_gb=node.mem_request_gb,
        mem_limit_gb=node.mem_limit_gb,
        mem_usage_gb=node.mem_usage_gb,
        mem_capacity_gb=node.mem_capacity_gb,
        mem_load_percent=node.mem_load_percent,
        ec2_instance_id=node.ec2_instance_id,
        instance_type=node.instance_type,
        capacity_type=node.capacity_type,
        architecture=node.architecture,
        zone=node.zone,
        nodepool=node.nodepool,
        nodeclaim=node.nodeclaim,
        autoscaler=node.autoscaler,
        age=node.age,
        taints=node.taint_str,
    )


def to_node_output_list(nodes: Iterable[NodeInfo] | None) -> list[NodeOutput]:
    """Convert every node into its serializable form."""
    return [to_node_output(node) for node in nodes or ()]


class Formatter(Protocol):
    """Writes node data to a text stream."""

    def format(self, stream: TextIO, nodes: Iterable[NodeInfo]) -> None: ...


_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _plain_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


class JSONFormatter:
    """Renders nodes as an indented JSON array."""

    def format(self, stream: TextIO, nodes: Iterable[NodeInfo]) -> None:
        """Write nodes as a JSON array followed by a newline.

        Raises ValueError when a value is NaN or infinite.
        """
        records = [
            {key: _plain_number(value) for key, value in out.to_dict().items()}
            for out in to_node_output_list(nodes)
        ]
        text = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False)
        for char, escape in _HTML_ESCAPES.items():
            text = text.replace(char, escape)
        stream.write(text + "\n")


class YAMLFormatter:
    """Renders nodes as a YAML list."""

    def format(self, stream: TextIO, nodes: Iterable[NodeInfo]) -> None:
        """Write nodes as a YAML list; an empty list is written as "[]"."""
        records = [out.to_dict() for out in to_node_output_list(nodes)]
        yaml.safe_dump(
            records,
            stream,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )


def new_formatter(format: OutputFormat | str) -> Formatter:
    """Return the formatter for format; raises ValueError if it is not json or yaml."""
    try:
        chosen = OutputFormat(format)
    except ValueError:
        chosen = None
    if chosen is OutputFormat.JSON:
        return JSONFormatter()
    if chosen is OutputFormat.YAML:
        return YAMLFormatter()
    text = format.value if isinstance(format, OutputFormat) else format
    raise ValueError(f'unsupported output format: "{text}" (supported: json, yaml)')