"""Validation of command-line option values and their completions."""

from __future__ import annotations

from k8i.filter import SUPPORTED_FILTER_ATTRIBUTES

SUPPORTED_SORT_COLUMNS: tuple[str, ...] = (
    "name",
    "pods",
    "cpu_req",
    "cpu_lim",
    "cpu_use",
    "cpu_cap",
    "cpu_load",
    "mem_req",
    "mem_lim",
    "mem_use",
    "mem_cap",
    "mem_load",
    "ec2_type",
    "instance_type",
    "arch",
    "zone",
    "pool",
    "age",
    "taint",
    "autoscaler",
)

SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")
OUTPUT_FORMATS: tuple[str, ...] = ("table", "json", "yaml")


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _split_pair(value: str, separator: str) -> tuple[str, str] | None:
    if separator not in value:
        return None
    left, right = value.split(separator, 1)
    return left, right


def parse_deployment(value: str) -> tuple[str, str]:
    """Split a "namespace/name" workload reference.

    Raises ValueError when the separator, namespace or name is missing.
    """
    pair = _split_pair(value, "/")
    if pair is None:
        raise ValueError(
            f"invalid deployment format {_quote(value)}: expected namespace/name"
        )
    namespace, name = pair
    if not namespace:
        raise ValueError(
            f"invalid deployment format {_quote(value)}: namespace cannot be empty"
        )
    if not name:
        raise ValueError(
            f"invalid deployment format {_quote(value)}: name cannot be empty"
        )
    return namespace, name


def parse_filter(value: str) -> tuple[str, str]:
    """Split and validate an "attribute=value" filter.

    The value may itself contain "=". Raises ValueError on bad input.
    """
    pair = _split_pair(value, "=")
    if pair is None:
        raise ValueError(
            f"invalid filter format {_quote(value)}: expected attribute=value"
        )
    attribute, filter_value = pair
    if not attribute:
        raise ValueError(
            f"invalid filter format {_quote(value)}: attribute cannot be empty"
        )
    if not filter_value:
        raise ValueError(
            f"invalid filter format {_quote(value)}: value cannot be empty"
        )
    if attribute not in SUPPORTED_FILTER_ATTRIBUTES:
        raise ValueError(
            f"unsupported filter attribute {_quote(attribute)}; supported attributes: "
            + ", ".join(SUPPORTED_FILTER_ATTRIBUTES)
        )
    return attribute, filter_value


def parse_sort(value: str) -> tuple[str, str]:
    """Split and validate a "column=direction" sort.

    Raises ValueError on bad input.
    """
    pair = _split_pair(value, "=")
    if pair is None:
        raise ValueError(
            f"invalid sort format {_quote(value)}: expected column=direction"
        )
    column, direction = pair
    if not column:
        raise ValueError(
            f"invalid sort format {_quote(value)}: column cannot be empty"
        )
    if not direction:
        raise ValueError(
            f"invalid sort format {_quote(value)}: direction cannot be empty"
        )
    if column not in SUPPORTED_SORT_COLUMNS:
        raise ValueError(
            f"unsupported sort column {_quote(column)}; supported columns: "
            + ", ".join(SUPPORTED_SORT_COLUMNS)
        )
    if direction not in SORT_DIRECTIONS:
        raise ValueError(
            f"invalid sort direction {_quote(direction)}; supported directions: asc, desc"
        )
    return column, direction


def validate_output_format(format: str) -> str:
    """Return format if it is table, json or yaml; raise ValueError otherwise."""
    if format not in OUTPUT_FORMATS:
        raise ValueError(
            f"unsupported output format {_quote(format)}; supported formats: table, json, yaml"
        )
    return format


def parse_color_flag(value: str | None) -> bool | None:
    """Map "true"/"false" (any case) to a bool; anything else means auto (None)."""
    lowered = (value or "").lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def complete_filter_values(to_complete: str) -> list[str]:
    """Suggest "attribute=" prefixes until an "=" has been typed."""
    if "=" in to_complete:
        return []
    return [f"{attribute}=" for attribute in SUPPORTED_FILTER_ATTRIBUTES]


def complete_sort_values(to_complete: str) -> list[str]:
    """Suggest "column=" prefixes, then "column=asc" and "column=desc"."""
    if "=" not in to_complete:
        return [f"{column}=" for column in SUPPORTED_SORT_COLUMNS]
    prefix = to_complete[: to_complete.index("=") + 1]
    return [prefix + direction for direction in SORT_DIRECTIONS]