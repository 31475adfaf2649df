"""Kubernetes node report building blocks: metadata, age, load colouring, filtering, options and JSON/YAML output."""

__version__ = "0.1.0"

__all__ = [
    "age",
    "cli",
    "color",
    "debug",
    "filter",
    "labels",
    "model",
    "nodes",
    "options",
    "output",
    "selectors",
]