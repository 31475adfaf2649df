# k8i

`k8i` is a library of building blocks for a per-node Kubernetes resource
report: data types for node information, metadata read from node labels,
node ages, ANSI load colouring, attribute filtering, helpers over raw node,
metrics, pod and Karpenter nodeclaim objects, validation of command-line
option values, and JSON/YAML output of node records.

## Modules

- **`k8i.model`** – dataclasses `Taint` (with `from_dict` / `to_dict`),
  `NodeInfo`, `RunConfig` (defaults: `sort="pool=asc"`, `output="table"`,
  `color=None` for auto), `PodAggregation` and `ClusterData`.
- **`k8i.labels`** – `extract_metadata(labels, provider_id)` returns a
  `NodeMetadata`; every missing value is `"x"`. Also
  `extract_capacity_type` (priority `karpenter.sh/capacity-type`,
  `karpenter.k8s.aws/capacity-type`, `spotinst.io/node-lifecycle`,
  `eks.amazonaws.com/capacityType`; any on-demand spelling becomes `"od"`),
  `extract_nodepool` (EKS node group names cut to 15 characters),
  `extract_ec2_id` (first `i-[A-Za-z0-9-]+` in the provider id) and
  `detect_autoscaler` (`karpenter`, then `spotio`, then `cas`, else `x`).
  Nodeclaim names are cut to 20 characters and the zone is reduced to its
  last two characters (`us-east-1a` → `1a`).
- **`k8i.age`** – `format_age(creation_time, now)` gives `5d12h`, `3h45m`
  or `12m`; a missing or zero time gives `x`. `format_age_from_string`
  does the same for an RFC 3339 timestamp relative to now.
- **`k8i.color`** – `ColorConfig(enabled)` with `colorize_load` (formatted
  `%02d%`, green up to 60, yellow up to 80, red above), `colorize_green`,
  `colorize_ratio` and `colorize_overcommit_pct`; `new_color_config(force_color)`
  and `detect_color_support()` (true when stdout is a terminal).
- **`k8i.filter`** – `filter_nodes(nodes, attribute, value)` for
  `ec2_type`, `instance_type`, `arch`, `zone`, `pool`, `nodeclaim`,
  `autoscaler` (case-insensitive) and `taint` (`KEY` or `KEY=VALUE`);
  unsupported attributes raise `ValueError`. `hide_fargate_nodes` drops
  nodes named `fargate-…`.
- **`k8i.nodes`** – helpers over raw API objects given as plain mappings:
  `is_node_ready`, `build_metrics_by_node`, `build_nodeclaim_by_node`
  (matched on `status.nodeName`), and `calc_load_percent` /
  `calc_load_percent_float` (rounded percentage, 0 for zero capacity).
- **`k8i.selectors`** – `node_names_from_pods`,
  `label_selector_from_match_labels` (joins `matchLabels` into `k=v,k2=v2`,
  raising `ValueError` when empty) and `keep_nodes_on`.
- **`k8i.output`** – `NodeOutput`, `to_node_output`, `to_node_output_list`,
  `JSONFormatter` (indented JSON array) and `YAMLFormatter` (YAML list), and
  `new_formatter`, which accepts `json` or `yaml` and raises `ValueError`
  otherwise. An empty list is written as `[]` in both formats.
- **`k8i.options`** – `parse_filter`, `parse_sort`, `parse_deployment`
  (`namespace/name`), `validate_output_format`, `parse_color_flag`,
  `complete_filter_values` and `complete_sort_values`; invalid values raise
  `ValueError`.
- **`k8i.cli`** – `build_parser()` (an `argparse` parser with every flag and
  a `completion` subcommand), `build_run_config(argv)` returning a
  `RunConfig`, and `completion_script()` returning the kubectl completion
  hook script text.
- **`k8i.debug`** – `DebugLogger(enabled, stream=None)` writing
  `TIMESTAMP DEBUG category key=value …` lines (to stderr by default) for
  API calls, retries, processing steps, filter/sort steps, terminal width and
  output format; `format_duration` renders durations as `150ms`, `1.5s` or
  `1h2m3s`.

## Examples

```python
from datetime import datetime, timedelta, timezone
from k8i.age import format_age

now = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
format_age(now - timedelta(hours=3, minutes=45), now)   # "3h45m"
format_age(now - timedelta(days=5, hours=12), now)      # "5d12h"
```

```python
from k8i.labels import extract_capacity_type, extract_ec2_id, detect_autoscaler

extract_capacity_type({"eks.amazonaws.com/capacityType": "ON_DEMAND"})  # "od"
extract_ec2_id("aws:///us-east-1a/i-0abcdef1234567890")              # "i-0abcdef1234567890"
detect_autoscaler({"karpenter.sh/nodepool": "default"})              # "karpenter"
```

```python
from k8i.color import ColorConfig

ColorConfig(enabled=False).colorize_load(5)   # "05%"
ColorConfig(enabled=True).colorize_load(85)   # "85%" wrapped in red ANSI codes
```

```python
from k8i.options import parse_filter, parse_sort

parse_filter("taint=dedicated=gpu")   # ("taint", "dedicated=gpu")
parse_sort("cpu_load=desc")           # ("cpu_load", "desc")
```

```python
import sys
from k8i.model import NodeInfo
from k8i.filter import filter_nodes, hide_fargate_nodes
from k8i.output import new_formatter

nodes = [NodeInfo(name="node-1", capacity_type="spot"),
         NodeInfo(name="fargate-a", capacity_type="spot")]
spot = filter_nodes(hide_fargate_nodes(nodes), "ec2_type", "spot")
new_formatter("json").format(sys.stdout, spot)
```

```python
from k8i.cli import build_run_config

cfg = build_run_config(["--sort", "mem_load=asc", "-o", "yaml", "--color", "false"])
cfg.sort, cfg.output, cfg.color   # ("mem_load=asc", "yaml", False)
```

## What the package does not do

- It does not connect to a cluster: there is no kubeconfig loading and no
  API calls. Node, pod, metrics and nodeclaim objects must be supplied by the
  caller.
- It does not build `NodeInfo` records from raw objects; it provides the
  pieces (readiness, metadata, age, load percentages, lookups) but no
  function that sums pod requests per node or assembles a full record.
- It does not sort nodes. `parse_sort` only validates a `column=direction`
  value.
- It does not render a text table; only JSON and YAML output are written.
- It installs no command. `build_run_config` parses arguments into a
  `RunConfig`, but nothing in the package runs a report from it.

## Requirements

Python 3.10 or later and PyYAML.