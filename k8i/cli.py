"""Command-line parsing for the node resource report."""

from __future__ import annotations

import argparse
from typing import Sequence

from k8i.model import RunConfig
from k8i.options import parse_color_flag

PROG = "kubectl-k8i"

_DESCRIPTION = """\
Report per-node resource usage for a Kubernetes cluster: pod counts, CPU and
memory requests, limits, live usage and capacity, load percentages with
colour highlighting, and node metadata such as instance type, capacity type,
zone, pool and taints. Results can be printed as a table, JSON or YAML.

--filter takes attribute=value, with attribute one of:
  ec2_type, instance_type, arch, zone, pool, nodeclaim, taint, autoscaler

--sort takes column=direction, with direction asc or desc and column one of:
  name, pods, cpu_req, cpu_lim, cpu_use, cpu_cap, cpu_load,
  mem_req, mem_lim, mem_use, mem_cap, mem_load,
  ec2_type, instance_type, arch, zone, pool, age, taint, autoscaler

Processing order: the label selector is sent to the API server, then the
taint filter, the attribute filter and finally the sort are applied locally.
"""

_EXAMPLES = """\
examples:
  kubectl k8i                                   every Ready node, Fargate hidden
  kubectl k8i --fargate                         include Fargate nodes
  kubectl k8i --context staging                 use another kubeconfig context
  kubectl k8i --labels 'worker-type=spot'       select nodes by label
  kubectl k8i --filter 'ec2_type=od'            keep on-demand nodes only
  kubectl k8i --sort 'cpu_load=desc'            busiest CPU first
  kubectl k8i -o yaml                           structured output
  kubectl k8i --group-by taint --no-headers     grouped, without annotations
  kubectl k8i --taints 'dedicated=gpu'          nodes carrying a given taint
  kubectl k8i completion > kubectl_complete-k8i write the completion hook
"""

_COMPLETION_HELP = """\
Print a small shell script that lets kubectl complete this plugin's flags.

Save it as kubectl_complete-k8i, make it executable and put it on $PATH;
kubectl then runs it on TAB and it forwards to "kubectl-k8i __complete".
"""

_COMPLETION_SCRIPT = """\
#!/usr/bin/env sh
# Tab-completion hook used by kubectl for the k8i plugin.
# Install on $PATH under the name "kubectl_complete-k8i".
kubectl-k8i __complete "$@"
"""


def completion_script() -> str:
    """Return the kubectl_complete-k8i hook script."""
    return _COMPLETION_SCRIPT


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every flag and the completion subcommand."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [flags]",
        description=_DESCRIPTION,
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    add = parser.add_argument
    add("--context", default="", help="kubeconfig context to connect with")
    add("--labels", default="", help="label selector applied when listing nodes")
    add("--taints", default="", help="keep nodes with this taint (key or key=value)")
    add("--filter", default="", help="keep nodes whose attribute equals a value (attribute=value)")
    add("--sort", default="pool=asc", help="ordering as column=direction")
    add("--fargate", action="store_true", help="also show Fargate nodes")
    add("--color", default="auto", help="ANSI colours: true, false or auto")
    add("--debug", action="store_true", help="write debug lines to stderr")
    add("--group-by", dest="group_by", default="", help="grouping attribute (only 'taint')")
    add("-o", "--output", default="table", help="table, json or yaml")
    add("--no-headers", dest="no_headers", action="store_true",
        help="omit header, separator, timestamp and annotations")
    add("--deployment", default="",
        help="only nodes hosting pods of this deployment (namespace/name)")
    add("--statefulset", default="",
        help="only nodes hosting pods of this statefulset (namespace/name)")
    add("--namespace", default="", help="only nodes hosting pods of this namespace")
    add("--daemonset", default="",
        help="only nodes hosting pods of this daemonset (namespace/name)")

    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.add_parser(
        "completion",
        help="print the kubectl completion hook script",
        description=_COMPLETION_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    return parser


def build_run_config(argv: Sequence[str] | None = None) -> RunConfig:
    """Parse argv into a RunConfig.

    Parse errors and --help end in SystemExit, as argparse does.
    """
    args = build_parser().parse_args(argv)
    return RunConfig(
        context=args.context,
        labels=args.labels,
        taints=args.taints,
        filter=args.filter,
        sort=args.sort,
        fargate=args.fargate,
        color=parse_color_flag(args.color),
        debug=args.debug,
        group_by=args.group_by,
        output=args.output,
        no_headers=args.no_headers,
        deployment=args.deployment,
        statefulset=args.statefulset,
        namespace=args.namespace,
        daemonset=args.daemonset,
    )