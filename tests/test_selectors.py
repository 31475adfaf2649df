import pytest
from hypothesis import given
from hypothesis import strategies as st

from k8i.model import NodeInfo
from k8i.selectors import (
    keep_nodes_on,
    label_selector_from_match_labels,
    node_names_from_pods,
)


def pod(node_name):
    return {"metadata": {"name": "p", "namespace": "default"}, "spec": {"nodeName": node_name}}


def test_node_names_from_pods_collects_unique_names():
    pods = [pod("node-a"), pod("node-b"), pod("node-a")]
    assert node_names_from_pods(pods) == {"node-a", "node-b"}


def test_node_names_from_pods_skips_unscheduled():
    pods = [pod(""), {"spec": {}}, {}, pod("node-c")]
    assert node_names_from_pods(pods) == {"node-c"}


def test_node_names_from_pods_empty():
    assert node_names_from_pods(None) == set()
    assert node_names_from_pods([]) == set()


def test_label_selector_single_label():
    assert label_selector_from_match_labels("deployment", "default", "web", {"app": "web"}) == "app=web"


def test_label_selector_joins_pairs_with_commas():
    match_labels = {"app": "web", "tier": "front"}
    selector = label_selector_from_match_labels("statefulset", "db", "pg", match_labels)
    assert sorted(selector.split(",")) == sorted(f"{k}={v}" for k, v in match_labels.items())


@pytest.mark.parametrize("match_labels", [None, {}])
def test_label_selector_requires_labels(match_labels):
    with pytest.raises(ValueError, match="deployment default/web has no label selector"):
        label_selector_from_match_labels("deployment", "default", "web", match_labels)


def test_label_selector_error_names_kind():
    with pytest.raises(ValueError, match="daemonset kube-system/agent has no label selector"):
        label_selector_from_match_labels("daemonset", "kube-system", "agent", {})


def test_keep_nodes_on_preserves_order():
    nodes = [NodeInfo(name="c"), NodeInfo(name="a"), NodeInfo(name="b")]
    kept = keep_nodes_on(nodes, {"a", "c"})
    assert [n.name for n in kept] == ["c", "a"]


def test_keep_nodes_on_empty_names_drops_everything():
    nodes = [NodeInfo(name="a")]
    assert keep_nodes_on(nodes, set()) == []
    assert keep_nodes_on(None, {"a"}) == []


def test_pipeline_from_pods_to_nodes():
    nodes = [NodeInfo(name="node-a"), NodeInfo(name="node-b"), NodeInfo(name="node-c")]
    names = node_names_from_pods([pod("node-b"), pod("node-c"), pod("")])
    assert [n.name for n in keep_nodes_on(nodes, names)] == ["node-b", "node-c"]


@given(
    st.lists(st.from_regex(r"node-[a-z]{1,3}", fullmatch=True), max_size=20),
    st.sets(st.from_regex(r"node-[a-z]{1,3}", fullmatch=True), max_size=10),
)
def test_keep_nodes_on_is_ordered_subset(names, wanted):
    nodes = [NodeInfo(name=n) for n in names]
    kept = keep_nodes_on(nodes, wanted)
    assert all(n.name in wanted for n in kept)
    assert [n.name for n in kept] == [n for n in names if n in wanted]