import pytest
from hypothesis import given, strategies as st

from k8i.filter import SUPPORTED_FILTER_ATTRIBUTES, filter_nodes, hide_fargate_nodes
from k8i.model import NodeInfo, Taint


def sample_nodes():
    return [
        NodeInfo(
            name="node-1",
            capacity_type="spot",
            instance_type="m5.xlarge",
            architecture="amd64",
            zone="1a",
            nodepool="pool-a",
            nodeclaim="claim-1",
            autoscaler="karpenter",
            taints=[Taint("dedicated", "gpu", "NoSchedule")],
        ),
        NodeInfo(
            name="node-2",
            capacity_type="od",
            instance_type="c5.2xlarge",
            architecture="arm64",
            zone="1b",
            nodepool="pool-b",
            nodeclaim="claim-2",
            autoscaler="cas",
            taints=[Taint("team", "backend", "NoExecute")],
        ),
        NodeInfo(
            name="node-3",
            capacity_type="spot",
            instance_type="m5.xlarge",
            architecture="amd64",
            zone="1c",
            nodepool="pool-a",
            nodeclaim="claim-3",
            autoscaler="spotio",
        ),
    ]


def names(nodes):
    return [n.name for n in nodes]


@pytest.mark.parametrize(
    "attribute, value, expected",
    [
        ("ec2_type", "spot", ["node-1", "node-3"]),
        ("ec2_type", "reserved", []),
        ("instance_type", "c5.2xlarge", ["node-2"]),
        ("instance_type", "r5.large", []),
        ("arch", "arm64", ["node-2"]),
        ("arch", "s390x", []),
        ("zone", "1b", ["node-2"]),
        ("zone", "2a", []),
        ("pool", "pool-a", ["node-1", "node-3"]),
        ("pool", "pool-z", []),
        ("nodeclaim", "claim-2", ["node-2"]),
        ("nodeclaim", "claim-99", []),
        ("taint", "dedicated", ["node-1"]),
        ("taint", "team=backend", ["node-2"]),
        ("taint", "nonexistent", []),
        ("autoscaler", "karpenter", ["node-1"]),
        ("autoscaler", "unknown", []),
    ],
)
def test_filter_by_attribute(attribute, value, expected):
    assert names(filter_nodes(sample_nodes(), attribute, value)) == expected


def test_filter_case_insensitive():
    assert len(filter_nodes(sample_nodes(), "ec2_type", "SPOT")) == 2


def test_filter_unsupported_attribute():
    with pytest.raises(ValueError) as info:
        filter_nodes(sample_nodes(), "cpu_load", "50")
    assert "unsupported filter attribute" in str(info.value)
    assert "cpu_load" in str(info.value)


def test_filter_empty_attribute():
    with pytest.raises(ValueError, match="unsupported filter attribute"):
        filter_nodes(sample_nodes(), "", "value")


def test_filter_empty_node_list():
    assert filter_nodes(None, "arch", "amd64") == []


def test_supported_attributes_all_accepted():
    for attribute in SUPPORTED_FILTER_ATTRIBUTES:
        assert isinstance(filter_nodes(sample_nodes(), attribute, "nothing-matches"), list)
        assert filter_nodes(sample_nodes(), attribute, "nothing-matches") == []


def test_hide_fargate_nodes():
    nodes = [
        NodeInfo(name="ip-10-0-1-1.ec2.internal"),
        NodeInfo(name="fargate-ip-10-0-2-2.ec2.internal"),
        NodeInfo(name="ip-10-0-3-3.ec2.internal"),
        NodeInfo(name="fargate-ip-10-0-4-4.ec2.internal"),
    ]
    assert names(hide_fargate_nodes(nodes)) == [
        "ip-10-0-1-1.ec2.internal",
        "ip-10-0-3-3.ec2.internal",
    ]


def test_hide_fargate_nodes_no_fargate():
    assert len(hide_fargate_nodes([NodeInfo(name="node-1"), NodeInfo(name="node-2")])) == 2


def test_hide_fargate_nodes_all_fargate():
    assert hide_fargate_nodes([NodeInfo(name="fargate-a"), NodeInfo(name="fargate-b")]) == []


def test_hide_fargate_nodes_empty():
    assert hide_fargate_nodes(None) == []


_taints = st.builds(
    Taint,
    key=st.sampled_from(["dedicated", "team", "workload"]),
    value=st.sampled_from(["gpu", "backend", "frontend", ""]),
    effect=st.sampled_from(["NoSchedule", "NoExecute", "PreferNoSchedule"]),
)

_suffix = st.from_regex(r"[a-z0-9]{4,12}", fullmatch=True)

_node = st.builds(
    NodeInfo,
    name=st.one_of(_suffix.map(lambda s: "fargate-" + s), _suffix.map(lambda s: "ip-" + s)),
    capacity_type=st.sampled_from(["spot", "od", "x"]),
    instance_type=st.sampled_from(["m5.xlarge", "c5.2xlarge", "r5.large", "t3.medium"]),
    architecture=st.sampled_from(["amd64", "arm64"]),
    zone=st.sampled_from(["1a", "1b", "1c", "2a", "2b"]),
    nodepool=st.sampled_from(["pool-a", "pool-b", "pool-c"]),
    nodeclaim=st.sampled_from(["claim-1", "claim-2", "claim-3"]),
    autoscaler=st.sampled_from(["karpenter", "cas", "spotio", "x"]),
    taints=st.lists(_taints, max_size=3),
)

_FIELDS = {
    "ec2_type": "capacity_type",
    "instance_type": "instance_type",
    "arch": "architecture",
    "zone": "zone",
    "pool": "nodepool",
    "nodeclaim": "nodeclaim",
    "autoscaler": "autoscaler",
}


@given(
    nodes=st.lists(_node, min_size=1, max_size=30),
    attribute=st.sampled_from(sorted(_FIELDS)),
    data=st.data(),
)
def test_filter_returns_exactly_matching_nodes(nodes, attribute, data):
    field = _FIELDS[attribute]
    picked = data.draw(st.sampled_from(nodes))
    value = getattr(picked, field).lower()

    result = filter_nodes(nodes, attribute, value)

    assert all(getattr(n, field).lower() == value for n in result)
    assert picked in result
    excluded = [n for n in nodes if n not in result]
    assert all(getattr(n, field).lower() != value for n in excluded)


@given(nodes=st.lists(_node, max_size=30))
def test_fargate_hiding_invariant(nodes):
    result = hide_fargate_nodes(nodes)
    assert not any(n.name.startswith("fargate-") for n in result)
    assert result == [n for n in nodes if not n.name.startswith("fargate-")]