from pathlib import Path

import pytest

from flowtrace.dsl.loader import load_network_file, load_network_yaml
from flowtrace.model.errors import ValidationError, ValidationErrorKind

EXAMPLE = Path(__file__).resolve().parents[2] / "examples" / "classic.yaml"


def test_example_file():
    net = load_network_file(EXAMPLE)
    assert net.source == "s" and net.sink == "t"
    assert len(net.edges) == 8
    assert net.node("s").label == "Source"
    assert net.node("a").attrs == {"x": 250, "y": 150}


def test_bare_node_ids():
    net = load_network_yaml(
        """
        source: s
        sink: t
        nodes: [s, t]
        edges:
          - {from: s, to: t, capacity: 3}
        """
    )
    assert net.edge("s", "t").capacity == 3


def test_node_mapping_layout():
    net = load_network_yaml(
        """
        source: s
        sink: t
        nodes:
          s: {label: Source}
          t:
        edges: []
        """
    )
    assert [n.id for n in net.nodes] == ["s", "t"]
    assert net.node("s").label == "Source"


def test_json_document():
    net = load_network_yaml(
        '{"source": "s", "sink": "t", "nodes": ["s", "t"],'
        ' "edges": [{"from": "s", "to": "t", "capacity": 2.0}]}'
    )
    assert net.edge("s", "t").capacity == 2
    assert isinstance(net.edge("s", "t").capacity, int)


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("- just\n- a list\n", "mapping"),
        ("source: s\nsink: t\nnodes: [s, t]\n", "edges"),
        (
            "source: s\nsink: t\nnodes: [s, t]\n"
            "edges: [{from: s, to: t, capacity: 1.5}]\n",
            "edges/0/capacity",
        ),
        (
            "source: s\nsink: t\nnodes: [s, t]\nedges: []\nextra: 1\n",
            "extra",
        ),
        ("source: [unclosed\n", "YAML"),
        (
            "source: s\nsink: t\nnodes:\n  s:\n  yes: {}\n  t:\nedges: []\n",
            "'nodes': node id True",
        ),
        (
            "source: s\nsink: t\nnodes:\n  s:\n  1: {label: One}\n  t:\nedges: []\n",
            "'nodes': node id 1",
        ),
    ],
)
def test_schema_errors(text, fragment):
    with pytest.raises(ValueError) as exc_info:
        load_network_yaml(text)
    assert not isinstance(exc_info.value, ValidationError)
    assert fragment in str(exc_info.value)


@pytest.mark.parametrize(
    "edges, source, sink, kind",
    [
        ("[{from: s, to: x, capacity: 1}]", "s", "t", ValidationErrorKind.UNKNOWN_NODE),
        ("[{from: s, to: t, capacity: -1}]", "s", "t", ValidationErrorKind.NEGATIVE_CAPACITY),
        ("[]", "s", "s", ValidationErrorKind.SAME_TERMINAL),
    ],
)
def test_semantic_errors(edges, source, sink, kind):
    text = f"source: {source}\nsink: {sink}\nnodes: [s, t]\nedges: {edges}\n"
    with pytest.raises(ValidationError) as exc_info:
        load_network_yaml(text)
    assert exc_info.value.kind is kind


def test_empty_document_is_rejected():
    with pytest.raises(ValueError):
        load_network_yaml("")
