"""Tests for Graph mutation and query operations."""

import networkx as nx
import pytest

from pathgraph.errors import (
    EdgeNotFoundError,
    GraphError,
    InvalidAttributeError,
    InvalidWeightError,
    NodeNotFoundError,
)
from pathgraph.graph import Edge, Graph, Node


def test_add_edge_makes_edge_visible_with_weight() -> None:
    """has_edge is true and the weight is stored after add_edge."""
    graph = Graph()
    edge = graph.add_edge(0, 1, 0.25)

    assert graph.has_edge(0, 1)
    assert not graph.has_edge(1, 0)
    assert edge.weight == 0.25
    assert graph.edge(0, 1).weight == 0.25


def test_add_edge_default_weight_is_one() -> None:
    graph = Graph()
    assert graph.add_edge(3, 4).weight == 1.0


def test_add_edge_creates_missing_endpoints_with_empty_attributes() -> None:
    """Endpoints that were never added are created implicitly."""
    graph = Graph()
    graph.add_edge(7, 8, 2.0)

    assert graph.has_node(7)
    assert graph.has_node(8)
    assert graph.node(7).attributes == {}
    assert graph.node(8).attributes == {}
    assert graph.node_count() == 2


def test_add_edge_keeps_existing_endpoint_attributes() -> None:
    graph = Graph()
    graph.add_node(0, {"x": 100})
    graph.add_edge(0, 1)

    assert graph.node(0).attributes == {"x": 100}


def test_edge_count_counts_distinct_pairs_only() -> None:
    """Re-adding an ordered pair overwrites instead of adding an edge."""
    graph = Graph()
    pairs = [(0, 1), (1, 0), (1, 2), (2, 2), (0, 2)]
    for source, target in pairs:
        graph.add_edge(source, target)
    assert graph.edge_count() == len(pairs)

    graph.add_edge(0, 1, 9.0)
    graph.add_edge(2, 2, 3.0)
    assert graph.edge_count() == len(pairs)


def test_readding_edge_updates_weight_in_place() -> None:
    """Last write wins and the same Edge record is kept."""
    graph = Graph()
    first = graph.add_edge(0, 1, 1.0, {"label": "road"})
    second = graph.add_edge(0, 1, 4.5)

    assert second is first
    assert graph.edge(0, 1).weight == 4.5
    assert graph.edge(0, 1).attributes == {"label": "road"}


def test_readding_edge_with_attributes_replaces_them() -> None:
    graph = Graph()
    graph.add_edge(0, 1, 1.0, {"label": "road", "lanes": 2})
    graph.add_edge(0, 1, 1.0, {"label": "rail"})

    assert graph.edge(0, 1).attributes == {"label": "rail"}


def test_add_node_replaces_attributes_without_merging() -> None:
    """Overwriting a node drops attributes not present in the new map."""
    graph = Graph()
    graph.add_node(0, {"x": 100, "y": 200})
    graph.add_node(0, {"z": "top"})

    assert graph.node(0).attributes == {"z": "top"}
    assert graph.node_count() == 1


def test_add_node_replacement_keeps_outgoing_edges() -> None:
    """Every stored edge stays reachable from its source node."""
    graph = Graph()
    graph.add_edge(0, 1, 0.5)
    graph.add_edge(0, 2, 1.5)
    graph.add_node(0, {"name": "hub"})

    assert graph.get_neighbors(0) == {1, 2}
    assert graph.node(0).edges == {1: (0, 1), 2: (0, 2)}
    assert graph.shortest_path(0, 2) == (1.5, [0, 2])


def test_add_prebuilt_node() -> None:
    graph = Graph()
    node = Node(id=5, attributes={"kind": "depot"})

    stored = graph.add_node(node)

    assert stored is not node
    assert graph.node(5) is stored
    assert stored.attributes == {"kind": "depot"}
    assert graph.node(5).edges == {}


def test_prebuilt_node_shared_between_graphs_stays_independent() -> None:
    """Adding one Node to two graphs leaves each graph's adjacency intact."""
    node = Node(id=0, attributes={"kind": "depot"})
    first = Graph()
    first.add_edge(0, 1, 0.5)
    first.add_node(node)

    second = Graph()
    second.add_node(node, {"kind": "yard"})

    assert first.node(0).edges == {1: (0, 1)}
    assert first.node(0).attributes == {"kind": "depot"}
    assert second.node(0).edges == {}
    assert second.node(0).attributes == {"kind": "yard"}
    assert node.edges == {}
    assert node.attributes == {"kind": "depot"}
    assert first.shortest_path(0, 1) == (0.5, [0, 1])


def test_prebuilt_node_edges_are_reset_to_graph_state() -> None:
    """Handles on a prebuilt node never point at edges the graph lacks."""
    graph = Graph()
    graph.add_edge(1, 2)
    node = Node(id=1, edges={9: (1, 9)})

    graph.add_node(node)

    assert graph.node(1).edges == {2: (1, 2)}


def test_node_adjacency_holds_handles_into_edge_table() -> None:
    """Adjacency entries resolve to the same Edge the graph stores."""
    graph = Graph()
    edge = graph.add_edge(0, 1, 0.5)
    handle = graph.node(0).edges[1]

    assert handle == (0, 1)
    assert graph.edge(*handle) is edge
    assert graph.node(1).edges == {}


def test_get_neighbors_returns_successor_ids() -> None:
    graph = Graph()
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)
    graph.add_edge(3, 0)

    assert graph.get_neighbors(0) == {1, 2, 3}
    assert graph.get_neighbors(3) == {0}
    assert graph.get_neighbors(1) == set()


def test_get_neighbors_excludes_self_loop() -> None:
    """A self loop is stored but never reported as a neighbor."""
    graph = Graph()
    graph.add_edge(4, 4, 0.1)
    graph.add_edge(4, 5)

    assert graph.has_edge(4, 4)
    assert graph.get_neighbors(4) == {5}
    assert graph.edge_count() == 2


def test_get_neighbors_unknown_node_raises() -> None:
    graph = Graph()
    graph.add_edge(0, 1)

    with pytest.raises(NodeNotFoundError) as excinfo:
        graph.get_neighbors(42)

    assert excinfo.value.node_id == 42
    assert isinstance(excinfo.value, KeyError)
    assert "42" in str(excinfo.value)
    assert not graph.has_node(42)


def test_edge_lookup_unknown_pair_raises() -> None:
    graph = Graph()
    graph.add_edge(0, 1)

    with pytest.raises(EdgeNotFoundError) as excinfo:
        graph.edge(1, 0)

    assert excinfo.value.key == (1, 0)


def test_has_edge_on_unknown_nodes_is_false() -> None:
    graph = Graph()
    assert not graph.has_edge(0, 1)


def test_attribute_types_are_preserved() -> None:
    graph = Graph()
    node = graph.add_node(0, {"count": 3, "ratio": 0.5, "name": "a"})

    assert type(node.attributes["count"]) is int
    assert type(node.attributes["ratio"]) is float
    assert node.attributes["name"] == "a"


@pytest.mark.parametrize("value", [True, None, [1, 2], {"nested": 1}, object()])
def test_invalid_node_attribute_rejected(value) -> None:
    graph = Graph()

    with pytest.raises(InvalidAttributeError):
        graph.add_node(0, {"bad": value})

    assert not graph.has_node(0)


def test_invalid_edge_attribute_leaves_graph_untouched() -> None:
    graph = Graph()

    with pytest.raises(InvalidAttributeError):
        graph.add_edge(0, 1, 1.0, {"flag": False})

    assert graph.node_count() == 0
    assert graph.edge_count() == 0


def test_nodes_and_edges_iterate_records() -> None:
    graph = Graph()
    graph.add_node(2)
    graph.add_edge(0, 1, 0.5)

    assert [node.id for node in graph.nodes()] == [2, 0, 1]
    assert graph.node_ids() == [2, 0, 1]
    edges = list(graph.edges())
    assert len(edges) == 1
    assert isinstance(edges[0], Edge)
    assert edges[0].key == (0, 1)


def test_native_graph_exposes_networkx_view() -> None:
    graph = Graph()
    graph.add_edge(0, 1, 0.5)

    native = graph.native_graph
    assert isinstance(native, nx.DiGraph)
    assert native.has_edge(0, 1)
    assert native.edges[0, 1]["record"] is graph.edge(0, 1)


def test_repr_reports_sizes() -> None:
    graph = Graph()
    graph.add_edge(0, 1)
    assert repr(graph) == "Graph(nodes=2, edges=1)"


@pytest.mark.parametrize("weight", ["heavy", None, [1.0]])
def test_non_numeric_weight_rejected_on_new_edge(weight) -> None:
    """Bad weights surface as graph errors and leave the graph untouched."""
    graph = Graph()

    with pytest.raises(InvalidWeightError) as excinfo:
        graph.add_edge(0, 1, weight)

    assert isinstance(excinfo.value, GraphError)
    assert isinstance(excinfo.value, InvalidAttributeError)
    assert graph.node_count() == 0
    assert graph.edge_count() == 0


def test_non_numeric_weight_rejected_on_existing_edge() -> None:
    graph = Graph()
    graph.add_edge(0, 1, 2.0)

    with pytest.raises(InvalidWeightError):
        graph.add_edge(0, 1, "heavy")

    assert graph.edge(0, 1).weight == 2.0


def test_integer_weight_is_stored_as_float() -> None:
    graph = Graph()
    edge = graph.add_edge(0, 1, 2)

    assert edge.weight == 2.0
    assert isinstance(edge.weight, float)
