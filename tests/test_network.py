import io
import json

import pytest

from resgraph.network import EdgeResult, Node, RemoveResult, ResNet


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def net(out):
    return ResNet(out)


def names(net):
    return [node.name for node in net.nodes]


def test_add_node_returns_index_and_is_idempotent(net):
    assert net.add_node("A") == 0
    assert net.add_node("B") == 1
    assert net.add_node("A") == 0
    assert names(net) == ["A", "B"]
    assert [n.name for n in net.err_nodes] == ["A", "B"]


def test_find_node_missing_is_none(net):
    net.add_node("A")
    assert net.find_node("A") == 0
    assert net.find_node("Z") is None


def test_add_edge_creates_nodes_source_first(net, out):
    assert net.add_edge("A", "B", 2) == EdgeResult.OK
    assert names(net) == ["A", "B"]
    assert net.get_edges("A") == [("B", 2.0)]
    assert "No circle, node not found" in out.getvalue()


def test_add_existing_edge_updates_value(net):
    net.add_edge("A", "B", 2)
    assert net.add_edge("A", "B", 5) == EdgeResult.EXISTS
    assert net.get_edges("A") == [("B", 5.0)]


def test_self_loop_becomes_error_edge(net):
    assert net.add_edge("A", "A", 1) == EdgeResult.SELF_LOOP
    assert net.get_edges("A") == []
    assert net.err_nodes[0].edges == {"A": 1.0}


def test_cycle_is_rejected_and_recorded(net, out):
    net.add_edge("A", "B", 1)
    net.add_edge("B", "C", 1)
    assert net.add_edge("C", "A", 4) == EdgeResult.CYCLE
    assert "Cannot add edge" in out.getvalue()
    assert net.get_edges("C") == []
    assert net.err_nodes[net.find_node("C")].edges == {"A": 4.0}
    assert net.add_edge("C", "A", 7) == EdgeResult.CYCLE
    assert net.err_nodes[net.find_node("C")].num_edges == 1
    assert net.err_nodes[net.find_node("C")].edges["A"] == 7.0


def test_circle_check_reachability(net):
    net.add_edge("A", "B", 1)
    net.add_edge("B", "C", 1)
    assert net.circle_check("A", "C") == EdgeResult.CYCLE
    assert net.circle_check("C", "A") == EdgeResult.OK
    assert net.circle_check("B", "B") == EdgeResult.SELF_LOOP


def test_circle_check_adds_missing_nodes(net):
    assert net.circle_check("X", "Y") == EdgeResult.OK
    assert names(net) == ["Y", "X"]


def test_remove_edge_missing_nodes(net):
    net.add_edge("A", "B", 1)
    assert net.remove_edge("A", "Z") == RemoveResult.NOT_FOUND
    assert net.remove_edge("Z", "A") == RemoveResult.NOT_FOUND
    assert net.remove_edge("B", "A") == RemoveResult.NOT_FOUND


def test_remove_error_edge(net):
    net.add_edge("A", "B", 1)
    net.add_edge("B", "A", 3)
    assert net.remove_edge("B", "A") == RemoveResult.ERROR_EDGE_REMOVED
    assert net.err_nodes[net.find_node("B")].edges == {}
    assert net.get_edges("A") == [("B", 1.0)]


def test_remove_edge_legalizes_error_edge(net):
    net.add_edge("A", "B", 1)
    net.add_edge("B", "A", 3)
    assert net.remove_edge("A", "B") == RemoveResult.REMOVED
    assert net.get_edges("A") == []
    assert net.get_edges("B") == [("A", 3.0)]
    assert all(not n.edges for n in net.err_nodes)


def test_remove_node_drops_incoming_edges_and_reindexes(net):
    net.add_edge("A", "B", 1)
    net.add_edge("B", "C", 2)
    assert net.remove_node("B") == RemoveResult.REMOVED
    assert names(net) == ["A", "C"]
    assert net.name_to_index == {"A": 0, "C": 1}
    assert net.get_edges("A") == []
    assert net.find_node("B") is None
    assert len(net.err_nodes) == len(net.nodes)


def test_remove_missing_node(net):
    assert net.remove_node("Q") == RemoveResult.NOT_FOUND


def test_remove_node_legalizes_error_edge(net):
    net.add_edge("A", "B", 1)
    net.add_edge("B", "C", 1)
    net.add_edge("C", "A", 9)
    net.remove_node("B")
    assert net.get_edges("C") == [("A", 9.0)]
    assert net.err_nodes[net.find_node("C")].edges == {}


def test_get_edges_unknown_node(net):
    assert net.get_edges("nope") == []


def test_node_num_edges():
    node = Node("A", {"B": 1.0, "C": 2.0})
    assert node.num_edges == 2


def test_clear(net):
    net.add_edge("A", "B", 1)
    net.clear()
    assert net.nodes == [] and net.err_nodes == [] and net.name_to_index == {}


def test_export_empty_graph(net):
    assert net.export_to_json() == '{\n  "nodes": [\n  ],\n  "edges": [\n  ]\n}'


def test_export_round_trip(net):
    net.add_edge("A", "B", 2)
    net.add_edge("B", "A", 1.5)
    data = json.loads(net.export_to_json())
    assert data["nodes"] == [{"id": "A", "label": "A"}, {"id": "B", "label": "B"}]
    assert data["edges"] == [
        {"from": "A", "to": "B", "label": "2", "isError": False},
        {"from": "B", "to": "A", "label": "1.5", "isError": True},
    ]


def test_print_graph_empty(net, out):
    before = net.export_to_json()
    net.print_graph()
    assert "No graph exists" in out.getvalue()
    assert net.export_to_json() == before
    assert net.find_node("A") is None


def test_print_graph_lists_edges(net, out):
    net.add_edge("A", "B", 2)
    before = net.export_to_json()
    net.print_graph()
    text = out.getvalue()
    assert "Graph Structure:" in text
    assert "2.000000" in text
    assert "No edges" in text
    assert net.export_to_json() == before
    assert net.get_edges("A") == [("B", 2.0)]


def test_print_err_nodes(net, out):
    assert net.print_err_nodes() is False
    net.add_edge("A", "A", 1)
    assert net.print_err_nodes() is True
    assert "Error edges:" in out.getvalue()