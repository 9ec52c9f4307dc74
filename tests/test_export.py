"""Tests for export functionality (JSON, SVG)."""

import json
import logging

import pytest

from graph_relax import FruchtermanReingoldLayout, Link, Node
from graph_relax.export import node_records, to_json, to_svg
from graph_relax.validation import InvalidLinkError

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def path_layout():
    """A small laid-out path."""
    nodes = [{"id": i, "x": 0.2 + 0.15 * i, "y": 0.5, "name": f"Node_{i}"} for i in range(4)]
    links = [[i, i + 1] for i in range(3)]
    return FruchtermanReingoldLayout(nodes=nodes, links=links, iterations=20).run()


# =============================================================================
# JSON
# =============================================================================


class TestJsonExport:
    def test_same_order_and_ids(self, path_layout):
        data = json.loads(to_json(path_layout.nodes))
        assert [record["id"] for record in data] == [0, 1, 2, 3]

    def test_positions_match_nodes(self, path_layout):
        data = json.loads(to_json(path_layout.nodes))
        for record, node in zip(data, path_layout.nodes):
            assert record["x"] == node.x
            assert record["y"] == node.y

    def test_extra_fields_written(self, path_layout):
        data = json.loads(to_json(path_layout.nodes))
        assert data[2]["name"] == "Node_2"
        assert list(data[2]) == ["id", "x", "y", "name"]

    def test_indented(self, path_layout):
        text = to_json(path_layout.nodes)
        assert text.startswith("[\n  {")

    def test_compact(self):
        assert to_json([Node(id="a", x=0.5, y=0.25)], indent=None) == '[{"id": "a", "x": 0.5, "y": 0.25}]'

    def test_node_records(self):
        assert node_records([Node(id=1, x=0.0, y=1.0)]) == [{"id": 1, "x": 0.0, "y": 1.0}]

    def test_field_named_like_node_member_is_kept(self, caplog):
        """An input field called to_dict still round-trips, with a warning."""
        caplog.set_level(logging.WARNING, logger="graph_relax")
        node = Node(id="a", x=0.5, y=0.5, to_dict="keep", color="red")

        assert node_records([node]) == [
            {"id": "a", "x": 0.5, "y": 0.5, "to_dict": "keep", "color": "red"}
        ]
        assert callable(node.to_dict)
        assert "to_dict" in caplog.text

    def test_extra_field_changes_are_exported(self):
        node = Node(id="a", x=0.5, y=0.5, color="red")
        node.color = "blue"
        assert node.to_dict()["color"] == "blue"


# =============================================================================
# SVG
# =============================================================================


class TestSvgExport:
    def test_basic_structure(self, path_layout):
        svg = to_svg(path_layout.nodes, path_layout.links)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert svg.count("<circle") == 4
        assert svg.count("<line") == 3

    def test_canvas_size(self):
        svg = to_svg([Node(id=0, x=0.5, y=0.5)], [], size=(200, 100), padding=10)
        assert 'width="220.0" height="120.0"' in svg
        assert 'cx="110.00" cy="60.00"' in svg

    def test_labels(self, path_layout):
        svg = to_svg(path_layout.nodes, path_layout.links)
        assert '<g class="labels">' in svg
        assert ">3</text>" in svg

    def test_no_labels(self, path_layout):
        svg = to_svg(path_layout.nodes, path_layout.links, show_labels=False)
        assert "<text" not in svg

    def test_labels_escaped(self):
        svg = to_svg([Node(id="<a&b>", x=0.5, y=0.5)], [])
        assert "&lt;a&amp;b&gt;" in svg

    def test_background(self):
        svg = to_svg([Node(id=0, x=0.5, y=0.5)], [], background="#ffffff")
        assert 'fill="#ffffff"' in svg

    def test_empty(self):
        svg = to_svg([], [])
        assert svg.startswith("<svg")
        assert "<circle" not in svg

    def test_dangling_link(self):
        with pytest.raises(InvalidLinkError):
            to_svg([Node(id=0, x=0.5, y=0.5)], [Link(0, 1)])

    def test_id_pair_links(self):
        """Edges straight from an edge file draw like Link objects."""
        nodes = [Node(id=0, x=0.0, y=0.0), Node(id=1, x=1.0, y=1.0)]
        assert to_svg(nodes, [[0, 1]], show_labels=False) == to_svg(
            nodes, [Link(0, 1)], show_labels=False
        )
