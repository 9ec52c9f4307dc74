"""Tests for layout quality metrics."""

import pytest

from graph_relax import Link, Node
from graph_relax.geometry import distance, distance_xy
from graph_relax.metrics import (
    EdgeLengthMetrics,
    edge_crossings,
    edge_length_metrics,
    edge_length_uniformity,
    edge_length_variance,
    layout_quality_summary,
)
from graph_relax.validation import InvalidLinkError


class TestDistance:
    """Tests for the epsilon-offset distance."""

    def test_three_four_five(self):
        assert distance(Node(id=0, x=0, y=0), Node(id=1, x=3, y=4)) == pytest.approx(5 + 1e-6)

    def test_coincident_points_are_epsilon_apart(self):
        a = Node(id=0, x=0.5, y=0.5)
        assert distance(a, a) == 1e-6

    def test_custom_epsilon(self):
        assert distance_xy(0.0, 0.0, 0.0, 2.0, epsilon=0.5) == 2.5

    def test_symmetric(self):
        a = Node(id=0, x=0.1, y=0.9)
        b = Node(id=1, x=0.7, y=0.2)
        assert distance(a, b) == distance(b, a)


class TestEdgeLengthMetrics:
    """Tests for total/average edge length."""

    def test_single_edge(self):
        """(0,0)-(3,4) has length 5 + epsilon."""
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=3, y=4)]
        metrics = edge_length_metrics(nodes, [Link(0, 1)])

        assert metrics.total_edge_length == pytest.approx(5 + 1e-6)
        assert metrics.average_edge_length == pytest.approx(5 + 1e-6)
        assert metrics.edge_count == 1

    def test_average_over_edges(self):
        nodes = [Node(id="a", x=0, y=0), Node(id="b", x=1, y=0), Node(id="c", x=1, y=3)]
        metrics = edge_length_metrics(nodes, [Link("a", "b"), Link("b", "c")], epsilon=0.0)

        assert metrics.total_edge_length == pytest.approx(4.0)
        assert metrics.average_edge_length == pytest.approx(2.0)

    def test_no_edges_is_defined(self):
        """No edges gives zeros and has_edges False, never NaN."""
        metrics = edge_length_metrics([Node(id=0, x=0.5, y=0.5)], [])

        assert metrics == EdgeLengthMetrics(0.0, 0.0, 0)
        assert not metrics.has_edges

    def test_dangling_edge_raises(self):
        nodes = [Node(id=0, x=0, y=0)]
        with pytest.raises(InvalidLinkError, match="target 5"):
            edge_length_metrics(nodes, [Link(0, 5)])

    def test_accepts_id_pairs(self):
        """Edges as loaded from JSON: plain [source, target] pairs."""
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=3, y=4)]
        metrics = edge_length_metrics(nodes, [[0, 1]])

        assert metrics.total_edge_length == pytest.approx(5 + 1e-6)
        assert metrics.edge_count == 1

    def test_accepts_dict_links(self):
        nodes = [Node(id="a", x=0, y=0), Node(id="b", x=0, y=2)]
        metrics = edge_length_metrics(nodes, [{"source": "a", "target": "b"}], epsilon=0.0)

        assert metrics.average_edge_length == pytest.approx(2.0)

    def test_dangling_id_pair_raises(self):
        nodes = [Node(id=0, x=0, y=0)]
        with pytest.raises(InvalidLinkError, match="Link 0: target 7"):
            edge_length_metrics(nodes, [[0, 7]])

    def test_report_lines(self):
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=3, y=4)]
        lines = edge_length_metrics(nodes, [Link(0, 1)]).report_lines("Initial graph metrics:")

        assert lines == [
            "Initial graph metrics:",
            "- Average edge length: 5.0000",
            "- Total edge length: 5.0000",
        ]

    def test_report_lines_without_edges(self):
        lines = EdgeLengthMetrics(0.0, 0.0, 0).report_lines("Final graph metrics:")
        assert lines[0] == "Final graph metrics:"
        assert "No edges" in lines[1]


class TestEdgeLengthVariance:
    """Tests for edge length variance and uniformity."""

    def test_uniform_lengths(self):
        nodes = [Node(id=i, x=0.2 * i, y=0) for i in range(4)]
        links = [Link(0, 1), Link(1, 2), Link(2, 3)]

        assert edge_length_variance(nodes, links) == pytest.approx(0.0)
        assert edge_length_uniformity(nodes, links) == pytest.approx(1.0)

    def test_varied_lengths(self):
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=0.1, y=0), Node(id=2, x=0.9, y=0)]
        links = [Link(0, 1), Link(1, 2)]

        assert edge_length_variance(nodes, links) > 0
        assert 0.0 <= edge_length_uniformity(nodes, links) < 1.0

    def test_no_links(self):
        nodes = [Node(id=0, x=0, y=0)]
        assert edge_length_variance(nodes, []) == 0.0
        assert edge_length_uniformity(nodes, []) == 1.0


class TestEdgeCrossings:
    """Tests for edge crossing detection."""

    def test_square_with_diagonals(self):
        """Square with diagonals has exactly 1 crossing."""
        nodes = [
            Node(id="nw", x=0, y=0),
            Node(id="ne", x=1, y=0),
            Node(id="se", x=1, y=1),
            Node(id="sw", x=0, y=1),
        ]
        links = [
            Link("nw", "ne"),
            Link("ne", "se"),
            Link("se", "sw"),
            Link("sw", "nw"),
            Link("nw", "se"),
            Link("ne", "sw"),
        ]
        assert edge_crossings(nodes, links) == 1

    def test_shared_endpoint_not_counted(self):
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=1, y=0), Node(id=2, x=0, y=1)]
        assert edge_crossings(nodes, [Link(0, 1), Link(0, 2)]) == 0

    def test_single_edge(self):
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=1, y=0)]
        assert edge_crossings(nodes, [Link(0, 1)]) == 0

    def test_id_pairs(self):
        nodes = [
            Node(id=0, x=0, y=0),
            Node(id=1, x=1, y=1),
            Node(id=2, x=1, y=0),
            Node(id=3, x=0, y=1),
        ]
        assert edge_crossings(nodes, [[0, 1], [2, 3]]) == 1


class TestQualitySummary:
    def test_summary_keys(self):
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=3, y=4)]
        summary = layout_quality_summary(nodes, [Link(0, 1)])

        assert summary["edge_count"] == 1
        assert summary["total_edge_length"] == pytest.approx(5 + 1e-6)
        assert summary["edge_crossings"] == 0
        assert summary["edge_length_variance"] == 0.0

    def test_summary_from_id_pairs(self):
        nodes = [Node(id=0, x=0, y=0), Node(id=1, x=1, y=0), Node(id=2, x=1, y=1)]
        summary = layout_quality_summary(nodes, [[0, 1], [1, 2]])

        assert summary["edge_count"] == 2
        assert summary["edge_length_variance"] == pytest.approx(0.0)
        assert summary["edge_length_uniformity"] == pytest.approx(1.0)
