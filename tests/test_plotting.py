"""
Smoke tests for ring plotting.
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from ringguard import validate_ring
from ringguard.visualization.plotting import plot_ring


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


class TestPlotRing:
    """Tests for plot_ring()."""

    def test_valid_ring(self):
        ax = plot_ring([(0, 0), (0, 1), (1, 1), (1, 0)])
        assert ax.get_title() == "Ring"
        assert ax.get_xlabel() == 'Longitude'
        # Outline plus fill
        assert len(ax.lines) == 1
        assert len(ax.patches) == 1

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        assert plot_ring([(0, 0), (0, 1), (1, 1)], ax=ax, title="Triangle") is ax
        assert ax.get_title() == "Triangle"

    def test_bowtie_highlights_intersecting_edges(self):
        ax = plot_ring([(0, 0), (1, 1), (1, 0), (0, 1)])
        # Outline, two highlighted edges, legend proxy
        assert len(ax.lines) == 4
        assert 'self-intersection' in ax.texts[0].get_text()

    def test_first_pair_only(self):
        ax = plot_ring([(0, 0), (1, 1), (1, 0), (0, 1)], show_all_intersections=False)
        assert len(ax.lines) == 4

    def test_precomputed_outcome(self):
        points = [(0, 0), (0, 0), (1, 0), (1, 1)]
        outcome = validate_ring(points)
        ax = plot_ring(points, outcome=outcome)
        assert ax.texts[0].get_text() == outcome.message
        assert ax.get_legend() is not None

    def test_out_of_range_point(self):
        ax = plot_ring([(0, 0), (0, 1), (95, 1)])
        assert 'Latitude' in ax.texts[0].get_text()

    def test_too_few_points(self):
        ax = plot_ring([(0, 0), (1, 1)])
        assert 'at least 3' in ax.texts[0].get_text()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
