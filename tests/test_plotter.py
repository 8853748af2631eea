"""Unit tests for StatsPlotter figure generation."""

import matplotlib.pyplot as plt
import pytest

from structview.analysis.statistics import compute_stats
from structview.schema.molecule import Molecule
from structview.viz.plotter import StatsPlotter


@pytest.fixture
def plotter(protein_with_water):
    return StatsPlotter(compute_stats(protein_with_water), name="1abc")


def test_chain_share_bars(plotter):
    """One bar per chain, heights are percentages."""
    ax = plotter.plot_chain_shares()
    heights = [patch.get_height() for patch in ax.patches]
    assert heights == pytest.approx([500 / 6, 100 / 6])
    assert ax.get_title() == "1abc: Chain composition"
    plt.close(ax.figure)


def test_residue_bars_limited_to_top(plotter):
    """top limits the number of residue bars."""
    ax = plotter.plot_residue_counts(top=2)
    widths = sorted(patch.get_width() for patch in ax.patches)
    assert widths == [1, 3]
    plt.close(ax.figure)


def test_save_writes_file(plotter, tmp_path):
    """The two-panel figure is written to disk."""
    path = plotter.save(tmp_path / "stats.png")
    assert path.exists()


def test_empty_stats_plot(tmp_path):
    """Empty molecules plot without errors."""
    path = StatsPlotter(compute_stats(Molecule())).save(tmp_path / "empty.png")
    assert path.exists()
