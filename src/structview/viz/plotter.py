"""Plotting support for per-structure statistics."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from structview.analysis.statistics import chain_atom_shares
from structview.config.mplstyle import load_mplstyle
from structview.schema.stats import MoleculeStats

load_mplstyle()  # load figure config file


class StatsPlotter:
    """
    Figures for one structure's statistics: chain atom shares and residue composition.

    Parameters
    ----------
    stats : MoleculeStats
        Statistics to plot.
    name : str, optional
        Structure name used in figure titles.
    """

    def __init__(self, stats: MoleculeStats, name: str = "") -> None:
        self.stats = stats
        self.name = name

    def _title(self, label: str) -> str:
        return f"{self.name}: {label}" if self.name else label

    def plot_chain_shares(self, ax: Axes | None = None) -> Axes:
        """Bar chart of the percentage of atoms held by each chain."""
        if ax is None:
            _, ax = plt.subplots()

        shares = chain_atom_shares(self.stats)
        labels = [chain_id or "-" for chain_id in shares]
        ax.bar(labels, list(shares.values()))
        ax.set_xlabel("Chain")
        ax.set_ylabel("% of total atoms")
        ax.set_ylim(0, 100)
        ax.set_title(self._title("Chain composition"))
        return ax

    def plot_residue_counts(self, ax: Axes | None = None, top: int | None = None) -> Axes:
        """
        Horizontal bar chart of residue occurrence counts.

        Parameters
        ----------
        ax : Axes, optional
            Axes to draw on; a new figure is created otherwise.
        top : int, optional
            Only plot the ``top`` most frequent residues.
        """
        if ax is None:
            _, ax = plt.subplots()

        residues = np.array(list(self.stats.residue_counts), dtype=str)
        counts = np.array(list(self.stats.residue_counts.values()), dtype=int)
        order = np.argsort(-counts, kind="stable")
        if top is not None:
            order = order[:top]

        ax.barh(residues[order][::-1], counts[order][::-1])
        ax.set_xlabel("Atoms")
        ax.set_title(self._title("Residue composition"))
        return ax

    def figure(self, top: int | None = 20) -> Figure:
        """Two-panel figure with both plots side by side."""
        fig, (ax_chain, ax_res) = plt.subplots(1, 2)
        self.plot_chain_shares(ax_chain)
        self.plot_residue_counts(ax_res, top=top)
        fig.tight_layout()
        return fig

    def save(self, path: str | Path, top: int | None = 20) -> Path:
        """Write the two-panel figure to ``path`` and close it."""
        path = Path(path)
        fig = self.figure(top=top)
        fig.savefig(path)
        plt.close(fig)
        return path
