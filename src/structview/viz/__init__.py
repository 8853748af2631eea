"""Statistics figures."""

from structview.viz.plotter import StatsPlotter

__all__ = ["StatsPlotter"]
