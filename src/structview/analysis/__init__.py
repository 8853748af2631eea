"""Derived statistics over parsed molecules."""

from structview.analysis.statistics import chain_atom_shares, compute_stats, summarize_structures

__all__ = ["chain_atom_shares", "compute_stats", "summarize_structures"]
