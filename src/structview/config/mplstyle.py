"""
Load custom matplotlib style for consistent statistics figures.

Provides a utility to apply a predefined `.mplstyle` file for presentation-ready plots.
"""

from pathlib import Path

import matplotlib.pyplot as plt

STYLE_PATH = Path(__file__).parent / "presentation.mplstyle"


def load_mplstyle() -> None:
    """
    Apply the custom matplotlib style defined in `presentation.mplstyle`.

    Notes
    -----
    - Style file is expected to reside in the same directory as this module.
    - Side effect: sets the global matplotlib style.
    """
    plt.style.use(STYLE_PATH)
