"""
Unit tests for ViewerStateCoordinator and the viewer defaults.

This suite verifies:
- Merge semantics of partial updates
- Rejection of unknown fields and out-of-domain values without side effects
- Listener notification and reset
"""

import math

import pytest

from structview.config import ATOM_SIZE_RANGE, load_viewer_defaults
from structview.core.viewer import ViewerStateCoordinator
from structview.exceptions import InvalidConfigurationError
from structview.schema.events import RegistryEventKind
from structview.schema.viewer_state import ColorScheme, ViewerState, ViewMode


@pytest.fixture
def coordinator():
    return ViewerStateCoordinator()


def test_defaults():
    """Default state is cartoon, default colors, unit atom size, everything visible."""
    state = load_viewer_defaults()
    assert state == ViewerState(ViewMode.CARTOON, ColorScheme.DEFAULT, 1.0, True, True)


def test_atom_size_update_leaves_other_fields(coordinator):
    """Updating atom_size only touches atom_size."""
    before = coordinator.state
    after = coordinator.update({"atom_size": 1.5})
    assert after.atom_size == 1.5
    assert (after.view_mode, after.color_scheme, after.show_ligand, after.show_water_ion) == (
        before.view_mode,
        before.color_scheme,
        before.show_ligand,
        before.show_water_ion,
    )


def test_atom_size_above_max_rejected(coordinator):
    """atom_size 5 exceeds the declared maximum and leaves the state untouched."""
    before = coordinator.state
    with pytest.raises(InvalidConfigurationError, match="atom_size"):
        coordinator.update({"atom_size": 5})
    assert coordinator.state == before


@pytest.mark.parametrize("value", [0.0, 3.01, -1, math.nan, "2", True, None])
def test_atom_size_invalid_values(coordinator, value):
    """Non-numeric, NaN, boolean and out-of-range sizes are rejected."""
    with pytest.raises(InvalidConfigurationError):
        coordinator.update(atom_size=value)


def test_atom_size_bounds_inclusive(coordinator):
    """Both ends of the atom size range are valid."""
    lower, upper = ATOM_SIZE_RANGE
    assert coordinator.update(atom_size=lower).atom_size == lower
    assert coordinator.update(atom_size=upper).atom_size == upper


def test_enum_fields_accept_strings(coordinator):
    """Enum fields accept member values as strings."""
    state = coordinator.update(view_mode="spacefill", color_scheme="CHAIN")
    assert state.view_mode is ViewMode.SPACEFILL
    assert state.color_scheme is ColorScheme.CHAIN


@pytest.mark.parametrize(
    ("field", "value"),
    [("view_mode", "ribbon"), ("color_scheme", "chain"), ("show_ligand", 1), ("show_water_ion", "yes")],
)
def test_out_of_domain_values_rejected(coordinator, field, value):
    """Values outside the declared enumerations or types are rejected."""
    with pytest.raises(InvalidConfigurationError) as excinfo:
        coordinator.update({field: value})
    assert excinfo.value.field == field


def test_unknown_field_rejected_atomically(coordinator):
    """An unknown field fails the whole update, including valid fields alongside it."""
    with pytest.raises(InvalidConfigurationError, match="unknown setting"):
        coordinator.update({"atom_size": 2.0, "opacity": 0.5})
    assert coordinator.state.atom_size == 1.0


def test_listeners_notified_on_change_only(coordinator):
    """Listeners receive the new state; no-op updates emit nothing."""
    received = []
    coordinator.subscribe(received.append)
    coordinator.update(show_ligand=False)
    coordinator.update(show_ligand=False)
    assert len(received) == 1
    assert received[0].kind is RegistryEventKind.VIEWER_STATE_CHANGED
    assert received[0].payload.show_ligand is False


def test_reset_restores_defaults(coordinator):
    """Reset restores the initial state."""
    coordinator.update(view_mode=ViewMode.SURFACE, atom_size=2.5)
    assert coordinator.reset() == load_viewer_defaults()


def test_custom_defaults_validated():
    """Overrides for the defaults go through the same validation."""
    assert load_viewer_defaults(color_scheme="ELEMENT").color_scheme is ColorScheme.ELEMENT
    with pytest.raises(InvalidConfigurationError):
        load_viewer_defaults(atom_size=10)
