"""
Default viewer configuration and the declared domain of every viewer setting.

Values arriving from view controls are checked here before they reach a :class:`ViewerState`.
"""

from collections.abc import Mapping
from dataclasses import fields, replace
from enum import Enum
from typing import Any

from structview.exceptions import InvalidConfigurationError
from structview.schema.viewer_state import ColorScheme, ViewerState, ViewMode
from structview.utils.validation import is_in_range

ATOM_SIZE_RANGE: tuple[float, float] = (0.1, 3.0)

VIEWER_FIELDS: frozenset[str] = frozenset(f.name for f in fields(ViewerState))

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "view_mode": ViewMode,
    "color_scheme": ColorScheme,
}
_BOOL_FIELDS = ("show_ligand", "show_water_ion")


def _coerce_enum(name: str, value: Any, enum_cls: type[Enum]) -> Enum:
    # accept members or their string values
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidConfigurationError(name, value, f"expected one of {choices}") from e


def validate_viewer_fields(partial: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate and normalize a partial viewer update.

    Parameters
    ----------
    partial : Mapping[str, Any]
        Field names mapped to new values. Enum fields accept members or their string values.

    Returns
    -------
    dict[str, Any]
        Normalized values, ready for :func:`dataclasses.replace`.

    Raises
    ------
    InvalidConfigurationError
        If a field is unknown or a value lies outside its declared enumeration or range.
    """
    normalized: dict[str, Any] = {}
    for name, value in partial.items():
        if name not in VIEWER_FIELDS:
            raise InvalidConfigurationError(name, value, "unknown setting")

        if name in _ENUM_FIELDS:
            normalized[name] = _coerce_enum(name, value, _ENUM_FIELDS[name])
        elif name == "atom_size":
            lower, upper = ATOM_SIZE_RANGE
            if not is_in_range(value, lower, upper):
                raise InvalidConfigurationError(name, value, f"expected a number in [{lower}, {upper}]")
            normalized[name] = float(value)
        elif name in _BOOL_FIELDS:
            if not isinstance(value, bool):
                raise InvalidConfigurationError(name, value, "expected a boolean")
            normalized[name] = value

    return normalized


def load_viewer_defaults(**overrides: Any) -> ViewerState:
    """
    Build the initial viewer state, optionally overriding individual defaults.

    Examples
    --------
    >>> load_viewer_defaults().view_mode
    <ViewMode.CARTOON: 'cartoon'>
    >>> load_viewer_defaults(atom_size=2.0).atom_size
    2.0
    """
    return replace(ViewerState(), **validate_viewer_fields(overrides))
