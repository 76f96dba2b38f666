import numpy as np

from polar_lut.config import DEFAULT_METHOD, METHODS
from polar_lut.errors import EmptyColumn, FormatError, UnknownColumn
from polar_lut.models import PolarTable
from polar_lut.table_loader import deg_to_rad


# -------------------------------------------------
# Column access
# -------------------------------------------------

def get_column(table: PolarTable, column_name: str) -> tuple:
    try:
        column = table[column_name]
    except KeyError:
        raise UnknownColumn(column_name, table.keys()) from None
    if len(column) == 0:
        raise EmptyColumn(column_name)
    return column


def column_range(table: PolarTable, column_name: str) -> tuple[float, float]:
    """(first angle, last angle) of a column, radians."""
    column = get_column(table, column_name)
    return column[0].angle, column[-1].angle


# -------------------------------------------------
# Interpolation policies (both clipped to the sampled range)
# -------------------------------------------------

def _midpoint(column, x: float) -> float:
    for s in column:
        if s.angle == x:
            return s.value

    # first sample past x; bracketed by the range checks in lookup()
    i = next(k for k, s in enumerate(column) if s.angle > x)
    # equal-weight average of the neighbours, independent of where x falls
    return (column[i - 1].value + column[i].value) / 2.0


def _linear(column, x: float) -> float:
    bp = np.array([s.angle for s in column], dtype=float)
    table = np.array([s.value for s in column], dtype=float)
    return float(np.interp(x, bp, table))


_POLICIES = {
    "midpoint": _midpoint,
    "linear": _linear,
}


def lookup(table: PolarTable, column_name: str, query_angle: float, method: str = DEFAULT_METHOD) -> float:
    """
    Value of `column_name` at `query_angle` (radians).

    Outside the sampled range the boundary value is returned (flat
    extrapolation). Inside it an exact angle match returns the stored
    value; otherwise "midpoint" returns the mean of the two bracketing
    samples and "linear" weights them by distance.
    """
    if method not in _POLICIES:
        raise ValueError(f"Unknown method {method!r}; expected one of: {', '.join(METHODS)}")

    column = get_column(table, column_name)
    if not (np.isfinite(column[0].angle) and np.isfinite(column[-1].angle)):
        raise FormatError(f"Column {column_name!r} has a non-finite boundary angle")
    x = float(query_angle)
    if np.isnan(x):
        raise ValueError("query angle is NaN")

    if x <= column[0].angle:
        return float(column[0].value)
    if x >= column[-1].angle:
        return float(column[-1].value)
    return float(_POLICIES[method](column, x))


def lookup_deg(table: PolarTable, column_name: str, query_angle_deg: float, method: str = DEFAULT_METHOD) -> float:
    return lookup(table, column_name, deg_to_rad(query_angle_deg), method=method)


def lookup_many(table: PolarTable, column_name: str, query_angles, method: str = DEFAULT_METHOD) -> np.ndarray:
    angles = np.atleast_1d(np.asarray(query_angles, dtype=float))
    return np.array([lookup(table, column_name, a, method=method) for a in angles], dtype=float)
