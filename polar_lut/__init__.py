"""Polar lookup tables: load XFLR5-style polar exports and query coefficients by angle of attack."""

from polar_lut.config import FORMATS, XFLR5, XFLR5_FIXED, get_format
from polar_lut.errors import (
    EmptyColumn,
    FormatError,
    MalformedRow,
    NotFoundError,
    PolarError,
    SourceUnavailable,
    UnknownColumn,
)
from polar_lut.models import PolarFormat, PolarTable, Sample
from polar_lut.table_loader import deg_to_rad, load, loads
from polar_lut.table_query import column_range, lookup, lookup_deg, lookup_many

__version__ = "0.1.0"

__all__ = [
    "FORMATS", "XFLR5", "XFLR5_FIXED", "get_format",
    "PolarError", "FormatError", "SourceUnavailable", "MalformedRow",
    "UnknownColumn", "NotFoundError", "EmptyColumn",
    "PolarFormat", "PolarTable", "Sample",
    "deg_to_rad", "load", "loads",
    "lookup", "lookup_deg", "lookup_many", "column_range",
]
