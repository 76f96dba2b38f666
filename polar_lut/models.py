from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

import numpy as np


class Sample(NamedTuple):
    angle: float  # rad
    value: float


@dataclass(frozen=True)
class PolarFormat:
    """
    One export variant of a polar file.

    columns=None means the column names are read from a header line
    (followed by `separator_lines` rule lines); a tuple of names means
    the data starts right after the skipped lines.
    """
    header_lines_to_skip: int
    columns: tuple[str, ...] | None = None
    separator_lines: int = 1
    name: str = ""

    def __post_init__(self):
        if self.header_lines_to_skip < 0:
            raise ValueError("header_lines_to_skip must be >= 0")
        if self.separator_lines < 0:
            raise ValueError("separator_lines must be >= 0")
        if self.columns is not None:
            object.__setattr__(self, "columns", tuple(self.columns))

    @property
    def reads_header(self) -> bool:
        return self.columns is None


class PolarTable(Mapping):
    """
    Read-only mapping: column name -> tuple of Sample(angle_rad, value).
    """

    def __init__(self, columns: Mapping[str, list | tuple]):
        self._columns = MappingProxyType(
            {name: tuple(Sample(float(a), float(v)) for a, v in samples)
             for name, samples in columns.items()}
        )

    def __getitem__(self, name: str) -> tuple:
        return self._columns[name]

    def __iter__(self):
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self):
        sizes = ", ".join(f"{k}={len(v)}" for k, v in self._columns.items())
        return f"PolarTable({sizes})"

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._columns)

    @property
    def n_rows(self) -> int:
        # longest column; equal to every column length for strictly loaded tables
        return max((len(c) for c in self._columns.values()), default=0)

    def angles_of(self, name: str) -> np.ndarray:
        return np.array([s.angle for s in self[name]], dtype=float)

    def values_of(self, name: str) -> np.ndarray:
        return np.array([s.value for s in self[name]], dtype=float)
