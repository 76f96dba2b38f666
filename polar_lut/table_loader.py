# polar_lut/table_loader.py
from __future__ import annotations

import io
import os

import numpy as np

from polar_lut.config import XFLR5
from polar_lut.errors import FormatError, MalformedRow, SourceUnavailable
from polar_lut.log_utils import get_logger
from polar_lut.models import PolarFormat, PolarTable

logger = get_logger(__name__)


def deg_to_rad(deg: float) -> float:
    return float(deg) * np.pi / 180.0


def _leading_floats(tokens: list[str]) -> list[float]:
    """Parse tokens left to right, stopping at the first non-numeric one."""
    out = []
    for tok in tokens:
        try:
            out.append(float(tok))
        except ValueError:
            break
    return out


def _check_names(names: tuple[str, ...], strict: bool, where: str) -> None:
    if not names:
        if strict:
            raise FormatError(f"{where}: no column names")
        logger.warning("%s: no column names, table will be empty", where)
        return

    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        if strict:
            raise FormatError(f"{where}: duplicate column names {', '.join(dupes)}")
        logger.warning("%s: duplicate column names %s share one column", where, ", ".join(dupes))


def _parse(lines, fmt: PolarFormat, strict: bool, label: str) -> PolarTable:
    numbered = enumerate(lines, start=1)

    # metadata block
    for _ in range(fmt.header_lines_to_skip):
        if next(numbered, None) is None:
            break

    if fmt.reads_header:
        header = next(numbered, None)
        if header is None:
            if strict:
                raise FormatError(f"{label}: input ended before the column header")
            logger.warning("%s: input ended before the column header", label)
            return PolarTable({})

        # first token names the angle axis (alpha)
        names = tuple(header[1].split()[1:])
        _check_names(names, strict, f"{label}:{header[0]}")

        for _ in range(fmt.separator_lines):
            next(numbered, None)
    else:
        names = fmt.columns
        _check_names(names, strict, label)

    columns = {name: [] for name in names}
    n_fields = len(names) + 1
    n_rows = 0

    for lineno, line in numbered:
        # end of table
        if not line.strip():
            break

        tokens = line.split()
        if strict:
            if len(tokens) != n_fields:
                raise MalformedRow(lineno, line, f"expected {n_fields} fields, got {len(tokens)}")
            try:
                numbers = [float(tok) for tok in tokens]
            except ValueError:
                raise MalformedRow(lineno, line, "non-numeric field") from None
            if not np.isfinite(numbers[0]):
                raise MalformedRow(lineno, line, "angle is not finite")
        else:
            numbers = _leading_floats(tokens)
            if not numbers:
                logger.warning("%s:%d: no numeric angle, row skipped", label, lineno)
                continue
            if len(numbers) != n_fields:
                logger.warning("%s:%d: %d numeric fields, expected %d", label, lineno, len(numbers), n_fields)

        alpha = deg_to_rad(numbers[0])
        for name, value in zip(names, numbers[1:]):
            columns[name].append((alpha, value))
        n_rows += 1

    logger.debug("%s: %d rows, columns %s", label, n_rows, ", ".join(columns))
    return PolarTable(columns)


def load(source, fmt: PolarFormat = XFLR5, strict: bool = True) -> PolarTable:
    """
    Build a PolarTable from a polar export.

    source: path (str / os.PathLike) or an open text stream / iterable of lines.
    fmt: export variant (header skip count, header or fixed column schema).
    strict: raise MalformedRow on rows that do not match the column schema;
            when False, short rows leave trailing columns without a sample,
            extra fields are ignored and problems are only logged.

    Raises SourceUnavailable if the file cannot be opened or read.
    """
    if isinstance(source, (str, os.PathLike)):
        label = os.fspath(source)
        try:
            with open(source, "r", encoding="utf-8", errors="replace") as fh:
                return _parse(fh, fmt, strict, label)
        except OSError as exc:
            raise SourceUnavailable(label, exc.strerror or str(exc)) from exc

    label = getattr(source, "name", "<stream>")
    try:
        return _parse(source, fmt, strict, str(label))
    except OSError as exc:
        raise SourceUnavailable(label, exc.strerror or str(exc)) from exc


def loads(text: str, fmt: PolarFormat = XFLR5, strict: bool = True) -> PolarTable:
    return load(io.StringIO(text), fmt=fmt, strict=strict)
