import numpy as np
import pandas as pd

from polar_lut.errors import FormatError
from polar_lut.models import PolarTable


def table_to_frame(table: PolarTable, degrees: bool = True) -> pd.DataFrame:
    """
    One row per data row: alpha (deg, or rad with degrees=False) followed by
    the coefficient columns in name order.
    """
    names = sorted(table)
    if not names:
        return pd.DataFrame({"alpha": np.array([], dtype=float)})

    lengths = {len(table[n]) for n in names}
    if len(lengths) != 1:
        raise FormatError("Columns have different lengths; table cannot be framed (loaded with strict=False?)")

    alpha = table.angles_of(names[0])
    for n in names[1:]:
        if not np.array_equal(table.angles_of(n), alpha):
            raise FormatError(f"Column {n!r} is not aligned with {names[0]!r}")

    df = pd.DataFrame({"alpha": np.rad2deg(alpha) if degrees else alpha})
    for n in names:
        df[n] = table.values_of(n)
    return df
