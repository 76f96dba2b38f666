import numpy as np

from polar_lut.config import DEFAULT_METHOD
from polar_lut.table_loader import deg_to_rad
from polar_lut.table_query import lookup


class SweepLogger:
    """
    Collects the lookups of one column over a range of angles.

    Angles go in as degrees; the radian angle actually queried is kept
    alongside so plots and printed output agree with lookup().
    """

    def __init__(self, column_name: str, method: str = DEFAULT_METHOD):
        self.column_name = column_name
        self.method = method
        self.alpha_deg = []
        self.alpha_rad = []
        self.value = []

    def __len__(self):
        return len(self.value)

    def query(self, table, alpha_deg: float) -> float:
        a_rad = deg_to_rad(alpha_deg)
        value = lookup(table, self.column_name, a_rad, method=self.method)
        self.alpha_deg.append(float(alpha_deg))
        self.alpha_rad.append(a_rad)
        self.value.append(value)
        return value

    def to_numpy(self):
        return {
            "alpha_deg": np.array(self.alpha_deg, dtype=float),
            "alpha_rad": np.array(self.alpha_rad, dtype=float),
            "value": np.array(self.value, dtype=float),
        }


def sweep_angles(start_deg: float, stop_deg: float, step_deg: float) -> np.ndarray:
    """Closed range start..stop (deg); stop is included when it lands on the grid."""
    if step_deg <= 0:
        raise ValueError("step must be > 0")
    if stop_deg < start_deg:
        raise ValueError("stop must be >= start")
    n = int(np.floor((stop_deg - start_deg) / step_deg + 1e-9)) + 1
    return start_deg + step_deg * np.arange(n, dtype=float)


def sweep(table, column_name: str, start_deg: float, stop_deg: float, step_deg: float,
          method: str = DEFAULT_METHOD):
    log = SweepLogger(column_name, method=method)
    for a_deg in sweep_angles(start_deg, stop_deg, step_deg):
        log.query(table, a_deg)
    return log.to_numpy()
