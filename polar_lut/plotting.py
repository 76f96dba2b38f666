import matplotlib.pyplot as plt
import numpy as np

from polar_lut.table_query import get_column


def plot_column(table, column_name: str, sweep=None, title=None, show: bool = True):
    get_column(table, column_name)
    alpha_deg = np.rad2deg(table.angles_of(column_name))
    values = table.values_of(column_name)

    fig = plt.figure(figsize=(10, 5))
    plt.plot(alpha_deg, values, "o", label="samples")

    if sweep is not None:
        plt.plot(sweep["alpha_deg"], sweep["value"], "-", label="lookup")

    plt.xlabel("Alpha (deg)")
    plt.ylabel(column_name)
    plt.title(title or f"{column_name} vs Alpha")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()

    if show:
        plt.show()
    return fig
