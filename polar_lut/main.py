import argparse
import sys

from polar_lut.config import (
    FORMATS, METHODS,
    DEFAULT_FORMAT, DEFAULT_COLUMN, DEFAULT_METHOD,
    get_format,
)
from polar_lut.errors import PolarError
from polar_lut.frames import table_to_frame
from polar_lut.log_utils import get_logger, set_level
from polar_lut.sweep_log import sweep
from polar_lut.table_loader import load
from polar_lut.table_query import get_column, lookup_deg

logger = get_logger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Load an XFLR5 polar export and look up coefficients by angle of attack.")
    p.add_argument("path", help="Polar export file.")

    p.add_argument("--format", choices=sorted(FORMATS), default=DEFAULT_FORMAT,
                   help="Export variant (header skip count and column source).")
    p.add_argument("--skip", type=int, default=None, help="Override the number of leading lines to skip.")
    p.add_argument("--columns", nargs="+", default=None, metavar="NAME",
                   help="Fixed column names instead of reading the header line.")
    p.add_argument("--lenient", action="store_true",
                   help="Tolerate rows that do not match the column schema (logged, not raised).")

    p.add_argument("--column", default=DEFAULT_COLUMN, help="Coefficient column to print or query.")
    p.add_argument("--alpha", type=float, default=None, help="Query angle of attack (deg).")
    p.add_argument("--method", choices=METHODS, default=DEFAULT_METHOD)
    p.add_argument("--sweep", type=float, nargs=3, default=None, metavar=("START", "STOP", "STEP"),
                   help="Query a range of angles (deg).")

    p.add_argument("--table", action="store_true", help="Print the whole table.")
    p.add_argument("--plot", action="store_true", help="Plot the column (and sweep, if given).")
    p.add_argument("--verbose", action="store_true", help="Debug logging.")
    return p.parse_args(argv)


def run(args) -> int:
    fmt = get_format(args.format, header_lines_to_skip=args.skip, columns=args.columns)
    table = load(args.path, fmt=fmt, strict=not args.lenient)
    logger.debug("Loaded %r", table)

    swept = None

    if args.table:
        print(table_to_frame(table).to_string(index=False))
    elif args.alpha is not None:
        print(lookup_deg(table, args.column, args.alpha, method=args.method))
    elif args.sweep is not None:
        swept = sweep(table, args.column, *args.sweep, method=args.method)
        for a, v in zip(swept["alpha_deg"], swept["value"]):
            print(f"{a:g} {v:g}")
    else:
        for s in get_column(table, args.column):
            print(s.angle, s.value)

    if args.plot:
        from polar_lut.plotting import plot_column
        plot_column(table, args.column, sweep=swept)

    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        set_level("DEBUG")

    try:
        return run(args)
    except (PolarError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
