from polar_lut.models import PolarFormat

# -------------------------------------------------
# XFLR5 polar export variants
# -------------------------------------------------

# metadata block written by XFLR5 above the column header
XFLR5_HEADER_LINES = 9
# metadata + header + dashed rule, for reading with a fixed schema
XFLR5_FIXED_HEADER_LINES = 11

# "Top Xtr" / "Bot Xtr" are two tokens each in the file header
XFLR5_COLUMNS = ("CL", "CD", "CDp", "Cm", "Top_Xtr", "Bot_Xtr", "Cpmin", "Chinge", "XCp")

XFLR5 = PolarFormat(header_lines_to_skip=XFLR5_HEADER_LINES, name="xflr5")
XFLR5_FIXED = PolarFormat(
    header_lines_to_skip=XFLR5_FIXED_HEADER_LINES,
    columns=XFLR5_COLUMNS,
    name="xflr5-fixed",
)

FORMATS = {
    XFLR5.name: XFLR5,
    XFLR5_FIXED.name: XFLR5_FIXED,
}

# -------------------------------------------------
# Query / CLI defaults
# -------------------------------------------------

# real XFLR5 headers split "Top Xtr" / "Bot Xtr", so the CLI reads with the fixed schema
DEFAULT_FORMAT = XFLR5_FIXED.name
DEFAULT_COLUMN = "Cpmin"
DEFAULT_METHOD = "midpoint"
METHODS = ("midpoint", "linear")

LOG_LEVEL_ENV = "POLAR_LUT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def get_format(name: str = DEFAULT_FORMAT, header_lines_to_skip: int | None = None,
               columns=None) -> PolarFormat:
    """
    Returns the named export variant, optionally with its skip count or
    column schema replaced.

    Supplying columns for a header-reading variant also skips its header
    and rule lines unless header_lines_to_skip is given.
    """
    try:
        fmt = FORMATS[name]
    except KeyError:
        raise ValueError(f"Unknown format {name!r}; expected one of: {', '.join(FORMATS)}") from None

    if header_lines_to_skip is None and columns is None:
        return fmt

    if header_lines_to_skip is None:
        header_lines_to_skip = fmt.header_lines_to_skip
        if columns is not None and fmt.reads_header:
            header_lines_to_skip += 1 + fmt.separator_lines

    return PolarFormat(
        header_lines_to_skip=int(header_lines_to_skip),
        columns=fmt.columns if columns is None else tuple(columns),
        separator_lines=fmt.separator_lines,
        name=fmt.name,
    )
