class PolarError(Exception):
    """Base class for every error raised by polar_lut."""


class FormatError(PolarError):
    """The source could not be read as a polar table."""


class SourceUnavailable(FormatError):
    def __init__(self, source, reason: str = "Could not open the file"):
        super().__init__(f"{reason}: {source}")
        self.source = source
        self.reason = reason


class MalformedRow(FormatError):
    def __init__(self, lineno: int, line: str, reason: str):
        super().__init__(f"line {lineno}: {reason} ({line.strip()!r})")
        self.lineno = lineno
        self.line = line
        self.reason = reason


class UnknownColumn(PolarError, KeyError):
    def __init__(self, name: str, available=()):
        self.name = name
        self.available = tuple(sorted(available))
        super().__init__(name)

    def __str__(self):
        return f"Unknown column {self.name!r} (available: {', '.join(self.available) or 'none'})"


NotFoundError = UnknownColumn


class EmptyColumn(PolarError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Column {name!r} has no samples")
        self.name = name
