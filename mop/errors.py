# errors.py
from typing import Optional


class MopError(Exception):
    """Base class for every fatal error raised while cleaning a CSV."""


class InputOpenError(MopError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error opening file {path}: {reason}")


class HeaderParseError(MopError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not read headers: {reason}")


class RecordParseError(MopError):
    def __init__(self, line: Optional[int], reason: str):
        self.line = line
        self.reason = reason
        where = f" (line {line})" if line else ""
        super().__init__(f"Could not read record{where}: {reason}")


class OutputWriteError(MopError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not write output: {reason}")
