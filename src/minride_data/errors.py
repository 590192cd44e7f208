# errors.py
from pathlib import Path


class MinRideDataError(Exception):
    """Base class for dataset generation and loading failures."""


class DatasetWriteError(MinRideDataError):
    def __init__(self, path: Path, reason: str):
        self.path, self.reason = Path(path), reason
        super().__init__(f"cannot write dataset at {self.path}: {reason}")


class DatasetFormatError(MinRideDataError):
    def __init__(self, path: Path, line_no: int, line: str):
        self.path, self.line_no, self.line = Path(path), line_no, line
        super().__init__(f"{self.path}:{line_no}: failed to parse CSV line: {line!r}")
