from __future__ import annotations

from pathlib import Path


class VulnReportError(Exception):
    """Base class for errors raised by vulnreport."""


class ReportIOError(VulnReportError):
    """A report file could not be read."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


class ReportSchemaError(VulnReportError, ValueError):
    """A report file is not valid YAML or does not match the Report schema."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


class CopyrightYearNotFoundError(VulnReportError, ValueError):
    """A fixture comment has no "Copyright <year>" line."""


class CommentMismatchError(VulnReportError, ValueError):
    def __init__(self, diff: str) -> None:
        super().__init__(f"comment mismatch (-want, +got):\n{diff}")
        self.diff = diff
