from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain.models import Report


class ReportSourcePort(Protocol):
    def read(self, path: str | Path) -> Report:
        """Read and validate a single report file."""
        ...

    def write(self, path: str | Path, report: Report) -> None:
        """Serialize a report to path."""
        ...
