from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.models import Report
from ..core.errors import VulnReportError
from ..infra.txtar import File


class VulnReportClient:
    """Client for reading vulnerability reports and writing test fixtures.

    Example:
        # Using default configuration (from environment variables)
        client = VulnReportClient()
        report = client.read_report("GO-2021-0001")
        client.close()

        # Using context manager (recommended)
        with VulnReportClient(reports_dir="/src/vulndb/data/reports") as client:
            report = client.read_report("GO-2021-0001")
    """

    def __init__(self, *, reports_dir: str | Path | None = None) -> None:
        """Initialize the client.

        Args:
            reports_dir: Optional directory used to resolve report IDs.
                        If None, uses VULNREPORT_REPORTS_DIR or the default (data/reports).
        """
        self._container = Container()

        config_dict = {}
        if reports_dir is not None:
            config_dict["reports_dir"] = Path(reports_dir) if isinstance(reports_dir, str) else reports_dir

        if config_dict:
            config = AppConfig(**config_dict)
            self._container.config.from_pydantic(config)

        self._container.init_resources()

    def read_report(self, ref: str) -> Report:
        """Read a report by path or by ID.

        Raises:
            ReportIOError: If the file cannot be read.
            ReportSchemaError: If the file is not valid YAML or has unknown fields.
        """
        uc = self._container.read_report_uc()
        return uc.execute(ref)

    def check_reports(self, refs: Iterable[str]) -> list[tuple[str, Optional[VulnReportError]]]:
        """Read every ref and return (ref, error or None) pairs in order."""
        uc = self._container.read_report_uc()
        return uc.check(refs)

    def write_report(self, path: str | Path, report: Report) -> None:
        self._container.report_loader().write(path, report)

    def write_fixture(self, path: str | Path, files: Sequence[File], comment: str) -> None:
        """Write a txtar golden file with the copyright header and comment."""
        self._container.fixture_writer().write(path, files, comment)

    def close(self) -> None:
        self._container.shutdown_resources()

    def __enter__(self) -> VulnReportClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "VulnReportClient",
    "AppConfig",
]
