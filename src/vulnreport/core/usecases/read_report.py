from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from ..domain.models import Report
from ..errors import VulnReportError
from ..ports.report_port import ReportSourcePort

logger = logging.getLogger(__name__)

REPORT_ID_RE = re.compile(r"^GO-\d{4}-\d{4,}$")


class ReadReportUseCase:
    def __init__(self, source: ReportSourcePort, reports_dir: str | Path) -> None:
        self._source = source
        self._reports_dir = Path(reports_dir)

    def resolve(self, ref: str) -> Path:
        """Map a report ID (GO-2023-1234) to its file; anything else is a path."""
        if REPORT_ID_RE.match(ref) and not Path(ref).exists():
            return self._reports_dir / f"{ref}.yaml"
        return Path(ref)

    def execute(self, ref: str) -> Report:
        return self._source.read(self.resolve(ref))

    def check(self, refs: Iterable[str]) -> list[tuple[str, Optional[VulnReportError]]]:
        """Read every ref, collecting failures instead of stopping at the first one."""
        results: list[tuple[str, Optional[VulnReportError]]] = []
        for ref in refs:
            try:
                self.execute(ref)
            except VulnReportError as e:
                logger.info(f"{ref}: {e}")
                results.append((ref, e))
            else:
                results.append((ref, None))
        return results
