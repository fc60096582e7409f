"""vulnreport package: app/core/infra/shared.

Expose the library client and the report reader at the package level.
"""

from .app.api import AppConfig, VulnReportClient
from .core.domain.models import Report
from .core.errors import ReportIOError, ReportSchemaError, VulnReportError
from .infra.yaml_report import read_report, write_report

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "VulnReportClient",
    "AppConfig",
    "Report",
    "read_report",
    "write_report",
    "VulnReportError",
    "ReportIOError",
    "ReportSchemaError",
]
