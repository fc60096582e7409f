from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _ReportModel(BaseModel):
    # Unknown keys are errors: report files are written by hand and typos must fail.
    model_config = ConfigDict(extra="forbid", frozen=True)


class VersionRange(_ReportModel):
    introduced: Optional[str] = None
    fixed: Optional[str] = None


class Additional(_ReportModel):
    """An affected package other than the report's main module/package."""
    module: str = ""
    package: str = ""
    symbols: list[str] = Field(default_factory=list)
    versions: list[VersionRange] = Field(default_factory=list)


class Links(_ReportModel):
    pr: str = ""
    commit: str = ""
    context: list[str] = Field(default_factory=list)


class CVEMeta(_ReportModel):
    id: str = ""
    cwe: str = ""
    description: str = ""


class Report(_ReportModel):
    """A vulnerability report as stored in data/reports/*.yaml.

    CVE identifiers come from either `cves` (existing CVEs) or `cve_metadata`
    (a CVE we assign ourselves), never both. The rule is not checked here.
    """

    module: str = ""
    package: str = ""
    do_not_export: bool = Field(default=False, strict=True)
    additional_packages: list[Additional] = Field(default_factory=list)
    versions: list[VersionRange] = Field(default_factory=list)

    # CVE description from an existing CVE. Self-assigned CVEs use cve_metadata.description.
    description: str = ""
    published: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    withdrawn: Optional[datetime] = None

    cves: list[str] = Field(default_factory=list)
    credit: str = ""
    symbols: list[str] = Field(default_factory=list)
    os: list[str] = Field(default_factory=list)
    arch: list[str] = Field(default_factory=list)
    links: Links = Field(default_factory=Links)

    cve_metadata: Optional[CVEMeta] = None

    @property
    def is_withdrawn(self) -> bool:
        return self.withdrawn is not None
