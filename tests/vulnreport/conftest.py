"""tests/conftest.py

Common fixtures for the entire test suite.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner


FULL_REPORT_YAML = """\
module: golang.org/x/crypto
package: golang.org/x/crypto/ssh
do_not_export: true
additional_packages:
  - module: golang.org/x/crypto
    package: golang.org/x/crypto/ssh/agent
    symbols:
      - Agent.Sign
    versions:
      - fixed: v0.0.0-20220314234659-1baeb1ce4c0b
versions:
  - introduced: v0.0.0-20200220183623-bac4c82f6975
    fixed: v0.0.0-20220314234659-1baeb1ce4c0b
description: |
    Attackers can cause a crash in SSH servers when the server has been
    configured by passing a Signer to ServerConfig.AddHostKey.
published: 2022-03-15T00:00:00Z
last_modified: 2022-04-01T12:30:00Z
cves:
  - CVE-2022-27191
credit: Joe Example
symbols:
  - ServerConfig.AddHostKey
os:
  - linux
arch:
  - amd64
links:
  pr: https://go.dev/cl/392355
  commit: https://go.googlesource.com/crypto/+/1baeb1ce4c0b006eff0f294c47cb7617598dfb3d
  context:
    - https://groups.google.com/g/golang-announce/c/-cp44ypCT5s
"""


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def reports_dir(tmp_path: Path) -> Path:
    """A data/reports-style directory with one valid and one invalid report."""
    d = tmp_path / "data" / "reports"
    d.mkdir(parents=True)
    (d / "GO-2022-0001.yaml").write_text(FULL_REPORT_YAML)
    (d / "GO-2022-0002.yaml").write_text("module: example.com/m\nunexpected_field: foo\n")
    return d


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Factory fixture writing YAML text to a file under tmp_path."""

    def _write(text: str, name: str = "report.yaml") -> Path:
        p = tmp_path / name
        p.write_text(text)
        return p

    return _write


@pytest.fixture
def full_report_yaml() -> str:
    """A report exercising every recognized key."""
    return FULL_REPORT_YAML
