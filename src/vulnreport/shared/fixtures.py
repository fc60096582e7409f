"""Golden-file fixtures stored as txtar archives.

Every fixture starts with the repository's copyright boilerplate. The year in
that header is the year the fixture was generated, so `check_comment` accepts
any year and only compares the rest of the text.
"""

from __future__ import annotations

import difflib
import logging
import re
from pathlib import Path
from typing import Optional, Sequence

from ..core.errors import CommentMismatchError, CopyrightYearNotFoundError
from ..core.ports.clock_port import ClockPort, SystemClock
from ..infra.txtar import Archive, File, format_archive, read_archive

logger = logging.getLogger(__name__)

COPYRIGHT_RE = re.compile(r"Copyright (\d+)")


def add_boilerplate(year: int, comment: str) -> str:
    """Add the copyright header for year to comment, plus spacing for readability."""
    return (
        f"Copyright {year} The Go Authors. All rights reserved.\n"
        "Use of this source code is governed by a BSD-style\n"
        "license that can be found in the LICENSE file.\n"
        "\n"
        f"{comment}\n"
        "\n"
    )


def current_year(clock: Optional[ClockPort] = None) -> int:
    return (clock or SystemClock()).now().year


class TxtarFixtureWriter:
    def __init__(self, clock: Optional[ClockPort] = None) -> None:
        self._clock = clock or SystemClock()

    def write(self, path: str | Path, files: Sequence[File], comment: str) -> None:
        """Write files to path as a txtar archive headed by the boilerplate and comment.

        OS errors (directory creation, write) propagate unchanged.
        """
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        archive = Archive(
            comment=add_boilerplate(current_year(self._clock), comment).encode("utf-8"),
            files=tuple(files),
        )
        p.write_bytes(format_archive(archive))
        logger.debug(f"Wrote fixture {p} ({len(archive.files)} files)")


def write_txtar(
    path: str | Path,
    files: Sequence[File],
    comment: str,
    *,
    clock: Optional[ClockPort] = None,
) -> None:
    TxtarFixtureWriter(clock).write(path, files, comment)


def read_txtar(path: str | Path) -> Archive:
    return read_archive(path)


def find_copyright_year(comment: str) -> int:
    m = COPYRIGHT_RE.search(comment)
    if m is None:
        raise CopyrightYearNotFoundError("comment does not contain a copyright year")
    return int(m.group(1))


def _diff(want: str, got: str) -> str:
    lines = difflib.unified_diff(
        want.splitlines(keepends=True),
        got.splitlines(keepends=True),
        fromfile="want",
        tofile="got",
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


def check_comment(want_comment: str, got: str) -> None:
    """Check that got is the header write_txtar(..., want_comment) would produce.

    Any copyright year is accepted. For tests.
    """
    year = find_copyright_year(got)
    want = add_boilerplate(year, want_comment)
    if want != got:
        raise CommentMismatchError(_diff(want, got))
