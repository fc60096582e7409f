"""Reader and writer for the txtar archive format.

A txtar archive is a comment followed by a sequence of files, each introduced
by a marker line of the form::

    -- name --

The file's data runs from the line after the marker to the next marker or the
end of the archive. There is no escaping: a line that looks like a marker
always starts a new file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_MARKER = b"-- "
_MARKER_END = b" --"
_NEWLINE_MARKER = b"\n" + _MARKER


@dataclass(frozen=True)
class File:
    name: str
    data: bytes


@dataclass(frozen=True)
class Archive:
    comment: bytes = b""
    files: tuple[File, ...] = field(default_factory=tuple)


def _fix_nl(data: bytes) -> bytes:
    if not data or data.endswith(b"\n"):
        return data
    return data + b"\n"


def format_archive(archive: Archive) -> bytes:
    """Serialize archive. Comment and file data gain a final newline if missing."""
    parts = [_fix_nl(archive.comment)]
    for f in archive.files:
        parts.append(b"-- " + f.name.encode("utf-8", errors="surrogateescape") + b" --\n")
        parts.append(_fix_nl(f.data))
    return b"".join(parts)


def _is_marker(data: bytes) -> tuple[str, bytes]:
    """Return (name, rest) if data begins with a marker line, else ("", b"")."""
    if not data.startswith(_MARKER):
        return "", b""
    line, after = data, b""
    i = data.find(b"\n")
    if i >= 0:
        line, after = data[:i], data[i + 1:]
    if not (line.endswith(_MARKER_END) and len(line) >= len(_MARKER) + len(_MARKER_END)):
        return "", b""
    name = line[len(_MARKER):len(line) - len(_MARKER_END)].decode("utf-8", errors="surrogateescape").strip()
    return name, after


def _find_file_marker(data: bytes) -> tuple[bytes, str, bytes]:
    """Split data at the first marker line: (before, name, after).

    When there is no marker, returns (data, "", b"").
    """
    i = 0
    while True:
        name, after = _is_marker(data[i:])
        if name:
            return data[:i], name, after
        j = data.find(_NEWLINE_MARKER, i)
        if j < 0:
            return _fix_nl(data), "", b""
        i = j + 1


def parse_archive(data: bytes) -> Archive:
    comment, name, rest = _find_file_marker(data)
    files: list[File] = []
    while name:
        file_data, next_name, rest = _find_file_marker(rest)
        files.append(File(name=name, data=file_data))
        name = next_name
    return Archive(comment=comment, files=tuple(files))


def read_archive(path: str | Path) -> Archive:
    return parse_archive(Path(path).read_bytes())


def write_archive(path: str | Path, archive: Archive) -> None:
    Path(path).write_bytes(format_archive(archive))
