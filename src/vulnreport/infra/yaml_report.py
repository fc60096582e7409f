from __future__ import annotations

import logging
from collections.abc import Hashable
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.domain.models import Report
from ..core.errors import ReportIOError, ReportSchemaError
from ..core.ports.report_port import ReportSourcePort

logger = logging.getLogger(__name__)


class _StrictLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate mapping keys and never resolves numbers."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen: set = set()
            for key_node, _ in node.value:
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


# No Report field is numeric: plain scalars such as `fixed: 1.20` or `credit: 2021`
# keep their source text as strings.
_StrictLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in ("tag:yaml.org,2002:int", "tag:yaml.org,2002:float")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def unmarshal_strict(data: bytes | str) -> Report:
    """Decode YAML into a Report, failing on unknown or duplicate keys.

    Raises yaml.YAMLError, pydantic.ValidationError or TypeError; callers add
    file context.
    """
    raw = yaml.load(data, Loader=_StrictLoader)
    if raw is None:
        return Report()
    if not isinstance(raw, dict):
        raise TypeError(f"expected a mapping at top level, got {type(raw).__name__}")
    return Report.model_validate(raw)


def report_to_yaml(report: Report) -> str:
    # Empty fields are omitted so that written reports stay minimal.
    payload = report.model_dump(exclude_defaults=True)
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True, default_flow_style=False)


def read_report(path: str | Path) -> Report:
    """Read a Report from path."""
    filename = str(path)
    where = f"report.read({filename!r})"
    logger.debug(f"Reading report {filename}")
    try:
        data = Path(filename).read_bytes()
    except OSError as e:
        raise ReportIOError(f"{where}: {e}", filename) from e
    try:
        report = unmarshal_strict(data)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        raise ReportSchemaError(f"{where}: yaml strict decode: {e} ({filename!r})", filename) from e
    logger.debug(f"Read report {filename} (module={report.module or '-'})")
    return report


def write_report(path: str | Path, report: Report) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(report_to_yaml(report), encoding="utf-8")
    logger.debug(f"Wrote report {p}")


class YamlReportLoader(ReportSourcePort):
    def read(self, path: str | Path) -> Report:
        return read_report(path)

    def write(self, path: str | Path, report: Report) -> None:
        write_report(path, report)
