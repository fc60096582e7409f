from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Iterator

import typer

from .container import Container
from ..config.settings import AppConfig
from ..core.errors import VulnReportError
from ..infra.yaml_report import report_to_yaml


app = typer.Typer(help="Vulnerability report tools")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@contextmanager
def provide_container() -> Iterator[Container]:
    container = Container()
    container.init_resources()
    try:
        yield container
    finally:
        container.shutdown_resources()


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (default: VULNREPORT_LOG_LEVEL or WARNING)"),
) -> None:
    level = (log_level or AppConfig().log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"{level.lower()!r} is not one of {', '.join(LOG_LEVELS)}",
            param_hint="'--log-level' / VULNREPORT_LOG_LEVEL",
        )
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command(help="Read a report (path or GO-YYYY-NNNN ID) and print it normalized.")
def show(
    ref: str = typer.Argument(..., help="Report file path or ID"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of YAML"),
) -> None:
    with provide_container() as container:
        uc = container.read_report_uc()
        try:
            report = uc.execute(ref)
        except VulnReportError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1)
        if as_json:
            print(json.dumps(report.model_dump(mode="json", exclude_defaults=True), ensure_ascii=False, indent=2))
        else:
            print(report_to_yaml(report), end="")


@app.command(help="Strictly parse each report and report failures. Exits 1 if any report fails.")
def check(
    refs: list[str] = typer.Argument(..., help="Report file paths or IDs", metavar="REPORT"),
) -> None:
    with provide_container() as container:
        uc = container.read_report_uc()
        results = uc.check(refs)
    failed = 0
    for ref, err in results:
        if err is None:
            typer.echo(f"{ref}: ok")
        else:
            failed += 1
            typer.echo(f"{ref}: {err}", err=True)
    if failed:
        typer.echo(f"{failed} of {len(results)} reports failed", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
