from __future__ import annotations

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..core.ports.clock_port import SystemClock
from ..core.usecases.read_report import ReadReportUseCase
from ..infra.yaml_report import YamlReportLoader
from ..shared.fixtures import TxtarFixtureWriter


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	clock = providers.Singleton(SystemClock)

	report_loader = providers.Factory(YamlReportLoader)

	fixture_writer = providers.Factory(TxtarFixtureWriter, clock=clock)

	read_report_uc = providers.Factory(
		ReadReportUseCase,
		source=report_loader,
		reports_dir=config.reports_dir,
	)
