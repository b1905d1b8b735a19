from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .companies.local_company_repository import LocalCompanyRepository
from .companies.remote_company_repository import RemoteCompanyRepository
from .companies.service import CompanyService
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS
from .dashboard.state import DashboardState
from .deadlines.calculator.business_day_calculator import BusinessDayCalculator
from .deadlines.holidays import load_holidays
from .infractions.local_infraction_repository import LocalInfractionRepository
from .infractions.remote_infraction_repository import RemoteInfractionRepository
from .infractions.service import InfractionService
from .inspections.local_inspection_repository import LocalInspectionRepository
from .inspections.remote_inspection_repository import RemoteInspectionRepository
from .inspections.service import InspectionService
from .laws.local_law_repository import LocalCustomLawRepository
from .laws.service import LawCatalogService
from .notifications.local_notification_repository import LocalNotificationRepository
from .notifications.remote_notification_repository import RemoteNotificationRepository
from .notifications.service import NotificationService
from .reports.service import ReportService
from .store.connection import ApiConfig, ApiConnection
from .store.local_base import LocalStore


@dataclass(frozen=True)
class Container:
    backend: str
    local_store: LocalStore
    api: Optional[ApiConnection]

    calculator: BusinessDayCalculator

    company_service: CompanyService
    law_service: LawCatalogService
    notification_service: NotificationService
    infraction_service: InfractionService
    inspection_service: InspectionService
    report_service: ReportService
    dashboard: DashboardState


def build_container(
    *,
    api_url: str = "",
    api_timeout_seconds: int = DEFAULT_API_TIMEOUT_SECONDS,
    local_store_dir: Path,
    holidays_file: Optional[Path] = None,
) -> Container:
    local_store = LocalStore(local_store_dir)
    api: Optional[ApiConnection] = None

    if api_url:
        api = ApiConnection.get_instance(ApiConfig(url=api_url, timeout_seconds=api_timeout_seconds))
        companies_repo = RemoteCompanyRepository(api)
        notifications_repo = RemoteNotificationRepository(api)
        infractions_repo = RemoteInfractionRepository(api)
        inspections_repo = RemoteInspectionRepository(api)
    else:
        companies_repo = LocalCompanyRepository(local_store)
        notifications_repo = LocalNotificationRepository(local_store)
        infractions_repo = LocalInfractionRepository(local_store)
        inspections_repo = LocalInspectionRepository(local_store)

    calculator = BusinessDayCalculator(load_holidays(holidays_file))

    company_service = CompanyService(companies_repo)
    law_service = LawCatalogService(LocalCustomLawRepository(local_store))
    notification_service = NotificationService(notifications_repo, company_service)
    infraction_service = InfractionService(infractions_repo, company_service, calculator)
    inspection_service = InspectionService(inspections_repo, company_service)
    dashboard = DashboardState(notification_service, infraction_service, inspection_service)

    return Container(
        backend="remote" if api else "local",
        local_store=local_store,
        api=api,
        calculator=calculator,
        company_service=company_service,
        law_service=law_service,
        notification_service=notification_service,
        infraction_service=infraction_service,
        inspection_service=inspection_service,
        report_service=ReportService(),
        dashboard=dashboard,
    )
