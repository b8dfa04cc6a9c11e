from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .confirmations.document_confirmation_repository import DocumentConfirmationRepository
from .confirmations.service import ConfirmationService
from .core.constants import DEFAULT_SERVICE_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .documents.memory_store import InMemoryDocumentStore
from .documents.mysql_store import MySQLDocumentStore
from .documents.store import DocumentStore
from .employees.document_repository import DocumentDepartmentRepository, DocumentEmployeeRepository
from .employees.service import EmployeeService
from .menus.document_menu_repository import DocumentMenuRepository
from .menus.service import MenuService
from .reports.service import ConfirmationReportService
from .users.service import AuthService, IdentityProvider, StaticIdentityProvider
from .weekdays.registry import WEEKDAYS, WeekdayRegistry


@dataclass(frozen=True)
class Container:
    store: DocumentStore
    conn: Optional[DatabaseConnection]
    weekdays: WeekdayRegistry

    menus_repo: DocumentMenuRepository
    confirmations_repo: DocumentConfirmationRepository
    employees_repo: DocumentEmployeeRepository
    departments_repo: DocumentDepartmentRepository

    auth_service: AuthService
    menu_service: MenuService
    confirmation_service: ConfirmationService
    employee_service: EmployeeService
    report_service: ConfirmationReportService


def build_store(*, backend: str, db_config: Optional[Mapping[str, Any]] = None) -> tuple[DocumentStore, Optional[DatabaseConnection]]:
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryDocumentStore(), None
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config or {}))
        return MySQLDocumentStore(conn), conn
    raise ValueError(f"Unknown DOCUMENT_STORE backend: {backend!r}")


def build_container(
    *,
    store_backend: str = "memory",
    db_config: Optional[Mapping[str, Any]] = None,
    identity: Optional[IdentityProvider] = None,
    dev_tokens: Optional[Mapping[str, Mapping[str, Any]]] = None,
    service_days: Iterable[str] = DEFAULT_SERVICE_DAYS,
    store: Optional[DocumentStore] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None
    if store is None:
        store, conn = build_store(backend=store_backend, db_config=db_config)

    registry = WEEKDAYS

    menus_repo = DocumentMenuRepository(store, registry=registry)
    confirmations_repo = DocumentConfirmationRepository(store)
    employees_repo = DocumentEmployeeRepository(store)
    departments_repo = DocumentDepartmentRepository(store)

    auth_service = AuthService(identity or StaticIdentityProvider(dev_tokens or {}))
    menu_service = MenuService(menus_repo, registry=registry, service_days=service_days)
    confirmation_service = ConfirmationService(
        confirmations_repo,
        menus_repo,
        employees_repo,
        departments_repo,
        registry=registry,
    )
    employee_service = EmployeeService(employees_repo, departments_repo)
    report_service = ConfirmationReportService(confirmations_repo, departments_repo, registry=registry)

    return Container(
        store=store,
        conn=conn,
        weekdays=registry,
        menus_repo=menus_repo,
        confirmations_repo=confirmations_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        auth_service=auth_service,
        menu_service=menu_service,
        confirmation_service=confirmation_service,
        employee_service=employee_service,
        report_service=report_service,
    )
