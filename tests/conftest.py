from __future__ import annotations

from datetime import date, datetime

import pytest

from comedor.confirmations.document_confirmation_repository import DocumentConfirmationRepository
from comedor.core.enums import Role
from comedor.documents.memory_store import InMemoryDocumentStore
from comedor.employees.document_repository import DocumentDepartmentRepository, DocumentEmployeeRepository
from comedor.employees.model import Department
from comedor.menus.document_menu_repository import DocumentMenuRepository
from comedor.users.model import SessionUser

# 2025-01-06 is a Monday
MONDAY = date(2025, 1, 6)
FIXED_NOW = datetime(2025, 1, 3, 9, 30, 0)


@pytest.fixture
def store():
    return InMemoryDocumentStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def menus_repo(store):
    return DocumentMenuRepository(store)


@pytest.fixture
def departments_repo(store):
    repo = DocumentDepartmentRepository(store)
    repo.upsert(Department("ti", "Tecnologías de la Información", "matriz"))
    repo.upsert(Department("rh", "Recursos Humanos", "matriz"))
    repo.upsert(Department("almacen", "Almacén", "norte"))
    return repo


@pytest.fixture
def employees_repo(store):
    return DocumentEmployeeRepository(store)


@pytest.fixture
def confirmations_repo(store):
    return DocumentConfirmationRepository(store)


@pytest.fixture
def admin():
    return SessionUser(uid="admin", display_name="Administrador", role=Role.ADMIN)


@pytest.fixture
def coordinator():
    return SessionUser(uid="coord-ti", display_name="Coordinador TI", role=Role.COORDINATOR, department_id="ti")
