from __future__ import annotations

import pytest

from comedor.core.exceptions import AuthorizationError, ValidationError
from comedor.employees.seed import DEMO_DEPARTMENTS, seed_demo_data
from comedor.employees.service import EmployeeService


@pytest.fixture
def service(employees_repo, departments_repo):
    return EmployeeService(employees_repo, departments_repo)


def test_coordinator_adds_to_own_department(service, coordinator):
    employee_id = service.add_employee(current_user=coordinator, name="  Carla Núñez ", position="Analista")

    rows = service.list_department(current_user=coordinator)
    assert [(e.employee_id, e.name, e.position, e.active) for e in rows] == [(employee_id, "Carla Núñez", "Analista", True)]


def test_coordinator_cannot_touch_other_departments(service, coordinator, admin):
    with pytest.raises(AuthorizationError):
        service.add_employee(current_user=coordinator, name="X", department_id="rh")

    other = service.add_employee(current_user=admin, name="Diego Peña", department_id="rh")
    with pytest.raises(AuthorizationError):
        service.set_active(current_user=coordinator, employee_id=other, active=False)


def test_admin_must_name_an_existing_department(service, admin):
    with pytest.raises(ValidationError):
        service.list_department(current_user=admin)
    with pytest.raises(ValidationError):
        service.add_employee(current_user=admin, name="X", department_id="nope")


def test_blank_name_is_rejected(service, coordinator):
    with pytest.raises(ValidationError):
        service.add_employee(current_user=coordinator, name="   ")


def test_set_active_toggles(service, coordinator, employees_repo):
    employee_id = service.add_employee(current_user=coordinator, name="Ana")

    service.set_active(current_user=coordinator, employee_id=employee_id, active=False)

    assert employees_repo.get(employee_id).active is False
    assert employees_repo.list_by_department("ti", active_only=True) == []

    with pytest.raises(ValidationError):
        service.set_active(current_user=coordinator, employee_id="missing", active=True)


def test_seed_is_idempotent(departments_repo, employees_repo):
    first = seed_demo_data(departments_repo, employees_repo)
    second = seed_demo_data(departments_repo, employees_repo)

    assert first > 0
    assert second == 0
    assert len(departments_repo.list_all()) == len(DEMO_DEPARTMENTS)
