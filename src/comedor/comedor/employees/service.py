from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from ..common.validators import optional_text, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.model import SessionUser
from .model import Department, Employee
from .repository import DepartmentRepository, EmployeeRepository


class EmployeeService:
    """Use case: coordinators manage their department's roster; admins any."""

    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository):
        self._employees = employees
        self._departments = departments

    def _target_department(self, current_user: SessionUser, department_id: Optional[str]) -> Department:
        if current_user.role == Role.COORDINATOR:
            if department_id and department_id != current_user.department_id:
                raise AuthorizationError("Solo puede gestionar empleados de su departamento")
            department_id = current_user.department_id
        elif current_user.role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos")

        if not department_id:
            raise ValidationError("Departamento no válido")

        department = self._departments.get(department_id)
        if not department:
            raise ValidationError("El departamento no existe")
        return department

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def list_department(self, *, current_user: SessionUser, department_id: Optional[str] = None) -> Sequence[Employee]:
        department = self._target_department(current_user, department_id)
        return self._employees.list_by_department(department.department_id)

    def add_employee(
        self,
        *,
        current_user: SessionUser,
        name: str,
        position: Optional[str] = None,
        department_id: Optional[str] = None,
    ) -> str:
        department = self._target_department(current_user, department_id)
        name = require_non_empty(name, "Nombre del empleado")

        employee_id = self._employees.create(name=name, department_id=department.department_id, position=optional_text(position, "Puesto"))
        logger.info("Employee {} added to department {} by {}", employee_id, department.department_id, current_user.uid)
        return employee_id

    def set_active(self, *, current_user: SessionUser, employee_id: str, active: bool) -> None:
        employee = self._employees.get(employee_id)
        if not employee:
            raise ValidationError("El empleado no existe")
        self._target_department(current_user, employee.department_id)

        if not self._employees.set_active(employee_id, active=active):
            raise ValidationError("No se pudo actualizar el empleado")
