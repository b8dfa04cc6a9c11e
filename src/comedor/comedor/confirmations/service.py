from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable, Optional, Sequence

from loguru import logger

from ..common.datetime_utils import week_start
from ..common.validators import optional_text
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import DepartmentRepository, EmployeeRepository
from ..menus.repository import MenuRepository
from ..users.model import SessionUser
from ..weekdays.registry import WEEKDAYS, WeekdayRegistry
from .model import Confirmation
from .repository import ConfirmationRepository


class ConfirmationService:
    """Use case: coordinators confirm who eats at the cafeteria on a given day."""

    def __init__(
        self,
        confirmations: ConfirmationRepository,
        menus: MenuRepository,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        *,
        registry: WeekdayRegistry = WEEKDAYS,
    ):
        self._confirmations = confirmations
        self._menus = menus
        self._employees = employees
        self._departments = departments
        self._registry = registry

    @staticmethod
    def _unique(ids: Iterable[Any]) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for raw in ids:
            value = str(raw).strip()
            if value:
                seen.setdefault(value, None)
        return tuple(seen)

    def confirm(
        self,
        *,
        current_user: SessionUser,
        work_date: date,
        employee_ids: Iterable[Any],
        comments: Optional[str] = None,
    ) -> Confirmation:
        if current_user.role != Role.COORDINATOR:
            raise AuthorizationError("Solo los coordinadores pueden confirmar asistencia")
        if not current_user.department_id:
            raise AuthorizationError("El coordinador no tiene un departamento asignado")

        department = self._departments.get(current_user.department_id)
        if not department:
            raise ValidationError("El departamento no existe")

        menu = self._menus.get(week_start(work_date))
        if not menu or not menu.is_published:
            raise ValidationError("No hay un menú publicado para esta semana")

        day = self._registry.for_date(work_date)
        if menu.day(day).is_empty:
            raise ValidationError(f"No hay menú para el {self._registry.display_name_of(day)}")

        ids = self._unique(employee_ids)
        allowed = {e.employee_id for e in self._employees.list_by_department(department.department_id, active_only=True)}
        unknown = [i for i in ids if i not in allowed]
        if unknown:
            raise ValidationError("Hay empleados que no pertenecen al departamento o están inactivos")

        saved = self._confirmations.upsert(
            Confirmation(
                confirmation_id=None,
                work_date=work_date,
                department_id=department.department_id,
                department_name=department.name,
                coordinator_id=current_user.uid,
                coordinator_name=current_user.display_name,
                employee_ids=ids,
                comments=optional_text(comments, "Comentarios"),
            )
        )
        logger.info(
            "Confirmed {} employee(s) for {} on {} by {}",
            saved.confirmed_count,
            department.department_id,
            work_date.isoformat(),
            current_user.uid,
        )
        return saved

    def get_for_department(self, *, current_user: SessionUser, work_date: date, department_id: Optional[str] = None) -> Optional[Confirmation]:
        if current_user.role == Role.COORDINATOR:
            if department_id and department_id != current_user.department_id:
                raise AuthorizationError("Solo puede consultar su departamento")
            department_id = current_user.department_id
        if not department_id:
            raise ValidationError("Departamento no válido")
        return self._confirmations.get_for_department(work_date, department_id)

    def list_for_week(self, any_date: date) -> Sequence[Confirmation]:
        start = week_start(any_date)
        # weeks run Monday..Sunday
        return self._confirmations.list_range(start, start + timedelta(days=6))

    def confirmations_for_day(self, any_date: date, day_label: Any) -> Sequence[Confirmation]:
        """Confirmations of the week whose date falls on ``day_label``.

        Raises NotAWeekday when the label is not a day name.
        """
        day = self._registry.require(day_label)
        return [c for c in self.list_for_week(any_date) if self._registry.for_date(c.work_date) == day]
