from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence

from loguru import logger

from ..common.datetime_utils import week_start
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_SERVICE_DAYS
from ..core.enums import MenuStatus, Role, WeekdayId
from ..core.exceptions import AuthorizationError, ValidationError
from ..weekdays.registry import WEEKDAYS, WeekdayRegistry
from .model import DayMenu, MenuItem, WeeklyMenu
from .reconciler import coerce_item, reconcile, reconcile_with_report
from .repository import MenuRepository


class MenuService:
    """Use cases for weekly menus (admin authoring, read access for everyone)."""

    def __init__(
        self,
        menus: MenuRepository,
        *,
        registry: WeekdayRegistry = WEEKDAYS,
        service_days: Iterable[str | WeekdayId] = DEFAULT_SERVICE_DAYS,
    ):
        self._menus = menus
        self._registry = registry
        self._service_days = tuple(registry.require(d) for d in service_days)

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos para modificar el menú")

    def _empty_week(self, any_date: date) -> WeeklyMenu:
        return WeeklyMenu(week_start=week_start(any_date), status=MenuStatus.DRAFT, days=reconcile({}, registry=self._registry))

    @staticmethod
    def _clean_item(name: Optional[str], description: Optional[str] = None) -> MenuItem:
        return MenuItem(name=require_non_empty(name, "Nombre del platillo"), description=optional_text(description, "Descripción del platillo"))

    def get_week(self, any_date: date) -> WeeklyMenu:
        """Stored menu of the week, or an empty draft (not persisted)."""
        return self._menus.get(week_start(any_date)) or self._empty_week(any_date)

    def get_published_week(self, any_date: date) -> Optional[WeeklyMenu]:
        menu = self._menus.get(week_start(any_date))
        if menu and menu.is_published:
            return menu
        return None

    def initialize_week(self, *, current_role: Role, any_date: date) -> WeeklyMenu:
        self._require_admin(current_role)

        if self._menus.get(week_start(any_date)):
            raise ValidationError("Ya existe un menú para esta semana")

        menu = self._menus.save(self._empty_week(any_date))
        logger.info("Initialized menu for week {}", menu.week_start)
        return menu

    def set_day_items(
        self,
        *,
        current_role: Role,
        any_date: date,
        day_label: Any,
        items: Sequence[Mapping[str, Any] | MenuItem | str],
    ) -> WeeklyMenu:
        self._require_admin(current_role)
        day = self._registry.require(day_label)

        cleaned: list[MenuItem] = []
        for raw in items:
            item = coerce_item(raw)
            if item is None:
                raise ValidationError("Todos los platillos necesitan un nombre")
            cleaned.append(self._clean_item(item.name, item.description))

        menu = self.get_week(any_date).with_day(day, DayMenu(items=tuple(cleaned)))
        saved = self._menus.save(menu)
        logger.info("Saved {} item(s) for {} of week {}", len(cleaned), day.value, saved.week_start)
        return saved

    def add_item(
        self,
        *,
        current_role: Role,
        any_date: date,
        day_label: Any,
        name: str,
        description: Optional[str] = None,
    ) -> WeeklyMenu:
        self._require_admin(current_role)
        day = self._registry.require(day_label)
        item = self._clean_item(name, description)

        menu = self.get_week(any_date)
        current = menu.day(day)
        return self._menus.save(menu.with_day(day, DayMenu(items=current.items + (item,))))

    def update_item(
        self,
        *,
        current_role: Role,
        any_date: date,
        day_label: Any,
        position: int,
        name: str,
        description: Optional[str] = None,
    ) -> WeeklyMenu:
        self._require_admin(current_role)
        day = self._registry.require(day_label)
        item = self._clean_item(name, description)

        menu = self.get_week(any_date)
        items = list(menu.day(day).items)
        position = self._check_position(items, position)
        items[position] = item
        return self._menus.save(menu.with_day(day, DayMenu(items=tuple(items))))

    def remove_item(self, *, current_role: Role, any_date: date, day_label: Any, position: int) -> WeeklyMenu:
        self._require_admin(current_role)
        day = self._registry.require(day_label)

        menu = self.get_week(any_date)
        items = list(menu.day(day).items)
        position = self._check_position(items, position)
        del items[position]
        return self._menus.save(menu.with_day(day, DayMenu(items=tuple(items))))

    @staticmethod
    def _check_position(items: list, position: Any) -> int:
        try:
            index = int(position)
        except (TypeError, ValueError):
            raise ValidationError("Platillo no encontrado")
        if not 0 <= index < len(items):
            raise ValidationError("Platillo no encontrado")
        return index

    def import_days(self, *, current_role: Role, any_date: date, raw: Mapping[str, Any]) -> tuple[WeeklyMenu, tuple]:
        """Replace the days named in ``raw`` (free-form labels); other days are kept.

        Returns the stored menu and the keys that could not be resolved.
        """
        self._require_admin(current_role)

        result = reconcile_with_report(raw, registry=self._registry)
        provided = {self._registry.resolve(k) for k in raw.keys()} - {None}

        menu = self.get_week(any_date)
        for day in self._registry.ordered_ids():
            if day in provided:
                menu = menu.with_day(day, result.days[day])

        saved = self._menus.save(menu)
        logger.info("Imported {} day(s) into week {}", len(provided), saved.week_start)
        return saved, result.dropped_keys

    def missing_service_days(self, menu: WeeklyMenu) -> list[WeekdayId]:
        return [day for day in self._service_days if menu.day(day).is_empty]

    def publish(self, *, current_role: Role, user_id: str, any_date: date) -> WeeklyMenu:
        self._require_admin(current_role)

        menu = self._menus.get(week_start(any_date))
        if not menu:
            raise ValidationError("No existe un menú para esta semana")
        if menu.is_published:
            raise ValidationError("El menú ya ha sido publicado.")

        missing = self.missing_service_days(menu)
        if missing:
            names = ", ".join(self._registry.display_name_of(d) for d in missing)
            raise ValidationError(f"Todos los días deben tener al menos un platillo. Faltan: {names}")

        published = self._menus.mark_published(week_start=menu.week_start, published_by=str(user_id))
        logger.info("Menu for week {} published by {}", published.week_start, user_id)
        return published
