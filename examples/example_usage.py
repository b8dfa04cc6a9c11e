"""Example: use the service layer without Flask.

Controllers are thin; menu rules live in the services and the reconciler.
"""

from datetime import date

from comedor.container import build_container
from comedor.core.enums import Role
from comedor.menus.reconciler import reconcile_with_report
from comedor.weekdays.comparison import are_equal


def main():
    container = build_container(store_backend="memory")
    monday = date(2025, 1, 6)

    container.menu_service.import_days(
        current_role=Role.ADMIN,
        any_date=monday,
        raw={
            "Lunes": {"items": [{"name": "Enchiladas"}]},
            "MIÉRCOLES": {"items": [{"name": "Pozole", "description": "Rojo"}]},
            "Feriado": {"items": [{"name": "Nada"}]},
        },
    )
    menu = container.menu_service.get_week(monday)
    for day in container.weekdays.ordered_ids():
        print(container.weekdays.display_name_of(day), [i.name for i in menu.day(day).items])

    report = reconcile_with_report({"sabado": [], "Sábado": ["Tamales"]})
    print("collisions:", report.collisions)
    print("Miércoles == miercoles:", are_equal("Miércoles", "miercoles"))


if __name__ == "__main__":
    main()
