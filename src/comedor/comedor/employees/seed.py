from __future__ import annotations

from .document_repository import DocumentDepartmentRepository, DocumentEmployeeRepository
from .model import Department

DEMO_DEPARTMENTS = (
    Department("ti", "Tecnologías de la Información", "matriz"),
    Department("rh", "Recursos Humanos", "matriz"),
    Department("almacen", "Almacén", "norte"),
)

DEMO_EMPLOYEES = {
    "ti": ("Ana López", "Bruno Díaz", "Carla Núñez"),
    "rh": ("Diego Peña", "Elena Ruiz"),
    "almacen": ("Fernando Ibáñez", "Gabriela Soto", "Héctor Muñoz"),
}


def seed_demo_data(departments: DocumentDepartmentRepository, employees: DocumentEmployeeRepository) -> int:
    """Create demo departments and, for empty departments, their employees.

    Returns the number of employees created.
    """
    created = 0
    for dept in DEMO_DEPARTMENTS:
        departments.upsert(dept)
        if employees.list_by_department(dept.department_id):
            continue
        for name in DEMO_EMPLOYEES.get(dept.department_id, ()):
            employees.create(name=name, department_id=dept.department_id)
            created += 1
    return created
