from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import week_start
from ..confirmations.repository import ConfirmationRepository
from ..employees.repository import DepartmentRepository
from ..weekdays.registry import WEEKDAYS, WeekdayRegistry


@dataclass(frozen=True)
class WeeklySummary:
    week_start: date
    days: list[str]
    rows: list[dict]
    branches: list[dict]
    total: int


class ConfirmationReportService:
    """Weekly attendance counts per department and branch."""

    def __init__(
        self,
        confirmations: ConfirmationRepository,
        departments: DepartmentRepository,
        *,
        registry: WeekdayRegistry = WEEKDAYS,
    ):
        self._confirmations = confirmations
        self._departments = departments
        self._registry = registry

    def weekly_summary(self, any_date: date, *, branch_id: Optional[str] = None) -> WeeklySummary:
        start = week_start(any_date)
        confirmations = self._confirmations.list_range(start, start + timedelta(days=6))
        day_names = [self._registry.display_name_of(d) for d in self._registry.ordered_ids()]

        departments = {d.department_id: d for d in self._departments.list_all()}
        rows_map: dict[str, dict] = {}

        for c in confirmations:
            dept = departments.get(c.department_id)
            dept_branch = dept.branch_id if dept else None
            if branch_id and dept_branch != branch_id:
                continue

            row = rows_map.get(c.department_id)
            if not row:
                row = {
                    "department_id": c.department_id,
                    "department_name": dept.name if dept else c.department_name,
                    "branch_id": dept_branch,
                    "counts": {name: 0 for name in day_names},
                    "total": 0,
                }
                rows_map[c.department_id] = row

            name = self._registry.display_name_of(self._registry.for_date(c.work_date))
            row["counts"][name] += c.confirmed_count
            row["total"] += c.confirmed_count

        rows = sorted(rows_map.values(), key=lambda r: r["department_name"])

        branch_totals: dict[str, int] = {}
        for r in rows:
            key = r["branch_id"] or "-"
            branch_totals[key] = branch_totals.get(key, 0) + r["total"]
        branches = [{"branch_id": k, "total": v} for k, v in sorted(branch_totals.items())]

        return WeeklySummary(
            week_start=start,
            days=day_names,
            rows=rows,
            branches=branches,
            total=sum(r["total"] for r in rows),
        )

    def export_csv(self, any_date: date, *, branch_id: Optional[str] = None) -> str:
        summary = self.weekly_summary(any_date, branch_id=branch_id)

        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(["Departamento", *summary.days, "Total"])
        for r in summary.rows:
            writer.writerow([r["department_name"], *(r["counts"][d] for d in summary.days), r["total"]])
        writer.writerow(["Total", *(sum(r["counts"][d] for r in summary.rows) for d in summary.days), summary.total])
        return buf.getvalue()
