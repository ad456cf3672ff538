"""
Project cost report (orchestration).

This is where we:
- check that the project exists
- run the three independent aggregate queries concurrently
- map repository rows to result records
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from . import repository


@dataclass(frozen=True)
class ProjectCostsQuery:
    project_id: int
    date_from: datetime
    date_to: datetime


@dataclass(frozen=True)
class TopMaterialResult:
    material: str
    total_cost: Decimal


@dataclass(frozen=True)
class MonthlyBreakdownResult:
    month: str
    total_cost: Decimal


@dataclass(frozen=True)
class ProjectCostsResult:
    total_cost: Decimal
    top_materials: list[TopMaterialResult]
    monthly_breakdown: list[MonthlyBreakdownResult]


async def get_project_costs(query: ProjectCostsQuery | None) -> ProjectCostsResult | None:
    """
    Build the cost report for one project, or None if the project is unknown.

    The aggregates run without a shared transaction, so a concurrent write may
    make the total differ from the sum of the monthly breakdown.
    """
    if query is None:
        raise ValueError("query is required.")

    project = await repository.get_by_id(query.project_id)
    if project is None:
        return None

    total_cost, material_rows, month_rows = await asyncio.gather(
        repository.get_total_cost(query.project_id, query.date_from, query.date_to),
        repository.get_top_materials(query.project_id, query.date_from, query.date_to),
        repository.get_monthly_breakdown(query.project_id, query.date_from, query.date_to),
    )

    return ProjectCostsResult(
        total_cost=total_cost,
        top_materials=[
            TopMaterialResult(material=str(row["material"]), total_cost=row["total_cost"])
            for row in material_rows
        ],
        monthly_breakdown=[
            MonthlyBreakdownResult(month=str(row["month"]), total_cost=row["total_cost"])
            for row in month_rows
        ],
    )
