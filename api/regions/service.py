"""
Region overrun ranking (orchestration).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from . import repository


@dataclass(frozen=True)
class RegionOverrunsQuery:
    region_id: int
    limit: int


@dataclass(frozen=True)
class RegionOverrunResult:
    project_id: int
    name: str
    budget: Decimal
    total_cost: Decimal
    # None when the budget is zero; not the same as a 0% overrun.
    overrun_pct: Decimal | None


async def get_top_overruns(query: RegionOverrunsQuery | None) -> list[RegionOverrunResult]:
    if query is None:
        raise ValueError("query is required.")

    rows = await repository.get_top_overruns(query.region_id, query.limit)
    return [
        RegionOverrunResult(
            project_id=int(row["project_id"]),
            name=str(row["name"]),
            budget=row["budget"],
            total_cost=row["total_cost"],
            overrun_pct=row["overrun_pct"],
        )
        for row in rows
    ]
