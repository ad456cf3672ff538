"""
Pydantic schemas for region endpoints.
"""

from __future__ import annotations

from core.schemas import Money, WireModel

from .service import RegionOverrunResult


class RegionOverrunDto(WireModel):
    project_id: int
    name: str
    budget: Money
    total_cost: Money
    overrun_pct: Money | None = None

    @classmethod
    def from_result(cls, result: RegionOverrunResult) -> "RegionOverrunDto":
        return cls(
            project_id=result.project_id,
            name=result.name,
            budget=result.budget,
            total_cost=result.total_cost,
            overrun_pct=result.overrun_pct,
        )
