"""
Pydantic schemas for project cost endpoints.
"""

from __future__ import annotations

from core.schemas import Money, WireModel

from .service import ProjectCostsResult


class TopMaterialDto(WireModel):
    material: str
    total_cost: Money


class MonthlyBreakdownDto(WireModel):
    month: str
    total_cost: Money


class ProjectCostsDto(WireModel):
    total_cost: Money
    top_materials: list[TopMaterialDto] = []
    monthly_breakdown: list[MonthlyBreakdownDto] = []

    @classmethod
    def from_result(cls, result: ProjectCostsResult) -> "ProjectCostsDto":
        return cls(
            total_cost=result.total_cost,
            top_materials=[
                TopMaterialDto(material=m.material, total_cost=m.total_cost)
                for m in result.top_materials
            ],
            monthly_breakdown=[
                MonthlyBreakdownDto(month=m.month, total_cost=m.total_cost)
                for m in result.monthly_breakdown
            ],
        )
