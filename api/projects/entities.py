"""
Project entity as read from the `project` table.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    region_id: int
    budget: Decimal
    start_date: datetime
    end_date: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Project":
        return cls(
            id=int(row["id"]),
            name=str(row["name"]),
            region_id=int(row["region_id"]),
            budget=Decimal(row["budget"]),
            start_date=row["start_date"],
            end_date=row.get("end_date"),
        )
