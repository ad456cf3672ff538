"""
Region entity as read from the `region` table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Region:
    id: int
    name: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Region":
        return cls(id=int(row["id"]), name=str(row["name"]))
