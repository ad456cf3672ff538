"""
Project cost queries (raw SQL).

All aggregates read the `purchase` table filtered the same way:
`project_id = $1 AND purchase_date BETWEEN $2 AND $3` (inclusive on both
ends). `purchase.total_cost` is the authoritative cost figure.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from core import db

from .entities import Project

DEFAULT_TOP_MATERIALS_LIMIT = 10

_PROJECT_COLUMNS = "id, name, region_id, budget, start_date, end_date"


async def get_by_id(project_id: int) -> Project | None:
    row = await db.fetch_one(
        f"""
        SELECT {_PROJECT_COLUMNS}
        FROM project
        WHERE id = $1
        """,
        project_id,
    )
    return Project.from_row(row) if row is not None else None


async def get_by_region(region_id: int) -> list[Project]:
    rows = await db.fetch_all(
        f"""
        SELECT {_PROJECT_COLUMNS}
        FROM project
        WHERE region_id = $1
        """,
        region_id,
    )
    return [Project.from_row(row) for row in rows]


async def get_total_cost(project_id: int, date_from: datetime, date_to: datetime) -> Decimal:
    total = await db.fetch_val(
        """
        SELECT COALESCE(SUM(total_cost), 0)
        FROM purchase
        WHERE project_id = $1
          AND purchase_date BETWEEN $2 AND $3
        """,
        project_id,
        date_from,
        date_to,
    )
    return Decimal(total) if total is not None else Decimal(0)


async def get_top_materials(
    project_id: int,
    date_from: datetime,
    date_to: datetime,
    limit: int = DEFAULT_TOP_MATERIALS_LIMIT,
) -> list[dict[str, Any]]:
    """
    Materials ranked by summed purchase cost in the range, most expensive first.

    Inner join: a material without purchases in range never shows up.
    """
    return await db.fetch_all(
        """
        SELECT m.name AS material, SUM(p.total_cost) AS total_cost
        FROM purchase p
        JOIN material m ON m.id = p.material_id
        WHERE p.project_id = $1
          AND p.purchase_date BETWEEN $2 AND $3
        GROUP BY m.name
        ORDER BY total_cost DESC
        LIMIT $4
        """,
        project_id,
        date_from,
        date_to,
        limit,
    )


async def get_monthly_breakdown(
    project_id: int,
    date_from: datetime,
    date_to: datetime,
) -> list[dict[str, Any]]:
    """
    Purchase cost per calendar month (`YYYY-MM`), oldest month first.
    """
    return await db.fetch_all(
        """
        SELECT to_char(purchase_date, 'YYYY-MM') AS month, SUM(total_cost) AS total_cost
        FROM purchase
        WHERE project_id = $1
          AND purchase_date BETWEEN $2 AND $3
        GROUP BY month
        ORDER BY month
        """,
        project_id,
        date_from,
        date_to,
    )
