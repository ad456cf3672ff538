"""
Region overrun queries (raw SQL).

Overrun percentage is computed in Postgres:
  ROUND((total_cost - budget) / budget * 100, 2)   when budget > 0
  NULL                                              otherwise
Unlike the project cost report, purchases are summed over the whole project
lifetime (no date filter).
"""

from __future__ import annotations

from typing import Any

from core import db

from .entities import Region


async def get_by_id(region_id: int) -> Region | None:
    row = await db.fetch_one(
        """
        SELECT id, name
        FROM region
        WHERE id = $1
        """,
        region_id,
    )
    return Region.from_row(row) if row is not None else None


async def get_top_overruns(region_id: int, limit: int) -> list[dict[str, Any]]:
    """
    Projects of a region ranked by overrun percentage, NULLs last.

    Projects without purchases are kept with total_cost = 0.
    """
    return await db.fetch_all(
        """
        SELECT
          p.id AS project_id,
          p.name,
          p.budget,
          COALESCE(cost_summary.total_cost, 0) AS total_cost,
          CASE
            WHEN p.budget > 0 THEN
              ROUND(((COALESCE(cost_summary.total_cost, 0) - p.budget) / p.budget * 100)::numeric, 2)
            ELSE NULL
          END AS overrun_pct
        FROM project p
        LEFT JOIN (
          SELECT project_id, SUM(total_cost) AS total_cost
          FROM purchase
          GROUP BY project_id
        ) cost_summary ON cost_summary.project_id = p.id
        WHERE p.region_id = $1
        ORDER BY overrun_pct DESC NULLS LAST
        LIMIT $2
        """,
        region_id,
        limit,
    )
