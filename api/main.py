import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from core import db
from core.log import configure_logging
from projects import router as projects_router
from regions import router as regions_router

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process. A missing connection string fails startup.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Constructora Cost Reporting API", lifespan=lifespan)

app.include_router(projects_router.router, tags=["projects"])
app.include_router(regions_router.router, tags=["regions"])


@app.get("/api/v1/health", tags=["health"])
async def health() -> dict:
    """
    Liveness probe. Always 200; the DB status only reports the round trip.
    """
    db_status = "OK"
    try:
        await db.ping()
    except Exception:
        logger.warning("health_db_check_failed", exc_info=True)
        db_status = "FAIL"
    return {
        "ApiStatus": "OK",
        "DbStatus": db_status,
        "Timestamp": datetime.now(timezone.utc).isoformat(),
    }
