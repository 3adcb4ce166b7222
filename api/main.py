from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from circuits import router as circuits_router
from constructors import router as constructors_router
from core import settings
from core.db import Database, Fetched
from core.dependencies import get_db
from core.errors import install_error_handlers
from drivers import router as drivers_router
from qualifying import router as qualifying_router
from races import router as races_router
from results import router as results_router
from standings import router as standings_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db
    try:
        await db.connect()
    except Exception:
        # Keep serving; every query reports a data-source error until the store is back.
        logger.exception("db_pool_open_failed")
    try:
        yield
    finally:
        await db.close()


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(title="Formula 1 API", lifespan=lifespan)
    app.state.db = database if database is not None else Database.from_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins(),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(circuits_router.router, tags=["circuits"])
    app.include_router(constructors_router.router, tags=["constructors"])
    app.include_router(drivers_router.router, tags=["drivers"])
    app.include_router(races_router.router, tags=["races"])
    app.include_router(results_router.router, tags=["results"])
    app.include_router(qualifying_router.router, tags=["qualifying"])
    app.include_router(standings_router.router, tags=["standings"])

    @app.get("/health")
    async def health(db: Database = Depends(get_db)) -> dict:
        outcome = await db.fetch_one("SELECT 1 AS ok")
        database_status = "ok" if isinstance(outcome, Fetched) else "unavailable"
        return {"status": "ok", "database": database_status}

    @app.get("/")
    def root() -> dict:
        return {"message": "Welcome to the Formula 1 API."}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host(), port=settings.port(), log_level=settings.log_level())
