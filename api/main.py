import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from answers import router as answers_router
from core import config
from core.db import Database
from core.dependencies import get_db
from core.errors import register_exception_handlers
from core.logging_setup import configure_logging
from questions import router as questions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared by every request through app.state.
    db = Database()
    await db.connect()
    app.state.db = db
    try:
        yield
    finally:
        await db.close()


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    configure_logging()
    app = FastAPI(title="qa-crud", lifespan=lifespan if use_lifespan else None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(questions_router.router, tags=["questions"])
    app.include_router(answers_router.router, tags=["answers"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/health/db")
    async def health_db(db: Database = Depends(get_db)) -> JSONResponse:
        try:
            ok = await db.ping()
        except Exception as exc:
            logger.error("health_db_failed reason=%s", exc, exc_info=True)
            ok = False
        if not ok:
            return JSONResponse({"status": "degraded", "db": False}, status_code=503)
        return JSONResponse({"status": "ok", "db": True})

    return app


app = create_app()
