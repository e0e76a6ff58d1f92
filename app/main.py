"""MindEase - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.errors import MindEaseError
from app.core.logging_config import setup_logging
from app.db.base import Base
from app.db.session import engine, AsyncSessionLocal
from app.routers import api, auth, journal, streaks
from app.services.seeding import seed_questions

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_questions:
        async with AsyncSessionLocal() as db:
            await seed_questions(db)

    logger.info("%s started", settings.app_name)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Mood, stress assessment and daily streak tracking",
    lifespan=lifespan,
)


@app.exception_handler(MindEaseError)
async def mindease_error_handler(request: Request, exc: MindEaseError):
    logger.warning("%s on %s %s: %s", exc.code, request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "code": exc.code, "errors": exc.detail},
    )


app.include_router(auth.router)
app.include_router(api.router)
app.include_router(streaks.router)
app.include_router(journal.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
