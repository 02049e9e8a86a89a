"""FastAPI application entry point. Registers middleware, error handlers and API routers."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from projecthub.config import settings
from projecthub.database import Base, engine
from projecthub.exceptions import register_exception_handlers
from projecthub.logging_config import setup_logging
import projecthub.models  # noqa: F401 - registers model metadata
from projecthub.routers import analytics, comments, projects, users

logger = logging.getLogger(__name__)

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="ProjectHub API",
    description="Project showcase backend: projects, comments, likes, ratings and analytics",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(projects.router)
app.include_router(comments.router)
app.include_router(users.router)
app.include_router(analytics.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)
    logger.info("database schema ready")


@app.get("/api/health")
def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


def run():
    import uvicorn

    uvicorn.run("projecthub.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
