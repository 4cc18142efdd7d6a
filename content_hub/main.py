"""FastAPI application: lifecycle, routes, error rendering."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from content_hub.db import create_tables, dispose_db, init_db
from content_hub.errors import ContentHubError
from content_hub.utils.logging import setup_logging, get_logger
from content_hub.routes import (
    blog_router,
    linkedin_router,
    public_router,
    settings_router,
    video_router,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging, DB tables. Shutdown: engine."""
    setup_logging()
    init_db()
    try:
        await create_tables()
    except Exception as e:
        logger.warning("create_tables_failed", error=str(e))
    yield
    await dispose_db()


app = FastAPI(
    title="Content Hub",
    description="Blog, LinkedIn and video content generation dashboard",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(blog_router)
app.include_router(linkedin_router)
app.include_router(video_router)
app.include_router(settings_router)
app.include_router(public_router)


@app.exception_handler(ContentHubError)
async def content_hub_error_handler(request: Request, exc: ContentHubError):
    """Render typed errors as a dismissible message; the client stays interactive."""
    logger.warning(
        "request_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": type(exc).__name__},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
