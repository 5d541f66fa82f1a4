import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.config import settings
from ..core.db import init_models
from ..core.errors import EngagementError
from ..services.llm_service import TitleSuggester
from ..services.youtube_service import YouTubeClient
from .routes import ai, comments, events, notes, videos

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    app.state.platform = YouTubeClient()
    app.state.suggester = TitleSuggester()
    logger.info("vdash started (env=%s)", settings.app_env)
    yield
    await app.state.platform.aclose()


app = FastAPI(title="vdash", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EngagementError)
async def engagement_error_handler(request: Request, exc: EngagementError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": type(exc).__name__, "message": exc.message},
    )


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


app.include_router(videos.router, prefix="/v1")
app.include_router(comments.router, prefix="/v1")
app.include_router(notes.router, prefix="/v1")
app.include_router(ai.router, prefix="/v1")
app.include_router(events.router, prefix="/v1")
