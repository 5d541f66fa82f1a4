from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import async_sessionmaker

from ..core.db import get_sessionmaker
from ..services.audit_service import AuditLog
from ..services.engagement_service import EngagementService
from ..services.llm_service import TitleSuggester
from ..services.note_service import NoteStore
from ..services.youtube_service import YouTubeClient


def get_credential(authorization: str | None = Header(default=None)) -> str | None:
    """Bearer token forwarded to the platform; anything else is anonymous."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_platform(request: Request) -> YouTubeClient:
    return request.app.state.platform


def get_suggester(request: Request) -> TitleSuggester:
    return request.app.state.suggester


def get_engagement_service(
    sessionmaker: async_sessionmaker = Depends(get_sessionmaker),  # noqa: B008
    platform: YouTubeClient = Depends(get_platform),  # noqa: B008
    suggester: TitleSuggester = Depends(get_suggester),  # noqa: B008
) -> EngagementService:
    return EngagementService(
        platform=platform,
        suggester=suggester,
        notes=NoteStore(sessionmaker),
        audit=AuditLog(sessionmaker),
    )
