import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from ..core.errors import AuditWriteFailed, StorageUnavailable
from ..models import AuditAction, EventLog

logger = logging.getLogger(__name__)


class AuditLog:
    """Append-only activity log.

    ``append`` never raises: a failed write is logged and dropped so it can
    not change the outcome of the action being recorded.
    """

    def __init__(self, sessionmaker: async_sessionmaker):
        self._sessionmaker = sessionmaker

    async def append(
        self, video_id: str | None, action: AuditAction, details: dict[str, Any]
    ) -> None:
        try:
            await self._write(video_id, action, details)
        except AuditWriteFailed:
            logger.exception("audit write failed: action=%s video_id=%s", action.value, video_id)

    async def _write(
        self, video_id: str | None, action: AuditAction, details: dict[str, Any]
    ) -> None:
        try:
            async with self._sessionmaker() as session:
                session.add(EventLog(video_id=video_id, action=action.value, details=details))
                await session.commit()
        except Exception as exc:
            raise AuditWriteFailed(str(exc)) from exc

    async def recent(self, video_id: str | None = None, limit: int = 50) -> list[EventLog]:
        stmt = select(EventLog).order_by(EventLog.timestamp.desc(), EventLog.id.desc())
        if video_id is not None:
            stmt = stmt.where(EventLog.video_id == video_id)
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(stmt.limit(limit))
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("event log read failed: %s", exc)
            raise StorageUnavailable("Failed to load events") from exc
