import enum
from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.db import Base, utcnow


class AuditAction(str, enum.Enum):
    LOAD_VIDEO = "LOAD_VIDEO"
    UPDATE_VIDEO = "UPDATE_VIDEO"
    LOAD_COMMENTS = "LOAD_COMMENTS"
    ADD_COMMENT = "ADD_COMMENT"
    REPLY_TO_COMMENT = "REPLY_TO_COMMENT"
    DELETE_COMMENT = "DELETE_COMMENT"
    LOAD_NOTES = "LOAD_NOTES"
    ADD_NOTE = "ADD_NOTE"
    UPDATE_NOTE = "UPDATE_NOTE"
    DELETE_NOTE = "DELETE_NOTE"
    SEARCH_NOTES = "SEARCH_NOTES"
    AI_SUGGEST_TITLES = "AI_SUGGEST_TITLES"
    ERROR = "ERROR"


class EventLog(Base):
    __tablename__ = "event_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    video_id: Mapped[str | None] = mapped_column(String, index=True, nullable=True)
    action: Mapped[str] = mapped_column(String, nullable=False)
    details: Mapped[dict | None] = mapped_column(JSON)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
