from . import (
    audit_service,
    comment_assembler,
    engagement_service,
    llm_service,
    note_service,
    youtube_service,
)

__all__ = [
    "audit_service",
    "comment_assembler",
    "engagement_service",
    "llm_service",
    "note_service",
    "youtube_service",
]
