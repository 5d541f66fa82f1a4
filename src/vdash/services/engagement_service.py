"""Orchestrates platform, suggestion and note operations for one video.

Every public operation runs its primary step first and then makes exactly
one audit write: the operation's own action on success, ``ERROR`` with a
fixed message on failure. The audit write cannot change what the caller
sees; the primary result or exception is returned or re-raised unchanged.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from ..core.errors import InvalidInput
from ..models import AuditAction, EventLog, Note
from ..schemas import Comment, Reply, Video
from .audit_service import AuditLog
from .comment_assembler import assemble_reply, assemble_thread, assemble_threads
from .llm_service import TitleSuggester, parse_suggestions
from .note_service import NoteStore, normalize_tags
from .youtube_service import YouTubeClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_text(value: str | None, what: str) -> str:
    if not value or not value.strip():
        raise InvalidInput(f"{what} is required")
    return value


class EngagementService:
    def __init__(
        self,
        platform: YouTubeClient,
        suggester: TitleSuggester,
        notes: NoteStore,
        audit: AuditLog,
    ):
        self.platform = platform
        self.suggester = suggester
        self.notes = notes
        self.audit = audit

    async def _audited(
        self,
        video_id: str | None,
        action: AuditAction,
        error_message: str,
        primary: Callable[[], Awaitable[T]],
        details: Callable[[T], dict[str, Any]],
    ) -> T:
        try:
            result = await primary()
        except Exception as exc:
            logger.warning("%s (video_id=%s): %s", error_message, video_id, exc)
            await self.audit.append(video_id, AuditAction.ERROR, {"message": error_message})
            raise
        await self.audit.append(video_id, action, details(result))
        return result

    # videos

    async def get_video(self, video_id: str, credential: str | None = None) -> Video:
        return await self._audited(
            video_id,
            AuditAction.LOAD_VIDEO,
            "Failed to load video",
            lambda: self.platform.get_video(video_id, credential),
            lambda video: {"title": video.title},
        )

    async def update_video(
        self,
        video_id: str,
        title: str | None,
        description: str | None,
        credential: str | None = None,
    ) -> dict[str, Any]:
        return await self._audited(
            video_id,
            AuditAction.UPDATE_VIDEO,
            "Failed to update video",
            lambda: self.platform.update_video(video_id, title, description, credential),
            lambda _: {"title": title, "description": description},
        )

    # comments

    async def list_comments(
        self, video_id: str, credential: str | None = None
    ) -> list[Comment]:
        async def primary() -> list[Comment]:
            page = await self.platform.list_comment_threads(video_id, credential)
            return assemble_threads(page)

        return await self._audited(
            video_id,
            AuditAction.LOAD_COMMENTS,
            "Failed to load comments",
            primary,
            lambda comments: {"count": len(comments)},
        )

    async def add_comment(
        self, video_id: str, text: str | None, credential: str | None = None
    ) -> Comment:
        async def primary() -> Comment:
            body = _require_text(text, "Comment text")
            raw = await self.platform.insert_comment_thread(video_id, body, credential)
            return assemble_thread(raw)

        return await self._audited(
            video_id,
            AuditAction.ADD_COMMENT,
            "Failed to add comment",
            primary,
            lambda _: {"text": text},
        )

    async def reply_to_comment(
        self,
        comment_id: str,
        text: str | None,
        video_id: str | None,
        credential: str | None = None,
    ) -> Reply:
        async def primary() -> Reply:
            body = _require_text(text, "Reply text")
            raw = await self.platform.insert_reply(comment_id, body, credential)
            return assemble_reply(raw)

        return await self._audited(
            video_id,
            AuditAction.REPLY_TO_COMMENT,
            "Failed to reply to comment",
            primary,
            lambda _: {"commentId": comment_id, "text": text},
        )

    async def delete_comment(
        self, comment_id: str, video_id: str | None, credential: str | None = None
    ) -> None:
        await self._audited(
            video_id,
            AuditAction.DELETE_COMMENT,
            "Failed to delete comment",
            lambda: self.platform.delete_comment(comment_id, credential),
            lambda _: {"commentId": comment_id},
        )

    # notes

    async def list_notes(self, video_id: str) -> list[Note]:
        return await self._audited(
            video_id,
            AuditAction.LOAD_NOTES,
            "Failed to load notes",
            lambda: self.notes.list(video_id),
            lambda notes: {"count": len(notes)},
        )

    async def create_note(
        self, video_id: str, text: str | None, tags: Iterable[str] | None = None
    ) -> Note:
        return await self._audited(
            video_id,
            AuditAction.ADD_NOTE,
            "Failed to add note",
            lambda: self.notes.create(video_id, text, tags),
            lambda note: {"text": text, "tags": note.tags},
        )

    async def update_note(
        self,
        note_id: int,
        text: str | None,
        tags: Iterable[str] | None = None,
        video_id: str | None = None,
    ) -> Note:
        try:
            note = await self.notes.update(note_id, text, tags)
        except Exception as exc:
            logger.warning("Failed to update note %s: %s", note_id, exc)
            await self.audit.append(
                video_id, AuditAction.ERROR, {"message": "Failed to update note"}
            )
            raise
        # the note knows its video when the caller did not say
        await self.audit.append(
            video_id or note.video_id,
            AuditAction.UPDATE_NOTE,
            {"noteId": note_id, "text": text, "tags": normalize_tags(tags)},
        )
        return note

    async def delete_note(self, note_id: int, video_id: str | None = None) -> None:
        await self._audited(
            video_id,
            AuditAction.DELETE_NOTE,
            "Failed to delete note",
            lambda: self.notes.delete(note_id),
            lambda _: {"noteId": note_id},
        )

    async def search_notes(
        self, video_id: str, query: str | None = None, tag: str | None = None
    ) -> list[Note]:
        return await self._audited(
            video_id,
            AuditAction.SEARCH_NOTES,
            "Failed to search notes",
            lambda: self.notes.search(video_id, query, tag),
            lambda notes: {"query": query, "tag": tag, "count": len(notes)},
        )

    # suggestions

    async def suggest_titles(
        self, title: str | None, description: str | None = None, video_id: str | None = None
    ) -> list[str]:
        async def primary() -> list[str]:
            original = _require_text(title, "Title")
            raw = await self.suggester.complete(original, description or "")
            return parse_suggestions(raw)

        return await self._audited(
            video_id,
            AuditAction.AI_SUGGEST_TITLES,
            "Failed to generate title suggestions",
            primary,
            lambda suggestions: {"originalTitle": title, "suggestions": suggestions},
        )

    # activity

    async def list_events(self, video_id: str | None = None, limit: int = 50) -> list[EventLog]:
        return await self.audit.recent(video_id, limit)
