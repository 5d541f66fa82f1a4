from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

from sqlalchemy import column, delete, false, func, literal_column, select, table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..core.db import utcnow
from ..core.errors import InvalidInput, NotFound, StorageUnavailable
from ..models import Note, NoteTag

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\w+", re.UNICODE)
_notes_fts = table("notes_fts", column("rowid"))


def normalize_tags(tags: Iterable[str] | None) -> list[str]:
    """Collapse duplicates and drop empty tags; order is not significant."""
    return sorted({t for t in tags or () if t})


def _text_match(dialect: str, query: str):
    """Full-text predicate on ``Note.text`` with English stemming."""
    words = _WORD.findall(query)
    if not words:
        return false()
    if dialect == "postgresql":
        return func.to_tsvector(literal_column("'english'"), Note.text).op("@@")(
            func.plainto_tsquery(literal_column("'english'"), query)
        )
    # FTS5 with the porter tokenizer; each quoted word is required
    match = " ".join('"%s"' % w for w in words)
    return Note.id.in_(
        select(_notes_fts.c.rowid).where(literal_column("notes_fts").op("MATCH")(match))
    )


class NoteStore:
    def __init__(self, sessionmaker: async_sessionmaker):
        self._sessionmaker = sessionmaker

    async def list(self, video_id: str) -> list[Note]:
        return await self.search(video_id)

    async def create(self, video_id: str, text: str, tags: Iterable[str] | None = None) -> Note:
        if not text or not text.strip():
            raise InvalidInput("Note text is required")
        note = Note(
            video_id=video_id,
            text=text,
            tag_rows=[NoteTag(tag=t) for t in normalize_tags(tags)],
        )
        async with self._session() as session:
            session.add(note)
            await session.commit()
        return note

    async def update(self, note_id: int, text: str, tags: Iterable[str] | None = None) -> Note:
        """Replace text and tags; omitted tags clear the existing ones."""
        if not text or not text.strip():
            raise InvalidInput("Note text is required")
        async with self._session() as session:
            note = await session.get(Note, note_id)
            if note is None:
                raise NotFound(f"Note {note_id} not found")
            existing = {row.tag: row for row in note.tag_rows}
            note.text = text
            note.tag_rows = [existing.get(t) or NoteTag(tag=t) for t in normalize_tags(tags)]
            note.updated_at = utcnow()
            await session.commit()
        return note

    async def delete(self, note_id: int) -> None:
        async with self._session() as session:
            await session.execute(delete(NoteTag).where(NoteTag.note_id == note_id))
            await session.execute(delete(Note).where(Note.id == note_id))
            await session.commit()

    async def search(
        self, video_id: str, query: str | None = None, tag: str | None = None
    ) -> list[Note]:
        stmt = select(Note).where(Note.video_id == video_id)
        async with self._session() as session:
            if query:
                stmt = stmt.where(_text_match(session.get_bind().dialect.name, query))
            if tag:
                stmt = stmt.where(
                    Note.id.in_(select(NoteTag.note_id).where(NoteTag.tag == tag))
                )
            stmt = stmt.order_by(Note.created_at.desc(), Note.id.desc())
            result = await session.execute(stmt)
            return list(result.scalars().all())

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._sessionmaker() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error("note store query failed: %s", exc)
            raise StorageUnavailable("Note storage is unavailable") from exc
