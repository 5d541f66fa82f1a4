from datetime import datetime

from sqlalchemy import DDL, DateTime, ForeignKey, Integer, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.db import Base, utcnow


class Note(Base):
    __tablename__ = "notes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    video_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    tag_rows = relationship(
        "NoteTag",
        back_populates="note",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def tags(self) -> list[str]:
        return sorted(row.tag for row in self.tag_rows)


class NoteTag(Base):
    __tablename__ = "note_tags"

    note_id: Mapped[int] = mapped_column(
        ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True
    )
    tag: Mapped[str] = mapped_column(String, primary_key=True, index=True)

    note = relationship("Note", back_populates="tag_rows")


# Full-text index over notes.text. SQLite keeps an FTS5 shadow table in sync
# through triggers; PostgreSQL gets a GIN index matching the search expression.
FULL_TEXT_DDL = {
    "sqlite": [
        "CREATE VIRTUAL TABLE IF NOT EXISTS notes_fts USING fts5("
        "text, content='notes', content_rowid='id', tokenize='porter unicode61')",
        "CREATE TRIGGER IF NOT EXISTS notes_fts_ai AFTER INSERT ON notes BEGIN "
        "INSERT INTO notes_fts(rowid, text) VALUES (new.id, new.text); END",
        "CREATE TRIGGER IF NOT EXISTS notes_fts_ad AFTER DELETE ON notes BEGIN "
        "INSERT INTO notes_fts(notes_fts, rowid, text) VALUES ('delete', old.id, old.text); END",
        "CREATE TRIGGER IF NOT EXISTS notes_fts_au AFTER UPDATE OF text ON notes BEGIN "
        "INSERT INTO notes_fts(notes_fts, rowid, text) VALUES ('delete', old.id, old.text); "
        "INSERT INTO notes_fts(rowid, text) VALUES (new.id, new.text); END",
    ],
    "postgresql": [
        "CREATE INDEX IF NOT EXISTS ix_notes_text_tsv ON notes "
        "USING gin (to_tsvector('english', text))",
    ],
}

FULL_TEXT_DROP_DDL = {
    "sqlite": ["DROP TABLE IF EXISTS notes_fts"],
    "postgresql": ["DROP INDEX IF EXISTS ix_notes_text_tsv"],
}

for _dialect, _statements in FULL_TEXT_DDL.items():
    for _stmt in _statements:
        event.listen(Note.__table__, "after_create", DDL(_stmt).execute_if(dialect=_dialect))

event.listen(
    Note.__table__,
    "before_drop",
    DDL("DROP TABLE IF EXISTS notes_fts").execute_if(dialect="sqlite"),
)
