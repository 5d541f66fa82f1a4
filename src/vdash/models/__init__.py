from .event_logs import AuditAction, EventLog
from .notes import Note, NoteTag

__all__ = [
    "AuditAction",
    "EventLog",
    "Note",
    "NoteTag",
]
