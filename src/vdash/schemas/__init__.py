from .comment import Comment, CommentCreate, Reply, ReplyCreate
from .event import EventLogRead
from .note import NoteCreate, NoteRead, NoteUpdate
from .suggestion import SuggestTitlesRequest, SuggestTitlesResponse
from .video import Video, VideoUpdate

__all__ = [
    "Comment",
    "CommentCreate",
    "EventLogRead",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
    "Reply",
    "ReplyCreate",
    "SuggestTitlesRequest",
    "SuggestTitlesResponse",
    "Video",
    "VideoUpdate",
]
