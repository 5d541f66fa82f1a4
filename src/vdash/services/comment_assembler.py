"""Shape raw YouTube comment payloads into ``Comment`` / ``Reply`` models.

Pure transforms: no network access, no audit writes, no sorting or
filtering. Replies keep the order the platform returned them in.
"""
from typing import Any

from ..schemas import Comment, Reply


def _author_channel_id(snippet: dict[str, Any]) -> str | None:
    author = snippet.get("authorChannelId") or {}
    return author.get("value")


def assemble_reply(raw: dict[str, Any], owner_channel_id: str | None = None) -> Reply:
    snippet = raw.get("snippet") or {}
    author_channel_id = _author_channel_id(snippet)
    return Reply(
        id=raw["id"],
        text=snippet.get("textDisplay") or snippet.get("textOriginal") or "",
        author=snippet.get("authorDisplayName"),
        author_channel_id=author_channel_id,
        published_at=snippet.get("publishedAt"),
        like_count=int(snippet.get("likeCount") or 0),
        is_owner=bool(owner_channel_id) and author_channel_id == owner_channel_id,
    )


def assemble_thread(raw: dict[str, Any], owner_channel_id: str | None = None) -> Comment:
    """Build one top-level comment with its replies.

    ``owner_channel_id`` falls back to the thread's ``snippet.channelId``,
    which is the channel that owns the video.
    """
    thread_snippet = raw.get("snippet") or {}
    owner = owner_channel_id or thread_snippet.get("channelId")
    top = assemble_reply(thread_snippet.get("topLevelComment") or {"id": raw["id"]}, owner)

    replies: list[Reply] = []
    if raw.get("replies"):
        replies = [assemble_reply(r, owner) for r in raw["replies"].get("comments", [])]

    # the thread id is what comments.insert expects as parentId
    return Comment(**top.model_dump(exclude={"id"}), id=raw["id"], replies=replies)


def assemble_threads(
    page: dict[str, Any], owner_channel_id: str | None = None
) -> list[Comment]:
    return [assemble_thread(item, owner_channel_id) for item in page.get("items", [])]
