from pydantic import BaseModel, Field


class Reply(BaseModel):
    id: str
    text: str = ""
    author: str | None = None
    author_channel_id: str | None = None
    published_at: str | None = None
    like_count: int = 0
    is_owner: bool = False


class Comment(Reply):
    replies: list[Reply] = Field(default_factory=list)


class CommentCreate(BaseModel):
    text: str | None = None


class ReplyCreate(BaseModel):
    text: str | None = None
    video_id: str | None = None
