from pydantic import BaseModel


class Video(BaseModel):
    id: str
    title: str
    description: str = ""
    thumbnail_url: str | None = None
    published_at: str | None = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    duration: str | None = None


class VideoUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
