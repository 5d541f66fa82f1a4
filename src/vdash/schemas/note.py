from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NoteCreate(BaseModel):
    text: str | None = None
    tags: list[str] | None = None


class NoteUpdate(NoteCreate):
    video_id: str | None = None


class NoteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    video_id: str
    text: str
    tags: list[str] = []
    created_at: datetime
    updated_at: datetime
