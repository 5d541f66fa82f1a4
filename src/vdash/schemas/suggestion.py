from pydantic import BaseModel


class SuggestTitlesRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    video_id: str | None = None


class SuggestTitlesResponse(BaseModel):
    suggestions: list[str]
