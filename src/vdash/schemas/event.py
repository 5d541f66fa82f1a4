from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class EventLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    video_id: str | None = None
    action: str
    details: dict[str, Any] | None = None
    timestamp: datetime
