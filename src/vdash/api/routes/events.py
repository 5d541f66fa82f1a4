from fastapi import APIRouter, Depends, Query

from ...schemas import EventLogRead
from ...services.engagement_service import EngagementService
from ..deps import get_engagement_service

router = APIRouter()


@router.get("/events/{video_id}", response_model=list[EventLogRead])
async def list_events(
    video_id: str,
    limit: int = Query(50, ge=1, le=500),
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.list_events(video_id, limit)
