from fastapi import APIRouter, Depends

from ...schemas import Video, VideoUpdate
from ...services.engagement_service import EngagementService
from ..deps import get_credential, get_engagement_service

router = APIRouter()


@router.get("/videos/{video_id}", response_model=Video)
async def get_video(
    video_id: str,
    credential: str | None = Depends(get_credential),  # noqa: B008
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.get_video(video_id, credential)


@router.put("/videos/{video_id}")
async def update_video(
    video_id: str,
    payload: VideoUpdate,
    credential: str | None = Depends(get_credential),  # noqa: B008
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    result = await service.update_video(
        video_id, payload.title, payload.description, credential
    )
    return {"success": True, "data": result}
