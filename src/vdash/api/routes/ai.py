from fastapi import APIRouter, Depends

from ...schemas import SuggestTitlesRequest, SuggestTitlesResponse
from ...services.engagement_service import EngagementService
from ..deps import get_engagement_service

router = APIRouter()


@router.post("/ai/suggest-titles", response_model=SuggestTitlesResponse)
async def suggest_titles(
    payload: SuggestTitlesRequest,
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    suggestions = await service.suggest_titles(
        payload.title, payload.description, payload.video_id
    )
    return {"suggestions": suggestions}
