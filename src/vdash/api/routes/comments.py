from fastapi import APIRouter, Depends

from ...schemas import Comment, CommentCreate, Reply, ReplyCreate
from ...services.engagement_service import EngagementService
from ..deps import get_credential, get_engagement_service

router = APIRouter()


@router.get("/comments/{video_id}", response_model=list[Comment])
async def list_comments(
    video_id: str,
    credential: str | None = Depends(get_credential),  # noqa: B008
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.list_comments(video_id, credential)


@router.post("/comments/{video_id}", response_model=Comment)
async def add_comment(
    video_id: str,
    payload: CommentCreate,
    credential: str | None = Depends(get_credential),  # noqa: B008
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.add_comment(video_id, payload.text, credential)


@router.post("/comments/{comment_id}/reply", response_model=Reply)
async def reply_to_comment(
    comment_id: str,
    payload: ReplyCreate,
    credential: str | None = Depends(get_credential),  # noqa: B008
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.reply_to_comment(
        comment_id, payload.text, payload.video_id, credential
    )


@router.delete("/comments/{comment_id}")
async def delete_comment(
    comment_id: str,
    video_id: str | None = None,
    credential: str | None = Depends(get_credential),  # noqa: B008
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    await service.delete_comment(comment_id, video_id, credential)
    return {"success": True}
