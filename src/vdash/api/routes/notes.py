from fastapi import APIRouter, Depends

from ...schemas import NoteCreate, NoteRead, NoteUpdate
from ...services.engagement_service import EngagementService
from ..deps import get_engagement_service

router = APIRouter()


@router.get("/notes/{video_id}", response_model=list[NoteRead])
async def list_notes(
    video_id: str,
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.list_notes(video_id)


@router.post("/notes/{video_id}", response_model=NoteRead)
async def create_note(
    video_id: str,
    payload: NoteCreate,
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.create_note(video_id, payload.text, payload.tags)


@router.put("/notes/{note_id}", response_model=NoteRead)
async def update_note(
    note_id: int,
    payload: NoteUpdate,
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.update_note(note_id, payload.text, payload.tags, payload.video_id)


@router.delete("/notes/{note_id}")
async def delete_note(
    note_id: int,
    video_id: str | None = None,
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    await service.delete_note(note_id, video_id)
    return {"success": True}


@router.get("/notes/{video_id}/search", response_model=list[NoteRead])
async def search_notes(
    video_id: str,
    q: str | None = None,
    tag: str | None = None,
    service: EngagementService = Depends(get_engagement_service),  # noqa: B008
):
    return await service.search_notes(video_id, q, tag)
