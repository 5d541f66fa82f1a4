"""Async client for the YouTube Data API v3.

Every call takes the caller's bearer credential explicitly; nothing about a
request's identity is stored on the client.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.config import settings
from ..core.errors import NotFound, RemoteRejected, RemoteUnavailable
from ..schemas import Video

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return response.reason_phrase


def _video_from_item(item: dict[str, Any]) -> Video:
    snippet = item.get("snippet") or {}
    stats = item.get("statistics") or {}
    thumbs = snippet.get("thumbnails") or {}
    thumb = thumbs.get("maxres") or thumbs.get("high") or thumbs.get("default") or {}
    return Video(
        id=item["id"],
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        thumbnail_url=thumb.get("url"),
        published_at=snippet.get("publishedAt"),
        view_count=int(stats.get("viewCount") or 0),
        like_count=int(stats.get("likeCount") or 0),
        comment_count=int(stats.get("commentCount") or 0),
        duration=(item.get("contentDetails") or {}).get("duration"),
    )


class YouTubeClient:
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
    ):
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.youtube_api_base_url,
            timeout=httpx.Timeout(settings.youtube_timeout_seconds),
        )
        self._api_key = api_key if api_key is not None else settings.youtube_api_key

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        credential: str | None,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        params = dict(params or {})
        if self._api_key:
            params["key"] = self._api_key
        headers = {"Authorization": f"Bearer {credential}"} if credential else {}
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.error("YouTube %s %s failed: %s", method, path, exc)
            raise RemoteUnavailable(f"Video platform unreachable: {exc}") from exc

        if response.status_code >= 500 or response.status_code == 429:
            logger.error("YouTube %s %s returned %s", method, path, response.status_code)
            raise RemoteUnavailable(_error_message(response))
        if response.status_code >= 400:
            logger.warning("YouTube %s %s rejected: %s", method, path, response.status_code)
            raise RemoteRejected(_error_message(response), response.status_code)
        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            logger.error("YouTube %s %s returned a non-JSON body", method, path)
            raise RemoteUnavailable("Video platform returned an unreadable response") from exc

    async def get_video(self, video_id: str, credential: str | None = None) -> Video:
        data = await self._request(
            "GET",
            "/videos",
            credential,
            params={"part": "snippet,statistics,contentDetails", "id": video_id},
        )
        items = data.get("items") or []
        if not items:
            raise NotFound("Video not found")
        return _video_from_item(items[0])

    async def update_video(
        self, video_id: str, title: str | None, description: str | None,
        credential: str | None = None,
    ) -> dict[str, Any]:
        body = {
            "id": video_id,
            "snippet": {
                "title": title,
                "description": description,
                "categoryId": settings.youtube_category_id,
            },
        }
        return await self._request(
            "PUT", "/videos", credential, params={"part": "snippet"}, json=body
        )

    async def list_comment_threads(
        self, video_id: str, credential: str | None = None
    ) -> dict[str, Any]:
        # first page only
        return await self._request(
            "GET",
            "/commentThreads",
            credential,
            params={
                "part": "snippet,replies",
                "videoId": video_id,
                "maxResults": settings.comment_page_size,
            },
        )

    async def insert_comment_thread(
        self, video_id: str, text: str, credential: str | None = None
    ) -> dict[str, Any]:
        body = {
            "snippet": {
                "videoId": video_id,
                "topLevelComment": {"snippet": {"textOriginal": text}},
            }
        }
        return await self._request(
            "POST", "/commentThreads", credential, params={"part": "snippet"}, json=body
        )

    async def insert_reply(
        self, parent_id: str, text: str, credential: str | None = None
    ) -> dict[str, Any]:
        body = {"snippet": {"parentId": parent_id, "textOriginal": text}}
        return await self._request(
            "POST", "/comments", credential, params={"part": "snippet"}, json=body
        )

    async def delete_comment(self, comment_id: str, credential: str | None = None) -> None:
        await self._request("DELETE", "/comments", credential, params={"id": comment_id})
