import asyncio
import json

import httpx
import pytest

from vdash.core.errors import NotFound, RemoteRejected, RemoteUnavailable
from vdash.services.youtube_service import YouTubeClient

BASE = "https://youtube.test/v3"

VIDEO_ITEM = {
    "id": "v1",
    "snippet": {
        "title": "How to edit",
        "description": "A tutorial",
        "publishedAt": "2024-01-02T03:04:05Z",
        "thumbnails": {
            "high": {"url": "https://img.test/high.jpg"},
            "maxres": {"url": "https://img.test/maxres.jpg"},
        },
    },
    "statistics": {"viewCount": "1200", "likeCount": "34"},
    "contentDetails": {"duration": "PT4M13S"},
}


def make_client(handler, api_key=None):
    transport = httpx.MockTransport(handler)
    return YouTubeClient(
        client=httpx.AsyncClient(base_url=BASE, transport=transport), api_key=api_key
    )


def run(coro):
    return asyncio.run(coro)


def test_get_video_maps_fields_and_forwards_credential():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"items": [VIDEO_ITEM]})

    video = run(make_client(handler, api_key="k").get_video("v1", "tok"))

    assert video.title == "How to edit"
    assert video.thumbnail_url == "https://img.test/maxres.jpg"
    assert video.view_count == 1200
    assert video.like_count == 34
    assert video.comment_count == 0
    assert video.duration == "PT4M13S"

    (request,) = seen
    assert request.url.path == "/v3/videos"
    assert request.url.params["id"] == "v1"
    assert request.url.params["key"] == "k"
    assert request.headers["Authorization"] == "Bearer tok"


def test_anonymous_request_has_no_authorization_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"items": [VIDEO_ITEM]})

    run(make_client(handler).get_video("v1"))
    assert "Authorization" not in seen[0].headers
    assert "key" not in seen[0].url.params


def test_get_video_without_items_is_not_found():
    client = make_client(lambda request: httpx.Response(200, json={"items": []}))
    with pytest.raises(NotFound):
        run(client.get_video("missing"))


def test_client_error_is_rejected_with_platform_message():
    body = {"error": {"code": 404, "message": "The comment could not be found."}}
    client = make_client(lambda request: httpx.Response(404, json=body))
    with pytest.raises(RemoteRejected) as exc_info:
        run(client.delete_comment("c1"))
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "The comment could not be found."


def test_server_error_is_unavailable():
    client = make_client(lambda request: httpx.Response(503, text="backend error"))
    with pytest.raises(RemoteUnavailable):
        run(client.list_comment_threads("v1"))


def test_transport_error_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteUnavailable):
        run(make_client(handler).get_video("v1"))


def test_delete_comment_accepts_empty_response():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(204)

    assert run(make_client(handler).delete_comment("c1", "tok")) is None
    assert seen[0].method == "DELETE"
    assert seen[0].url.params["id"] == "c1"


def test_write_bodies():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "x"})

    client = make_client(handler)
    run(client.update_video("v1", "T", "D"))
    run(client.insert_comment_thread("v1", "hello"))
    run(client.insert_reply("c1", "thanks"))

    update, thread, reply = [json.loads(r.content) for r in seen]
    assert seen[0].method == "PUT"
    assert update["snippet"]["title"] == "T"
    assert update["snippet"]["categoryId"] == "22"
    assert thread["snippet"]["topLevelComment"]["snippet"]["textOriginal"] == "hello"
    assert reply["snippet"] == {"parentId": "c1", "textOriginal": "thanks"}


def test_comment_threads_request_first_page_only():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"items": [], "nextPageToken": "p2"})

    page = run(make_client(handler).list_comment_threads("v1"))
    assert page["items"] == []
    assert len(seen) == 1
    assert seen[0].url.params["maxResults"] == "100"
    assert seen[0].url.params["part"] == "snippet,replies"


def test_non_json_success_body_is_unavailable():
    client = make_client(
        lambda request: httpx.Response(200, text="<html>captive portal</html>")
    )
    with pytest.raises(RemoteUnavailable):
        run(client.get_video("v1"))
