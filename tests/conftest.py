import asyncio
import itertools
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

import vdash.models  # noqa: F401,E402
from vdash.api.deps import get_platform, get_suggester  # noqa: E402
from vdash.api.main import app  # noqa: E402
from vdash.core.db import Base, get_sessionmaker  # noqa: E402
from vdash.core.errors import NotFound, RemoteRejected  # noqa: E402
from vdash.schemas import Video  # noqa: E402

OWNER_CHANNEL = "UC_owner"


def raw_comment(comment_id, text, author="Viewer", channel="UC_viewer", likes=0):
    return {
        "id": comment_id,
        "snippet": {
            "textDisplay": text,
            "textOriginal": text,
            "authorDisplayName": author,
            "authorChannelId": {"value": channel},
            "publishedAt": "2024-05-01T10:00:00Z",
            "likeCount": likes,
        },
    }


def raw_thread(thread_id, text, video_id="v1", replies=None, **kwargs):
    thread = {
        "id": thread_id,
        "snippet": {
            "videoId": video_id,
            "channelId": OWNER_CHANNEL,
            "topLevelComment": raw_comment(thread_id, text, **kwargs),
        },
    }
    if replies is not None:
        thread["replies"] = {"comments": replies}
    return thread


class FakePlatform:
    """In-memory stand-in for the YouTube client."""

    def __init__(self):
        self.videos = {
            "v1": Video(id="v1", title="My first video", description="intro", view_count=10)
        }
        self.threads = []
        self.calls = []
        self.credentials = []
        self.fail_with = None
        self._ids = itertools.count(1)

    def _call(self, name, credential):
        self.calls.append(name)
        self.credentials.append(credential)
        if self.fail_with is not None:
            raise self.fail_with

    def _find(self, comment_id):
        for thread in self.threads:
            if thread["id"] == comment_id:
                return thread, None
            for reply in thread.get("replies", {}).get("comments", []):
                if reply["id"] == comment_id:
                    return thread, reply
        raise RemoteRejected("The comment could not be found.", 404)

    async def get_video(self, video_id, credential=None):
        self._call("get_video", credential)
        if video_id not in self.videos:
            raise NotFound("Video not found")
        return self.videos[video_id]

    async def update_video(self, video_id, title, description, credential=None):
        self._call("update_video", credential)
        return {"id": video_id, "snippet": {"title": title, "description": description}}

    async def list_comment_threads(self, video_id, credential=None):
        self._call("list_comment_threads", credential)
        return {
            "items": [t for t in self.threads if t["snippet"]["videoId"] == video_id]
        }

    async def insert_comment_thread(self, video_id, text, credential=None):
        self._call("insert_comment_thread", credential)
        thread = raw_thread(
            f"c{next(self._ids)}", text, video_id, author="Owner", channel=OWNER_CHANNEL
        )
        self.threads.append(thread)
        return thread

    async def insert_reply(self, parent_id, text, credential=None):
        self._call("insert_reply", credential)
        thread, _ = self._find(parent_id)
        reply = raw_comment(
            f"{parent_id}.r{next(self._ids)}", text, author="Owner", channel=OWNER_CHANNEL
        )
        thread.setdefault("replies", {"comments": []})["comments"].append(reply)
        return reply

    async def delete_comment(self, comment_id, credential=None):
        self._call("delete_comment", credential)
        thread, reply = self._find(comment_id)
        if reply is None:
            self.threads.remove(thread)
        else:
            thread["replies"]["comments"].remove(reply)


class FakeSuggester:
    def __init__(self, raw="Title one\n\n  Title two  \nTitle three\nTitle four\n"):
        self.raw = raw
        self.calls = []
        self.fail_with = None

    async def complete(self, title, description=""):
        self.calls.append((title, description))
        if self.fail_with is not None:
            raise self.fail_with
        return self.raw


@pytest.fixture()
def sessionmaker(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'vdash-test.db'}", future=True, poolclass=NullPool
    )

    async def create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create())
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def platform():
    return FakePlatform()


@pytest.fixture()
def suggester():
    return FakeSuggester()


@pytest.fixture()
def client(sessionmaker, platform, suggester):
    app.dependency_overrides[get_sessionmaker] = lambda: sessionmaker
    app.dependency_overrides[get_platform] = lambda: platform
    app.dependency_overrides[get_suggester] = lambda: suggester
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def empty_sessionmaker(tmp_path):
    """Sessions against a database where no tables were ever created."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'vdash-empty.db'}", future=True, poolclass=NullPool
    )
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
