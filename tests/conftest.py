"""Shared fakes and fixtures for the SkinClassify tests."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from skinclassify.config import Settings
from skinclassify.core.types import PermissionStatus
from skinclassify.session.collaborators import Canceled, Picked

if TYPE_CHECKING:
    from skinclassify.core.types import PickedImage
    from skinclassify.session.collaborators import PickerOptions, PickResult

ENDPOINT = "http://testserver/upload"


def make_settings(**overrides: object) -> Settings:
    defaults: dict[str, object] = {
        "endpoint_url": ENDPOINT,
        "request_timeout": 5.0,
        "default_extension": "jpg",
    }
    defaults.update(overrides)
    return Settings(**defaults)  # type: ignore[arg-type]


class FakePermissions:
    def __init__(self, status: PermissionStatus = PermissionStatus.GRANTED) -> None:
        self.status = status
        self.calls = 0

    async def request_gallery_access(self) -> PermissionStatus:
        self.calls += 1
        return self.status


class FakePicker:
    """Returns queued outcomes in order; a None entry means the user canceled."""

    def __init__(self, *locators: str | None) -> None:
        self._queue = list(locators)
        self.options: list[PickerOptions] = []

    def queue(self, locator: str | None) -> None:
        self._queue.append(locator)

    async def pick_image(self, options: PickerOptions) -> PickResult:
        self.options.append(options)
        locator = self._queue.pop(0)
        return Canceled() if locator is None else Picked(locator)


class FakeImageSource:
    def __init__(self, content: bytes = b"\xff\xd8fake-jpeg") -> None:
        self.content = content
        self.reads: list[PickedImage] = []
        self.on_read: Any = None

    async def read(self, image: PickedImage) -> bytes:
        self.reads.append(image)
        if self.on_read is not None:
            self.on_read(image)
        return self.content


class GatedService:
    """httpx MockTransport handler that holds each request until released."""

    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        self.started.set()
        await self.release.wait()
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def image_source() -> FakeImageSource:
    return FakeImageSource()
