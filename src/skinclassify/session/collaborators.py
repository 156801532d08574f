"""Protocols for the external collaborators the core consumes.

Platform code (permission dialogs, gallery pickers, file access) implements
these; the core only awaits them.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol
from urllib.parse import unquote, urlparse

from skinclassify.core.errors import TransportError

if TYPE_CHECKING:
    from skinclassify.core.types import PermissionStatus, PickedImage


@dataclass(frozen=True)
class PickerOptions:
    """Picker configuration: one image, square crop, full quality."""

    single: bool = True
    square_crop: bool = True
    max_quality: bool = True


@dataclass(frozen=True)
class Picked:
    locator: str


@dataclass(frozen=True)
class Canceled:
    pass


PickResult = Picked | Canceled


class PermissionProvider(Protocol):
    """Protocol for the gallery permission dialog."""

    async def request_gallery_access(self) -> PermissionStatus:
        """Ask the platform for gallery access.

        Returns:
            GRANTED or DENIED. Queried fresh on every call, never cached.
        """
        ...


class ImagePicker(Protocol):
    """Protocol for the gallery/camera picker."""

    async def pick_image(self, options: PickerOptions) -> PickResult:
        """Let the user choose an image.

        Returns:
            Picked with the asset locator, or Canceled if the user backed out.
        """
        ...


class ImageSource(Protocol):
    """Protocol for reading the bytes behind a picked image."""

    async def read(self, image: PickedImage) -> bytes:
        """Return the raw image bytes.

        Raises:
            TransportError: If the bytes cannot be read.
        """
        ...


def locator_to_path(locator: str) -> Path:
    """Resolve a ``file://`` URI or a plain filesystem path."""
    parsed = urlparse(locator)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(locator)


class FileImageSource:
    """Reads local files off the event loop."""

    async def read(self, image: PickedImage) -> bytes:
        path = locator_to_path(image.uri)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise TransportError(f"cannot read {path}: {exc}") from exc
