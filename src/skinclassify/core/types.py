"""Value types for the image selection and submission lifecycle."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar
from urllib.parse import urlparse


_SEPARATOR_RE = re.compile(r"[\\/]")
_EXTENSION_RE = re.compile(r"[a-z0-9]+")


class PermissionStatus(StrEnum):
    GRANTED = "granted"
    DENIED = "denied"


class SubmissionStatus(StrEnum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureKind(StrEnum):
    TRANSPORT = "transport"
    SERVICE_ERROR = "service_error"
    MALFORMED_RESPONSE = "malformed_response"


def infer_extension(locator: str, default: str) -> str:
    """Return the media extension of a locator, or ``default`` if it has none.

    Only the final path segment is inspected, so dots in directory names or
    query strings never leak into the extension. An extension that is not a plain
    alphanumeric token also falls back.
    """
    parsed = urlparse(locator)
    # A one-letter scheme is a Windows drive, not a URI.
    path = parsed.path if len(parsed.scheme) > 1 else locator
    name = _SEPARATOR_RE.split(path)[-1]
    _, dot, extension = name.rpartition(".")
    extension = extension.lower()
    if not dot or not _EXTENSION_RE.fullmatch(extension):
        return default.lower()
    return extension


@dataclass(frozen=True, eq=False)
class PickedImage:
    """A user-selected photo, normalized for upload.

    Equality is identity: picking the same file twice yields two distinct
    selections, which is what stale-response detection relies on.
    """

    uri: str
    inferred_media_extension: str

    def __post_init__(self) -> None:
        if not self.inferred_media_extension:
            raise ValueError("inferred_media_extension must be non-empty")

    @classmethod
    def from_locator(cls, locator: str, default_extension: str = "jpg") -> PickedImage:
        return cls(uri=locator, inferred_media_extension=infer_extension(locator, default_extension))

    @property
    def mime_type(self) -> str:
        return f"image/{self.inferred_media_extension}"

    @property
    def upload_filename(self) -> str:
        return f"photo.{self.inferred_media_extension}"


@dataclass(frozen=True)
class ClassificationResult:
    """A decoded diagnosis. ``label`` is None when the service omitted it."""

    label: str | None
    confidence: float

    def __post_init__(self) -> None:
        if math.isnan(self.confidence) or not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence!r}")


@dataclass(frozen=True)
class NoSelection:
    """Returned when the user dismisses the picker without choosing."""


NO_SELECTION = NoSelection()


# ---------------------------------------------------------------------------
# Submission state variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Idle:
    status: ClassVar[SubmissionStatus] = SubmissionStatus.IDLE


@dataclass(frozen=True)
class InFlight:
    status: ClassVar[SubmissionStatus] = SubmissionStatus.IN_FLIGHT

    image: PickedImage


@dataclass(frozen=True)
class Succeeded:
    status: ClassVar[SubmissionStatus] = SubmissionStatus.SUCCEEDED

    result: ClassificationResult


@dataclass(frozen=True)
class Failed:
    status: ClassVar[SubmissionStatus] = SubmissionStatus.FAILED

    message: str
    kind: FailureKind


SubmissionState = Idle | InFlight | Succeeded | Failed

IDLE = Idle()
