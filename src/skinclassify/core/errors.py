"""Exception taxonomy for selection and submission."""

from __future__ import annotations

from skinclassify.core.types import FailureKind

GENERIC_UPLOAD_FAILURE = "Image upload failed. Check the server status."
MALFORMED_RESPONSE_MESSAGE = "The classification service returned an unreadable result."


class SkinClassifyError(Exception):
    """Base class for all SkinClassify errors."""


class UserFacingError(SkinClassifyError):
    """Error whose message is safe to display as-is."""


class PermissionDenied(UserFacingError):
    def __init__(self, message: str = "Gallery access is required to select an image.") -> None:
        super().__init__(message)


class NoImageSelected(UserFacingError):
    def __init__(self, message: str = "Select an image first.") -> None:
        super().__init__(message)


class SubmissionInProgress(UserFacingError):
    def __init__(self, message: str = "A classification request is already in progress.") -> None:
        super().__init__(message)


# ---------------------------------------------------------------------------
# Classification failures (always converted into the Failed state)
# ---------------------------------------------------------------------------


class ClassificationFailure(SkinClassifyError):
    """A submission attempt that ended without a usable result."""

    kind: FailureKind

    def __init__(self, user_message: str, detail: str | None = None) -> None:
        super().__init__(detail or user_message)
        self.user_message = user_message


class TransportError(ClassificationFailure):
    """Connection error, timeout, non-2xx status, or unreadable image bytes."""

    kind = FailureKind.TRANSPORT

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(GENERIC_UPLOAD_FAILURE, detail)


class ServiceReportedError(ClassificationFailure):
    """The service answered with an explicit ``error`` field."""

    kind = FailureKind.SERVICE_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MalformedResponse(ClassificationFailure):
    """The response body lacks a valid numeric confidence or is not an object."""

    kind = FailureKind.MALFORMED_RESPONSE

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(MALFORMED_RESPONSE_MESSAGE, detail)
