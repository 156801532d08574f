"""Submission Controller: single-flight classification requests.

State machine:
    Idle -> InFlight -> {Succeeded, Failed} -> Idle (on a new selection only)

A request is tagged with the PickedImage it was issued for. If the selection
changed by the time it completes, the outcome is discarded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skinclassify.core.errors import (
    GENERIC_UPLOAD_FAILURE,
    ClassificationFailure,
    NoImageSelected,
    SubmissionInProgress,
)
from skinclassify.core.types import Failed, FailureKind, InFlight, Succeeded

if TYPE_CHECKING:
    from skinclassify.api.client import ClassificationClient
    from skinclassify.core.types import PickedImage, SubmissionState
    from skinclassify.session.collaborators import ImageSource
    from skinclassify.session.state import ClassificationSession

logger = logging.getLogger(__name__)


def _log_failure(image: PickedImage, exc: ClassificationFailure) -> None:
    if exc.kind == FailureKind.SERVICE_ERROR:
        logger.info("Service reported an error for %s: %s", image.uri, exc.user_message)
    elif exc.kind == FailureKind.TRANSPORT:
        logger.warning("Upload of %s failed: %s", image.uri, exc, exc_info=True)
    else:
        logger.warning("Malformed response for %s: %s", image.uri, exc)


class SubmissionController:
    """Runs one classification attempt at a time against the session's image."""

    def __init__(
        self,
        session: ClassificationSession,
        client: ClassificationClient,
        image_source: ImageSource,
    ) -> None:
        self._session = session
        self._client = client
        self._image_source = image_source
        self._outstanding: PickedImage | None = None

    @property
    def in_flight(self) -> bool:
        """True while a request is outstanding, even if its image was replaced."""
        return self._outstanding is not None

    async def submit(self) -> SubmissionState:
        """Classify the currently selected image.

        Returns:
            The session's submission state after the attempt. A stale result
            leaves it as the newer selection set it.

        Raises:
            NoImageSelected: If nothing has been picked. No request is issued.
            SubmissionInProgress: If a request is already outstanding.
        """
        image = self._session.picked_image
        if image is None:
            raise NoImageSelected
        if self._outstanding is not None:
            logger.warning("Rejected submit for %s: a request is already in flight", image.uri)
            raise SubmissionInProgress

        self._outstanding = image
        self._session._transition(InFlight(image))
        logger.info("Submitting %s as %s", image.uri, image.mime_type)

        outcome: SubmissionState | None = None
        try:
            content = await self._image_source.read(image)
            result = await self._client.classify(image, content)
            outcome = Succeeded(result)
        except ClassificationFailure as exc:
            _log_failure(image, exc)
            outcome = Failed(exc.user_message, exc.kind)
        finally:
            self._outstanding = None
            if outcome is None:
                # Unexpected error: leave InFlight before it propagates.
                outcome = Failed(GENERIC_UPLOAD_FAILURE, FailureKind.TRANSPORT)
            self._finish(image, outcome)

        return self._session.submission_state

    def _finish(self, image: PickedImage, outcome: SubmissionState) -> None:
        if self._session.picked_image is not image:
            logger.info("Discarding stale %s result for %s", outcome.status, image.uri)
            return
        self._session._transition(outcome)
