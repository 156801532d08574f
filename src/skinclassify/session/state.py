"""Single-session state and its change notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from skinclassify.core.types import IDLE, Failed, Succeeded

if TYPE_CHECKING:
    from collections.abc import Callable

    from skinclassify.core.types import ClassificationResult, PickedImage, SubmissionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the render layer needs, frozen at one point in time."""

    picked_image_uri: str | None
    submission_state: SubmissionState
    last_result: ClassificationResult | None
    last_error_message: str | None


class ClassificationSession:
    """Owns the picked image and the submission state.

    Only SelectionManager and SubmissionController mutate it, through
    ``_apply_selection`` and ``_transition``. Observers are notified after
    every mutation.
    """

    def __init__(self) -> None:
        self._picked_image: PickedImage | None = None
        self._state: SubmissionState = IDLE
        self._observers: list[Callable[[SessionSnapshot], None]] = []

    # -- Read access --------------------------------------------------------

    @property
    def picked_image(self) -> PickedImage | None:
        return self._picked_image

    @property
    def submission_state(self) -> SubmissionState:
        return self._state

    @property
    def last_result(self) -> ClassificationResult | None:
        if isinstance(self._state, Succeeded):
            return self._state.result
        return None

    @property
    def last_error_message(self) -> str | None:
        if isinstance(self._state, Failed):
            return self._state.message
        return None

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            picked_image_uri=self._picked_image.uri if self._picked_image is not None else None,
            submission_state=self._state,
            last_result=self.last_result,
            last_error_message=self.last_error_message,
        )

    # -- Observers ----------------------------------------------------------

    def subscribe(self, callback: Callable[[SessionSnapshot], None]) -> Callable[[], None]:
        """Register an observer and return a function that removes it."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for callback in list(self._observers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Session observer %r failed", callback)

    # -- Mutation (component use only) --------------------------------------

    def _apply_selection(self, image: PickedImage) -> None:
        """Replace the picked image and drop any previous outcome."""
        self._picked_image = image
        self._state = IDLE
        logger.debug("Selection replaced: %s (state reset to idle)", image.uri)
        self._notify()

    def _transition(self, state: SubmissionState) -> None:
        logger.debug("Submission state %s -> %s", self._state.status, state.status)
        self._state = state
        self._notify()
