"""Selection Manager: permission check, picker invocation, selection reset."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skinclassify.core.errors import PermissionDenied
from skinclassify.core.types import NO_SELECTION, NoSelection, PermissionStatus, PickedImage
from skinclassify.session.collaborators import Canceled, PickerOptions

if TYPE_CHECKING:
    from skinclassify.session.collaborators import ImagePicker, PermissionProvider
    from skinclassify.session.state import ClassificationSession

logger = logging.getLogger(__name__)

PICKER_OPTIONS = PickerOptions(single=True, square_crop=True, max_quality=True)


class SelectionManager:
    """Obtains a new image from the user and installs it in the session."""

    def __init__(
        self,
        session: ClassificationSession,
        permissions: PermissionProvider,
        picker: ImagePicker,
        default_extension: str = "jpg",
    ) -> None:
        self._session = session
        self._permissions = permissions
        self._picker = picker
        self._default_extension = default_extension

    async def request_image(self) -> PickedImage | NoSelection:
        """Ask for gallery access, run the picker, and adopt the chosen image.

        Returns:
            The new PickedImage, or NO_SELECTION if the user canceled. A
            cancel leaves the session untouched.

        Raises:
            PermissionDenied: If gallery access was refused. The picker is not
                invoked and the session is untouched.
        """
        status = await self._permissions.request_gallery_access()
        if status != PermissionStatus.GRANTED:
            logger.info("Gallery access denied (%s)", status)
            raise PermissionDenied

        outcome = await self._picker.pick_image(PICKER_OPTIONS)
        if isinstance(outcome, Canceled):
            logger.info("Image picker canceled")
            return NO_SELECTION

        image = PickedImage.from_locator(outcome.locator, self._default_extension)
        logger.info("Selected image %s (%s)", image.uri, image.mime_type)
        self._session._apply_selection(image)
        return image
