"""Application wiring: settings, logging, HTTP client, session, components."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skinclassify.api.client import ClassificationClient
from skinclassify.config import get_settings
from skinclassify.session.collaborators import FileImageSource
from skinclassify.session.selection import SelectionManager
from skinclassify.session.state import ClassificationSession
from skinclassify.session.submission import SubmissionController

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    import httpx

    from skinclassify.config import Settings
    from skinclassify.core.types import NoSelection, PickedImage, SubmissionState
    from skinclassify.session.collaborators import ImagePicker, ImageSource, PermissionProvider
    from skinclassify.session.state import SessionSnapshot

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


class ClassifierApp:
    """One user session: pick an image, submit it, observe the outcome."""

    def __init__(
        self,
        permissions: PermissionProvider,
        picker: ImagePicker,
        settings: Settings | None = None,
        image_source: ImageSource | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = ClassificationSession()
        self.client = ClassificationClient(self.settings, http_client)
        self.selection = SelectionManager(
            self.session,
            permissions,
            picker,
            default_extension=self.settings.default_extension,
        )
        self.submission = SubmissionController(
            self.session,
            self.client,
            image_source or FileImageSource(),
        )
        logger.info("SkinClassify session ready (endpoint=%s)", self.client.endpoint_url)

    async def request_image(self) -> PickedImage | NoSelection:
        return await self.selection.request_image()

    async def submit(self) -> SubmissionState:
        return await self.submission.submit()

    def subscribe(self, callback: Callable[[SessionSnapshot], None]) -> Callable[[], None]:
        return self.session.subscribe(callback)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> ClassifierApp:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
