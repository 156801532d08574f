"""HTTP client for the remote classification service.

Architecture:
    SubmissionController -> ClassificationClient.classify -> httpx.AsyncClient POST (multipart)

One attempt per call. Every failure is raised as a ClassificationFailure subclass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from skinclassify.api.schemas import decode_response
from skinclassify.core.errors import MalformedResponse, TransportError

if TYPE_CHECKING:
    from skinclassify.config import Settings
    from skinclassify.core.types import ClassificationResult, PickedImage

logger = logging.getLogger(__name__)


class ClassificationClient:
    """Uploads a single image and decodes the service's verdict."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._endpoint_url = settings.endpoint_url
        self._field_name = settings.upload_field_name
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    async def classify(self, image: PickedImage, content: bytes) -> ClassificationResult:
        """POST the image bytes and return the decoded classification.

        Raises:
            TransportError: On connection failure, timeout, or a non-2xx status.
            ServiceReportedError: If the service reports an error in its payload.
            MalformedResponse: If the payload cannot be decoded.
        """
        files = {self._field_name: (image.upload_filename, content, image.mime_type)}
        try:
            response = await self._http.post(self._endpoint_url, files=files)
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {self._endpoint_url} failed: {exc!r}") from exc

        if not response.is_success:
            raise TransportError(f"server error: {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponse(f"response is not JSON: {exc}") from exc

        logger.debug("Service responded %s for %s", response.status_code, image.uri)
        return decode_response(body)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()
