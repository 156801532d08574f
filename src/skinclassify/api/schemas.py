"""Pydantic models for classification service responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skinclassify.core.errors import MalformedResponse, ServiceReportedError
from skinclassify.core.types import ClassificationResult


class ServiceErrorPayload(BaseModel):
    """Response body in which the service reports its own failure."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    error: str = Field(min_length=1)


class ClassificationPayload(BaseModel):
    """Successful classification response body."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    label: str | None = Field(default=None, alias="class", description="Predicted condition, may be omitted")
    confidence: float = Field(ge=0.0, le=1.0, strict=True, allow_inf_nan=False, description="Confidence (0.0-1.0)")


def decode_response(body: Any) -> ClassificationResult:
    """Decode a parsed JSON body into a result.

    Raises:
        ServiceReportedError: If the body carries a non-blank ``error`` field.
        MalformedResponse: If the body is not an object or the confidence is
            missing, non-numeric, or outside [0, 1].
    """
    if not isinstance(body, dict):
        raise MalformedResponse(f"expected a JSON object, got {type(body).__name__}")

    error = body.get("error")
    if isinstance(error, str):
        error = error.strip()
    if error:
        try:
            failure = ServiceErrorPayload.model_validate(body)
        except ValidationError as exc:
            raise MalformedResponse(f"unreadable error field: {exc}") from exc
        raise ServiceReportedError(failure.error)

    try:
        payload = ClassificationPayload.model_validate(body)
    except ValidationError as exc:
        raise MalformedResponse(str(exc)) from exc

    return ClassificationResult(label=payload.label or None, confidence=payload.confidence)
