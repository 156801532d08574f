"""Render directives derived from a session snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from skinclassify.core.types import Failed, InFlight, Succeeded

if TYPE_CHECKING:
    from skinclassify.session.state import SessionSnapshot

UNKNOWN_LABEL = "unknown"


def format_confidence(confidence: float) -> str:
    """Format a [0, 1] confidence as a percentage with two decimals."""
    return f"{confidence * 100:.2f}%"


def display_label(label: str | None) -> str:
    return label or UNKNOWN_LABEL


@dataclass(frozen=True)
class RenderView:
    """What to draw. Presentation itself belongs to the UI layer."""

    show_image_uri: str | None = None
    show_spinner: bool = False
    result_lines: tuple[str, ...] = field(default_factory=tuple)
    error_message: str | None = None


def build_view(snapshot: SessionSnapshot) -> RenderView:
    state = snapshot.submission_state
    result_lines: tuple[str, ...] = ()
    if isinstance(state, Succeeded):
        result_lines = (
            f"Condition: {display_label(state.result.label)}",
            f"Confidence: {format_confidence(state.result.confidence)}",
        )
    return RenderView(
        show_image_uri=snapshot.picked_image_uri,
        show_spinner=isinstance(state, InFlight),
        result_lines=result_lines,
        error_message=state.message if isinstance(state, Failed) else None,
    )
