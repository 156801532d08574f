"""Command line interface: classify one local photo."""

from __future__ import annotations

import argparse
import asyncio
from typing import TYPE_CHECKING

from skinclassify.config import get_settings
from skinclassify.core.errors import UserFacingError
from skinclassify.core.types import NoSelection, PermissionStatus, Succeeded
from skinclassify.main import ClassifierApp, configure_logging
from skinclassify.render import build_view
from skinclassify.session.collaborators import Picked

if TYPE_CHECKING:
    from skinclassify.session.collaborators import PickerOptions, PickResult
    from skinclassify.session.state import SessionSnapshot


class _GrantedPermissions:
    async def request_gallery_access(self) -> PermissionStatus:
        return PermissionStatus.GRANTED


class _FixedPicker:
    def __init__(self, locator: str) -> None:
        self._locator = locator

    async def pick_image(self, options: PickerOptions) -> PickResult:
        return Picked(self._locator)


def _print_view(snapshot: SessionSnapshot) -> None:
    view = build_view(snapshot)
    if view.show_spinner:
        print("Analyzing...")
    for line in view.result_lines:
        print(line)
    if view.error_message:
        print(f"Error: {view.error_message}")


async def _run(image: str, settings_overrides: dict[str, object]) -> int:
    settings = get_settings().model_copy(update=settings_overrides)
    configure_logging(settings.log_level)

    async with ClassifierApp(_GrantedPermissions(), _FixedPicker(image), settings=settings) as app:
        app.subscribe(_print_view)
        try:
            picked = await app.request_image()
            if isinstance(picked, NoSelection):
                return 1
            state = await app.submit()
        except UserFacingError as exc:
            print(f"Error: {exc}")
            return 1
    return 0 if isinstance(state, Succeeded) else 1


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Submit a photo to the skin classification service.")
    ap.add_argument("image", help="Path or file:// URI of the photo")
    ap.add_argument("--endpoint", default=None, help="Classification endpoint URL")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    ap.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    overrides: dict[str, object] = {}
    if args.endpoint is not None:
        overrides["endpoint_url"] = args.endpoint
    if args.timeout is not None:
        if args.timeout <= 0:
            ap.error("--timeout must be positive")
        overrides["request_timeout"] = args.timeout
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    return asyncio.run(_run(args.image, overrides))


if __name__ == "__main__":
    raise SystemExit(main())
