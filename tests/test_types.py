"""Tests for the core value types."""

from __future__ import annotations

import pytest

from skinclassify.core.types import (
    IDLE,
    ClassificationResult,
    Failed,
    FailureKind,
    InFlight,
    PickedImage,
    Succeeded,
    SubmissionStatus,
    infer_extension,
)


class TestInferExtension:
    @pytest.mark.parametrize(
        ("locator", "expected"),
        [
            ("file:///data/user/0/cache/ImagePicker/abc.jpeg", "jpeg"),
            ("file:///tmp/photo.PNG", "png"),
            ("/home/user/pictures/rash.webp", "webp"),
            ("https://cdn.example.com/img/mole.jpg?token=a.b", "jpg"),
            ("C:\\Users\\me\\Pictures\\rash.PNG", "png"),
            ("/tmp/what?.png", "png"),
            ("/tmp/notes#1.webp", "webp"),
        ],
    )
    def test_extension_after_final_dot(self, locator: str, expected: str) -> None:
        assert infer_extension(locator, "jpg") == expected

    def test_no_extension_falls_back(self) -> None:
        assert infer_extension("file:///tmp/abc", "jpg") == "jpg"

    def test_trailing_dot_falls_back(self) -> None:
        assert infer_extension("file:///tmp/abc.", "png") == "png"

    def test_dot_in_directory_is_ignored(self) -> None:
        assert infer_extension("file:///tmp/cache.d/abc", "jpg") == "jpg"

    @pytest.mark.parametrize(
        "locator",
        [
            "C:\\Users\\me.v2\\photo",
            "file:///tmp/a.j peg",
            "file:///tmp/a.jp+g",
        ],
    )
    def test_non_token_extension_falls_back(self, locator: str) -> None:
        assert infer_extension(locator, "jpg") == "jpg"
        assert PickedImage.from_locator(locator).mime_type == "image/jpg"


class TestPickedImage:
    def test_derived_mime_type_and_filename(self) -> None:
        image = PickedImage.from_locator("file:///tmp/photo.png")
        assert image.inferred_media_extension == "png"
        assert image.mime_type == "image/png"
        assert image.upload_filename == "photo.png"

    def test_locator_without_extension_gets_default(self) -> None:
        image = PickedImage.from_locator("file:///tmp/abc", default_extension="jpg")
        assert image.mime_type == "image/jpg"

    def test_empty_extension_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            PickedImage(uri="file:///tmp/abc", inferred_media_extension="")

    def test_is_immutable(self) -> None:
        image = PickedImage.from_locator("file:///tmp/a.jpg")
        with pytest.raises(AttributeError):
            image.uri = "file:///tmp/b.jpg"  # type: ignore[misc]

    def test_same_locator_is_a_distinct_selection(self) -> None:
        first = PickedImage.from_locator("file:///tmp/a.jpg")
        second = PickedImage.from_locator("file:///tmp/a.jpg")
        assert first != second
        assert first == first


class TestClassificationResult:
    def test_label_may_be_absent(self) -> None:
        result = ClassificationResult(label=None, confidence=0.5)
        assert result.label is None

    @pytest.mark.parametrize("confidence", [-0.01, 1.01, float("nan")])
    def test_confidence_out_of_range_rejected(self, confidence: float) -> None:
        with pytest.raises(ValueError, match="confidence"):
            ClassificationResult(label="eczema", confidence=confidence)


class TestSubmissionStates:
    def test_each_variant_reports_its_status(self) -> None:
        image = PickedImage.from_locator("file:///tmp/a.jpg")
        assert IDLE.status == SubmissionStatus.IDLE
        assert InFlight(image).status == SubmissionStatus.IN_FLIGHT
        assert Succeeded(ClassificationResult("eczema", 0.9)).status == SubmissionStatus.SUCCEEDED
        assert Failed("boom", FailureKind.TRANSPORT).status == SubmissionStatus.FAILED
