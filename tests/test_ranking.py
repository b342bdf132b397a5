"""Tests for media range preference ordering."""

from fastapi_conneg.core.ranking import compare_descriptors, rank_descriptors
from fastapi_conneg.schemas.media_range import (
    NOT_ACCEPTABLE,
    AcceptableQuality,
    MediaRange,
    ScoredContentType,
)


def media_range(value: str, order: int, weight: float | None = 1.0) -> MediaRange:
    type_, subtype = value.split("/", 1)
    quality = NOT_ACCEPTABLE if weight is None else AcceptableQuality(weight=weight)
    return MediaRange(raw_range=value, type=type_, subtype=subtype, quality=quality, order=order)


class TestCompareDescriptors:
    """Pairwise ordering rules."""

    def test_higher_quality_first(self):
        assert compare_descriptors(media_range("*/*", 1, 0.9), media_range("text/html", 0, 0.5)) < 0

    def test_concrete_type_before_wildcard(self):
        assert compare_descriptors(media_range("*/*", 0), media_range("text/html", 1)) > 0
        assert compare_descriptors(media_range("text/html", 1), media_range("*/*", 0)) < 0

    def test_different_concrete_types_use_order(self):
        assert compare_descriptors(media_range("text/html", 0), media_range("image/png", 1)) < 0
        assert compare_descriptors(media_range("text/html", 2), media_range("image/png", 1)) > 0

    def test_concrete_subtype_before_wildcard(self):
        assert compare_descriptors(media_range("text/*", 0), media_range("text/html", 1)) > 0

    def test_different_concrete_subtypes_use_order(self):
        assert compare_descriptors(media_range("text/xml", 0), media_range("text/html", 1)) < 0

    def test_identical_ranges_use_order(self):
        assert compare_descriptors(media_range("text/html", 0), media_range("text/html", 1)) < 0

    def test_not_acceptable_sorts_below_unmatched(self):
        unmatched = ScoredContentType(raw_range="a/b", type="a", subtype="b", order=1)
        refused = ScoredContentType(
            raw_range="c/d", type="c", subtype="d", order=0, quality=NOT_ACCEPTABLE
        )
        assert compare_descriptors(unmatched, refused) < 0


class TestRankDescriptors:
    def test_rank(self):
        ranked = rank_descriptors(
            [
                media_range("*/*", 0, 0.8),
                media_range("image/png", 1, None),
                media_range("text/*", 2, 0.8),
                media_range("text/plain", 3, 0.8),
                media_range("application/json", 4, 0.9),
            ]
        )
        assert [m.raw_range for m in ranked] == [
            "application/json",
            "text/plain",
            "text/*",
            "*/*",
            "image/png",
        ]
