from __future__ import annotations

import pytest

from pdf_slicer.ranges import format_page_indices, parse_page_indices, parse_range_spec


def test_mixed_ranges_and_pages() -> None:
    assert parse_page_indices("1-3,5,10-12", 12) == {0, 1, 2, 4, 9, 10, 11}


def test_reversed_endpoints_are_normalised() -> None:
    assert parse_page_indices("5-2", 10) == {1, 2, 3, 4}


def test_out_of_range_page_is_dropped() -> None:
    result = parse_range_spec("1,99", 10)
    assert result.indices == frozenset({0})
    assert result.dropped == ("99",)


def test_range_is_clamped_to_document() -> None:
    assert parse_page_indices("0-3", 5) == {0, 1, 2}
    assert parse_page_indices("4-40", 5) == {3, 4}


def test_range_entirely_outside_document_selects_nothing() -> None:
    result = parse_range_spec("20-30", 10)
    assert result.indices == frozenset()
    assert result.dropped == ("20-30",)


def test_whitespace_is_ignored() -> None:
    assert parse_page_indices(" 1 - 2 , 4 ", 5) == {0, 1, 3}


@pytest.mark.parametrize("spec", ["abc", "1-x", "-", ",,", "", "1.5"])
def test_malformed_tokens_never_raise(spec: str) -> None:
    assert parse_page_indices(spec, 5) == set()


def test_malformed_tokens_are_reported_without_affecting_valid_ones() -> None:
    result = parse_range_spec("x,2,3-y,4", 5)
    assert result.indices == frozenset({1, 3})
    assert result.dropped == ("x", "3-y")
    assert result.dropped_count == 2


def test_leading_separator_reads_as_single_page() -> None:
    assert parse_page_indices("-3", 5) == {2}


def test_zero_page_document_selects_nothing() -> None:
    assert parse_page_indices("1-3,1", 0) == set()


def test_format_page_indices_compacts_runs() -> None:
    assert format_page_indices({0, 1, 2, 4, 9, 10, 11}) == "1-3,5,10-12"
    assert format_page_indices(set()) == ""
    assert format_page_indices([3]) == "4"
