"""Tests for header classification."""

import pytest

from application.services.header_classifier import classify_header, classify_headers, normalize_header
from domain.enums import ColumnRole


@pytest.mark.unit
class TestClassifyHeader:
    """Test single header classification."""

    @pytest.mark.parametrize("header", ["Term", "CONCEPT", "word", "Name", " term "])
    def test_term_headers(self, header: str) -> None:
        assert classify_header(header) == ColumnRole.TERM

    @pytest.mark.parametrize("header", ["Note", "Description", "SUMMARY", "notes"])
    def test_note_headers_match_exactly(self, header: str) -> None:
        assert classify_header(header) == ColumnRole.NOTE

    def test_note_requires_exact_match(self) -> None:
        assert classify_header("Footnote text") == ColumnRole.UNMAPPED

    @pytest.mark.parametrize("header", ["Definition", "Def1", "Def 2", "Meaning (EN)", "Explanation", "deff"])
    def test_definition_headers_match_by_substring(self, header: str) -> None:
        assert classify_header(header) == ColumnRole.DEFINITION

    @pytest.mark.parametrize("header", ["Tags", "Tag1", "Keywords", "Categories", "tabs"])
    def test_tag_headers_match_by_substring(self, header: str) -> None:
        assert classify_header(header) == ColumnRole.TAGS

    def test_definition_wins_over_tags(self) -> None:
        assert classify_header("definition tags") == ColumnRole.DEFINITION

    @pytest.mark.parametrize("header", ["Author", "", None, 42])
    def test_unmapped_headers(self, header: object) -> None:
        assert classify_header(header) == ColumnRole.UNMAPPED

    def test_term_indicator_after_term_found_falls_through(self) -> None:
        assert classify_header("Name", term_found=True) == ColumnRole.UNMAPPED

    @pytest.mark.parametrize(
        ("header", "role"),
        [(" Term ", ColumnRole.TERM), ("\tNote\n", ColumnRole.NOTE), ("  Notes", ColumnRole.NOTE), ("Name  ", ColumnRole.TERM)],
    )
    def test_padded_exact_match_headers_are_trimmed(self, header: str, role: ColumnRole) -> None:
        assert classify_header(header) == role

    def test_normalize_header(self) -> None:
        assert normalize_header("  Term ") == "term"
        assert normalize_header(None) == ""
        assert normalize_header(7) == "7"


@pytest.mark.unit
class TestClassifyHeaders:
    """Test classification of a full header row."""

    def test_typical_sheet(self) -> None:
        roles = classify_headers(["Term", "Definition", "Tags"])

        assert roles == [ColumnRole.TERM, ColumnRole.DEFINITION, ColumnRole.TAGS]

    def test_multiple_definition_and_tag_columns(self) -> None:
        roles = classify_headers(["Name", "Def1", "Def2", "Tag1", "Note"])

        assert roles == [ColumnRole.TERM, ColumnRole.DEFINITION, ColumnRole.DEFINITION, ColumnRole.TAGS, ColumnRole.NOTE]

    def test_only_first_term_column_is_term(self) -> None:
        roles = classify_headers(["Word", "Term", "Definition"])

        assert roles == [ColumnRole.TERM, ColumnRole.UNMAPPED, ColumnRole.DEFINITION]

    def test_output_is_aligned_with_input(self) -> None:
        headers = ["x", "Term", "y", "Definition", "z"]

        assert len(classify_headers(headers)) == len(headers)

    def test_no_term_column(self) -> None:
        roles = classify_headers(["Definition", "Tags"])

        assert ColumnRole.TERM not in roles
