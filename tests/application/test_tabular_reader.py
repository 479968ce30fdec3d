"""Tests for CSV reading."""

import pytest

from application.services.tabular_reader import ParseError, decode_content, read_rows


@pytest.mark.unit
class TestReadRows:
    """Test CSV tokenizing and shape checks."""

    def test_reads_header_and_rows(self) -> None:
        rows = read_rows(b"Term,Definition\nCat,A feline\n")

        assert rows == [["Term", "Definition"], ["Cat", "A feline"]]

    def test_quoted_commas(self) -> None:
        rows = read_rows('Term,Definition,Tags\nCat,"A feline, small",\"pet,animal\"\n')

        assert rows[1] == ["Cat", "A feline, small", "pet,animal"]

    def test_blank_lines_are_skipped(self) -> None:
        rows = read_rows("Term,Definition\n\nCat,A feline\n,\n\nDog,Canine\n")

        assert rows == [["Term", "Definition"], ["Cat", "A feline"], ["Dog", "Canine"]]

    def test_utf8_bom_is_stripped(self) -> None:
        rows = read_rows("Term,Definition\nCafé,Coffee house\n".encode("utf-8-sig"))

        assert rows[0][0] == "Term"
        assert rows[1][0] == "Café"

    def test_header_only_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            read_rows("Term,Definition\n")

    def test_empty_input_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            read_rows(b"")

    def test_malformed_quotes_are_rejected(self) -> None:
        with pytest.raises(ParseError):
            read_rows('Term,Definition\nCat,"A feline" oops\n')

    def test_undecodable_bytes_are_rejected(self) -> None:
        with pytest.raises(ParseError):
            decode_content(b"\xff\xfe\xfa", "utf-8")
