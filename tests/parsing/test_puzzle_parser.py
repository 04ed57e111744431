import pytest

from amida.core.exceptions import ParseError
from amida.core.rung import Rung
from amida.parsing.puzzle_parser import Puzzle, parse_puzzle, parse_puzzle_file


class TestParsePuzzle:
    def test_parse_sample(self, sample_text, sample_rungs):
        puzzle = parse_puzzle(sample_text)

        assert isinstance(puzzle, Puzzle)
        assert puzzle.lane_count == 4
        assert puzzle.height == 6
        assert [r.key for r in puzzle.rungs] == [tuple(t) for t in sample_rungs]
        assert [r.id for r in puzzle.rungs] == [1, 2, 3, 4, 5, 6, 7]

    def test_trailing_newline_is_optional(self):
        with_newline = parse_puzzle("3 5 1\n2 1 2\n")
        without_newline = parse_puzzle("3 5 1\n2 1 2")
        assert with_newline == without_newline

    def test_header_only(self):
        puzzle = parse_puzzle("2 3 0")
        assert puzzle.rungs == ()

    def test_endpoints_are_normalised(self):
        puzzle = parse_puzzle("4 4 1\n3 4 2\n")
        assert puzzle.rungs == (Rung(id=1, height=3, left=2, right=4),)

    def test_third_header_field_is_not_interpreted(self):
        puzzle = parse_puzzle("2 2 whatever\n1 1 2\n")
        assert puzzle.lane_count == 2

    def test_puzzle_is_immutable(self):
        puzzle = parse_puzzle("2 2 1")
        with pytest.raises(AttributeError):
            puzzle.height = 9


class TestParseErrors:
    def test_empty_input(self):
        with pytest.raises(ParseError, match="non-empty"):
            parse_puzzle("")

    @pytest.mark.parametrize("header", ["4 6", "4 6 7 8", "4  6 7", "\n"])
    def test_bad_header_field_count(self, header):
        with pytest.raises(ParseError) as exc_info:
            parse_puzzle(header)
        assert exc_info.value.line_number == 1

    def test_non_integer_header(self):
        with pytest.raises(ParseError, match="integer"):
            parse_puzzle("four 6 7\n")

    def test_bad_rung_field_count(self):
        with pytest.raises(ParseError) as exc_info:
            parse_puzzle("4 6 2\n1 1 2\n1 2\n")
        assert exc_info.value.line_number == 3
        assert exc_info.value.details["line"] == "1 2"

    def test_non_integer_rung_token(self):
        with pytest.raises(ParseError) as exc_info:
            parse_puzzle("4 6 1\n1 x 2\n")
        assert exc_info.value.line_number == 2
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_blank_line_in_the_middle(self):
        with pytest.raises(ParseError):
            parse_puzzle("4 6 2\n\n1 1 2\n")

    def test_only_one_trailing_blank_line_is_skipped(self):
        with pytest.raises(ParseError):
            parse_puzzle("4 6 1\n1 1 2\n\n")


def test_parse_puzzle_file(tmp_path, sample_text):
    path = tmp_path / "sample.txt"
    path.write_text(sample_text, encoding="utf-8")

    puzzle = parse_puzzle_file(path)
    assert puzzle == parse_puzzle(sample_text)
    assert parse_puzzle_file(str(path)) == puzzle
