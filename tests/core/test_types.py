"""Tests for Square and coordinate helpers."""

import pytest

from rookie.core.types import A1, E4, H8, SQUARES, Square, make_square, parse_square


class TestSquare:
    def test_index_layout(self) -> None:
        assert A1.index == 0
        assert H8.index == 63
        assert E4.index == 28

    def test_name_round_trip(self) -> None:
        for sq in SQUARES:
            assert parse_square(sq.name) is sq

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            Square(8, 0)
        with pytest.raises(ValueError):
            Square(0, -1)
        with pytest.raises(ValueError):
            make_square(3, 8)

    def test_offset_stays_on_board(self) -> None:
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None
        assert E4.offset(1, 1) == parse_square("f5")

    def test_from_index(self) -> None:
        assert Square.from_index(28) is E4
        with pytest.raises(ValueError):
            Square.from_index(64)
        with pytest.raises(ValueError):
            Square.from_index(-1)

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)
