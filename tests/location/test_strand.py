import pytest

from inscripta.codonmap.exc import InvalidStrandException
from inscripta.codonmap.location.strand import Strand


class TestStrand:
    @pytest.mark.parametrize(
        "strand,string",
        [
            (Strand.PLUS, "+"),
            (Strand.MINUS, "-"),
            (Strand.UNSTRANDED, "."),
        ],
    )
    def test_str(self, strand, string):
        assert str(strand) == string

    @pytest.mark.parametrize(
        "symbol,expected",
        [("+", Strand.PLUS), ("-", Strand.MINUS), (".", Strand.UNSTRANDED), ("?", Strand.UNSTRANDED)],
    )
    def test_from_symbol_valid(self, symbol, expected):
        assert Strand.from_symbol(symbol) == expected

    def test_from_symbol_invalid(self):
        with pytest.raises(ValueError):
            Strand.from_symbol("x")

    def test_from_int(self):
        assert Strand.from_int(1) == Strand.PLUS
        assert Strand.from_int(-1) == Strand.MINUS
        assert Strand.from_int(0) == Strand.UNSTRANDED
        with pytest.raises(ValueError):
            Strand.from_int(2)

    def test_order(self):
        assert sorted([Strand.MINUS, Strand.UNSTRANDED, Strand.PLUS]) == [
            Strand.PLUS,
            Strand.MINUS,
            Strand.UNSTRANDED,
        ]

    def test_reverse(self):
        assert Strand.PLUS.reverse() == Strand.MINUS
        assert Strand.MINUS.reverse() == Strand.PLUS
        assert Strand.UNSTRANDED.reverse() == Strand.UNSTRANDED

    def test_assert_directional(self):
        Strand.PLUS.assert_directional()
        Strand.MINUS.assert_directional()
        with pytest.raises(InvalidStrandException):
            Strand.UNSTRANDED.assert_directional()

    @pytest.mark.parametrize("value,expected", [(1, Strand.PLUS), (-1, Strand.MINUS), (Strand.MINUS, Strand.MINUS)])
    def test_directional_from_value(self, value, expected):
        assert Strand.directional_from_value(value) == expected

    @pytest.mark.parametrize("value", [0, 2, -2, None, "+", Strand.UNSTRANDED])
    def test_directional_from_value_invalid(self, value):
        with pytest.raises(InvalidStrandException):
            Strand.directional_from_value(value)
