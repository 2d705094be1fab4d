"""
Tests for cell references and column letters.
"""

import pytest

from office2markdown.types import CellPosition, column_index, column_letters


class TestColumnLetters:

    @pytest.mark.parametrize('letters, index', [
        ('A', 1), ('Z', 26), ('AA', 27), ('AZ', 52), ('BA', 53),
        ('ZZ', 702), ('AAA', 703), ('XFD', 16384),
    ])
    def test_known_columns(self, letters, index):
        assert column_index(letters) == index
        assert column_letters(index) == letters

    def test_decode_encode_is_identity(self):
        for index in range(1, 20000):
            assert column_index(column_letters(index)) == index

    @pytest.mark.parametrize('letters', ['', 'a', 'A1', '1'])
    def test_invalid_letters(self, letters):
        with pytest.raises(ValueError):
            column_index(letters)

    def test_non_positive_index(self):
        with pytest.raises(ValueError):
            column_letters(0)


class TestCellPosition:

    def test_from_reference(self):
        assert CellPosition.from_reference('AA12') == CellPosition(row=12, col=27)

    def test_reference_round_trip(self):
        assert CellPosition.from_reference('XFD1048576').reference == 'XFD1048576'

    @pytest.mark.parametrize('reference', ['', None, 'A', '12', 'a1', 'A0', 'A1:B2', '$A$1'])
    def test_malformed_reference(self, reference):
        assert CellPosition.from_reference(reference) is None
