"""Unit tests for PhoneNumberFormatter and its offset mapping."""

from __future__ import annotations

import pytest

from country_code_picker.picker import PhoneNumberFormatter, TransformedText
from country_code_picker.picker.formatting import is_non_separator, strip_trailing_separators


class TestIsNonSeparator:
    @pytest.mark.parametrize("char", list("0123456789*#+N;,"))
    def test_dialable(self, char: str) -> None:
        assert is_non_separator(char)

    @pytest.mark.parametrize("char", list(" -()./a"))
    def test_separators(self, char: str) -> None:
        assert not is_non_separator(char)


class TestFormat:
    def test_region_is_upper_cased(self) -> None:
        assert PhoneNumberFormatter("ke").region == "KE"

    def test_international_kenyan_number(self) -> None:
        formatted = PhoneNumberFormatter("KE").format("+254712345678")
        assert formatted.startswith("+254 ")
        assert formatted.replace(" ", "") == "+254712345678"

    def test_input_separators_are_regrouped(self) -> None:
        plain = PhoneNumberFormatter("KE").format("+254712345678")
        noisy = PhoneNumberFormatter("KE").format("+254-71(23)45 678")
        assert noisy == plain

    def test_formatter_is_reusable(self) -> None:
        formatter = PhoneNumberFormatter("US")
        first = formatter.format("+16502530000")
        formatter.format("+447911123456")
        assert formatter.format("+16502530000") == first

    def test_partial_input(self) -> None:
        formatted = PhoneNumberFormatter("KE").format("+2547")
        assert "".join(ch for ch in formatted if ch.isdigit()) == "2547"

    def test_empty_input(self) -> None:
        assert PhoneNumberFormatter("KE").format("") == ""

    def test_unknown_region_still_formats_international_input(self) -> None:
        formatted = PhoneNumberFormatter("ZZ").format("+254712345678")
        assert "".join(ch for ch in formatted if ch.isdigit()) == "254712345678"


class TestStripTrailingSeparators:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("+254 ", "+254"), ("+254 712 - ", "+254 712"), ("+1 (650)", "+1 (650"), ("", ""), (" ", "")],
    )
    def test_strips(self, text: str, expected: str) -> None:
        assert strip_trailing_separators(text) == expected


class TestTransform:
    def test_empty_maps(self) -> None:
        result = PhoneNumberFormatter("KE").transform("")
        assert result == TransformedText("", (0,), (0,))

    def test_map_sizes_follow_input_and_output_lengths(self) -> None:
        text = "0712-345-678"
        result = PhoneNumberFormatter("KE").transform(text)
        assert len(result.original_to_transformed) == len(text) + 1
        assert len(result.transformed_to_original) == len(result.text) + 1

    def test_cursor_after_digit_stays_after_it(self) -> None:
        text = "+254712345678"
        result = PhoneNumberFormatter("KE").transform(text)
        for index, char in enumerate(text):
            assert result.text[result.to_transformed(index + 1) - 1] == char

    def test_separated_input_end_maps_to_input_end(self) -> None:
        text = "0712-345-678"
        result = PhoneNumberFormatter("KE").transform(text)
        assert result.to_original(len(result.text)) == len(text)
        assert result.to_transformed(len(text)) == len(result.text)

    def test_output_offsets_map_back_behind_same_digit(self) -> None:
        text = "(071) 234 5678"
        result = PhoneNumberFormatter("KE").transform(text)
        for offset, char in enumerate(result.text):
            if char.isdigit():
                assert text[result.to_original(offset + 1) - 1] == char

    def test_separator_positions_map_to_preceding_digit(self) -> None:
        text = "0712-345-678"
        result = PhoneNumberFormatter("KE").transform(text)
        # the dash after "0712" sits behind the fourth digit, like the offset before it
        assert result.to_transformed(5) == result.to_transformed(4)

    def test_maps_are_non_decreasing(self) -> None:
        result = PhoneNumberFormatter("US").transform("+1 650-253-0000")
        for offsets in (result.original_to_transformed, result.transformed_to_original):
            assert all(a <= b for a, b in zip(offsets, offsets[1:]))

    def test_offsets_are_clamped(self) -> None:
        result = PhoneNumberFormatter("KE").transform("+254712345678")
        assert result.to_transformed(-5) == 0
        assert result.to_original(10_000) == result.transformed_to_original[-1]

    def test_no_cursor_reports_none(self) -> None:
        assert PhoneNumberFormatter("KE").transform("+254712345678").cursor is None

    def test_cursor_does_not_change_text(self) -> None:
        formatter = PhoneNumberFormatter("KE")
        assert formatter.transform("+254712345678", cursor=5).text == formatter.format("+254712345678")

    @pytest.mark.parametrize("cursor", [1, 5, 8, 13])
    def test_remembered_cursor_matches_offset_map(self, cursor: int) -> None:
        result = PhoneNumberFormatter("KE").transform("+254712345678", cursor=cursor)
        assert result.cursor == result.to_transformed(cursor)

    def test_cursor_at_start(self) -> None:
        assert PhoneNumberFormatter("KE").transform("+254712345678", cursor=0).cursor == 0

    def test_mid_string_insertion_keeps_caret_behind_inserted_digit(self) -> None:
        text = "+254712345678"
        result = PhoneNumberFormatter("KE").transform(text, cursor=8)
        assert result.cursor is not None
        assert result.text[result.cursor - 1] == text[7]
