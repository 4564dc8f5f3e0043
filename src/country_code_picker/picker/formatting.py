"""As-you-type phone number formatting with cursor offset mapping.

The formatter groups the dialable characters of a number the way the
selected region writes them (``+254712345678`` -> ``+254 712 345678``) and
records how every cursor position moves, so an editing widget can keep its
caret behind the same digit while separators appear and disappear.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Final

import phonenumbers

# Dialable characters; everything else in the input is treated as a separator.
NON_SEPARATORS: Final = frozenset("0123456789*#+N;,")


def is_non_separator(char: str) -> bool:
    return char in NON_SEPARATORS


def strip_trailing_separators(text: str) -> str:
    end = len(text)
    while end and not is_non_separator(text[end - 1]):
        end -= 1
    return text[:end]


@dataclasses.dataclass(frozen=True)
class TransformedText:
    """Formatted text plus the cursor maps between input and output.

    ``original_to_transformed[i]`` is the output cursor offset for input
    cursor offset *i* (``0 <= i <= len(input)``); ``transformed_to_original[j]``
    is the input offset for output offset *j* (``0 <= j <= len(text)``).  A
    cursor sitting right after a dialable character stays right after it.
    ``cursor`` is the output offset of the caret passed to
    :meth:`PhoneNumberFormatter.transform`, or ``None`` when none was given.
    """

    text: str
    original_to_transformed: tuple[int, ...]
    transformed_to_original: tuple[int, ...]
    cursor: int | None = None

    def to_transformed(self, offset: int) -> int:
        return self.original_to_transformed[_clamp(offset, len(self.original_to_transformed))]

    def to_original(self, offset: int) -> int:
        return self.transformed_to_original[_clamp(offset, len(self.transformed_to_original))]


def _clamp(offset: int, size: int) -> int:
    return max(0, min(offset, size - 1))


def _cursor_map(source: str, target_positions: Sequence[int]) -> tuple[int, ...]:
    # offset i in source -> just after the k-th dialable char of the target,
    # where k counts the dialable chars in source[:i]
    offsets = [0]
    seen = 0
    for char in source:
        if is_non_separator(char) and seen < len(target_positions):
            seen += 1
        offsets.append(target_positions[seen - 1] + 1 if seen else 0)
    return tuple(offsets)


class PhoneNumberFormatter:
    """Region-aware formatter backed by :class:`phonenumbers.AsYouTypeFormatter`."""

    def __init__(self, region: str) -> None:
        self.region = region.upper()
        self._formatter = phonenumbers.AsYouTypeFormatter(self.region)

    def format(self, text: str) -> str:
        return self.transform(text).text

    def transform(self, text: str, cursor: int | None = None) -> TransformedText:
        """Format *text*.

        *cursor* is a caret offset into *text*; the formatter remembers the
        dialable character just before it and reports where that character
        ended up as :attr:`TransformedText.cursor`.
        """
        self._formatter.clear()
        input_positions = [index for index, char in enumerate(text) if is_non_separator(char)]
        remember = -1
        if cursor is not None:
            remember = sum(1 for index in input_positions if index < cursor) - 1

        formatted = ""
        for count, index in enumerate(input_positions):
            formatted = self._formatter.input_digit(text[index], count == remember)

        new_cursor = None
        if cursor is not None:
            new_cursor = self._formatter.get_remembered_position() if remember >= 0 else 0

        output_positions = [index for index, char in enumerate(formatted) if is_non_separator(char)]
        return TransformedText(
            text=formatted,
            original_to_transformed=_cursor_map(text, output_positions),
            transformed_to_original=_cursor_map(formatted, input_positions),
            cursor=new_cursor,
        )


__all__ = [
    "NON_SEPARATORS",
    "PhoneNumberFormatter",
    "TransformedText",
    "is_non_separator",
    "strip_trailing_separators",
]
