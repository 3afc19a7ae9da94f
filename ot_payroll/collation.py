"""Sort keys that order Thai names the way a Thai dictionary does.

Code-point order gets Thai wrong in two places. Leading vowels (เ แ โ ใ ไ)
are written before their consonant but sort after it, and tone marks and
other above/below-line signs only break ties between otherwise equal
spellings. Latin text falls back to case-insensitive ordering.
"""

from __future__ import annotations

from typing import Tuple

LEADING_VOWELS = frozenset("เแโใไ")
SECONDARY_MARKS = frozenset("็่้๊๋์ํ๎")


def _is_consonant(char: str) -> bool:
    return "ก" <= char <= "ฮ"


def _logical_order(text: str) -> str:
    chars = list(text)
    index = 0
    while index < len(chars) - 1:
        if chars[index] in LEADING_VOWELS and _is_consonant(chars[index + 1]):
            chars[index], chars[index + 1] = chars[index + 1], chars[index]
            index += 2
        else:
            index += 1
    return "".join(chars)


def thai_sort_key(text: str) -> Tuple[str, str, str]:
    ordered = _logical_order(text)
    primary = "".join(char for char in ordered if char not in SECONDARY_MARKS)
    return primary.casefold(), ordered, text
