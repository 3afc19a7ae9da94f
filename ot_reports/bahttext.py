"""Read a baht amount out in Thai words, as printed on disbursement documents.

>>> bahttext(120.5)
'หนึ่งร้อยยี่สิบบาทห้าสิบสตางค์'
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

DIGITS = ["ศูนย์", "หนึ่ง", "สอง", "สาม", "สี่", "ห้า", "หก", "เจ็ด", "แปด", "เก้า"]
PLACES = ["", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน"]
MILLION = "ล้าน"
ZERO_TEXT = "ศูนย์บาทถ้วน"

Amount = Union[int, float, Decimal]


def _read_group(value: int, has_higher: bool) -> str:
    """Read 0..999999. ``has_higher`` is set when a larger group precedes this one."""

    words = []
    digits = str(value)
    for index, char in enumerate(digits):
        digit = int(char)
        place = len(digits) - index - 1
        if digit == 0:
            continue
        if place == 1 and digit == 1:
            words.append(PLACES[1])
        elif place == 1 and digit == 2:
            words.append("ยี่" + PLACES[1])
        elif place == 0 and digit == 1 and (has_higher or len(digits) > 1):
            words.append("เอ็ด")
        else:
            words.append(DIGITS[digit] + PLACES[place])
    return "".join(words)


def read_number(value: int) -> str:
    if value == 0:
        return DIGITS[0]
    millions, rest = divmod(value, 1_000_000)
    if not millions:
        return _read_group(rest, has_higher=False)
    return read_number(millions) + MILLION + _read_group(rest, has_higher=True)


def bahttext(amount: Amount) -> str:
    try:
        value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Cannot read amount {amount!r}") from exc
    if not value.is_finite() or value < 0:
        raise ValueError(f"Amount must be a finite non-negative number, got {amount!r}")
    if value == 0:
        return ZERO_TEXT

    baht = int(value)
    satang = int((value - baht) * 100)
    baht_text = read_number(baht)
    if satang:
        return f"{baht_text}บาท{_read_group(satang, has_higher=False)}สตางค์"
    return f"{baht_text}บาทถ้วน"
