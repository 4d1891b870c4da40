"""Helpers for reading and writing fixed-width BCBP fields."""

# Project imports
from bcbp.errors import BCBPError, ErrorKind

_DIGITS = {
    10: frozenset("0123456789"),
    16: frozenset("0123456789ABCDEF"),
}

def take_fixed(text: str, length: int) -> tuple[str, str]:
    """
    Splits a fixed-width field off the front of the text.

    Returns a tuple of the field and the remaining text. Raises a
    DATA_LENGTH BCBPError if fewer than length characters remain.
    """
    if len(text) < length:
        raise BCBPError(
            ErrorKind.DATA_LENGTH,
            f"Expected {length} characters but only {len(text)} remain."
        )
    return text[:length], text[length:]

def take_optional(text: str, length: int) -> tuple[str | None, str]:
    """Like take_fixed, but returns None for a field that doesn't fit."""
    if len(text) < length:
        return None, text
    return text[:length], text[length:]

def take_chain(text: str, widths) -> list[str | None]:
    """
    Reads consecutive optional fields of the given widths.

    Every field after the first one that doesn't fit is None, even if a
    narrower later field would still fit.
    """
    values = []
    for width in widths:
        value, text = take_optional(text, width)
        if value is None:
            values.extend([None] * (len(widths) - len(values)))
            break
        values.append(value)
    return values

def trim_alpha(field: str | None) -> str | None:
    """Strips surrounding spaces from a text field."""
    if field is None:
        return None
    return field.strip(" ")

def parse_numeric_or_zero(field: str | None, base: int = 10) -> int:
    """
    Parses an unsigned integer field.

    Blank, malformed or signed values parse as 0, since numeric fields
    such as the sequence number and flight day are often left empty.
    """
    if field is None:
        return 0
    digits = field.strip().lstrip("0").upper()
    if digits == "" or not set(digits) <= _DIGITS[base]:
        return 0
    return int(digits, base)

def pad_numeric(value: int, width: int) -> str:
    """Zero-pads a number, or returns an empty string for 0 (unset)."""
    if value == 0:
        return ""
    return str(value).zfill(width)

def fit(value: str | None, width: int, right: bool = False) -> str:
    """Clips and space-pads a value to an exact field width."""
    value = (value or "")[:width]
    if right:
        return value.rjust(width)
    return value.ljust(width)
