"""
Text and number helpers for the classification core.

Decimal conversions are chunked so that arbitrarily long numeric items and
sums stay below the interpreter's int/str conversion digit limit
(``sys.int_info.str_digits_check_threshold``, 640 at minimum).
"""

import re
from typing import Iterable

ASCII_DIGITS_PATTERN = re.compile(r"[0-9]+")
ASCII_LETTERS_PATTERN = re.compile(r"[A-Za-z]+")

# Digits converted per int()/str() call
DECIMAL_CHUNK_DIGITS = 500
_CHUNK_BASE = 10 ** DECIMAL_CHUNK_DIGITS


def is_ascii_digits(text: str) -> bool:
    """
    True if text is one or more ASCII digits and nothing else.
    
    Signs, decimal points, whitespace and non-ASCII digits ("٣", "²") fail.
    
    Examples:
        >>> is_ascii_digits("007")
        True
        >>> is_ascii_digits("-5")
        False
    """
    return ASCII_DIGITS_PATTERN.fullmatch(text) is not None


def is_ascii_letters(text: str) -> bool:
    """True if text is one or more ASCII letters and nothing else."""
    return ASCII_LETTERS_PATTERN.fullmatch(text) is not None


def parse_decimal(digits: str) -> int:
    """
    Parse a string of ASCII digits into an int of any length.
    
    Args:
        digits: Non-empty string of ASCII digits (leading zeros allowed)
        
    Returns:
        The non-negative integer value
    """
    if len(digits) <= DECIMAL_CHUNK_DIGITS:
        return int(digits)
    
    value = 0
    for start in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[start:start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_decimal(value: int) -> str:
    """
    Render a non-negative int of any size as a decimal string.
    
    Args:
        value: Non-negative integer
        
    Returns:
        Decimal representation without leading zeros ("0" for zero)
    """
    if value < _CHUNK_BASE:
        return str(value)
    
    # Least significant chunk first, zero-padded except for the leading one
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).zfill(DECIMAL_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def alternating_caps(text: str) -> str:
    """
    Uppercase characters at even indexes, lowercase at odd indexes.
    
    Examples:
        >>> alternating_caps("yahoo")
        'YaHoO'
    """
    return "".join(
        char.upper() if index % 2 == 0 else char.lower()
        for index, char in enumerate(text)
    )


def build_concat_string(alphabet_items: Iterable[str]) -> str:
    """
    Join alphabetic items, reverse the result, then apply alternating caps.
    
    Args:
        alphabet_items: Alphabetic items in input order, original casing
        
    Returns:
        Derived string, empty when there are no items
        
    Examples:
        >>> build_concat_string(["a", "R"])
        'Ra'
        >>> build_concat_string(["ab", "Cd"])
        'DcBa'
    """
    return alternating_caps("".join(alphabet_items)[::-1])
