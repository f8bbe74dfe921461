"""
Item classifier for the /bfhl endpoint.

Pure, stateless, single pass over the input. Each item is checked against the
rules below in order (first match wins):

1. ASCII digits only -> odd/even number, added to the sum
2. ASCII letters only -> alphabet (uppercased), feeds the concat string
3. Anything else     -> special character
"""

from typing import Any, Sequence

from bfhl_api.classification.text_utils import (
    build_concat_string,
    format_decimal,
    is_ascii_digits,
    is_ascii_letters,
    parse_decimal,
)
from bfhl_api.models.enums import ItemCategory
from bfhl_api.models.output_models import ClassificationResult


def _as_text(item: Any) -> str:
    # Validation normally guarantees strings; anything else is judged by str()
    return item if isinstance(item, str) else str(item)


def classify_item(item: Any) -> ItemCategory:
    """
    Classify a single item.
    
    Args:
        item: Input item (non-strings are classified by their str() form)
        
    Returns:
        The ItemCategory the item belongs to
    """
    return _category_of(_as_text(item))


def _category_of(text: str) -> ItemCategory:
    if is_ascii_digits(text):
        # Parity only depends on the last digit
        if int(text[-1]) % 2 == 0:
            return ItemCategory.EVEN_NUMBER
        return ItemCategory.ODD_NUMBER
    
    if is_ascii_letters(text):
        return ItemCategory.ALPHABET
    
    return ItemCategory.SPECIAL_CHARACTER


def classify(items: Sequence[Any]) -> ClassificationResult:
    """
    Classify every item of the input array.
    
    Args:
        items: Ordered sequence of strings (may contain empty strings)
        
    Returns:
        ClassificationResult with every item in exactly one bucket, the
        decimal sum of all numeric items and the derived concat string
        
    Examples:
        >>> result = classify(["a", "1", "334", "4", "R", "$"])
        >>> result.sum, result.concat_string
        ('339', 'Ra')
    """
    odd_numbers: list[str] = []
    even_numbers: list[str] = []
    alphabets: list[str] = []
    special_characters: list[str] = []
    alphabet_items: list[str] = []
    total = 0
    
    for item in items:
        text = _as_text(item)
        category = _category_of(text)
        
        if category is ItemCategory.EVEN_NUMBER:
            total += parse_decimal(text)
            even_numbers.append(text)
        elif category is ItemCategory.ODD_NUMBER:
            total += parse_decimal(text)
            odd_numbers.append(text)
        elif category is ItemCategory.ALPHABET:
            alphabets.append(text.upper())
            alphabet_items.append(text)
        else:
            special_characters.append(text)
    
    return ClassificationResult(
        odd_numbers=odd_numbers,
        even_numbers=even_numbers,
        alphabets=alphabets,
        special_characters=special_characters,
        sum=format_decimal(total),
        concat_string=build_concat_string(alphabet_items),
    )
