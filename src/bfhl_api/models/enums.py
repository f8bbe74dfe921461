"""
Enumerations for BFHL data models.
"""

from enum import Enum


class ItemCategory(str, Enum):
    """
    Bucket an input item is classified into.
    
    Every item lands in exactly one category.
    """
    
    ODD_NUMBER = "odd_number"
    EVEN_NUMBER = "even_number"
    ALPHABET = "alphabet"
    SPECIAL_CHARACTER = "special_character"
