"""
Output data models for the classification core.
"""

from pydantic import BaseModel, ConfigDict, Field

from bfhl_api.models.enums import ItemCategory


class ClassificationResult(BaseModel):
    """
    Result of classifying one input array.
    
    Each list preserves input order. Numbers keep their original string form
    (``"007"`` stays ``"007"``), alphabets are uppercased.
    """
    
    model_config = ConfigDict(extra="forbid")
    
    odd_numbers: list[str] = Field(
        default_factory=list,
        description="Numeric items with an odd value, original string form"
    )
    even_numbers: list[str] = Field(
        default_factory=list,
        description="Numeric items with an even value, original string form"
    )
    alphabets: list[str] = Field(
        default_factory=list,
        description="Purely alphabetic items, uppercased"
    )
    special_characters: list[str] = Field(
        default_factory=list,
        description="Every other item (empty strings, symbols, mixed tokens)"
    )
    sum: str = Field(
        default="0",
        description="Decimal sum of all numeric items",
        examples=["339"]
    )
    concat_string: str = Field(
        default="",
        description="Alphabetic items joined, reversed, with alternating caps",
        examples=["Ra"]
    )
    
    def category_counts(self) -> dict[ItemCategory, int]:
        """Number of items per category."""
        return {
            ItemCategory.ODD_NUMBER: len(self.odd_numbers),
            ItemCategory.EVEN_NUMBER: len(self.even_numbers),
            ItemCategory.ALPHABET: len(self.alphabets),
            ItemCategory.SPECIAL_CHARACTER: len(self.special_characters),
        }
    
    @property
    def total_items(self) -> int:
        return sum(self.category_counts().values())
