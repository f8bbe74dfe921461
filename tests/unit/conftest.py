"""Unit test fixtures.

Provides small factories so tests can describe inputs compactly.
"""

import pytest


@pytest.fixture
def make_items():
    """Factory fixture building input arrays from category counts.
    
    Usage:
        def test_something(make_items):
            items = make_items(numbers=3, letters=2, specials=1)
    """
    def _create(numbers: int = 0, letters: int = 0, specials: int = 0) -> list[str]:
        items: list[str] = []
        items.extend(str(n) for n in range(numbers))
        items.extend("ab"[n % 2] * (n + 1) for n in range(letters))
        items.extend("#" * (n + 1) for n in range(specials))
        return items
    
    return _create
