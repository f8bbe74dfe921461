"""Unit tests for the item classifier."""

import pytest

from bfhl_api.classification import classify, classify_item
from bfhl_api.models.enums import ItemCategory
from bfhl_api.models.output_models import ClassificationResult


class TestReferenceScenarios:
    """Inputs with fully known outputs."""
    
    def test_mixed_items(self, scenario_inputs):
        result = classify(scenario_inputs["mixed"])
        
        assert result.odd_numbers == ["1"]
        assert result.even_numbers == ["334", "4"]
        assert result.alphabets == ["A", "R"]
        assert result.special_characters == ["$"]
        assert result.sum == "339"
        assert result.concat_string == "Ra"
    
    def test_symbols(self, scenario_inputs):
        result = classify(scenario_inputs["symbols"])
        
        assert result.odd_numbers == ["5"]
        assert result.even_numbers == ["2", "4"]
        assert result.alphabets == ["A", "Y"]
        assert result.special_characters == ["&", "-", "*"]
        assert result.sum == "11"
        assert result.concat_string == "Ya"
    
    def test_empty_string_item(self, scenario_inputs):
        result = classify(scenario_inputs["empty_item"])
        
        assert result.special_characters == [""]
        assert result.odd_numbers == []
        assert result.even_numbers == []
        assert result.alphabets == []
        assert result.sum == "0"
        assert result.concat_string == ""
    
    def test_numbers_only(self, scenario_inputs):
        result = classify(scenario_inputs["numbers_only"])
        
        assert result.even_numbers == ["10"]
        assert result.odd_numbers == ["21"]
        assert result.sum == "31"
        assert result.alphabets == []
        assert result.concat_string == ""
    
    def test_multi_letter_words(self):
        result = classify(["A", "ABcD", "DOE"])
        
        assert result.alphabets == ["A", "ABCD", "DOE"]
        # "AABcDDOE" reversed is "EODDcBAA"
        assert result.concat_string == "EoDdCbAa"


class TestClassifyItem:
    """Per-item rule, first match wins."""
    
    @pytest.mark.parametrize("item,expected", [
        ("0", ItemCategory.EVEN_NUMBER),
        ("7", ItemCategory.ODD_NUMBER),
        ("007", ItemCategory.ODD_NUMBER),
        ("120", ItemCategory.EVEN_NUMBER),
        ("x", ItemCategory.ALPHABET),
        ("Hello", ItemCategory.ALPHABET),
        ("", ItemCategory.SPECIAL_CHARACTER),
        ("-5", ItemCategory.SPECIAL_CHARACTER),
        ("+5", ItemCategory.SPECIAL_CHARACTER),
        ("3.14", ItemCategory.SPECIAL_CHARACTER),
        ("a1", ItemCategory.SPECIAL_CHARACTER),
        ("hello world", ItemCategory.SPECIAL_CHARACTER),
        (" 5", ItemCategory.SPECIAL_CHARACTER),
        ("5\n", ItemCategory.SPECIAL_CHARACTER),
        ("abc\n", ItemCategory.SPECIAL_CHARACTER),
        ("é", ItemCategory.SPECIAL_CHARACTER),
        ("١٢", ItemCategory.SPECIAL_CHARACTER),  # Arabic-Indic digits
        ("²", ItemCategory.SPECIAL_CHARACTER),
        ("@", ItemCategory.SPECIAL_CHARACTER),
    ])
    def test_rule(self, item, expected):
        assert classify_item(item) is expected
    
    def test_non_string_uses_str_form(self):
        assert classify_item(42) is ItemCategory.EVEN_NUMBER
        assert classify_item(-3) is ItemCategory.SPECIAL_CHARACTER
        assert classify_item(None) is ItemCategory.ALPHABET  # "None"
        assert classify_item(1.5) is ItemCategory.SPECIAL_CHARACTER


class TestLeadingZeros:
    
    def test_original_form_preserved(self):
        result = classify(["007", "010"])
        
        assert result.odd_numbers == ["007"]
        assert result.even_numbers == ["010"]
        assert result.sum == "17"
    
    def test_all_zeros(self):
        result = classify(["000"])
        
        assert result.even_numbers == ["000"]
        assert result.sum == "0"


class TestLargeNumbers:
    """The sum never wraps and never hits the int/str digit limit."""
    
    def test_beyond_64_bits(self):
        big = str(2**64)
        result = classify([big, big])
        
        assert result.sum == str(2**65)
        assert result.even_numbers == [big, big]
    
    def test_many_max_values(self):
        item = "9" * 30
        result = classify([item] * 1000)
        
        assert result.sum == str(int(item) * 1000)
        assert len(result.odd_numbers) == 1000
    
    def test_longer_than_conversion_limit(self):
        # 5000 digits exceeds the default 4300-digit int/str conversion limit
        item = "1" * 5000
        result = classify([item, "1"])
        
        assert result.sum == "1" * 4999 + "2"
        assert result.odd_numbers == [item, "1"]
        assert result.even_numbers == []
    
    def test_parity_from_last_digit(self):
        result = classify(["9" * 6000 + "8", "8" * 6000 + "9"])
        
        assert len(result.even_numbers) == 1
        assert len(result.odd_numbers) == 1


class TestProperties:
    
    @pytest.fixture
    def items(self):
        return ["a", "1", "", "Zz", "-1", "22", "x y", "007", "B", "#", "3.0", "ü"]
    
    def test_partition(self, items):
        result = classify(items)
        buckets = (
            result.odd_numbers
            + result.even_numbers
            + result.special_characters
        )
        
        assert result.total_items == len(items)
        assert len(buckets) + len(result.alphabets) == len(items)
        for item in items:
            in_numbers = item in result.odd_numbers or item in result.even_numbers
            in_alphabets = item.upper() in result.alphabets and item.isalpha() and item.isascii()
            in_special = item in result.special_characters
            assert sum([in_numbers, in_alphabets, in_special]) == 1, item
    
    def test_sum_matches_numeric_items(self, items):
        result = classify(items)
        expected = sum(int(item) for item in items if item.isascii() and item.isdigit())
        
        assert result.sum == str(expected)
    
    def test_concat_length(self, items):
        result = classify(items)
        
        assert len(result.concat_string) == sum(len(word) for word in result.alphabets)
    
    def test_idempotent(self, items):
        assert classify(items) == classify(items)
    
    def test_input_order_preserved(self, make_items):
        items = list(reversed(make_items(numbers=6, letters=4, specials=3)))
        result = classify(items)
        
        assert result.special_characters == ["###", "##", "#"]
        assert result.alphabets == ["BBBB", "AAA", "BB", "A"]
        assert result.even_numbers == ["4", "2", "0"]
        assert result.odd_numbers == ["5", "3", "1"]
    
    def test_input_not_mutated(self, items):
        snapshot = list(items)
        classify(items)
        
        assert items == snapshot
    
    def test_non_string_items_use_str_form(self):
        result = classify([7, "a", -2, 10])
        
        assert result.odd_numbers == ["7"]
        assert result.even_numbers == ["10"]
        assert result.special_characters == ["-2"]
        assert result.sum == "17"
    
    def test_accepts_tuple(self):
        assert classify(("a", "2")).sum == "2"
    
    def test_returns_fresh_result(self):
        first = classify(["a"])
        second = classify(["a"])
        
        assert isinstance(first, ClassificationResult)
        assert first is not second
        assert first.alphabets is not second.alphabets
