"""Tests for the Levenshtein edit distance module."""

import pytest

from name_dedup.algorithms.edit_distance import distance, within_distance
from name_dedup.errors import InvalidArgumentError, NullInputError


# ---- distance ---------------------------------------------------------------


class TestDistance:
    def test_identical(self):
        assert distance("test", "test") == 0

    def test_single_substitution(self):
        assert distance("test", "tent") == 1

    def test_substitution_and_insertion(self):
        assert distance("GUMBO", "GAMBOL") == 2

    def test_classic_example(self):
        assert distance("kitten", "sitting") == 3

    def test_different_lengths(self):
        assert distance("Gates", "Gate") == 1
        assert distance("a", "abc") == 2

    def test_symmetric(self):
        assert distance("Gates", "Gatez") == distance("Gatez", "Gates")
        assert distance("GUMBO", "GAMBOL") == distance("GAMBOL", "GUMBO")

    def test_case_sensitive(self):
        assert distance("Gates", "gates") == 1

    def test_null_input(self):
        with pytest.raises(NullInputError):
            distance(None, "test")
        with pytest.raises(NullInputError):
            distance("test", None)

    def test_null_input_is_type_error(self):
        with pytest.raises(TypeError):
            distance(None, "test")

    def test_empty_input(self):
        with pytest.raises(InvalidArgumentError):
            distance("", "test")
        with pytest.raises(InvalidArgumentError):
            distance("test", "")


# ---- within_distance --------------------------------------------------------


class TestWithinDistance:
    def test_exact_match_within_bound(self):
        assert within_distance("Gates", "Gates", 2)

    def test_single_typo_within_bound(self):
        assert within_distance("Gates", "Gatez", 2)

    def test_bound_is_strict(self):
        """Distance 2 is not below a bound of 2."""
        assert distance("Gates", "Gotez") == 2
        assert not within_distance("Gates", "Gotez", 2)

    def test_larger_bound(self):
        assert within_distance("Smith", "Smythe", 3)
        assert not within_distance("Smith", "Smythe", 2)

    def test_bound_of_one_requires_equality(self):
        assert within_distance("Gates", "Gates", 1)
        assert not within_distance("Gates", "Gatez", 1)

    def test_invalid_bound(self):
        with pytest.raises(InvalidArgumentError):
            within_distance("Gates", "Gates", 0)

    def test_rejects_empty(self):
        with pytest.raises(InvalidArgumentError):
            within_distance("", "Gates", 2)
