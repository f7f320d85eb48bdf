"""Tests for the name normalisation helpers."""

import pytest

from name_dedup.algorithms.name_normalizer import (
    canonical_form,
    last_token,
    sort_key,
    split_first_last,
    strip_middle_names,
    swap_first_last,
)
from name_dedup.errors import InvalidArgumentError, NullInputError


# ---- strip_middle_names -----------------------------------------------------


class TestStripMiddleNames:
    def test_drops_middle_name(self):
        assert strip_middle_names("Bill Henry Gates ") == "Bill Gates"
        assert strip_middle_names("Mustafa Elsayed Elbehery") == "Mustafa Elbehery"

    def test_drops_several_middle_names(self):
        assert strip_middle_names("John Ronald Reuel Tolkien") == "John Tolkien"

    def test_two_tokens_unchanged(self):
        assert strip_middle_names("Mustafa Elbehery") == "Mustafa Elbehery"

    def test_two_tokens_trimmed_but_spacing_kept(self):
        assert strip_middle_names("  Bill   Gates  ") == "Bill   Gates"

    def test_single_token(self):
        assert strip_middle_names(" Madonna ") == "Madonna"

    def test_collapses_irregular_spacing_for_long_names(self):
        assert strip_middle_names("Bill\tHenry   Gates") == "Bill Gates"

    def test_null_input(self):
        with pytest.raises(NullInputError):
            strip_middle_names(None)

    def test_empty_and_blank(self):
        with pytest.raises(InvalidArgumentError):
            strip_middle_names("")
        with pytest.raises(InvalidArgumentError):
            strip_middle_names("   ")


# ---- sort_key ---------------------------------------------------------------


class TestSortKey:
    def test_sorted_lowercase_characters(self):
        assert sort_key("Bill Gates") == " abegillst"

    def test_order_and_case_insensitive(self):
        assert sort_key("Gates Bill") == sort_key("bill gates")
        assert sort_key("GATES BILL") == sort_key("Bill Gates")

    def test_anagrams_share_key(self):
        assert sort_key("listen") == sort_key("Silent")

    def test_different_letters_differ(self):
        assert sort_key("Bill Gates") != sort_key("Bill Gatez")

    def test_spaces_are_part_of_the_key(self):
        assert sort_key("Bill  Gates") != sort_key("Bill Gates")

    def test_null_input(self):
        with pytest.raises(NullInputError):
            sort_key(None)

    def test_empty_input(self):
        with pytest.raises(InvalidArgumentError):
            sort_key("")


# ---- swap_first_last --------------------------------------------------------


class TestSwapFirstLast:
    def test_two_tokens(self):
        assert swap_first_last("Mustafa Elbehery") == "Elbehery Mustafa"

    def test_trailing_whitespace(self):
        assert swap_first_last("Bill Gates ") == "Gates Bill"

    def test_normalises_inner_spacing(self):
        assert swap_first_last("Gates   Bill") == "Bill Gates"

    def test_single_token_unchanged(self):
        assert swap_first_last("MustafaElbehery") == "MustafaElbehery"

    def test_more_than_two_tokens(self):
        with pytest.raises(InvalidArgumentError):
            swap_first_last("Mustafa Elsayed Elbehery              ")

    def test_null_input(self):
        with pytest.raises(NullInputError):
            swap_first_last(None)

    def test_empty_input(self):
        with pytest.raises(InvalidArgumentError):
            swap_first_last("")


# ---- last_token -------------------------------------------------------------


class TestLastToken:
    def test_two_tokens(self):
        assert last_token("Mustafa Elbehery") == "Elbehery"

    def test_leading_whitespace(self):
        assert last_token("           Mustafa Elsayed Elbehery") == "Elbehery"

    def test_trailing_whitespace(self):
        assert last_token("Mustafa Elsayed Elbehery              ") == "Elbehery"

    def test_single_token(self):
        assert last_token("MustafaElbehery") == "MustafaElbehery"
        assert last_token("  Madonna ") == "Madonna"

    def test_null_input(self):
        with pytest.raises(NullInputError):
            last_token(None)

    def test_empty_input(self):
        with pytest.raises(InvalidArgumentError):
            last_token("")


# ---- split_first_last / canonical_form --------------------------------------


class TestSplitFirstLast:
    def test_pair(self):
        assert split_first_last("Bill Gates") == ("Bill", "Gates")

    def test_single_token(self):
        assert split_first_last("Madonna") is None

    def test_unreduced_name(self):
        with pytest.raises(InvalidArgumentError):
            split_first_last("Bill Henry Gates")

    def test_agrees_with_canonical_form(self):
        for name in ("Bill Gates", "  Bill\t  Gates ", "Gates Bill"):
            assert split_first_last(name) == canonical_form(name)


class TestCanonicalForm:
    def test_long_name(self):
        assert canonical_form("Bill Henry Gates") == ("Bill", "Gates")

    def test_two_tokens(self):
        assert canonical_form("Bill Gates") == ("Bill", "Gates")

    def test_single_token(self):
        assert canonical_form("Madonna") == ("Madonna",)
