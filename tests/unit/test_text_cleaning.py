"""Tests for accent- and case-insensitive text matching."""
from recordstore.utils.text_cleaning import contains_normalized, normalize


class TestNormalize:

    def test_strips_accents_and_case(self):
        assert normalize("São JOSÉ") == "sao jose"
        assert normalize("Informática") == "informatica"

    def test_casefold_special_cases(self):
        assert normalize("Straße") == "strasse"


class TestContainsNormalized:

    def test_substring_ignoring_case_and_accents(self):
        assert contains_normalized("Bingo Heeler", "bingo")
        assert contains_normalized("Padaria São João", "SAO JOAO")
        assert contains_normalized("Padaria Sao Joao", "são")

    def test_no_match(self):
        assert not contains_normalized("Bingo Heeler", "bluey")

    def test_non_string_values(self):
        """Numbers are compared through their string form; None never matches."""
        assert contains_normalized(2023, "202")
        assert not contains_normalized(None, "")
