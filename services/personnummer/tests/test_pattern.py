"""
Tests for structural matching of personnummer strings.
"""

import pytest

from services.personnummer.errors import PersonnummerError, Reason
from services.personnummer.helpers.pattern import ParsedPersonnummer, match


class TestMatchAcceptedLayouts:
    """The six accepted layouts."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("8112189876", ParsedPersonnummer("81", "12", "18", None, "9876")),
            ("811218-9876", ParsedPersonnummer("81", "12", "18", "-", "9876")),
            ("811218+9876", ParsedPersonnummer("81", "12", "18", "+", "9876")),
            ("198112189876", ParsedPersonnummer("1981", "12", "18", None, "9876")),
            ("19811218-9876", ParsedPersonnummer("1981", "12", "18", "-", "9876")),
            ("19811218+9876", ParsedPersonnummer("1981", "12", "18", "+", "9876")),
        ],
        ids=[
            "short_no_separator",
            "short_dash",
            "short_plus",
            "long_no_separator",
            "long_dash",
            "long_plus",
        ],
    )
    def test_match(self, text, expected):
        """Test that each layout yields the expected groups."""
        assert match(text) == expected

    def test_groups_are_not_range_checked(self):
        """Test that month and day are matched structurally only."""
        parsed = match("819999-0000")
        assert parsed.month == "99"
        assert parsed.day == "99"


class TestMatchRejects:
    """Inputs that must not match."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "811218",
            "811218-987",
            "811218-98765",
            "81121898765",
            "1981121898765",
            "811218/9876",
            "811218 9876",
            "811218--9876",
            " 811218-9876",
            "811218-9876 ",
            "811218-9876\n",
            "x811218-9876",
            "81121a-9876",
            "811218-98x6",
            "٨١١٢١٨-٩٨٧٦",
            "8112-18-9876",
            None,
            8112189876,
        ],
        ids=[
            "empty",
            "date_only",
            "control_too_short",
            "control_too_long",
            "eleven_digits",
            "thirteen_digits",
            "slash_separator",
            "space_separator",
            "double_separator",
            "leading_space",
            "trailing_space",
            "trailing_newline",
            "leading_garbage",
            "letter_in_day",
            "letter_in_control",
            "arabic_indic_digits",
            "separator_in_date",
            "none_input",
            "integer_input",
        ],
    )
    def test_no_match(self, text):
        """Test that malformed input raises NO_MATCH."""
        with pytest.raises(PersonnummerError) as exc_info:
            match(text)
        assert exc_info.value.reason is Reason.NO_MATCH
