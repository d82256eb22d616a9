"""Test random identifier utilities."""

import pytest

from explorer_library.utils.identifiers import ALPHANUMERIC
from explorer_library.utils.identifiers import DIGITS
from explorer_library.utils.identifiers import random_numeric_string
from explorer_library.utils.identifiers import random_string


class TestRandomString:
    """Test random_string() function."""

    def test_alphabet_has_62_characters(self) -> None:
        """Alphabet is upper, lower and digits with no repeats."""
        assert len(ALPHANUMERIC) == 62
        assert len(set(ALPHANUMERIC)) == 62

    def test_default_length(self) -> None:
        """Default length is 32."""
        assert len(random_string()) == 32

    def test_characters_from_alphabet(self) -> None:
        """Every character comes from the alphanumeric alphabet."""
        value = random_string(500)

        assert len(value) == 500
        assert set(value) <= set(ALPHANUMERIC)

    def test_consecutive_calls_differ(self) -> None:
        """Two calls produce different values."""
        assert random_string(32) != random_string(32)

    @pytest.mark.parametrize("length", [0, -1, 2.5, "8", None, True])
    def test_rejects_invalid_length(self, length: object) -> None:
        """Non-positive or non-integer lengths raise ValueError."""
        with pytest.raises(ValueError, match="positive integer"):
            random_string(length)  # type: ignore[arg-type]


class TestRandomNumericString:
    """Test random_numeric_string() function."""

    def test_default_length(self) -> None:
        """Default length is 6."""
        assert len(random_numeric_string()) == 6

    def test_digits_only(self) -> None:
        """Only 0-9 appear, leading zeros allowed."""
        value = random_numeric_string(300)

        assert len(value) == 300
        assert set(value) <= set(DIGITS)

    def test_rejects_zero(self) -> None:
        """Zero length raises ValueError."""
        with pytest.raises(ValueError):
            random_numeric_string(0)
