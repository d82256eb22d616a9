"""Random identifier generation.

Identifiers tag tree entries and may be shown to clients, so bytes come from
the secrets module rather than the random module. Each byte is mapped onto the
alphabet with a modulo, which slightly favours the first characters of the
alphabet (256 is not a multiple of 62 or 10). That is acceptable for entry
tags, which carry no access-control weight.
"""

import secrets
import string

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
DIGITS = string.digits


def _validate_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise ValueError(f"Length must be a positive integer, got {length!r}")


def _random_from(alphabet: str, length: int) -> str:
    _validate_length(length)
    size = len(alphabet)
    return "".join(alphabet[byte % size] for byte in secrets.token_bytes(length))


def random_string(length: int = 32) -> str:
    """Generate a random alphanumeric string.

    Args:
        length: Number of characters to generate

    Returns:
        String drawn from A-Z, a-z and 0-9

    Raises:
        ValueError: If length is not a positive integer

    Example:
        >>> value = random_string(8)
        >>> assert len(value) == 8 and value.isalnum()
    """
    return _random_from(ALPHANUMERIC, length)


def random_numeric_string(length: int = 6) -> str:
    """Generate a random string of decimal digits.

    Args:
        length: Number of digits to generate

    Returns:
        String drawn from 0-9 (leading zeros allowed)

    Raises:
        ValueError: If length is not a positive integer
    """
    return _random_from(DIGITS, length)
