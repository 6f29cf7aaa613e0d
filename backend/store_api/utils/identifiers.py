"""
Identifier coercion for path segments and query parameters.

Textual ids are turned into the store's numeric ids leniently: anything
that is not a non-negative base-10 integer becomes 0. No row ever has id 0,
so a bad id surfaces as "not found" instead of a validation error. Every
such coercion is logged as a warning so it does not go unnoticed.
"""

import re
from typing import Iterable, List, Optional

from store_api.core.logging_config import get_logger


logger = get_logger(__name__)

# Largest id a signed 64-bit integer column can hold. Out-of-range input is
# clamped to it, so it reads as "not found" rather than overflowing the driver.
MAX_IDENTIFIER = 2**63 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def string_to_uint(value: Optional[str]) -> int:
    """
    Convert a textual identifier to a non-negative integer.

    Args:
        value: Raw text, e.g. a URL path segment

    Returns:
        The parsed id, or 0 if the text is not an integer or is negative

    Example:
        >>> string_to_uint("42")
        42
        >>> string_to_uint("-5")
        0
        >>> string_to_uint("abc")
        0
    """
    if value is None or not _INTEGER.fullmatch(value):
        logger.warning(
            "Invalid identifier coerced to 0",
            extra={"raw_identifier": value}
        )
        return 0

    number = int(value)
    if number < 0:
        logger.warning(
            "Negative identifier coerced to 0",
            extra={"raw_identifier": value}
        )
        return 0

    return min(number, MAX_IDENTIFIER)


def strings_to_uints(values: Iterable[Optional[str]]) -> List[int]:
    """
    Apply ``string_to_uint`` to every element, keeping order and length.
    """
    return [string_to_uint(value) for value in values]
