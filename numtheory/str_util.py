"""
String rendering for result sequences.
"""

from typing import Iterable


def string_for_sequence(values: Iterable, separator: str = ",") -> str:
    """Join values into a delimited string with no trailing separator."""
    return separator.join(str(v) for v in values)
