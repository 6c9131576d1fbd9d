"""
Tests for result rendering.
"""

import numpy as np
import pytest

from numtheory.str_util import string_for_sequence
from numtheory.primes import list_of_primes
from numtheory.factorization import factors_for_number


class TestStringForSequence:

    def test_two_values(self):
        assert string_for_sequence([1, 2]) == "1,2"

    def test_no_trailing_separator(self):
        assert string_for_sequence([1, 2, 3]) == "1,2,3"

    def test_single_and_empty(self):
        assert string_for_sequence([7]) == "7"
        assert string_for_sequence([]) == ""

    def test_custom_separator(self):
        assert string_for_sequence([1, 3, 5, 15], separator=", ") == "1, 3, 5, 15"

    def test_renders_results(self):
        assert string_for_sequence(list_of_primes(12)) == "2,3,5,7,11"
        assert string_for_sequence(factors_for_number(15)) == "1,3,5,15"

    def test_numpy_values(self):
        assert string_for_sequence(np.array([2, 3, 5])) == "2,3,5"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
