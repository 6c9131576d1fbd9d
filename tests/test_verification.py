"""
Tests for the cross-validation harness and its summary table.
"""

import pandas as pd
import pytest
import yaml
from pathlib import Path

from numtheory.verification import (
    DEFAULT_CONFIG,
    run_verification,
    verify_counter_against_sieve,
    verify_factorial,
    verify_factors,
    verify_sieve_against_tester,
)

CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"


class TestIndividualChecks:
    """Each check passes on correct implementations."""

    @pytest.mark.parametrize("bound", [-1, 0, 1, 2, 3, 12, 1000])
    def test_sieve_against_tester(self, bound):
        assert verify_sieve_against_tester(bound, verbose=False)

    @pytest.mark.parametrize("count", [-1, 0, 1, 5, 200])
    def test_counter_against_sieve(self, count):
        assert verify_counter_against_sieve(count, verbose=False)

    @pytest.mark.parametrize("number", [1, 4, 15, 360, 6857])
    def test_factors(self, number):
        assert verify_factors(number, verbose=False)

    @pytest.mark.parametrize("n", [0, 1, 9, 12, 20, 30])
    def test_factorial(self, n):
        assert verify_factorial(n, verbose=False)

    def test_verbose_output(self, capsys):
        assert verify_sieve_against_tester(12, verbose=True)
        out = capsys.readouterr().out
        assert "✓" in out
        assert "bound=12" in out


class TestRunVerification:
    """Test the combined run and its DataFrame summary."""

    def test_small_config(self):
        config = {
            'sieve_bounds': [1, 12, 500],
            'prime_counts': [0, 5],
            'factor_numbers': [15],
            'factorial_inputs': [9],
        }
        df = run_verification(config, verbose=False)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['check', 'input', 'passed', 'size', 'estimate', 'elapsed_s']
        assert len(df) == 7
        assert df['passed'].all()

        sieve_rows = df[df['check'] == 'sieve_vs_tester']
        assert sieve_rows['size'].tolist() == [0, 5, 95]
        assert (sieve_rows['estimate'] >= sieve_rows['size']).all()

        factor_row = df[df['check'] == 'factors'].iloc[0]
        assert factor_row['size'] == 4

        factorial_row = df[df['check'] == 'factorial'].iloc[0]
        assert factorial_row['size'] == len("362880")

    def test_missing_keys_use_defaults(self):
        df = run_verification({'sieve_bounds': [12]}, verbose=False)
        expected_rows = (1 + len(DEFAULT_CONFIG['prime_counts'])
                         + len(DEFAULT_CONFIG['factor_numbers'])
                         + len(DEFAULT_CONFIG['factorial_inputs']))
        assert len(df) == expected_rows

    def test_rejects_non_integer_values(self):
        with pytest.raises(ValueError):
            run_verification({'sieve_bounds': [12, 'x']}, verbose=False)

    def test_rejects_non_positive_factor_numbers(self):
        with pytest.raises(ValueError):
            run_verification({'factor_numbers': [0]}, verbose=False)

    def test_rejects_negative_factorial_inputs(self):
        with pytest.raises(ValueError):
            run_verification({'factorial_inputs': [-1]}, verbose=False)

    def test_default_config_file(self):
        """The shipped config/default.yaml parses and passes."""
        with open(CONFIG_PATH) as f:
            config = yaml.safe_load(f)
        # Keep the run short: drop the largest inputs
        config['sieve_bounds'] = [b for b in config['sieve_bounds'] if b <= 1000]
        config['prime_counts'] = [c for c in config['prime_counts'] if c <= 1000]
        config['factor_numbers'] = [n for n in config['factor_numbers'] if n <= 10**6]
        df = run_verification(config, verbose=False)
        assert df['passed'].all(), df[~df['passed']].to_string()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
