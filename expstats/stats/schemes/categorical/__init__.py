"""
Association between condition and a categorical outcome.

- `chi_square_2xk`: chi-square test of independence for two conditions
"""

from expstats.stats.schemes.categorical.chi_square import chi_square_2xk

__all__ = ["chi_square_2xk"]
