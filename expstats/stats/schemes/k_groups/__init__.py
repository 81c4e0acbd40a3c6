"""
Comparisons across more than two conditions.

- `one_way_anova`: F-test with eta-squared
"""

from expstats.stats.schemes.k_groups.anova import one_way_anova

__all__ = ["one_way_anova"]
