"""
Two-sample comparisons for between-subjects experiments.

This module compares measurements from two independent conditions:

**Location tests:**
- `welch_t_test`: Welch's unequal-variance t-test with Cohen's d
- `mann_whitney_u`: rank-based U test with rank-biserial r

**Assumption checks:**
- `levene_test`: equality of variances (mean-centred)
- `shapiro_wilk`: approximate normality check with coarse p-values

Example Usage
-------------
>>> from expstats.stats.schemes.two_sample import welch_t_test, mann_whitney_u
>>> formal = [5.1, 5.8, 6.0, 6.4, 5.5]
>>> informal = [4.2, 4.9, 5.0, 4.4, 5.3]
>>> welch_t_test(formal, informal).mean_diff > 0
True
>>> mann_whitney_u(formal, informal).u
1.0
"""

from expstats.stats.schemes.two_sample.assumptions import levene_test, shapiro_wilk
from expstats.stats.schemes.two_sample.nonparametric import mann_whitney_u
from expstats.stats.schemes.two_sample.parametric import welch_t_test

__all__ = ["welch_t_test", "mann_whitney_u", "levene_test", "shapiro_wilk"]
