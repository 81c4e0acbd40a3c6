"""
expstats.stats.schemes.categorical.chi_square
=============================================

Chi-square test of independence for a 2 x K contingency table.

Each condition contributes one row, given as a mapping from category label to
observed count. Categories missing from one row count as zero there. Empty
labels are ignored entirely: they form no column and their counts do not
enter the row or grand totals. For every cell the expected count is

    E = row_total * category_total / grand_total

and cells with E = 0 are skipped. The statistic has (2 - 1)(K - 1) degrees
of freedom.

Examples
--------
>>> from expstats.stats.schemes.categorical.chi_square import chi_square_2xk
>>> res = chi_square_2xk({"a": 10, "b": 10}, {"a": 10, "b": 10})
>>> res.chi2, res.df, res.p_value
(0.0, 1, 1.0)
>>> chi_square_2xk({}, {}).p_value
1.0
"""

from __future__ import annotations
import logging
from typing import Dict, List, Mapping

from expstats.core.results import ChiSquareResult
from expstats.core.samples import Number, as_counts
from expstats.stats.common.distributions import chi_square_sf

logger = logging.getLogger(__name__)


def category_union(*rows: Mapping[str, int]) -> List[str]:
    """Non-empty category labels across rows, in first-seen order."""
    seen: Dict[str, None] = {}
    for row in rows:
        for label in row:
            if label:
                seen.setdefault(label, None)
    return list(seen)


def chi_square_2xk(
    counts_a: Mapping[str, Number], counts_b: Mapping[str, Number]
) -> ChiSquareResult:
    """
    Test whether category proportions differ between two conditions.

    Raises:
        ValueError: if a count is negative or not an integer.
    """
    row_a = as_counts(counts_a)
    row_b = as_counts(counts_b)

    categories = category_union(row_a, row_b)
    if not categories:
        logger.debug("chi_square_2xk: no categories")
        return ChiSquareResult.neutral()

    total_a = sum(row_a.get(cat, 0) for cat in categories)
    total_b = sum(row_b.get(cat, 0) for cat in categories)
    grand_total = total_a + total_b
    if grand_total == 0:
        logger.debug("chi_square_2xk: zero grand total")
        return ChiSquareResult.neutral()

    chi2 = 0.0
    for cat in categories:
        obs_a = row_a.get(cat, 0)
        obs_b = row_b.get(cat, 0)
        col_total = obs_a + obs_b
        exp_a = total_a * col_total / grand_total
        exp_b = total_b * col_total / grand_total
        if exp_a > 0:
            chi2 += (obs_a - exp_a) ** 2 / exp_a
        if exp_b > 0:
            chi2 += (obs_b - exp_b) ** 2 / exp_b

    df = max(0, len(categories) - 1)
    p_value = 1.0 if df == 0 else chi_square_sf(chi2, df)
    return ChiSquareResult(chi2=chi2, df=df, p_value=p_value)
