"""
expstats.stats.schemes.two_sample.assumptions
=============================================

Assumption checks run alongside the two-sample comparisons.

**Levene's test** compares the spread of two groups by running a one-way
ANOVA on the absolute deviations |x - mean(group)|. Deviations are taken from
the group *mean*, the original Levene formulation, rather than the median
(Brown-Forsythe), so it is more sensitive to skewed data.

**Shapiro-Wilk (approximate)** correlates the sorted sample with expected
normal scores m_i = Φ⁻¹((i + 0.5) / n):

    W = (Σ m_i x_(i))² / (SS · Σ m_i² · c_n),  c_n = 1 + 0.221/√n - 0.147/n

and reads the p-value off four fixed thresholds (W > 0.95 → 0.5,
> 0.90 → 0.1, > 0.85 → 0.05, otherwise 0.01). It is a quick diagnostic for
choosing between the parametric and rank-based tests, not a citable
normality test.

Examples
--------
>>> from expstats.stats.schemes.two_sample.assumptions import levene_test, shapiro_wilk
>>> res = levene_test([1, 2, 3, 4], [2, 4, 6, 8])
>>> res.df1, res.df2
(1.0, 6.0)
>>> shapiro_wilk([1.0, 2.0]).is_normal
True
"""

from __future__ import annotations
import logging
import math
from typing import Sequence

from expstats.core.results import LeveneResult, ShapiroResult
from expstats.core.samples import as_sample
from expstats.stats.common.descriptive import mean, sum_of_squares
from expstats.stats.common.distributions import f_sf
from expstats.stats.common.special import normal_quantile

logger = logging.getLogger(__name__)

# (lower bound on W, p-value), checked in order.
SHAPIRO_P_THRESHOLDS = ((0.95, 0.5), (0.90, 0.1), (0.85, 0.05))
SHAPIRO_P_FLOOR = 0.01
NORMALITY_ALPHA = 0.05


def levene_test(group_a: Sequence[float], group_b: Sequence[float]) -> LeveneResult:
    """
    Levene's test for equal variances in two groups (mean-centred).

    Returns:
        LeveneResult with W ~ F(1, N - 2) under the null; neutral when a
        group has fewer than two values, W = 0 and p = 1 when the deviations
        have no within-group spread.
    """
    a = as_sample(group_a)
    b = as_sample(group_b)
    n1, n2 = len(a), len(b)
    if n1 < 2 or n2 < 2:
        logger.debug("levene_test: need two values per group, got %d and %d", n1, n2)
        return LeveneResult.neutral()

    k = 2
    total = n1 + n2
    df1 = float(k - 1)
    df2 = float(total - k)

    m1, m2 = mean(a), mean(b)
    z1 = [abs(x - m1) for x in a]
    z2 = [abs(x - m2) for x in b]
    z1_mean, z2_mean = mean(z1), mean(z2)
    z_grand = (z1_mean * n1 + z2_mean * n2) / total

    between = n1 * (z1_mean - z_grand) ** 2 + n2 * (z2_mean - z_grand) ** 2
    within = sum_of_squares(z1) + sum_of_squares(z2)
    if within == 0:
        logger.debug("levene_test: zero within-group deviation spread")
        return LeveneResult(w=0.0, df1=df1, df2=df2, p_value=1.0)

    w = (df2 * between) / (df1 * within)
    return LeveneResult(w=w, df1=df1, df2=df2, p_value=f_sf(w, df1, df2))


def order_statistic_normalizer(n: int) -> float:
    """Approximate normalizer c_n for the order-statistic coefficients."""
    return 1.0 + 0.221 / math.sqrt(n) - 0.147 / n


def shapiro_p_value(w: float) -> float:
    """Coarse p-value for the approximate W statistic."""
    for bound, p in SHAPIRO_P_THRESHOLDS:
        if w > bound:
            return p
    return SHAPIRO_P_FLOOR


def shapiro_wilk(data: Sequence[float]) -> ShapiroResult:
    """
    Approximate Shapiro-Wilk normality check.

    Returns:
        ShapiroResult with W in [0, 1]; neutral (W = 1, p = 1) for fewer
        than three values or a constant sample.
    """
    values = as_sample(data)
    n = len(values)
    if n < 3:
        logger.debug("shapiro_wilk: need three values, got %d", n)
        return ShapiroResult.neutral()

    ss = sum_of_squares(values)
    if ss == 0:
        logger.debug("shapiro_wilk: constant sample")
        return ShapiroResult.neutral()

    ordered = sorted(values)
    scores = [normal_quantile((i + 0.5) / n) for i in range(n)]
    b = sum(m * x for m, x in zip(scores, ordered))
    score_ss = sum(m * m for m in scores)

    w = b * b / (ss * score_ss * order_statistic_normalizer(n))
    w = min(max(w, 0.0), 1.0)
    p_value = shapiro_p_value(w)
    return ShapiroResult(w=w, p_value=p_value, is_normal=p_value > NORMALITY_ALPHA)
