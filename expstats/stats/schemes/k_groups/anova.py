"""
expstats.stats.schemes.k_groups.anova
=====================================

One-way analysis of variance across k independent groups.

    SS_between = Σ n_i (mean_i - grand_mean)²
    SS_within  = Σ_i Σ_j (x_ij - mean_i)²
    F          = (SS_between / (k - 1)) / (SS_within / (N - k))
    eta²       = SS_between / (SS_between + SS_within)

Examples
--------
>>> from expstats.stats.schemes.k_groups.anova import one_way_anova
>>> res = one_way_anova([[1, 2, 3], [1, 2, 3], [1, 2, 3]])
>>> res.f, res.p_value, res.eta_sq
(0.0, 1.0, 0.0)
>>> res.group_means, res.group_ns
((2.0, 2.0, 2.0), (3, 3, 3))
"""

from __future__ import annotations
import logging
from typing import Iterable, Sequence

from expstats.core.results import AnovaResult
from expstats.core.samples import as_groups
from expstats.stats.common.descriptive import mean, sum_of_squares
from expstats.stats.common.distributions import f_sf

logger = logging.getLogger(__name__)


def one_way_anova(groups: Iterable[Sequence[float]]) -> AnovaResult:
    """
    F-test for equality of k group means.

    Args:
        groups: One sample per condition

    Returns:
        AnovaResult. With fewer than two groups or fewer than k + 1 values
        in total, F = 0, p = 1 and eta² = 0, with group means and sizes
        still reported.
    """
    samples = as_groups(groups)
    k = len(samples)
    group_ns = tuple(len(g) for g in samples)
    group_means = tuple(mean(g) for g in samples)
    n = sum(group_ns)

    if k < 2 or n < k + 1:
        logger.debug("one_way_anova: degenerate design (k=%d, N=%d)", k, n)
        return AnovaResult(
            f=0.0,
            df1=0.0,
            df2=0.0,
            p_value=1.0,
            eta_sq=0.0,
            group_means=group_means,
            group_ns=group_ns,
        )

    grand_mean = mean([x for g in samples for x in g])
    ss_between = sum(
        ni * (mi - grand_mean) ** 2 for ni, mi in zip(group_ns, group_means)
    )
    ss_within = sum(sum_of_squares(g) for g in samples)

    df1 = k - 1
    df2 = n - k
    ms_between = ss_between / df1
    ms_within = ss_within / df2
    f = ms_between / ms_within if ms_within > 0 else 0.0

    ss_total = ss_between + ss_within
    eta_sq = ss_between / ss_total if ss_total > 0 else 0.0

    return AnovaResult(
        f=f,
        df1=float(df1),
        df2=float(df2),
        p_value=f_sf(f, df1, df2),
        eta_sq=eta_sq,
        group_means=group_means,
        group_ns=group_ns,
    )
