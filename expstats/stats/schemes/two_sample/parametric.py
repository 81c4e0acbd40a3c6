"""
expstats.stats.schemes.two_sample.parametric
============================================

Welch's t-test for two independent samples with unequal variances.

Mathematical Background
-----------------------
With group sizes n1, n2, means m1, m2 and sample variances v1, v2:

    se1 = v1 / n1,  se2 = v2 / n2
    t   = (m1 - m2) / sqrt(se1 + se2)
    df  = (se1 + se2)^2 / (se1^2 / (n1 - 1) + se2^2 / (n2 - 1))

The effect size is Cohen's d with the *pooled* standard deviation

    s_p = sqrt(((n1 - 1) v1 + (n2 - 1) v2) / (n1 + n2 - 2))

and the 95% interval for m1 - m2 uses the fixed normal critical value 1.96
rather than a df-dependent t quantile. Intervals are therefore slightly too
narrow for small samples.

Examples
--------
>>> from expstats.stats.schemes.two_sample.parametric import welch_t_test
>>> res = welch_t_test([10, 12, 14, 16, 18], [20, 22, 24, 26, 28])
>>> res.mean_diff, res.t, res.df
(-10.0, -5.0, 8.0)
>>> res.p_value < 0.01
True
"""

from __future__ import annotations
import logging
import math
from typing import Sequence

from expstats.core.results import TTestResult
from expstats.core.samples import as_sample
from expstats.stats.common.descriptive import mean, variance
from expstats.stats.common.distributions import two_tailed_t_p_value

logger = logging.getLogger(__name__)

# Large-sample critical value for the 95% interval.
CI95_CRITICAL_VALUE = 1.96


def pooled_std(n1: int, v1: float, n2: int, v2: float) -> float:
    """Pooled standard deviation of two samples; 0 without residual df."""
    dof = n1 + n2 - 2
    if dof <= 0:
        return 0.0
    return math.sqrt(((n1 - 1) * v1 + (n2 - 1) * v2) / dof)


def welch_t_test(group_a: Sequence[float], group_b: Sequence[float]) -> TTestResult:
    """
    Welch's unequal-variance t-test of mean(A) - mean(B).

    Args:
        group_a: Measurements of the first condition
        group_b: Measurements of the second condition

    Returns:
        TTestResult; neutral when either group has fewer than two values.
        With zero standard error (both groups constant) t is reported as 0
        and p as 1.
    """
    a = as_sample(group_a)
    b = as_sample(group_b)
    n1, n2 = len(a), len(b)
    if n1 < 2 or n2 < 2:
        logger.debug("welch_t_test: need two values per group, got %d and %d", n1, n2)
        return TTestResult.neutral()

    m1, m2 = mean(a), mean(b)
    v1, v2 = variance(a), variance(b)
    diff = m1 - m2

    se1 = v1 / n1
    se2 = v2 / n2
    se = math.sqrt(se1 + se2)
    if se == 0:
        logger.debug("welch_t_test: zero standard error, returning t=0")
        return TTestResult(
            t=0.0,
            df=float(n1 + n2 - 2),
            p_value=1.0,
            mean_diff=diff,
            cohens_d=0.0,
            ci95=(diff, diff),
        )

    t = diff / se
    df = (se1 + se2) ** 2 / (se1**2 / (n1 - 1) + se2**2 / (n2 - 1))
    p_value = two_tailed_t_p_value(t, df)

    sp = pooled_std(n1, v1, n2, v2)
    cohens_d = diff / sp if sp > 0 else 0.0

    half_width = CI95_CRITICAL_VALUE * se
    return TTestResult(
        t=t,
        df=df,
        p_value=p_value,
        mean_diff=diff,
        cohens_d=cohens_d,
        ci95=(diff - half_width, diff + half_width),
    )
