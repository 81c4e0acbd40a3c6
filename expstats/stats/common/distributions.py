"""
expstats.stats.common.distributions
===================================

Cumulative distribution functions built on the special functions.

- `student_t_cdf`: Student-t via the incomplete beta function
- `f_cdf`: Fisher F via the incomplete beta function
- `chi_square_cdf`: chi-square via the lower regularized gamma function

plus the tail helpers the tests use to turn statistics into p-values.

Note on `student_t_cdf`: the closed form depends on t only through t², so it
returns the same value for t and -t. It is correct for t >= 0, which is how
every caller in this package uses it (two-tailed p-values from |t|). Do not
use it directly for a one-sided p-value with a negative statistic.

Examples
--------
>>> from expstats.stats.common.distributions import student_t_cdf, f_cdf, chi_square_cdf
>>> student_t_cdf(0.0, 7)
0.5
>>> f_cdf(0.0, 2, 10), chi_square_cdf(-1.0, 3)
(0.0, 0.0)
"""

from __future__ import annotations

from expstats.stats.common.special import (
    lower_regularized_gamma,
    normal_cdf,
    regularized_incomplete_beta,
)

# Above this many degrees of freedom the t distribution is treated as normal.
T_NORMAL_DF_CUTOFF = 100


def clip_probability(p: float) -> float:
    """Clamp a probability into [0, 1]; NaN passes through."""
    if p < 0.0:
        return 0.0
    if p > 1.0:
        return 1.0
    return p


def student_t_cdf(t: float, df: float) -> float:
    """
    CDF of Student's t distribution for t >= 0.

    Args:
        t: Statistic value
        df: Degrees of freedom (> 0)

    Returns:
        P(T <= t); symmetric in t (see module note)

    Examples:
        >>> round(student_t_cdf(2.228, 10), 3)
        0.975
    """
    if df > T_NORMAL_DF_CUTOFF:
        return normal_cdf(t)
    x = df / (df + t * t)
    return 1.0 - 0.5 * regularized_incomplete_beta(df / 2.0, 0.5, x)


def f_cdf(f: float, df1: float, df2: float) -> float:
    """
    CDF of the F distribution.

    Examples:
        >>> round(f_cdf(4.96, 1, 10), 3)
        0.95
    """
    if f <= 0:
        return 0.0
    x = df1 * f / (df1 * f + df2)
    return regularized_incomplete_beta(df1 / 2.0, df2 / 2.0, x)


def chi_square_cdf(x: float, df: float) -> float:
    """
    CDF of the chi-square distribution.

    Examples:
        >>> round(chi_square_cdf(3.841, 1), 3)
        0.95
    """
    if x <= 0:
        return 0.0
    return lower_regularized_gamma(df / 2.0, x / 2.0)


def two_tailed_t_p_value(t: float, df: float) -> float:
    """Two-tailed p-value 2 * (1 - F_t(|t|))."""
    return clip_probability(2.0 * (1.0 - student_t_cdf(abs(t), df)))


def two_tailed_z_p_value(z: float) -> float:
    """Two-tailed p-value 2 * (1 - Φ(|z|))."""
    return clip_probability(2.0 * (1.0 - normal_cdf(abs(z))))


def f_sf(f: float, df1: float, df2: float) -> float:
    """Upper tail 1 - F_F(f)."""
    return clip_probability(1.0 - f_cdf(f, df1, df2))


def chi_square_sf(x: float, df: float) -> float:
    """Upper tail 1 - F_chi2(x)."""
    return clip_probability(1.0 - chi_square_cdf(x, df))
