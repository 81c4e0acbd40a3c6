"""
expstats.stats.schemes.association.correlation
==============================================

Pearson and Spearman correlation with two-tailed significance.

Both functions pair the first n = min(len(x), len(y)) values. Significance
uses t = r sqrt((n - 2) / (1 - r²)) against Student's t with n - 2 degrees of
freedom.

Spearman's rho is Pearson's r on the ranks. Tied values get the rank of
their *first* sorted position (see `expstats.stats.common.ranks`), not the
average rank, so with ties rho differs slightly from the textbook value.

Examples
--------
>>> from expstats.stats.schemes.association.correlation import (
...     pearson_correlation, spearman_correlation)
>>> res = pearson_correlation([1, 2, 3, 4], [1, 2, 3, 4])
>>> res.r, res.p_value, res.n
(1.0, 0.0, 4)
>>> spearman_correlation([1, 2, 3, 4], [1, 4, 9, 16]).r
1.0
>>> pearson_correlation([1, 2], [2, 1]).p_value
1.0
"""

from __future__ import annotations
import logging
import math
from typing import Sequence

from expstats.core.results import CorrelationResult
from expstats.core.samples import as_sample, paired_prefix
from expstats.stats.common.descriptive import mean
from expstats.stats.common.distributions import two_tailed_t_p_value
from expstats.stats.common.ranks import first_position_ranks

logger = logging.getLogger(__name__)

MIN_CORRELATION_N = 3


def _pearson(x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    n = len(x)
    if n < MIN_CORRELATION_N:
        logger.debug("correlation: need %d pairs, got %d", MIN_CORRELATION_N, n)
        return CorrelationResult.neutral(n)

    mx, my = mean(x), mean(y)
    ssx = ssy = sp = 0.0
    for xi, yi in zip(x, y):
        dx, dy = xi - mx, yi - my
        ssx += dx * dx
        ssy += dy * dy
        sp += dx * dy

    den = math.sqrt(ssx * ssy)
    if den == 0:
        logger.debug("correlation: zero variance in one variable")
        return CorrelationResult.neutral(n)

    r = max(-1.0, min(1.0, sp / den))
    if abs(r) == 1.0:
        # t is unbounded for a perfect linear relation.
        return CorrelationResult(r=r, p_value=0.0, n=n)

    t = r * math.sqrt((n - 2) / (1.0 - r * r))
    return CorrelationResult(r=r, p_value=two_tailed_t_p_value(t, n - 2), n=n)


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    """Pearson product-moment correlation; r = 0, p = 1 for fewer than 3 pairs."""
    xs, ys = paired_prefix(as_sample(x), as_sample(y))
    return _pearson(xs, ys)


def spearman_correlation(x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    """Spearman rank correlation (first-position tie ranks)."""
    xs, ys = paired_prefix(as_sample(x), as_sample(y))
    if len(xs) < MIN_CORRELATION_N:
        return CorrelationResult.neutral(len(xs))
    return _pearson(first_position_ranks(xs), first_position_ranks(ys))
