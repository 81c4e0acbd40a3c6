"""
expstats.stats.common.descriptive
=================================

Descriptive statistics for a single sample.

Inputs are converted with `as_sample` first, so any iterable of numbers
(lists, tuples, generators, NumPy arrays) is accepted. Degenerate inputs
return zeros rather than raising: an empty sample has mean 0, and a variance
needs more values than the degrees-of-freedom adjustment.

Examples
--------
>>> from expstats.stats.common.descriptive import mean, variance, describe
>>> mean([1, 2, 3, 4])
2.5
>>> variance([1, 2, 3, 4]), variance([1, 2, 3, 4], ddof=0)
(1.6666666666666667, 1.25)
>>> describe([3, 1, 2]).median
2.0
"""

from __future__ import annotations
import math
from typing import Iterable, Sequence

from expstats.core.results import DescriptiveStats
from expstats.core.samples import Number, as_sample


def mean(data: Iterable[Number]) -> float:
    values = as_sample(data)
    if not values:
        return 0.0
    return sum(values) / len(values)


def variance(data: Iterable[Number], ddof: int = 1) -> float:
    """Variance with denominator n - ddof; 0 when n <= ddof."""
    values = as_sample(data)
    n = len(values)
    if n <= ddof:
        return 0.0
    m = mean(values)
    return sum((x - m) ** 2 for x in values) / (n - ddof)


def std(data: Iterable[Number], ddof: int = 1) -> float:
    return math.sqrt(variance(data, ddof))


def sem(data: Iterable[Number]) -> float:
    """Standard error of the mean (sample SD / sqrt(n))."""
    values = as_sample(data)
    if not values:
        return 0.0
    return std(values) / math.sqrt(len(values))


def sum_of_squares(data: Iterable[Number]) -> float:
    """Sum of squared deviations from the mean."""
    values = as_sample(data)
    m = mean(values)
    return sum((x - m) ** 2 for x in values)


def quantile(sorted_data: Sequence[float], p: float) -> float:
    """
    Linear-interpolation quantile of already sorted data.

    The rank is p * (n - 1); values at the floor and ceiling ranks are
    interpolated.

    Examples:
        >>> quantile([1.0, 2.0, 3.0, 4.0], 0.25)
        1.75
    """
    idx = p * (len(sorted_data) - 1)
    low = math.floor(idx)
    high = math.ceil(idx)
    if low == high:
        return sorted_data[low]
    return sorted_data[low] * (high - idx) + sorted_data[high] * (idx - low)


def describe(data: Iterable[Number]) -> DescriptiveStats:
    """
    Summarize a sample: n, mean, std, sem, min, max, median, quartiles.

    An empty sample yields an all-zero summary.
    """
    values = as_sample(data)
    if not values:
        return DescriptiveStats.empty()

    ordered = sorted(values)
    return DescriptiveStats(
        n=len(values),
        mean=mean(values),
        std=std(values),
        sem=sem(values),
        min=ordered[0],
        max=ordered[-1],
        median=quantile(ordered, 0.5),
        q1=quantile(ordered, 0.25),
        q3=quantile(ordered, 0.75),
    )
