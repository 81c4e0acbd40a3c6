"""
expstats.stats.methods.multiple_comparison.core
===============================================

Family-wise error control for a set of p-values.

Implements the Holm-Bonferroni step-down procedure: sort the m p-values
ascending, multiply the j-th smallest (0-based) by m - j, cap at 1, and carry
a running maximum so adjusted values never decrease with rank. Adjusted
values are returned in input order.

Examples
--------
>>> from expstats.stats.methods.multiple_comparison.core import holm_correction, reject_null
>>> holm_correction([0.5, 0.125, 0.25])
[0.5, 0.375, 0.5]
>>> reject_null([0.01, 0.05, 0.2], alpha=0.05)
[True, False, False]
"""

from __future__ import annotations
from typing import List, Sequence


def holm_correction(p_values: Sequence[float]) -> List[float]:
    """
    Holm-Bonferroni adjusted p-values.

    Args:
        p_values: Raw p-values, in any order

    Returns:
        Adjusted p-values aligned with the input; ties keep input order.
    """
    m = len(p_values)
    order = sorted(range(m), key=lambda i: p_values[i])

    adjusted = [0.0] * m
    running_max = 0.0
    for rank, idx in enumerate(order):
        candidate = min(p_values[idx] * (m - rank), 1.0)
        running_max = max(running_max, candidate)
        adjusted[idx] = running_max
    return adjusted


def reject_null(adjusted: Sequence[float], alpha: float = 0.05) -> List[bool]:
    """Flag p-values strictly below alpha."""
    return [p < alpha for p in adjusted]
