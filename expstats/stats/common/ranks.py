"""
expstats.stats.common.ranks
===========================

Rank transforms used by the nonparametric statistics.

Two tie conventions are provided because the tests need both:

- `average_ranks`: a tied block gets the mean of its positions (Mann-Whitney U)
- `first_position_ranks`: a tied block gets the rank of its first position
  (the convention the Spearman correlation in this package uses; it differs
  from the textbook mid-rank definition when ties are present)

Ranks are 1-based and returned in the order of the input.

Examples
--------
>>> from expstats.stats.common.ranks import average_ranks, first_position_ranks
>>> average_ranks([10, 20, 20, 30])
[1.0, 2.5, 2.5, 4.0]
>>> first_position_ranks([10, 20, 20, 30])
[1.0, 2.0, 2.0, 4.0]
"""

from __future__ import annotations
from typing import List, Sequence


def _order(values: Sequence[float]) -> List[int]:
    """Indices that sort the values ascending (stable)."""
    return sorted(range(len(values)), key=lambda i: values[i])


def average_ranks(values: Sequence[float]) -> List[float]:
    """Ranks with ties assigned the average of their positions."""
    order = _order(values)
    ranks = [0.0] * len(values)
    i = 0
    while i < len(order):
        j = i
        while j < len(order) and values[order[j]] == values[order[i]]:
            j += 1
        # Positions i..j-1 (0-based) hold ranks i+1..j.
        avg_rank = (i + 1 + j) / 2.0
        for k in range(i, j):
            ranks[order[k]] = avg_rank
        i = j
    return ranks


def first_position_ranks(values: Sequence[float]) -> List[float]:
    """Ranks with ties assigned the rank of their first sorted position."""
    order = _order(values)
    ranks = [0.0] * len(values)
    rank = 1
    for pos, idx in enumerate(order):
        if pos > 0 and values[idx] != values[order[pos - 1]]:
            rank = pos + 1
        ranks[idx] = float(rank)
    return ranks
