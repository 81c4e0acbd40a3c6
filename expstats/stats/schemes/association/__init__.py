"""
Association measures between two variables measured on the same participants.

- `pearson_correlation`: linear correlation
- `spearman_correlation`: rank correlation
"""

from expstats.stats.schemes.association.correlation import (
    pearson_correlation,
    spearman_correlation,
)

__all__ = ["pearson_correlation", "spearman_correlation"]
