"""
Effect-size interpretation.

Threshold-based qualitative labels for Cohen's d and the rank-biserial
correlation, and the partial eta-squared ratio, are available in the `core`
module.
"""

from expstats.stats.methods.effect_size.core import (
    interpret_cohens_d,
    interpret_rank_biserial,
    partial_eta_squared,
)

__all__ = ["interpret_cohens_d", "interpret_rank_biserial", "partial_eta_squared"]
