"""
Multiple-comparison corrections.

This module adjusts a family of p-values, typically one per outcome measure of
an experiment, so that the family-wise error rate stays at alpha.

The Holm-Bonferroni procedure and the rejection helper are available in the
`core` module.
"""

from expstats.stats.methods.multiple_comparison.core import holm_correction, reject_null

__all__ = ["holm_correction", "reject_null"]
