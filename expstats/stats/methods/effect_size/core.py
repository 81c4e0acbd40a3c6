"""
expstats.stats.methods.effect_size.core
=======================================

Qualitative labels and ratios for effect sizes.

Cohen's d uses the conventional 0.2 / 0.5 / 0.8 cut-offs; the rank-biserial
correlation uses 0.1 / 0.3 / 0.5. Both compare the absolute value.

Examples
--------
>>> from expstats.stats.methods.effect_size.core import interpret_cohens_d, interpret_rank_biserial
>>> interpret_cohens_d(-0.55)
'medium'
>>> interpret_rank_biserial(0.05)
'negligible'
"""

from __future__ import annotations
from typing import Sequence, Tuple

from expstats.core.names import EffectSizeLabel

COHENS_D_CUTOFFS: Tuple[float, ...] = (0.2, 0.5, 0.8)
RANK_BISERIAL_CUTOFFS: Tuple[float, ...] = (0.1, 0.3, 0.5)
_LABELS: Tuple[EffectSizeLabel, ...] = ("negligible", "small", "medium", "large")


def _classify(value: float, cutoffs: Sequence[float]) -> EffectSizeLabel:
    magnitude = abs(value)
    for label, cutoff in zip(_LABELS, cutoffs):
        if magnitude < cutoff:
            return label
    return _LABELS[-1]


def interpret_cohens_d(d: float) -> EffectSizeLabel:
    return _classify(d, COHENS_D_CUTOFFS)


def interpret_rank_biserial(r: float) -> EffectSizeLabel:
    return _classify(r, RANK_BISERIAL_CUTOFFS)


def partial_eta_squared(ss_effect: float, ss_error: float) -> float:
    """SS_effect / (SS_effect + SS_error); 0 when both are zero."""
    total = ss_effect + ss_error
    if total == 0:
        return 0.0
    return ss_effect / total
