"""
expstats.core.names
===================

Typed names shared across the package.

- `SupportLevel`: an Enum for the verdicts of a directional hypothesis.
- `Condition`: NewType wrapper for condition labels.
- Common `Literal` tags for effect-size labels, directions and test names.

Examples
--------
>>> from expstats.core.names import SupportLevel, Condition
>>> SupportLevel.PARTIAL.value
'partial'
>>> c = Condition("formal"); isinstance(c, str)
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, NewType


class SupportLevel(str, Enum):
    """Verdicts for a directional hypothesis over one or more outcomes.

    - YES: every outcome significant in the predicted direction
    - PARTIAL: some outcomes significant in the predicted direction
    - NO: nothing significant
    - OPPOSITE: only significant effects against the prediction
    """

    YES = "yes"
    PARTIAL = "partial"
    NO = "no"
    OPPOSITE = "opposite"


# Thin wrapper over str for condition labels ("formal", "informal", ...).
Condition = NewType("Condition", str)

EffectSizeLabel = Literal["negligible", "small", "medium", "large"]
Direction = Literal["a_higher", "b_higher"]

# Test names accepted by AnalysisConfig.
PrimaryTest = Literal["welch", "mann_whitney"]
CorrectionMethod = Literal["holm", "none"]

PRIMARY_TESTS = ("welch", "mann_whitney")
CORRECTION_METHODS = ("holm", "none")
DIRECTIONS = ("a_higher", "b_higher")

# Measurement level of an exploratory predictor.
PredictorKind = Literal["continuous", "categorical"]
PREDICTOR_KINDS = ("continuous", "categorical")
CORRELATION_METHODS = ("spearman", "pearson")
