"""
expstats.api - Experiment Analysis Facade
=========================================

This module provides an off-the-shelf interface for analysing a
between-subjects experiment, organized by the questions a researcher asks
rather than by the statistical machinery underneath.

Examples
--------
>>> from expstats.api.conditions import compare_conditions
>>> cmp = compare_conditions([4, 5, 6, 5], [2, 3, 2, 3])
>>> cmp.primary_p_value < 0.05
True

Unified Interface
-----------------
All condition-level functionality lives in `expstats.api.conditions`:
- `compare_conditions()`: every two-sample result for one outcome
- `analyze_outcomes()`: many outcomes with a family-wise correction
- `evaluate_hypothesis()`: grade a directional prediction
- `compare_categories()`: balance check for a categorical variable

Secondary analyses live in `expstats.api.exploration`:
- `cumulative_progression()`: Welch's t-test after each recruitment batch
- `explore_predictor()` / `explore_grid()`: participant predictors vs outcomes

Architecture
------------
This facade delegates to the underlying components:
- expstats.core: names, input conversion and result records
- expstats.stats: numerics, hypothesis tests and corrections
- expstats.reporting: tabular views of the results
"""

from expstats.api.conditions import (
    AnalysisConfig,
    ConditionComparison,
    HypothesisResult,
    OutcomeResult,
    analyze_outcomes,
    compare_categories,
    compare_conditions,
    describe_conditions,
    evaluate_hypothesis,
)
from expstats.api.exploration import (
    PredictorResult,
    ProgressionPoint,
    cumulative_progression,
    explore_grid,
    explore_predictor,
)

__all__ = [
    "AnalysisConfig",
    "ConditionComparison",
    "HypothesisResult",
    "OutcomeResult",
    "PredictorResult",
    "ProgressionPoint",
    "analyze_outcomes",
    "compare_categories",
    "compare_conditions",
    "cumulative_progression",
    "describe_conditions",
    "evaluate_hypothesis",
    "explore_grid",
    "explore_predictor",
]
