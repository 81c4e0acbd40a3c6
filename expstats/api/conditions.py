"""
expstats.api.conditions
=======================

Experiment-level facade for comparing two conditions.

This module runs the full battery of tests a between-subjects analysis needs
for each outcome measure, applies a multiple-comparison correction across
outcomes, and grades directional hypotheses against the corrected results.

Examples
--------
>>> from expstats.api.conditions import AnalysisConfig, analyze_outcomes, evaluate_hypothesis
>>> outcomes = {
...     "trust": ([5.1, 5.8, 6.0, 6.4, 5.5, 6.1], [4.2, 4.9, 5.0, 4.4, 5.3, 4.6]),
...     "warmth": ([3.0, 3.5, 4.0, 3.2, 3.9, 3.1], [3.1, 3.6, 3.8, 3.3, 3.4, 3.7]),
... }
>>> results = analyze_outcomes(outcomes, AnalysisConfig(alpha=0.05))
>>> [r.name for r in results]
['trust', 'warmth']
>>> results[0].significant, results[1].significant
(True, False)
>>> evaluate_hypothesis("H1", results[:1], "a_higher").supported.value
'yes'
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from expstats.core.names import (
    CORRECTION_METHODS,
    DIRECTIONS,
    PRIMARY_TESTS,
    Condition,
    CorrectionMethod,
    Direction,
    EffectSizeLabel,
    PrimaryTest,
    SupportLevel,
)
from expstats.core.results import (
    ChiSquareResult,
    DescriptiveStats,
    LeveneResult,
    MannWhitneyResult,
    ShapiroResult,
    TTestResult,
)
from expstats.core.samples import LabeledGroup, Number, as_sample
from expstats.stats.common.descriptive import describe
from expstats.stats.methods.effect_size.core import (
    interpret_cohens_d,
    interpret_rank_biserial,
)
from expstats.stats.methods.multiple_comparison.core import holm_correction
from expstats.stats.schemes.categorical.chi_square import chi_square_2xk
from expstats.stats.schemes.two_sample import (
    levene_test,
    mann_whitney_u,
    shapiro_wilk,
    welch_t_test,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """
    Settings for a two-condition analysis.

    Attributes
    ----------
    alpha : float, default=0.05
        Significance level applied to corrected p-values
    primary_test : {"welch", "mann_whitney"}, default="welch"
        Test whose p-value enters the multiple-comparison correction
    correction : {"holm", "none"}, default="holm"
        Family-wise correction across outcomes
    min_group_size : int, default=2
        Smallest group size for which the two-sample tests are run
    min_normality_size : int, default=3
        Smallest group size for which the normality check is run

    Examples
    --------
    >>> AnalysisConfig(alpha=0.01, primary_test="mann_whitney").validate()
    >>> AnalysisConfig(alpha=1.5).validate()
    Traceback (most recent call last):
        ...
    ValueError: Alpha must be in (0,1), got 1.5
    """

    alpha: float = 0.05
    primary_test: PrimaryTest = "welch"
    correction: CorrectionMethod = "holm"
    min_group_size: int = 2
    min_normality_size: int = 3

    def validate(self) -> None:
        """Validate analysis configuration."""
        if not 0 < self.alpha < 1:
            raise ValueError(f"Alpha must be in (0,1), got {self.alpha}")
        if self.primary_test not in PRIMARY_TESTS:
            raise ValueError(
                f"primary_test must be one of {PRIMARY_TESTS}, got {self.primary_test!r}"
            )
        if self.correction not in CORRECTION_METHODS:
            raise ValueError(
                f"correction must be one of {CORRECTION_METHODS}, got {self.correction!r}"
            )
        if self.min_group_size < 2:
            raise ValueError(
                f"min_group_size must be at least 2, got {self.min_group_size}"
            )
        if self.min_normality_size < 3:
            raise ValueError(
                f"min_normality_size must be at least 3, got {self.min_normality_size}"
            )


@dataclass(frozen=True)
class ConditionComparison:
    """
    All two-sample results for one outcome measure.

    Attributes
    ----------
    descriptive_a, descriptive_b : DescriptiveStats
        Per-condition summaries
    t_test : TTestResult
        Welch's t-test of A - B
    mann_whitney : MannWhitneyResult
        Rank-based comparison
    levene : LeveneResult
        Equality-of-variance check
    shapiro_a, shapiro_b : ShapiroResult
        Per-condition normality checks
    primary_test : str
        Which of the location tests supplies `primary_p_value`
    """

    descriptive_a: DescriptiveStats
    descriptive_b: DescriptiveStats
    t_test: TTestResult
    mann_whitney: MannWhitneyResult
    levene: LeveneResult
    shapiro_a: ShapiroResult
    shapiro_b: ShapiroResult
    primary_test: PrimaryTest = "welch"

    @property
    def primary_p_value(self) -> float:
        if self.primary_test == "mann_whitney":
            return self.mann_whitney.p_value
        return self.t_test.p_value

    @property
    def cohens_d_label(self) -> EffectSizeLabel:
        return interpret_cohens_d(self.t_test.cohens_d)

    @property
    def rank_biserial_label(self) -> EffectSizeLabel:
        return interpret_rank_biserial(self.mann_whitney.rank_biserial_r)

    @property
    def normality_ok(self) -> bool:
        return self.shapiro_a.is_normal and self.shapiro_b.is_normal


@dataclass(frozen=True)
class OutcomeResult:
    """A named outcome with its comparison and corrected p-value."""

    name: str
    comparison: ConditionComparison
    adjusted_p: float
    significant: bool

    @property
    def a_higher(self) -> bool:
        return self.comparison.t_test.mean_diff > 0


@dataclass(frozen=True)
class HypothesisResult:
    """Verdict for a directional hypothesis over one or more outcomes."""

    name: str
    direction: str
    supported: SupportLevel
    summary: str
    outcomes: Tuple[OutcomeResult, ...] = field(default_factory=tuple)


def compare_conditions(
    group_a: Sequence[Number],
    group_b: Sequence[Number],
    config: Optional[AnalysisConfig] = None,
) -> ConditionComparison:
    """
    Run descriptive statistics, location tests and assumption checks.

    Groups below `config.min_group_size` get neutral two-sample results and
    groups below `config.min_normality_size` a neutral normality check, so
    the comparison is always fully populated.

    Examples
    --------
    >>> cmp = compare_conditions([1, 2, 3, 4], [3, 4, 5, 6])
    >>> cmp.t_test.mean_diff, cmp.cohens_d_label
    (-2.0, 'large')
    >>> compare_conditions([1.0], [2.0, 3.0]).t_test.p_value
    1.0
    """
    config = config or AnalysisConfig()
    config.validate()

    a = as_sample(group_a)
    b = as_sample(group_b)
    enough = len(a) >= config.min_group_size and len(b) >= config.min_group_size
    if not enough:
        logger.debug(
            "compare_conditions: groups of %d and %d are below min_group_size=%d",
            len(a),
            len(b),
            config.min_group_size,
        )

    return ConditionComparison(
        descriptive_a=describe(a),
        descriptive_b=describe(b),
        t_test=welch_t_test(a, b) if enough else TTestResult.neutral(),
        mann_whitney=mann_whitney_u(a, b) if enough else MannWhitneyResult.neutral(),
        levene=levene_test(a, b) if enough else LeveneResult.neutral(),
        shapiro_a=(
            shapiro_wilk(a)
            if len(a) >= config.min_normality_size
            else ShapiroResult.neutral()
        ),
        shapiro_b=(
            shapiro_wilk(b)
            if len(b) >= config.min_normality_size
            else ShapiroResult.neutral()
        ),
        primary_test=config.primary_test,
    )


def correct_p_values(
    p_values: Sequence[float], method: CorrectionMethod = "holm"
) -> List[float]:
    """Apply the configured family-wise correction."""
    if method == "holm":
        return holm_correction(p_values)
    if method == "none":
        return list(p_values)
    raise ValueError(f"Unknown correction method: {method}")


def analyze_outcomes(
    outcomes: Mapping[str, Tuple[Sequence[Number], Sequence[Number]]],
    config: Optional[AnalysisConfig] = None,
) -> List[OutcomeResult]:
    """
    Compare two conditions on several outcome measures.

    Parameters
    ----------
    outcomes : mapping
        Outcome name -> (values in condition A, values in condition B)
    config : AnalysisConfig, optional
        Analysis settings; defaults to Welch + Holm at alpha = 0.05

    Returns
    -------
    list of OutcomeResult
        In the mapping's order, with corrected p-values and significance
    """
    config = config or AnalysisConfig()
    config.validate()

    names = list(outcomes)
    comparisons = [compare_conditions(*outcomes[name], config=config) for name in names]
    adjusted = correct_p_values([c.primary_p_value for c in comparisons], config.correction)

    results = [
        OutcomeResult(
            name=name,
            comparison=comparison,
            adjusted_p=p,
            significant=p < config.alpha,
        )
        for name, comparison, p in zip(names, comparisons, adjusted)
    ]
    logger.info(
        "Analyzed %d outcomes (%s, %s correction): %d significant at alpha=%s",
        len(results),
        config.primary_test,
        config.correction,
        sum(r.significant for r in results),
        config.alpha,
    )
    return results


def evaluate_hypothesis(
    name: str, results: Sequence[OutcomeResult], direction: Direction
) -> HypothesisResult:
    """
    Grade a directional hypothesis against corrected outcome results.

    Parameters
    ----------
    name : str
        Hypothesis identifier
    results : sequence of OutcomeResult
        Outcomes the hypothesis makes a prediction about
    direction : {"a_higher", "b_higher"}
        Predicted direction of the difference

    Returns
    -------
    HypothesisResult
        YES when every outcome is significant in the predicted direction,
        PARTIAL when some are, OPPOSITE when only opposite effects are
        significant, NO otherwise.
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")

    predicted_a_higher = direction == "a_higher"
    significant = [r for r in results if r.significant]
    as_predicted = [r for r in significant if r.a_higher == predicted_a_higher]
    opposite = [r for r in significant if r.a_higher != predicted_a_higher]

    if significant and len(as_predicted) == len(results):
        supported = SupportLevel.YES
        summary = (
            f"Supported: All {len(significant)} measure(s) significant in predicted direction"
        )
    elif as_predicted:
        supported = SupportLevel.PARTIAL
        summary = (
            f"Partially supported: {len(as_predicted)}/{len(results)} "
            "significant in predicted direction"
        )
    elif opposite:
        supported = SupportLevel.OPPOSITE
        summary = (
            f"Opposite effect: {len(opposite)} measure(s) significant in opposite direction"
        )
    else:
        supported = SupportLevel.NO
        summary = "Not supported: No significant differences found"

    return HypothesisResult(
        name=name,
        direction=direction,
        supported=supported,
        summary=summary,
        outcomes=tuple(results),
    )


def compare_categories(
    counts_a: Mapping[str, Number], counts_b: Mapping[str, Number]
) -> ChiSquareResult:
    """
    Test a categorical baseline variable (e.g. gender) for balance.

    Examples
    --------
    >>> compare_categories({"f": 12, "m": 10}, {"f": 12, "m": 10}).p_value
    1.0
    """
    return chi_square_2xk(counts_a, counts_b)


def describe_conditions(
    groups: Mapping[str, Sequence[Number]]
) -> Dict[Condition, DescriptiveStats]:
    """
    Descriptive statistics for each named condition.

    Examples
    --------
    >>> summary = describe_conditions({"formal": [4, 5, 6], "informal": []})
    >>> summary["formal"].mean, summary["informal"].n
    (5.0, 0)
    """
    labeled = [LabeledGroup.of(label, values) for label, values in groups.items()]
    return {Condition(g.label): describe(g.values) for g in labeled}
