"""
expstats.api.exploration
========================

Secondary analyses run alongside the confirmatory comparison.

- `cumulative_progression`: re-runs Welch's t-test on the cumulative samples
  after each recruitment batch, to show how the evidence built up.
- `explore_predictor`: relates one participant-level predictor (age, gender,
  ...) to one outcome, choosing the test from the predictor's measurement
  level.
- `explore_grid`: `explore_predictor` over every predictor x outcome pair.

Nothing here is corrected for multiple comparisons; the results are
descriptive.

Examples
--------
>>> from expstats.api.exploration import cumulative_progression, explore_predictor
>>> points = cumulative_progression({"pilot": ([5, 6], [3]), "main": ([7, 6], [4, 3])})
>>> [(p.step_label, p.n_a, p.n_b, p.p_value is None) for p in points]
[('B1', 2, 1, True), ('B2', 4, 3, False)]
>>> pairs = [(20, 3.1), (25, 3.4), (31, 3.9), (40, 4.4), (52, 4.8)]
>>> res = explore_predictor(pairs, "continuous")
>>> res.test, res.statistic, res.n
('spearman', 1.0, 5)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from expstats.core.names import CORRELATION_METHODS, PREDICTOR_KINDS, PredictorKind
from expstats.core.samples import Number, as_sample
from expstats.stats.schemes.association import pearson_correlation, spearman_correlation
from expstats.stats.schemes.k_groups import one_way_anova
from expstats.stats.schemes.two_sample import welch_t_test

from expstats.api.conditions import AnalysisConfig

logger = logging.getLogger(__name__)

MIN_PREDICTOR_PAIRS = 5
MIN_CATEGORY_SIZE = 2
UNKNOWN_CATEGORY = "Unknown"


@dataclass(frozen=True)
class ProgressionPoint:
    """Welch's t-test on everything collected up to and including one batch.

    ``p_value``, ``significant`` and ``cohens_d`` are None until both
    conditions have reached the configured minimum group size.
    """

    batch_label: str
    step: int
    batch_participants: int
    cumulative_participants: int
    n_a: int
    n_b: int
    p_value: Optional[float]
    significant: Optional[bool]
    cohens_d: Optional[float]

    @property
    def step_label(self) -> str:
        return f"B{self.step}"


@dataclass(frozen=True)
class PredictorResult:
    """
    Association between one predictor and one outcome.

    Attributes
    ----------
    kind : {"continuous", "categorical"}
        Measurement level of the predictor
    test : {"spearman", "pearson", "welch", "anova"}
        Test that produced the result
    statistic : float
        Correlation coefficient, Cohen's d or eta² depending on `test`
    p_value : float
        Two-tailed p-value
    n : int
        Number of usable (predictor, outcome) pairs
    n_groups : int
        Categories that entered the test; 0 for a continuous predictor
    """

    kind: str
    test: str
    statistic: float
    p_value: float
    n: int
    n_groups: int = 0

    @property
    def effect_label(self) -> str:
        symbol = {"spearman": "rho", "pearson": "r", "welch": "d", "anova": "eta²"}
        return f"{symbol[self.test]} = {self.statistic:.2f}"


def cumulative_progression(
    batches: Mapping[str, Tuple[Sequence[Number], Sequence[Number]]],
    config: Optional[AnalysisConfig] = None,
) -> List[ProgressionPoint]:
    """
    Track Welch's t-test as batches accumulate.

    Parameters
    ----------
    batches : mapping
        Batch label -> (values in condition A, values in condition B), in
        recruitment order
    config : AnalysisConfig, optional
        Supplies `alpha` and `min_group_size`

    Returns
    -------
    list of ProgressionPoint
        One point per batch, including batches that added nobody
    """
    config = config or AnalysisConfig()
    config.validate()

    cumulative_a: List[float] = []
    cumulative_b: List[float] = []
    points = []
    for step, (label, (batch_a, batch_b)) in enumerate(batches.items(), start=1):
        a = as_sample(batch_a)
        b = as_sample(batch_b)
        cumulative_a.extend(a)
        cumulative_b.extend(b)

        p_value = significant = cohens_d = None
        if min(len(cumulative_a), len(cumulative_b)) >= config.min_group_size:
            test = welch_t_test(cumulative_a, cumulative_b)
            p_value = test.p_value
            significant = p_value < config.alpha
            cohens_d = test.cohens_d

        points.append(
            ProgressionPoint(
                batch_label=str(label),
                step=step,
                batch_participants=len(a) + len(b),
                cumulative_participants=len(cumulative_a) + len(cumulative_b),
                n_a=len(cumulative_a),
                n_b=len(cumulative_b),
                p_value=p_value,
                significant=significant,
                cohens_d=cohens_d,
            )
        )
    return points


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return isinstance(value, float) and math.isnan(value)


def _usable_pairs(pairs: Iterable[Tuple[Any, Optional[Number]]]) -> List[Tuple[Any, float]]:
    usable = []
    for predictor, outcome in pairs:
        if _is_missing(predictor) or outcome is None:
            continue
        y = float(outcome)
        if math.isfinite(y):
            usable.append((predictor, y))
    return usable


def explore_predictor(
    pairs: Iterable[Tuple[Any, Optional[Number]]],
    kind: PredictorKind,
    method: str = "spearman",
) -> Optional[PredictorResult]:
    """
    Relate a participant-level predictor to an outcome.

    Pairs with a missing predictor (None, "" or NaN) or a missing or
    non-finite outcome are dropped first; fewer than five remaining pairs
    give None.

    A continuous predictor is correlated with the outcome (`method` is
    "spearman" or "pearson"). A categorical predictor splits the outcome
    into groups by category (blank labels become "Unknown"); groups with
    fewer than two values are dropped, and at least two groups must remain
    or the result is None. Two groups are compared with Welch's t-test
    (statistic = Cohen's d), three or more with one-way ANOVA
    (statistic = eta²).

    Raises:
        ValueError: for an unknown `kind` or `method`, or a continuous
            predictor value that is not numeric.

    Examples
    --------
    >>> pairs = [("f", 4.0), ("f", 5.0), ("m", 2.0), ("m", 3.0), ("x", 9.0)]
    >>> res = explore_predictor(pairs, "categorical")
    >>> res.test, res.n_groups, res.n
    ('welch', 2, 5)
    >>> explore_predictor(pairs[:4], "categorical") is None
    True
    """
    if kind not in PREDICTOR_KINDS:
        raise ValueError(f"kind must be one of {PREDICTOR_KINDS}, got {kind!r}")
    if method not in CORRELATION_METHODS:
        raise ValueError(f"method must be one of {CORRELATION_METHODS}, got {method!r}")

    usable = _usable_pairs(pairs)
    if len(usable) < MIN_PREDICTOR_PAIRS:
        logger.debug("explore_predictor: %d usable pairs, need %d", len(usable), MIN_PREDICTOR_PAIRS)
        return None

    if kind == "continuous":
        numeric = [(float(x), y) for x, y in usable]
        numeric = [(x, y) for x, y in numeric if math.isfinite(x)]
        if len(numeric) < MIN_PREDICTOR_PAIRS:
            return None
        xs = [x for x, _ in numeric]
        ys = [y for _, y in numeric]
        correlate = spearman_correlation if method == "spearman" else pearson_correlation
        res = correlate(xs, ys)
        return PredictorResult(
            kind=kind, test=method, statistic=res.r, p_value=res.p_value, n=res.n
        )

    by_category: Dict[str, List[float]] = {}
    for category, y in usable:
        label = str(category).strip() or UNKNOWN_CATEGORY
        by_category.setdefault(label, []).append(y)
    groups = [g for g in by_category.values() if len(g) >= MIN_CATEGORY_SIZE]
    if len(groups) < 2:
        logger.debug("explore_predictor: %d categories with enough values", len(groups))
        return None

    if len(groups) == 2:
        t = welch_t_test(groups[0], groups[1])
        test, statistic, p_value = "welch", t.cohens_d, t.p_value
    else:
        anova = one_way_anova(groups)
        test, statistic, p_value = "anova", anova.eta_sq, anova.p_value
    return PredictorResult(
        kind=kind,
        test=test,
        statistic=statistic,
        p_value=p_value,
        n=len(usable),
        n_groups=len(groups),
    )


def explore_grid(
    predictors: Mapping[str, Tuple[PredictorKind, Sequence[Any]]],
    outcomes: Mapping[str, Sequence[Optional[Number]]],
    method: str = "spearman",
) -> Dict[Tuple[str, str], PredictorResult]:
    """
    Run `explore_predictor` for every predictor x outcome combination.

    Predictor and outcome sequences are aligned by participant position and
    must all have the same length; None marks a missing value. Combinations
    that `explore_predictor` skips are absent from the result.

    Raises:
        ValueError: if the sequences differ in length.
    """
    lengths = {len(values) for _, values in predictors.values()}
    lengths.update(len(values) for values in outcomes.values())
    if len(lengths) > 1:
        raise ValueError(f"Predictor and outcome columns differ in length: {sorted(lengths)}")

    cells: Dict[Tuple[str, str], PredictorResult] = {}
    for pred_name, (kind, pred_values) in predictors.items():
        for outcome_name, outcome_values in outcomes.items():
            res = explore_predictor(zip(pred_values, outcome_values), kind, method)
            if res is not None:
                cells[(pred_name, outcome_name)] = res
    logger.info(
        "Explored %d predictor x outcome pairs, %d with enough data",
        len(predictors) * len(outcomes),
        len(cells),
    )
    return cells
