"""
expstats.core.results
=====================

Result records returned by the statistical tests.

Records are frozen dataclasses: a fresh one is built per call and never
mutated. Each record knows its *neutral* form, the sentinel returned when the
input is statistically degenerate (too few values, zero variance, empty
tables), so callers never have to catch exceptions for small samples.

Examples
--------
>>> from expstats.core.results import TTestResult
>>> r = TTestResult.neutral()
>>> r.p_value, r.ci95
(1.0, (0.0, 0.0))
>>> sorted(r.as_dict())[:3]
['ci95', 'cohens_d', 'df']
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


class _Record:
    """Mixin giving records a plain-dict view."""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class DescriptiveStats(_Record):
    """Location and spread summary of one sample."""

    n: int
    mean: float
    std: float
    sem: float
    min: float
    max: float
    median: float
    q1: float
    q3: float

    @classmethod
    def empty(cls) -> "DescriptiveStats":
        return cls(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class TTestResult(_Record):
    """Welch's t-test for two independent samples.

    Attributes:
        t: t statistic, positive when group A has the larger mean
        df: Welch-Satterthwaite degrees of freedom
        p_value: two-tailed p-value
        mean_diff: mean(A) - mean(B)
        cohens_d: standardized difference using the pooled SD
        ci95: normal-approximation 95% interval for mean_diff
    """

    t: float
    df: float
    p_value: float
    mean_diff: float
    cohens_d: float
    ci95: Tuple[float, float]

    @classmethod
    def neutral(cls) -> "TTestResult":
        return cls(0.0, 0.0, 1.0, 0.0, 0.0, (0.0, 0.0))


@dataclass(frozen=True)
class MannWhitneyResult(_Record):
    """Mann-Whitney U test with rank-biserial effect size."""

    u: float
    z: float
    p_value: float
    rank_biserial_r: float

    @classmethod
    def neutral(cls) -> "MannWhitneyResult":
        return cls(0.0, 0.0, 1.0, 0.0)


@dataclass(frozen=True)
class LeveneResult(_Record):
    """Levene's test for equality of variances (W is an F statistic)."""

    w: float
    df1: float
    df2: float
    p_value: float

    @classmethod
    def neutral(cls) -> "LeveneResult":
        return cls(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class ShapiroResult(_Record):
    """Approximate Shapiro-Wilk normality check."""

    w: float
    p_value: float
    is_normal: bool

    @classmethod
    def neutral(cls) -> "ShapiroResult":
        return cls(1.0, 1.0, True)


@dataclass(frozen=True)
class CorrelationResult(_Record):
    """Correlation coefficient with its two-tailed p-value."""

    r: float
    p_value: float
    n: int

    @classmethod
    def neutral(cls, n: int = 0) -> "CorrelationResult":
        return cls(0.0, 1.0, n)


@dataclass(frozen=True)
class AnovaResult(_Record):
    """One-way ANOVA over k groups."""

    f: float
    df1: float
    df2: float
    p_value: float
    eta_sq: float
    group_means: Tuple[float, ...]
    group_ns: Tuple[int, ...]


@dataclass(frozen=True)
class ChiSquareResult(_Record):
    """Chi-square test of independence for a 2 x K table."""

    chi2: float
    df: int
    p_value: float

    @classmethod
    def neutral(cls) -> "ChiSquareResult":
        return cls(0.0, 0, 1.0)
