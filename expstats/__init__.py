"""
expstats: a statistical-inference engine for between-subjects experiments.

A two-condition experiment produces, for each outcome measure, two plain
samples of numbers. expstats turns those samples into test results: Welch
and Mann-Whitney comparisons, variance and normality checks, correlations,
one-way ANOVA and 2 x K chi-square tests, with Holm-Bonferroni correction
across outcomes and qualitative effect-size labels.

Every function is pure. Inputs are converted to floats at the boundary, no
state is kept between calls, and statistically degenerate inputs (too few
values, zero variance, empty tables) yield neutral results (p = 1, effect 0)
instead of exceptions. Non-finite values are not filtered: callers remove
missing data before calling in.

The distribution functions (normal, t, F, chi-square) are implemented from
their special-function definitions, so the package has no numerical
dependencies; polars is only used for the reporting tables.

Example
-------
>>> import expstats
>>> assert hasattr(expstats, "stats")
>>> assert hasattr(expstats, "api")
"""

import logging

from expstats import api, core, stats

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["api", "core", "stats"]
