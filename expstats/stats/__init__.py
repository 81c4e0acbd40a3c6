"""
Statistical methods for between-subjects experiments.

The package separates generic numerics from the tests built on them:

1. **Common** (expstats.stats.common):
   Special functions, distribution CDFs, descriptive statistics and ranks.
   Pure numerics with no knowledge of experimental designs.

2. **Schemes** (expstats.stats.schemes):
   Hypothesis tests for particular designs (two samples, k groups,
   correlations, contingency tables), composed from `common`.

3. **Methods** (expstats.stats.methods):
   Post-processing of test results: multiple-comparison correction and
   effect-size labels.

Example:
--------
>>> from expstats.stats.common.distributions import student_t_cdf
>>> student_t_cdf(0.0, 12)
0.5

>>> from expstats.stats.schemes.two_sample import welch_t_test
>>> welch_t_test([1, 2, 3], [1, 2, 3]).p_value
1.0
"""
