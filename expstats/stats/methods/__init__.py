"""
Post-processing methods applied to test results.

These methods never see raw samples; they consume fields of result records
(p-values, effect sizes) produced by the schemes:

- `multiple_comparison`: Holm-Bonferroni adjustment of p-value families
- `effect_size`: qualitative labels for Cohen's d and rank-biserial r
"""
