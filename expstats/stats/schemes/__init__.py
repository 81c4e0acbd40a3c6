"""
Hypothesis tests for between-subjects experiments.

This module contains the concrete tests that combine the numerical
foundations in `common` to answer specific experimental questions:

- `two_sample`: two independent conditions (Welch, Mann-Whitney, Levene, Shapiro-Wilk)
- `association`: correlation between two measures (Pearson, Spearman)
- `k_groups`: more than two conditions (one-way ANOVA)
- `categorical`: categorical outcomes by condition (2 x K chi-square)
"""
