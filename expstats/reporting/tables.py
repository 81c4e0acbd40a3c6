"""
expstats.reporting.tables
=========================

Tabular views of analysis results for presentation layers.

Each function turns result records into a polars DataFrame with one row per
item and flat, typed columns, ready for rendering or export.

Examples
--------
>>> from expstats.api.conditions import analyze_outcomes
>>> from expstats.reporting.tables import outcome_table
>>> results = analyze_outcomes({"trust": ([5, 6, 7, 6], [3, 4, 3, 4])})
>>> table = outcome_table(results)
>>> table.shape[0], table["outcome"].to_list()
(1, ['trust'])
"""

from __future__ import annotations

from typing import Mapping, Sequence, Tuple, TYPE_CHECKING

import polars as pl

from expstats.core.results import CorrelationResult, DescriptiveStats

if TYPE_CHECKING:
    from expstats.api.conditions import OutcomeResult
    from expstats.api.exploration import PredictorResult, ProgressionPoint

DESCRIPTIVE_COLUMNS = ("n", "mean", "std", "sem", "min", "max", "median", "q1", "q3")


def descriptive_table(stats: Mapping[str, DescriptiveStats]) -> pl.DataFrame:
    """
    One row per label with the descriptive summary columns.

    Examples
    --------
    >>> from expstats.stats.common.descriptive import describe
    >>> descriptive_table({"formal": describe([1, 2, 3])})["median"].to_list()
    [2.0]
    """
    rows = [{"label": label, **record.as_dict()} for label, record in stats.items()]
    schema = {"label": pl.Utf8, "n": pl.Int64}
    schema.update({col: pl.Float64 for col in DESCRIPTIVE_COLUMNS[1:]})
    return pl.DataFrame(rows, schema=schema)


def outcome_table(results: Sequence["OutcomeResult"]) -> pl.DataFrame:
    """
    Returns one row per outcome with numeric columns:
    - group means and sizes, Welch t / df / p, corrected p and significance
    - Cohen's d and its label, Mann-Whitney U / p, rank-biserial r and label
    - Levene p and the per-group normality flags
    """
    rows = []
    for res in results:
        cmp = res.comparison
        rows.append(
            {
                "outcome": res.name,
                "n_a": cmp.descriptive_a.n,
                "n_b": cmp.descriptive_b.n,
                "mean_a": cmp.descriptive_a.mean,
                "mean_b": cmp.descriptive_b.mean,
                "mean_diff": cmp.t_test.mean_diff,
                "ci95_low": cmp.t_test.ci95[0],
                "ci95_high": cmp.t_test.ci95[1],
                "t": cmp.t_test.t,
                "df": cmp.t_test.df,
                "p_welch": cmp.t_test.p_value,
                "p_adjusted": res.adjusted_p,
                "significant": res.significant,
                "cohens_d": cmp.t_test.cohens_d,
                "cohens_d_label": cmp.cohens_d_label,
                "u": cmp.mann_whitney.u,
                "p_mann_whitney": cmp.mann_whitney.p_value,
                "rank_biserial_r": cmp.mann_whitney.rank_biserial_r,
                "rank_biserial_label": cmp.rank_biserial_label,
                "p_levene": cmp.levene.p_value,
                "normal_a": cmp.shapiro_a.is_normal,
                "normal_b": cmp.shapiro_b.is_normal,
            }
        )
    return pl.DataFrame(rows, schema=_OUTCOME_SCHEMA)


_OUTCOME_SCHEMA = {
    "outcome": pl.Utf8,
    "n_a": pl.Int64,
    "n_b": pl.Int64,
    "mean_a": pl.Float64,
    "mean_b": pl.Float64,
    "mean_diff": pl.Float64,
    "ci95_low": pl.Float64,
    "ci95_high": pl.Float64,
    "t": pl.Float64,
    "df": pl.Float64,
    "p_welch": pl.Float64,
    "p_adjusted": pl.Float64,
    "significant": pl.Boolean,
    "cohens_d": pl.Float64,
    "cohens_d_label": pl.Utf8,
    "u": pl.Float64,
    "p_mann_whitney": pl.Float64,
    "rank_biserial_r": pl.Float64,
    "rank_biserial_label": pl.Utf8,
    "p_levene": pl.Float64,
    "normal_a": pl.Boolean,
    "normal_b": pl.Boolean,
}


def correlation_table(results: Mapping[str, CorrelationResult]) -> pl.DataFrame:
    """One row per named correlation: r, p-value and n."""
    rows = [{"pair": name, **res.as_dict()} for name, res in results.items()]
    return pl.DataFrame(
        rows, schema={"pair": pl.Utf8, "r": pl.Float64, "p_value": pl.Float64, "n": pl.Int64}
    )


def progression_table(points: Sequence["ProgressionPoint"]) -> pl.DataFrame:
    """
    One row per batch; test columns are null until both groups are large
    enough to test.

    Examples
    --------
    >>> from expstats.api.exploration import cumulative_progression
    >>> table = progression_table(cumulative_progression({"b1": ([1], [2])}))
    >>> table["p_value"].to_list()
    [None]
    """
    rows = [
        {
            "batch": p.batch_label,
            "step": p.step_label,
            "batch_participants": p.batch_participants,
            "cumulative_participants": p.cumulative_participants,
            "n_a": p.n_a,
            "n_b": p.n_b,
            "p_value": p.p_value,
            "significant": p.significant,
            "cohens_d": p.cohens_d,
        }
        for p in points
    ]
    return pl.DataFrame(
        rows,
        schema={
            "batch": pl.Utf8,
            "step": pl.Utf8,
            "batch_participants": pl.Int64,
            "cumulative_participants": pl.Int64,
            "n_a": pl.Int64,
            "n_b": pl.Int64,
            "p_value": pl.Float64,
            "significant": pl.Boolean,
            "cohens_d": pl.Float64,
        },
    )


def exploration_table(
    cells: Mapping[Tuple[str, str], "PredictorResult"]
) -> pl.DataFrame:
    """One row per predictor x outcome pair with its test and effect label."""
    rows = [
        {
            "predictor": predictor,
            "outcome": outcome,
            "kind": res.kind,
            "test": res.test,
            "statistic": res.statistic,
            "effect": res.effect_label,
            "p_value": res.p_value,
            "n": res.n,
            "n_groups": res.n_groups,
        }
        for (predictor, outcome), res in cells.items()
    ]
    return pl.DataFrame(
        rows,
        schema={
            "predictor": pl.Utf8,
            "outcome": pl.Utf8,
            "kind": pl.Utf8,
            "test": pl.Utf8,
            "statistic": pl.Float64,
            "effect": pl.Utf8,
            "p_value": pl.Float64,
            "n": pl.Int64,
            "n_groups": pl.Int64,
        },
    )
