import logging

import pytest

from expstats.api import (
    AnalysisConfig,
    cumulative_progression,
    explore_grid,
    explore_predictor,
)
from expstats.api.exploration import PredictorResult
from expstats.reporting import exploration_table, progression_table
from expstats.stats.schemes.association import pearson_correlation, spearman_correlation
from expstats.stats.schemes.k_groups import one_way_anova
from expstats.stats.schemes.two_sample import welch_t_test

BATCHES = {
    "pilot": ([5.0, 6.0], [3.0]),
    "wave-1": ([7.0], [4.0, 3.0]),
    "wave-2": ([], []),
    "wave-3": ([6.5, 5.5], [3.5, 4.5]),
}


# --- cumulative progression ---


def test_progression_waits_for_minimum_group_size():
    first = cumulative_progression(BATCHES)[0]
    assert first.step == 1 and first.step_label == "B1"
    assert (first.n_a, first.n_b) == (2, 1)
    assert first.p_value is None
    assert first.significant is None
    assert first.cohens_d is None


def test_progression_uses_cumulative_samples():
    points = cumulative_progression(BATCHES)
    expected = welch_t_test([5.0, 6.0, 7.0], [3.0, 4.0, 3.0])
    assert points[1].p_value == expected.p_value
    assert points[1].cohens_d == expected.cohens_d
    assert points[1].significant == (expected.p_value < 0.05)
    assert points[1].cumulative_participants == 6
    assert points[1].batch_participants == 3


def test_progression_keeps_empty_batches():
    points = cumulative_progression(BATCHES)
    assert [p.batch_label for p in points] == list(BATCHES)
    assert points[2].batch_participants == 0
    assert points[2].p_value == points[1].p_value
    assert points[3].n_a == 5 and points[3].n_b == 5


def test_progression_uses_config():
    points = cumulative_progression(BATCHES, AnalysisConfig(min_group_size=4, alpha=0.5))
    assert points[1].p_value is None
    assert points[3].p_value is not None
    assert points[3].significant is True


def test_progression_empty():
    assert cumulative_progression({}) == []


# --- explore_predictor ---

AGES = [19, 23, 31, 45, 52, 27, 38, 60]
SCORES = [3.2, 3.0, 4.1, 4.4, 5.0, 3.6, 3.9, 5.3]


def test_continuous_predictor_uses_spearman():
    res = explore_predictor(zip(AGES, SCORES), "continuous")
    ref = spearman_correlation(AGES, SCORES)
    assert res.kind == "continuous"
    assert res.test == "spearman"
    assert res.statistic == ref.r
    assert res.p_value == ref.p_value
    assert res.n == 8
    assert res.n_groups == 0
    assert res.effect_label.startswith("rho = ")


def test_continuous_predictor_pearson():
    res = explore_predictor(zip(AGES, SCORES), "continuous", method="pearson")
    assert res.statistic == pearson_correlation(AGES, SCORES).r
    assert res.effect_label.startswith("r = ")


def test_missing_values_are_dropped():
    pairs = list(zip(AGES, SCORES)) + [(None, 4.0), ("", 2.0), (33, None), (41, float("nan"))]
    assert explore_predictor(pairs, "continuous") == explore_predictor(zip(AGES, SCORES), "continuous")


def test_too_few_pairs():
    assert explore_predictor(zip(AGES[:4], SCORES[:4]), "continuous") is None
    assert explore_predictor([(None, 1.0)] * 10, "categorical") is None


def test_two_categories_use_welch():
    pairs = [("f", 4.0), ("f", 5.0), ("f", 4.5), ("m", 2.0), ("m", 3.0), ("other", 9.0)]
    res = explore_predictor(pairs, "categorical")
    ref = welch_t_test([4.0, 5.0, 4.5], [2.0, 3.0])
    assert res.test == "welch"
    assert res.statistic == ref.cohens_d
    assert res.p_value == ref.p_value
    assert res.n == 6
    assert res.n_groups == 2
    assert res.effect_label.startswith("d = ")


def test_three_categories_use_anova():
    pairs = [
        ("uni", 4.0), ("uni", 5.0),
        ("school", 2.0), ("school", 3.0), ("school", 2.5),
        ("phd", 6.0), ("phd", 5.5),
    ]
    res = explore_predictor(pairs, "categorical")
    ref = one_way_anova([[4.0, 5.0], [2.0, 3.0, 2.5], [6.0, 5.5]])
    assert res.test == "anova"
    assert res.statistic == ref.eta_sq
    assert res.p_value == ref.p_value
    assert res.n_groups == 3


def test_blank_categories_become_unknown():
    pairs = [("  ", 1.0), (" ", 2.0), ("a", 5.0), ("a", 6.0), ("a", 5.5)]
    res = explore_predictor(pairs, "categorical")
    assert res.n_groups == 2
    assert res.p_value == welch_t_test([1.0, 2.0], [5.0, 6.0, 5.5]).p_value


def test_single_usable_category_is_skipped():
    pairs = [("a", 1.0), ("a", 2.0), ("a", 3.0), ("b", 4.0), ("c", 5.0)]
    assert explore_predictor(pairs, "categorical") is None


@pytest.mark.parametrize("kwargs", [{"kind": "ordinal"}, {"kind": "continuous", "method": "kendall"}])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        explore_predictor(zip(AGES, SCORES), **kwargs)


# --- explore_grid ---


def test_grid_covers_every_pair_with_enough_data():
    predictors = {
        "age": ("continuous", AGES),
        "gender": ("categorical", ["f", "m", "f", "m", "f", "m", "f", "m"]),
    }
    outcomes = {"trust": SCORES, "sparse": [1.0, None, None, None, None, None, 2.0, 3.0]}
    cells = explore_grid(predictors, outcomes)
    assert set(cells) == {("age", "trust"), ("gender", "trust")}
    assert isinstance(cells[("gender", "trust")], PredictorResult)


def test_grid_rejects_misaligned_columns():
    with pytest.raises(ValueError, match="length"):
        explore_grid({"age": ("continuous", AGES)}, {"trust": SCORES[:-1]})


def test_grid_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="expstats"):
        explore_grid({"age": ("continuous", AGES)}, {"trust": SCORES})
    assert "1 with enough data" in caplog.text


# --- tables ---


def test_progression_table():
    table = progression_table(cumulative_progression(BATCHES))
    assert table["step"].to_list() == ["B1", "B2", "B3", "B4"]
    assert table["p_value"].null_count() == 1
    assert table["n_a"].to_list() == [2, 3, 3, 5]


def test_exploration_table():
    cells = explore_grid({"age": ("continuous", AGES)}, {"trust": SCORES})
    table = exploration_table(cells)
    assert table.row(0, named=True)["predictor"] == "age"
    assert table["test"].to_list() == ["spearman"]
    assert exploration_table({}).shape == (0, 9)
