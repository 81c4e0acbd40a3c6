import pytest

from expstats.stats.methods.effect_size import (
    interpret_cohens_d,
    interpret_rank_biserial,
    partial_eta_squared,
)
from expstats.stats.methods.multiple_comparison import holm_correction, reject_null


# --- Holm-Bonferroni ---


def test_holm_adjusted_not_below_raw_and_monotone():
    raw = [0.01, 0.02, 0.03]
    adjusted = holm_correction(raw)
    assert adjusted == pytest.approx([0.03, 0.04, 0.04])
    assert all(a >= p for a, p in zip(adjusted, raw))
    assert adjusted == sorted(adjusted)


def test_holm_returns_input_order():
    raw = [0.04, 0.001, 0.3, 0.02]
    adjusted = holm_correction(raw)
    # sorted: 0.001*4, 0.02*3, 0.04*2, 0.3*1 with running max
    assert adjusted == pytest.approx([0.08, 0.004, 0.3, 0.06])


def test_holm_caps_at_one():
    assert holm_correction([0.6, 0.7]) == [1.0, 1.0]


def test_holm_single_and_empty():
    assert holm_correction([0.2]) == [0.2]
    assert holm_correction([]) == []


def test_holm_ties_share_adjusted_value():
    adjusted = holm_correction([0.01, 0.01, 0.5])
    assert adjusted[0] == adjusted[1] == pytest.approx(0.03)


def test_holm_does_not_mutate_input():
    raw = [0.3, 0.1, 0.2]
    holm_correction(raw)
    assert raw == [0.3, 0.1, 0.2]


def test_reject_null_is_strict():
    assert reject_null([0.049, 0.05, 0.051]) == [True, False, False]
    assert reject_null([0.009, 0.02], alpha=0.01) == [True, False]


# --- Effect sizes ---


@pytest.mark.parametrize(
    "d,label",
    [
        (0.0, "negligible"),
        (0.19, "negligible"),
        (0.2, "small"),
        (-0.49, "small"),
        (0.5, "medium"),
        (0.79, "medium"),
        (0.8, "large"),
        (-2.5, "large"),
    ],
)
def test_cohens_d_labels(d, label):
    assert interpret_cohens_d(d) == label


@pytest.mark.parametrize(
    "r,label",
    [
        (0.09, "negligible"),
        (0.1, "small"),
        (-0.3, "medium"),
        (0.49, "medium"),
        (0.5, "large"),
        (-1.0, "large"),
    ],
)
def test_rank_biserial_labels(r, label):
    assert interpret_rank_biserial(r) == label


def test_partial_eta_squared():
    assert partial_eta_squared(3.0, 1.0) == 0.75
    assert partial_eta_squared(0.0, 0.0) == 0.0
    assert partial_eta_squared(0.0, 5.0) == 0.0
