import pytest
from scipy import stats

from expstats.core.results import CorrelationResult
from expstats.stats.common.special import normal_quantile
from expstats.stats.schemes.association import pearson_correlation, spearman_correlation

X = [2.1, 3.4, 1.9, 5.6, 4.4, 3.9, 6.2, 2.8, 5.1, 4.0]
Y = [1.8, 3.9, 2.5, 5.0, 4.9, 3.1, 6.6, 2.2, 4.3, 4.6]


def test_pearson_self_correlation():
    res = pearson_correlation(X, X)
    assert res.r == 1
    assert res.p_value == pytest.approx(0.0, abs=1e-12)
    assert res.n == len(X)


def test_pearson_perfect_negative():
    res = pearson_correlation([1, 2, 3, 4], [8, 6, 4, 2])
    assert res.r == pytest.approx(-1.0)
    assert res.p_value == pytest.approx(0.0, abs=1e-6)


def test_pearson_matches_reference():
    res = pearson_correlation(X, Y)
    r_ref, p_ref = stats.pearsonr(X, Y)
    assert res.r == pytest.approx(r_ref, rel=1e-12)
    assert res.p_value == pytest.approx(p_ref, abs=1e-7)


def test_pearson_uncorrelated_sample_is_not_significant():
    n = 11
    x = [normal_quantile((i + 0.5) / n) for i in range(n)]
    # y is symmetric around the middle of x, so the linear correlation is ~0.
    y = [v * v for v in x]
    res = pearson_correlation(x, y)
    assert abs(res.r) < 1e-9
    assert res.p_value == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("x,y", [([], []), ([1.0], [2.0]), ([1.0, 2.0], [2.0, 4.0])])
def test_pearson_small_samples_are_neutral(x, y):
    res = pearson_correlation(x, y)
    assert res.r == 0
    assert res.p_value == 1
    assert res.n == len(x)


def test_pearson_zero_variance_is_neutral():
    assert pearson_correlation([1.0, 1.0, 1.0], [1.0, 2.0, 3.0]) == CorrelationResult.neutral(3)


def test_pearson_truncates_to_common_length():
    res = pearson_correlation([1, 2, 3, 4, 100], [2, 4, 6, 8])
    assert res.n == 4
    assert res.r == pytest.approx(1.0)


def test_spearman_matches_reference_without_ties():
    res = spearman_correlation(X, Y)
    rho_ref, p_ref = stats.spearmanr(X, Y)
    assert res.r == pytest.approx(rho_ref, rel=1e-12)
    assert res.p_value == pytest.approx(p_ref, abs=1e-7)


def test_spearman_monotonic_nonlinear():
    x = [1, 2, 3, 4, 5, 6]
    y = [v**3 for v in x]
    assert spearman_correlation(x, y).r == pytest.approx(1.0)


def test_spearman_ties_use_first_position_rank():
    x = [1.0, 2.0, 2.0, 3.0]
    y = [1.0, 2.0, 3.0, 4.0]
    # x ranks are [1, 2, 2, 4], not the mid-ranks [1, 2.5, 2.5, 4].
    expected = pearson_correlation([1, 2, 2, 4], [1, 2, 3, 4])
    res = spearman_correlation(x, y)
    assert res.r == pytest.approx(expected.r)
    assert res.r != pytest.approx(stats.spearmanr(x, y)[0])


def test_spearman_small_sample_is_neutral():
    assert spearman_correlation([1, 2], [2, 1]) == CorrelationResult.neutral(2)
