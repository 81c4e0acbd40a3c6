import pytest
from scipy import stats

from expstats.stats.schemes.k_groups import one_way_anova


def test_identical_groups():
    res = one_way_anova([[1, 2, 3], [1, 2, 3], [1, 2, 3]])
    assert res.f == 0
    assert res.p_value == 1
    assert res.eta_sq == 0
    assert res.df1 == 2
    assert res.df2 == 6


def test_matches_reference():
    groups = [
        [4.1, 5.2, 4.8, 5.5, 4.9],
        [5.9, 6.3, 5.4, 6.8, 6.1, 5.7],
        [4.6, 5.0, 5.3, 4.4],
    ]
    res = one_way_anova(groups)
    ref = stats.f_oneway(*groups)
    assert res.f == pytest.approx(ref.statistic, rel=1e-10)
    assert res.p_value == pytest.approx(ref.pvalue, abs=1e-7)
    assert res.df1 == 2
    assert res.df2 == 12
    assert res.group_ns == (5, 6, 4)
    assert res.group_means[1] == pytest.approx(sum(groups[1]) / 6)


def test_eta_squared_is_between_share_of_total():
    groups = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    res = one_way_anova(groups)
    # grand mean 3.5: SS_between = 2 * 3 * 1.5^2 = 13.5, SS_within = 4
    assert res.eta_sq == pytest.approx(13.5 / 17.5)
    assert res.f == pytest.approx(13.5 / (4.0 / 4))


def test_two_groups_agree_with_pooled_t_test():
    a = [2.0, 3.5, 4.1, 3.3, 2.8]
    b = [4.4, 5.1, 3.9, 5.6]
    res = one_way_anova([a, b])
    t_ref = stats.ttest_ind(a, b, equal_var=True)
    assert res.f == pytest.approx(t_ref.statistic**2)


def test_zero_within_variance_gives_zero_f():
    res = one_way_anova([[2.0, 2.0], [5.0, 5.0]])
    assert res.f == 0.0
    assert res.p_value == 1.0
    assert res.eta_sq == 1.0


@pytest.mark.parametrize(
    "groups",
    [
        [],
        [[1.0, 2.0, 3.0]],
        [[1.0], [2.0]],
        [[1.0], [2.0], [3.0]],
    ],
)
def test_degenerate_designs(groups):
    res = one_way_anova(groups)
    assert res.f == 0
    assert res.p_value == 1
    assert res.eta_sq == 0
    assert res.df1 == 0 and res.df2 == 0
    assert res.group_ns == tuple(len(g) for g in groups)
    assert res.group_means == tuple(float(sum(g)) / len(g) for g in groups)


def test_accepts_generators():
    res = one_way_anova(iter([(1, 2, 3), (4, 5, 6)]))
    assert res.group_ns == (3, 3)
