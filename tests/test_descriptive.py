import math
import statistics

import numpy as np
import pytest

from expstats.core.results import DescriptiveStats
from expstats.stats.common.descriptive import (
    describe,
    mean,
    quantile,
    sem,
    std,
    sum_of_squares,
    variance,
)
from expstats.stats.common.ranks import average_ranks, first_position_ranks


def test_mean_of_empty_is_zero():
    assert mean([]) == 0.0


def test_variance_ddof_guard():
    assert variance([4.0]) == 0.0
    assert variance([4.0, 6.0], ddof=2) == 0.0
    assert variance([]) == 0.0


def test_variance_and_std_match_statistics_module():
    data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert variance(data) == pytest.approx(statistics.variance(data))
    assert variance(data, ddof=0) == pytest.approx(statistics.pvariance(data))
    assert std(data) == pytest.approx(statistics.stdev(data))
    assert sem(data) == pytest.approx(statistics.stdev(data) / math.sqrt(8))


def test_variance_never_negative():
    assert variance([3.3, 3.3, 3.3]) >= 0.0
    assert std([3.3, 3.3, 3.3]) == pytest.approx(0.0, abs=1e-12)


def test_sem_of_empty_is_zero():
    assert sem([]) == 0.0


def test_sum_of_squares():
    assert sum_of_squares([1.0, 2.0, 3.0]) == 2.0


def test_quantile_interpolates_between_ranks():
    data = [10.0, 20.0, 30.0, 40.0, 50.0]
    assert quantile(data, 0.0) == 10.0
    assert quantile(data, 1.0) == 50.0
    assert quantile(data, 0.5) == 30.0
    assert quantile(data, 0.1) == pytest.approx(14.0)


def test_describe_empty_is_all_zero():
    assert describe([]) == DescriptiveStats.empty()


def test_describe_summary():
    res = describe([7, 1, 3, 5])
    assert res.n == 4
    assert res.mean == 4.0
    assert res.min == 1.0
    assert res.max == 7.0
    assert res.median == 4.0
    assert res.q1 == pytest.approx(2.5)
    assert res.q3 == pytest.approx(5.5)
    assert res.std == pytest.approx(statistics.stdev([7, 1, 3, 5]))
    assert res.sem == pytest.approx(res.std / 2.0)


def test_describe_single_value():
    res = describe([2.5])
    assert res.n == 1
    assert res.std == 0.0
    assert res.median == res.q1 == res.q3 == 2.5


def test_average_ranks_handles_ties():
    assert average_ranks([3, 1, 3, 2, 3]) == [4.0, 1.0, 4.0, 2.0, 4.0]


def test_first_position_ranks_handles_ties():
    assert first_position_ranks([3, 1, 3, 2, 3]) == [3.0, 1.0, 3.0, 2.0, 3.0]


def test_ranks_without_ties_agree():
    data = [0.4, -1.2, 3.3, 2.0]
    assert average_ranks(data) == first_position_ranks(data) == [2.0, 1.0, 4.0, 3.0]


def test_helpers_accept_any_numeric_iterable():
    arr = np.array([1.0, 2.0, 3.0, 4.0])
    assert mean(arr) == 2.5
    assert variance(arr) == pytest.approx(statistics.variance([1, 2, 3, 4]))
    assert std(arr) == pytest.approx(statistics.stdev([1, 2, 3, 4]))
    assert sem(arr) == pytest.approx(std([1, 2, 3, 4]) / 2.0)
    assert sum_of_squares(arr) == 5.0
    assert mean(np.array([])) == 0.0
    assert mean(x for x in (1, 2, 3)) == 2.0
    assert variance(iter([2, 4])) == 2.0
    assert describe(arr).n == 4
