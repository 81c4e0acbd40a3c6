"""
expstats.stats.schemes.two_sample.nonparametric
===============================================

Mann-Whitney U test for two independent samples.

Both samples are pooled and ranked (ties get their average rank). With R1 the
rank sum of group A:

    U1 = R1 - n1 (n1 + 1) / 2,   U2 = n1 n2 - U1,   U = min(U1, U2)

The p-value uses the normal approximation with mean n1 n2 / 2 and standard
deviation sqrt(n1 n2 (n1 + n2 + 1) / 12). Neither a tie correction nor a
continuity correction is applied, so p-values for small or heavily tied
samples are approximate. The effect size is the rank-biserial correlation
r = 1 - 2U / (n1 n2).

Examples
--------
>>> from expstats.stats.schemes.two_sample.nonparametric import mann_whitney_u
>>> res = mann_whitney_u([1, 2, 3], [4, 5, 6])
>>> res.u, res.rank_biserial_r
(0.0, 1.0)
>>> res.p_value < 0.05
True
"""

from __future__ import annotations
import logging
import math
from typing import Sequence

from expstats.core.results import MannWhitneyResult
from expstats.core.samples import as_sample
from expstats.stats.common.distributions import two_tailed_z_p_value
from expstats.stats.common.ranks import average_ranks

logger = logging.getLogger(__name__)


def mann_whitney_u(
    group_a: Sequence[float], group_b: Sequence[float]
) -> MannWhitneyResult:
    """
    Rank-based test of whether values in A tend to differ from values in B.

    Returns:
        MannWhitneyResult; neutral when either group is empty. ``z`` keeps
        the sign of U1 - E[U], so it is negative when A tends to be smaller.
    """
    a = as_sample(group_a)
    b = as_sample(group_b)
    n1, n2 = len(a), len(b)
    if n1 == 0 or n2 == 0:
        logger.debug("mann_whitney_u: empty group (%d, %d)", n1, n2)
        return MannWhitneyResult.neutral()

    ranks = average_ranks(a + b)
    r1 = sum(ranks[:n1])

    u1 = r1 - n1 * (n1 + 1) / 2.0
    u2 = n1 * n2 - u1
    u = min(u1, u2)

    mu = n1 * n2 / 2.0
    sigma = math.sqrt(n1 * n2 * (n1 + n2 + 1) / 12.0)
    z = (u1 - mu) / sigma
    p_value = two_tailed_z_p_value(z)

    rank_biserial_r = 1.0 - 2.0 * u / (n1 * n2)
    return MannWhitneyResult(
        u=u, z=z, p_value=p_value, rank_biserial_r=rank_biserial_r
    )
