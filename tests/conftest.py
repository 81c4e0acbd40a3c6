import pytest


@pytest.fixture(scope="session")
def formal_scores():
    # Ratings from the "formal" condition, no ties with informal_scores.
    return [5.1, 5.8, 6.0, 6.4, 5.5, 6.1, 5.7, 6.6, 4.9, 5.95, 6.25, 5.35]


@pytest.fixture(scope="session")
def informal_scores():
    return [4.2, 4.85, 5.05, 4.4, 5.3, 4.6, 5.9, 4.75, 5.45, 3.8, 4.95, 5.2, 4.05]


@pytest.fixture(scope="session")
def skewed_sample():
    return [1, 1, 1, 1, 1, 1, 1, 1, 2, 50]
