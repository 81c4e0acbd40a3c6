"""
expstats.reporting
==================

Tabular (polars) views of result records for dashboards and exports.
"""

from expstats.reporting.tables import (
    correlation_table,
    descriptive_table,
    exploration_table,
    outcome_table,
    progression_table,
)

__all__ = [
    "correlation_table",
    "descriptive_table",
    "exploration_table",
    "outcome_table",
    "progression_table",
]
