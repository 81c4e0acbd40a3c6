"""
expstats.stats.common.__init__.py
=================================

Common numerical methods and utilities.

This module contains the generic building blocks shared by every test in the
package: special functions, distribution CDFs, descriptive statistics and
rank transforms. Nothing here knows about experimental conditions.
"""
