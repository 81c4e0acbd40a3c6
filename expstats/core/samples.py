"""
expstats.core.samples
=====================

Boundary conversion for the engine's inputs.

Every public test converts its arguments here once, so the algorithms below
only ever see tuples of Python floats and plain ``dict[str, int]`` count
tables. Non-finite values are passed through untouched: filtering them is the
caller's job, and NaN simply propagates into the results.

Examples
--------
>>> from expstats.core.samples import as_sample, as_counts, LabeledGroup
>>> as_sample([1, 2.5, "3"])
(1.0, 2.5, 3.0)
>>> as_counts({"a": 2, "b": 0})
{'a': 2, 'b': 0}
>>> LabeledGroup.of("formal", [4, 5]).n
2
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Sequence, Tuple, Union

Number = Union[int, float]
Sample = Tuple[float, ...]


def as_sample(values: Iterable[Number]) -> Sample:
    """Convert an iterable of numbers to an immutable tuple of floats.

    Raises:
        TypeError, ValueError: if an element cannot be converted by ``float``.
    """
    return tuple(float(v) for v in values)


def as_groups(groups: Iterable[Iterable[Number]]) -> Tuple[Sample, ...]:
    """Convert a collection of groups to a tuple of samples."""
    return tuple(as_sample(g) for g in groups)


def as_counts(counts: Mapping[str, Number]) -> Dict[str, int]:
    """
    Validate a category -> count mapping.

    Counts must be non-negative integers; floats with an integral value are
    accepted (``3.0`` -> ``3``).

    Raises:
        ValueError: for a negative, fractional or non-finite count.
    """
    out: Dict[str, int] = {}
    for label, count in counts.items():
        value = float(count)
        if not math.isfinite(value) or value < 0 or value != int(value):
            raise ValueError(
                f"Category counts must be non-negative integers, got {label!r}: {count!r}"
            )
        out[str(label)] = int(value)
    return out


@dataclass(frozen=True)
class LabeledGroup:
    """A sample tagged with the name of its experimental condition."""

    label: str
    values: Sample

    @classmethod
    def of(cls, label: str, values: Iterable[Number]) -> "LabeledGroup":
        return cls(label=str(label), values=as_sample(values))

    @property
    def n(self) -> int:
        return len(self.values)


def paired_prefix(x: Sequence[float], y: Sequence[float]) -> Tuple[Sample, Sample]:
    """Truncate two samples to their common length."""
    n = min(len(x), len(y))
    return tuple(x[:n]), tuple(y[:n])
