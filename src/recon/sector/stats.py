"""Aggregation helpers for peer and sector comparisons.

All helpers skip missing (None) values rather than treating them as zero.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import TypeVar

from recon.sector.models import PriceBar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def _present(values: Mapping[K, float | None] | Iterable[float | None]) -> list[float]:
    if isinstance(values, Mapping):
        values = values.values()
    return [v for v in values if v is not None]


def average(values: Mapping[K, float | None] | Iterable[float | None]) -> float | None:
    """Mean of the non-None values, or None if there are none."""
    present = _present(values)
    if not present:
        return None
    return sum(present) / len(present)


def median(values: Mapping[K, float | None] | Iterable[float | None]) -> float | None:
    """Middle element of the sorted non-None values.

    For an even count this picks the upper of the two middle elements
    (index ``n // 2``); the two are not averaged.
    """
    present = sorted(_present(values))
    if not present:
        return None
    return present[len(present) // 2]


def rank_ascending(values: Mapping[K, float | None]) -> dict[K, int | None]:
    """Rank keys 1..N by ascending value.

    Keys with a None value get no rank and do not take a slot. Ties keep
    mapping order.
    """
    ranked = sorted(
        ((key, value) for key, value in values.items() if value is not None),
        key=lambda kv: kv[1],
    )
    ranks: dict[K, int | None] = dict.fromkeys(values)
    for position, (key, _) in enumerate(ranked, start=1):
        ranks[key] = position
    return ranks


def percentile_rank(value: float, population: Iterable[float | None]) -> float | None:
    """Percent of non-None population values strictly below ``value``."""
    present = _present(population)
    if not present:
        return None
    below = sum(1 for v in present if v < value)
    return below / len(present) * 100


def high_low(bars: Iterable[PriceBar]) -> tuple[float | None, float | None]:
    """Highest high and lowest low across ``bars``; (None, None) when empty."""
    high: float | None = None
    low: float | None = None
    for bar in bars:
        if high is None or bar.high > high:
            high = bar.high
        if low is None or bar.low < low:
            low = bar.low
    return high, low


def sample_evenly(series: Sequence[T], points: int) -> list[T]:
    """Down-sample ``series`` to ``points`` items at an even stride.

    The first item is always kept. Series already at or below ``points``
    come back unchanged.
    """
    if len(series) <= points:
        return list(series)
    if points <= 0:
        return []
    step = len(series) / points
    return [series[int(i * step)] for i in range(points)]
