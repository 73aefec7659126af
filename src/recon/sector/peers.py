"""Peer context for a single valuation metric."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel

from recon.sector.stats import average, median, percentile_rank


class PeerContext(BaseModel):
    """Where a ticker's metric sits relative to its peers."""

    value: float | None
    peer_median: float | None
    peer_average: float | None
    percentile: float | None
    peer_count: int


def build_peer_context(value: float | None, peers: Mapping[str, float | None]) -> PeerContext:
    """Compare ``value`` with peer values keyed by ticker; peers without data are ignored."""
    return PeerContext(
        value=value,
        peer_median=median(peers),
        peer_average=average(peers),
        percentile=percentile_rank(value, peers.values()) if value is not None else None,
        peer_count=sum(1 for v in peers.values() if v is not None),
    )
