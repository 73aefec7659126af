"""In-memory ticker search index.

The index is built once from a static ticker dataset and is read-only
afterwards, so a single instance is shared by all search requests without
locking. Search runs three ranked passes:

1. Exact symbol match
2. Symbol prefix match
3. Substring match on "symbol name"

Each pass only adds tickers not already collected, and within a pass results
keep dataset order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel, ValidationError

from recon.core.constants import DEFAULT_ASSET_TYPE, DEFAULT_EXCHANGE, DEFAULT_SEARCH_LIMIT
from recon.core.exceptions import TickerDatasetError
from recon.core.logging import get_logger

logger = get_logger(__name__)

BUNDLED_DATASET = "tickers.json"

ASSET_TYPES = frozenset({"stock", "etf", "adr", "warrant", "right", "unit", "structured"})


class TickerRecord(BaseModel):
    """One row of the static ticker dataset."""

    ticker: str
    name: str
    exchange: str = ""
    type: str = ""


class SearchResult(BaseModel):
    """A ranked search hit."""

    ticker: str
    name: str
    exchange: str
    type: str


@dataclass(frozen=True, slots=True)
class TickerEntry:
    """Indexed ticker with its precomputed lowercase match key."""

    ticker: str
    name: str
    exchange: str
    type: str
    search_key: str

    @classmethod
    def from_record(cls, record: TickerRecord) -> TickerEntry:
        return cls(
            ticker=record.ticker,
            name=record.name,
            exchange=record.exchange or DEFAULT_EXCHANGE,
            type=normalize_asset_type(record.type),
            search_key=f"{record.ticker} {record.name}".lower(),
        )

    def to_result(self) -> SearchResult:
        return SearchResult(
            ticker=self.ticker, name=self.name, exchange=self.exchange, type=self.type
        )


# Polygon-style asset type codes
_ASSET_TYPE_CODES: dict[str, str] = {
    "ETF": "etf",
    "CS": "stock",  # Common Stock
    "PFD": "stock",  # Preferred Stock
    "WARRANT": "warrant",
    "RIGHT": "right",
    "UNIT": "unit",
    "ADR": "adr",
    "ADRC": "adr",
    "SP": "structured",  # Structured Product
}


def map_asset_type(code: str) -> str:
    """Map a provider asset type code (CS, ETF, ADRC, ...) to our asset type."""
    return _ASSET_TYPE_CODES.get(code.upper(), DEFAULT_ASSET_TYPE)


def normalize_asset_type(value: str) -> str:
    if not value:
        return DEFAULT_ASSET_TYPE
    if value.lower() in ASSET_TYPES:
        return value.lower()
    return map_asset_type(value)


class TickerIndex:
    """Searchable, immutable collection of tickers.

    Usage:
        index = load_default_index()
        results = index.search("app", limit=5)
    """

    def __init__(self, entries: Sequence[TickerEntry]) -> None:
        self._entries: tuple[TickerEntry, ...] = tuple(entries)

    @classmethod
    def from_records(cls, records: Iterable[TickerRecord | Mapping[str, Any]]) -> TickerIndex:
        """Build an index from dataset rows, preserving their order.

        Raises:
            TickerDatasetError: If a row is missing the ticker or name
        """
        entries: list[TickerEntry] = []
        for i, raw in enumerate(records):
            try:
                record = raw if isinstance(raw, TickerRecord) else TickerRecord.model_validate(raw)
            except ValidationError as e:
                raise TickerDatasetError(f"Invalid ticker record at position {i}: {e}") from e
            entries.append(TickerEntry.from_record(record))
        return cls(entries)

    @classmethod
    def from_json(cls, payload: bytes | str) -> TickerIndex:
        """Build an index from a JSON array of ticker records."""
        try:
            data = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            raise TickerDatasetError(f"Ticker dataset is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise TickerDatasetError("Ticker dataset must be a JSON array")
        return cls.from_records(data)

    @classmethod
    def from_file(cls, path: Path) -> TickerIndex:
        try:
            payload = path.read_bytes()
        except OSError as e:
            raise TickerDatasetError(f"Cannot read ticker dataset {path}: {e}") from e
        return cls.from_json(payload)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TickerEntry]:
        return iter(self._entries)

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[SearchResult]:
        """Find tickers matching ``query``, best matches first.

        An empty or blank query returns nothing; ``limit <= 0`` means the
        default limit.
        """
        query = query.strip().lower()
        if not query:
            return []
        if limit <= 0:
            limit = DEFAULT_SEARCH_LIMIT

        results: list[SearchResult] = []
        seen: set[str] = set()

        def collect(entry: TickerEntry) -> None:
            seen.add(entry.ticker)
            results.append(entry.to_result())

        # Exact symbol match, at most one
        for entry in self._entries:
            if entry.ticker.lower() == query:
                collect(entry)
                break

        # Symbol prefix
        for entry in self._entries:
            if len(results) >= limit:
                break
            if entry.ticker not in seen and entry.ticker.lower().startswith(query):
                collect(entry)

        # Symbol or name substring
        for entry in self._entries:
            if len(results) >= limit:
                break
            if entry.ticker not in seen and query in entry.search_key:
                collect(entry)

        return results


def load_default_index(path: Path | None = None) -> TickerIndex:
    """Load the ticker index from ``path``, or from the bundled dataset.

    Raises:
        TickerDatasetError: If the dataset cannot be read or parsed
    """
    if path is not None:
        index = TickerIndex.from_file(path)
        source = str(path)
    else:
        payload = resources.files("recon.search").joinpath("data", BUNDLED_DATASET).read_bytes()
        index = TickerIndex.from_json(payload)
        source = BUNDLED_DATASET

    logger.info("Ticker index built", count=len(index), source=source)
    return index
