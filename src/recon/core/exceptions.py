"""Custom exceptions for Recon."""


class ReconError(Exception):
    """Base exception for all Recon errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Data loading errors
class DataLoadError(ReconError):
    """Base error for static data loading."""


class TickerDatasetError(DataLoadError):
    """Ticker dataset is missing or malformed."""
