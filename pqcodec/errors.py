"""Exceptions raised while reading and writing parquet data."""

from __future__ import annotations

from enum import Enum


class Feature(Enum):
    """Optional capabilities whose absence can cause a runtime error."""

    SNAPPY = "Snappy"
    BROTLI = "Brotli"
    GZIP = "Gzip"
    LZ4 = "Lz4"
    ZSTD = "Zstd"


class ParquetError(Exception):
    """Base class of every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class GeneralError(ParquetError):
    """A general parquet error."""


class FeatureNotActiveError(ParquetError):
    """Raised when an operation needs a capability that is not available."""

    def __init__(self, feature: Feature, reason: str) -> None:
        self.feature = feature
        self.reason = reason
        super().__init__(
            f'The feature "{feature.value}" needs to be active to {reason}'
        )


class OutOfSpecError(ParquetError):
    """Raised when data is known to violate the parquet specification."""


class ExternalError(ParquetError):
    """An error that originates from a consumer or a dependency."""

    def __init__(self, message: str, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"{message}: {cause}")
        self.context_message = message
        self.__cause__ = cause