"""Configuration for the ufind command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class PartitionConfig:
    """Settings for building and reporting on a partition table.

    Attributes:
        size: Number of elements in the table.
        read_only: Answer queries with find_only/same_only instead of find/same.
        as_json: Emit machine-readable output.
        log_level: Logging level name ("DEBUG" | "INFO" | "WARNING" | "ERROR").
    """

    size: int = 0
    read_only: bool = False
    as_json: bool = False
    log_level: str = "WARNING"

    _VALID_LOG_LEVELS: ClassVar[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        if self.log_level not in self._VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {self._VALID_LOG_LEVELS}, got '{self.log_level}'"
            )
