"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from seasons.domain import Season, SeasonCollection


class SeasonStore(ABC):
    """Interface for season persistence operations."""

    @abstractmethod
    def list_seasons(self, host_id: str, year: int | None = None) -> SeasonCollection:
        """Return the host's seasons keyed by id, optionally for one year."""
        ...

    @abstractmethod
    def get_season(self, host_id: str, season_id: str) -> Season | None:
        """Return a season by ID, or None if not found."""
        ...

    @abstractmethod
    def save_season(self, host_id: str, season: Season) -> None:
        """Insert or replace a season."""
        ...

    @abstractmethod
    def save_seasons(self, host_id: str, seasons: Iterable[Season]) -> None:
        """Insert or replace several seasons as one unit. Either all are saved or none."""
        ...

    @abstractmethod
    def delete_season(self, host_id: str, season_id: str) -> None:
        """Delete a season. Missing ids are ignored."""
        ...

    @abstractmethod
    def season_exists(self, host_id: str, season_id: str) -> bool:
        """Check if a season exists."""
        ...
