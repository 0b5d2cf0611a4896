"""Site and stop candidate domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Site:
    """A departure-board location (a station or stop area)."""

    id: int
    name: str
    aliases: tuple[str, ...] = field(default_factory=tuple)
    abbreviation: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def matches_query(self, query: str) -> bool:
        """Name or alias contains the query, or the abbreviation equals it."""
        query_lower = query.lower()
        if query_lower in self.name.lower():
            return True
        if any(query_lower in alias.lower() for alias in self.aliases):
            return True
        return bool(self.abbreviation) and self.abbreviation.lower() == query_lower


@dataclass(frozen=True)
class StopCandidate:
    """A stop returned by a journey planner's stop search."""

    id: str
    name: str
    coordinates: tuple[float, float] | None = None
    weight: int = 0
