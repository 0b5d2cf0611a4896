"""Transport mode domain model."""

from enum import Enum


class TransportMode(str, Enum):
    """Kind of vehicle (or walking) used on a leg or departure."""

    BUS = "bus"
    METRO = "metro"
    TRAIN = "train"
    TRAM = "tram"
    SHIP = "ship"
    WALK = "walk"
    UNKNOWN = "unknown"

    @classmethod
    def from_code(cls, code: str | None) -> "TransportMode":
        """Map a mode code such as "BUS" or "metro" to a TransportMode.

        Unrecognised codes map to UNKNOWN.
        """
        if not code:
            return cls.UNKNOWN
        try:
            return cls(code.strip().lower())
        except ValueError:
            return cls.UNKNOWN
