"""Swedish and English names for transport modes typed by users."""

from types import MappingProxyType

from se_transport.domain.exceptions import InvalidInputError
from se_transport.domain.models.transport_mode import TransportMode

MODE_ALIASES = MappingProxyType(
    {
        "bus": TransportMode.BUS,
        "buss": TransportMode.BUS,
        "metro": TransportMode.METRO,
        "subway": TransportMode.METRO,
        "tunnelbana": TransportMode.METRO,
        "tbana": TransportMode.METRO,
        "t-bana": TransportMode.METRO,
        "train": TransportMode.TRAIN,
        "tåg": TransportMode.TRAIN,
        "tag": TransportMode.TRAIN,
        "pendel": TransportMode.TRAIN,
        "pendeltåg": TransportMode.TRAIN,
        "pendeltag": TransportMode.TRAIN,
        "tram": TransportMode.TRAM,
        "spårvagn": TransportMode.TRAM,
        "sparvagn": TransportMode.TRAM,
        "tvärbana": TransportMode.TRAM,
        "ship": TransportMode.SHIP,
        "boat": TransportMode.SHIP,
        "ferry": TransportMode.SHIP,
        "båt": TransportMode.SHIP,
        "bat": TransportMode.SHIP,
        "färja": TransportMode.SHIP,
        "farja": TransportMode.SHIP,
    }
)

VALID_MODES_HINT = (
    "bus/buss, metro/tunnelbana/t-bana, train/tåg/pendeltåg, tram/spårvagn, ship/båt/färja"
)


def normalize_mode(mode: str) -> TransportMode:
    """Map a user-typed mode name to a TransportMode.

    Raises:
        InvalidInputError: If the name is not a known alias.
    """
    normalized = MODE_ALIASES.get(mode.strip().lower())
    if normalized is None:
        raise InvalidInputError(f"invalid transport mode '{mode}' (valid: {VALID_MODES_HINT})")
    return normalized


def is_mode_alias(word: str) -> bool:
    return word.strip().lower() in MODE_ALIASES
