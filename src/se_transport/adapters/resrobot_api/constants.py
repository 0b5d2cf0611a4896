"""Constants for the ResRobot v2.1 API."""

from types import MappingProxyType

from se_transport.domain.models.transport_mode import TransportMode

RESROBOT_BASE_URL = "https://api.resrobot.se/v2.1"
RESROBOT_LOCATION_URL = f"{RESROBOT_BASE_URL}/location.name"
RESROBOT_TRIP_URL = f"{RESROBOT_BASE_URL}/trip"

WALK_LEG_TYPES = frozenset({"WALK", "TRSF"})

CATEGORY_MODES = MappingProxyType(
    {
        "PEN": TransportMode.TRAIN,
        "REG": TransportMode.TRAIN,
        "SJ": TransportMode.TRAIN,
        "SNT": TransportMode.TRAIN,
        "NRT": TransportMode.TRAIN,
        "MET": TransportMode.METRO,
        "BUS": TransportMode.BUS,
        "NAT": TransportMode.BUS,
        "SPN": TransportMode.TRAM,
        "BAT": TransportMode.SHIP,
    }
)

CATEGORY_NAMES = MappingProxyType(
    {
        "PEN": "Pendeltåg",
        "MET": "Tunnelbana",
        "BUS": "Buss",
        "REG": "Regionaltåg",
        "SJ": "SJ",
        "SNT": "Snabbtåg",
        "NRT": "Norrtåg",
        "SPN": "Spårvagn",
        "BAT": "Färja",
        "FLY": "Flygbuss",
        "NAT": "Nattbuss",
    }
)
