"""Constants for the SL journey planner and transport APIs."""

from types import MappingProxyType

from se_transport.domain.models.transport_mode import TransportMode

SL_JOURNEY_PLANNER_URL = "https://journeyplanner.integration.sl.se/v2"
SL_STOP_FINDER_URL = f"{SL_JOURNEY_PLANNER_URL}/stop-finder"
SL_TRIPS_URL = f"{SL_JOURNEY_PLANNER_URL}/trips"

SL_TRANSPORT_URL = "https://transport.integration.sl.se/v1"
SL_SITES_URL = f"{SL_TRANSPORT_URL}/sites"

# Only stops, not addresses or points of interest
STOP_FINDER_OBJECT_FILTER = "2"

PRODUCT_CLASS_FOOTPATH = 99
FOOTPATH_PRODUCT_NAME = "footpath"

PRODUCT_CLASS_MODES = MappingProxyType(
    {
        1: TransportMode.TRAIN,
        2: TransportMode.METRO,
        4: TransportMode.TRAM,
        5: TransportMode.BUS,
        9: TransportMode.SHIP,
        PRODUCT_CLASS_FOOTPATH: TransportMode.WALK,
    }
)

# Transport modes used by the departures endpoint
DEPARTURE_MODES = MappingProxyType(
    {
        "BUS": TransportMode.BUS,
        "METRO": TransportMode.METRO,
        "TRAIN": TransportMode.TRAIN,
        "TRAM": TransportMode.TRAM,
        "SHIP": TransportMode.SHIP,
    }
)
