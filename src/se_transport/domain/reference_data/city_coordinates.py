"""Coordinates of common Swedish cities, keyed by lowercase name."""

from types import MappingProxyType

STOCKHOLM = (59.3293, 18.0686)
GOTEBORG = (57.7089, 11.9746)
MALMO = (55.6050, 13.0038)
LINKOPING = (58.4108, 15.6214)
OREBRO = (59.2753, 15.2134)
VASTERAS = (59.6099, 16.5448)
NORRKOPING = (58.5877, 16.1924)
UMEA = (63.8258, 20.2630)
JONKOPING = (57.7826, 14.1618)
LULEA = (65.5848, 22.1547)
GAVLE = (60.6749, 17.1413)
VAXJO = (56.8777, 14.8091)
ARE = (63.3988, 13.0814)

CITY_COORDINATES = MappingProxyType(
    {
        "stockholm": STOCKHOLM,
        "göteborg": GOTEBORG,
        "gothenburg": GOTEBORG,
        "malmö": MALMO,
        "malmo": MALMO,
        "uppsala": (59.8586, 17.6389),
        "linköping": LINKOPING,
        "linkoping": LINKOPING,
        "örebro": OREBRO,
        "orebro": OREBRO,
        "västerås": VASTERAS,
        "vasteras": VASTERAS,
        "norrköping": NORRKOPING,
        "norrkoping": NORRKOPING,
        "lund": (55.7047, 13.1910),
        "umeå": UMEA,
        "umea": UMEA,
        "jönköping": JONKOPING,
        "jonkoping": JONKOPING,
        "luleå": LULEA,
        "lulea": LULEA,
        "kiruna": (67.8558, 20.2253),
        "sundsvall": (62.3908, 17.3069),
        "gävle": GAVLE,
        "gavle": GAVLE,
        "karlstad": (59.3793, 13.5036),
        "växjö": VAXJO,
        "vaxjo": VAXJO,
        "halmstad": (56.6745, 12.8578),
        "kalmar": (56.6634, 16.3566),
        "visby": (57.6348, 18.2948),
        "åre": ARE,
        "are": ARE,
    }
)


def lookup_coordinates(location: str) -> tuple[float, float] | None:
    """Coordinates for a known city name, ignoring case and surrounding spaces."""
    return CITY_COORDINATES.get(location.strip().lower())
