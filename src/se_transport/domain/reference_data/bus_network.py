"""Cities, operator identifiers and typical routes for long-distance buses."""

from types import MappingProxyType

from se_transport.domain.models.bus import BusCity, RouteInfo


def _city(key: str, name: str, flixbus_id: str = "", vy_stop: str | None = None) -> BusCity:
    return BusCity(key=key, name=name, flixbus_id=flixbus_id, vy_stop=vy_stop or name)


_CITIES = (
    _city("stockholm", "Stockholm", "40dfdbe7-8646-11e6-9066-549f350fcb0c"),
    _city("göteborg", "Göteborg", "40de87a6-8646-11e6-9066-549f350fcb0c"),
    _city("malmö", "Malmö", "40de8c24-8646-11e6-9066-549f350fcb0c"),
    _city("uppsala", "Uppsala", "40de9066-8646-11e6-9066-549f350fcb0c"),
    _city("linköping", "Linköping", "40de8aea-8646-11e6-9066-549f350fcb0c"),
    _city("norrköping", "Norrköping", "40de8d64-8646-11e6-9066-549f350fcb0c"),
    _city("jönköping", "Jönköping", "40de8940-8646-11e6-9066-549f350fcb0c"),
    _city("örebro", "Örebro", "40de90e8-8646-11e6-9066-549f350fcb0c"),
    _city("västerås", "Västerås", "40de9156-8646-11e6-9066-549f350fcb0c"),
    _city("karlstad", "Karlstad", "40de89b8-8646-11e6-9066-549f350fcb0c"),
    _city("borås", "Borås", "40de85ee-8646-11e6-9066-549f350fcb0c"),
    _city("helsingborg", "Helsingborg", "40de882a-8646-11e6-9066-549f350fcb0c"),
    _city("lund", "Lund", "40de8b9e-8646-11e6-9066-549f350fcb0c"),
    _city("umeå", "Umeå", "40de8ff8-8646-11e6-9066-549f350fcb0c"),
    _city("sundsvall", "Sundsvall", "40de8efe-8646-11e6-9066-549f350fcb0c"),
    _city("gävle", "Gävle", "40de879c-8646-11e6-9066-549f350fcb0c"),
    _city("kalmar", "Kalmar", "40de88a2-8646-11e6-9066-549f350fcb0c"),
    _city("växjö", "Växjö", "40de91c4-8646-11e6-9066-549f350fcb0c"),
    _city("halmstad", "Halmstad", "40de87ce-8646-11e6-9066-549f350fcb0c"),
    _city("kristianstad", "Kristianstad", "40de8a50-8646-11e6-9066-549f350fcb0c"),
    _city("karlskrona", "Karlskrona", "40de8a28-8646-11e6-9066-549f350fcb0c"),
    _city("luleå", "Luleå", "40de8b76-8646-11e6-9066-549f350fcb0c"),
    _city("ånge", "Ånge"),
    _city("svenstavik", "Svenstavik"),
    _city("östersund", "Östersund", "40de9124-8646-11e6-9066-549f350fcb0c"),
    _city("mora", "Mora", "40de8cf6-8646-11e6-9066-549f350fcb0c"),
    _city("falun", "Falun", "40de86ca-8646-11e6-9066-549f350fcb0c"),
    _city("borlänge", "Borlänge", "40de85c6-8646-11e6-9066-549f350fcb0c"),
    _city("ullared", "Ullared"),
    _city("värnamo", "Värnamo", "40de9188-8646-11e6-9066-549f350fcb0c"),
    _city("ljungby", "Ljungby", "40de8afe-8646-11e6-9066-549f350fcb0c"),
    _city("nässjö", "Nässjö", "40de8d8c-8646-11e6-9066-549f350fcb0c"),
    _city("vetlanda", "Vetlanda"),
    _city("eksjö", "Eksjö"),
    _city("åre", "Åre", "40de9232-8646-11e6-9066-549f350fcb0c"),
    _city("sälen", "Sälen", "40de8e72-8646-11e6-9066-549f350fcb0c"),
    _city("vemdalen", "Vemdalen", "0f2869d8-d001-42e3-8f28-df360bbfa313"),
    _city("idre", "Idre", "40de88c0-8646-11e6-9066-549f350fcb0c"),
    _city("funäsdalen", "Funäsdalen", "40de8756-8646-11e6-9066-549f350fcb0c"),
    _city("trysil", "Trysil", "40de7e68-8646-11e6-9066-549f350fcb0c"),
    _city("hemavan", "Hemavan", "40de8846-8646-11e6-9066-549f350fcb0c"),
    _city("riksgränsen", "Riksgränsen", "40de8dc8-8646-11e6-9066-549f350fcb0c"),
    _city("oslo", "Oslo", "40de7d0a-8646-11e6-9066-549f350fcb0c"),
    _city("köpenhamn", "Köpenhamn", "40de5cda-8646-11e6-9066-549f350fcb0c", "København"),
    BusCity(
        key="arlanda",
        name="Stockholm Arlanda Airport",
        flixbus_id="40dea650-8646-11e6-9066-549f350fcb0c",
        vy_stop="Arlanda",
        is_airport=True,
        airport_code="ARN",
    ),
    BusCity(
        key="landvetter",
        name="Göteborg Landvetter Airport",
        flixbus_id="40dea754-8646-11e6-9066-549f350fcb0c",
        vy_stop="Landvetter",
        is_airport=True,
        airport_code="GOT",
    ),
)

# Spellings without Swedish letters, plus English names
_ALIASES = {
    "gothenburg": "göteborg",
    "malmo": "malmö",
    "linkoping": "linköping",
    "norrkoping": "norrköping",
    "jonkoping": "jönköping",
    "orebro": "örebro",
    "vasteras": "västerås",
    "boras": "borås",
    "umea": "umeå",
    "gavle": "gävle",
    "vaxjo": "växjö",
    "lulea": "luleå",
    "ange": "ånge",
    "ostersund": "östersund",
    "borlange": "borlänge",
    "varnamo": "värnamo",
    "nassjo": "nässjö",
    "eksjo": "eksjö",
    "are": "åre",
    "salen": "sälen",
    "funasdalen": "funäsdalen",
    "riksgransen": "riksgränsen",
    "copenhagen": "köpenhamn",
    "kopenhamn": "köpenhamn",
}

_by_key = {city.key: city for city in _CITIES}
BUS_CITIES = MappingProxyType(
    {**_by_key, **{alias: _by_key[key] for alias, key in _ALIASES.items()}}
)

ROUTES = MappingProxyType(
    {
        "stockholm-göteborg": RouteInfo("4-5 tim", 99, 299, "8-12/dag", True),
        "stockholm-malmö": RouteInfo("6-8 tim", 149, 399, "6-10/dag", False),
        "göteborg-malmö": RouteInfo("3-4 tim", 99, 249, "8-12/dag", False),
        "stockholm-oslo": RouteInfo("6-7 tim", 149, 349, "4-6/dag", True),
        "stockholm-köpenhamn": RouteInfo("8-9 tim", 199, 449, "4-6/dag", False),
        "göteborg-köpenhamn": RouteInfo("4-5 tim", 149, 299, "4-6/dag", True),
        "stockholm-linköping": RouteInfo("2-3 tim", 79, 199, "10-15/dag", True),
        "stockholm-norrköping": RouteInfo("2 tim", 79, 179, "10-15/dag", True),
        "stockholm-jönköping": RouteInfo("3-4 tim", 99, 249, "6-8/dag", True),
        "stockholm-örebro": RouteInfo("2.5 tim", 79, 199, "6-8/dag", True),
        "stockholm-västerås": RouteInfo("1-1.5 tim", 59, 149, "8-10/dag", True),
        "stockholm-karlstad": RouteInfo("3-4 tim", 99, 249, "4-6/dag", True),
        "stockholm-uppsala": RouteInfo("45 min", 49, 99, "Många/dag", False),
        "göteborg-borås": RouteInfo("1 tim", 49, 99, "Många/dag", True),
        "malmö-lund": RouteInfo("20 min", 39, 59, "Många/dag", False),
        "malmö-helsingborg": RouteInfo("1 tim", 49, 99, "Många/dag", False),
        "stockholm-arlanda": RouteInfo("45 min", 99, 139, "Var 10 min", False),
        "göteborg-landvetter": RouteInfo("30 min", 99, 119, "Var 15 min", False),
        "stockholm-åre": RouteInfo("7-8 tim", 299, 599, "2-4/dag", False),
        "stockholm-sälen": RouteInfo("5-6 tim", 249, 499, "2-4/dag", False),
        "stockholm-vemdalen": RouteInfo("5-6 tim", 249, 499, "2-3/dag", False),
        "stockholm-idre": RouteInfo("5 tim", 249, 449, "1-2/dag", False),
        "göteborg-åre": RouteInfo("8-9 tim", 349, 649, "1-2/dag", False),
        "göteborg-sälen": RouteInfo("5-6 tim", 249, 499, "1-2/dag", False),
        "oslo-trysil": RouteInfo("2.5 tim", 149, 299, "3-4/dag", False),
        "stockholm-funäsdalen": RouteInfo("6 tim", 279, 529, "1-2/dag", False),
        "stockholm-östersund": RouteInfo("6 tim", 249, 499, "3-4/dag", False),
        "stockholm-mora": RouteInfo("4 tim", 199, 399, "2-3/dag", False),
        "stockholm-falun": RouteInfo("3 tim", 149, 299, "4-6/dag", False),
        "göteborg-ullared": RouteInfo("1.5 tim", 99, 199, "4-6/dag", False),
        "stockholm-värnamo": RouteInfo("4 tim", 149, 349, "2-3/dag", False),
        "göteborg-värnamo": RouteInfo("2 tim", 99, 199, "3-4/dag", False),
        "malmö-värnamo": RouteInfo("2.5 tim", 99, 249, "2-3/dag", False),
    }
)


def lookup_city(name: str) -> BusCity | None:
    """City record for a name or alias, ignoring case and surrounding spaces."""
    return BUS_CITIES.get(name.strip().lower())


def lookup_route_info(origin: BusCity, destination: BusCity) -> RouteInfo | None:
    """Route info for a city pair in either direction."""
    return ROUTES.get(f"{origin.key}-{destination.key}") or ROUTES.get(
        f"{destination.key}-{origin.key}"
    )
