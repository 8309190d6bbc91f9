"""Shared helpers for the simulated listing feeds."""

from __future__ import annotations

import random
import string
from types import MappingProxyType

DEFAULT_CITY = "Berlin"

# (latitude, longitude) of each city centre
CITY_COORDINATES: MappingProxyType[str, tuple[float, float]] = MappingProxyType({
    "Berlin": (52.520008, 13.404954),
    "München": (48.135125, 11.581981),
    "Hamburg": (53.551086, 9.993682),
    "Frankfurt": (50.110924, 8.682127),
    "Köln": (50.937531, 6.960279),
    "Stuttgart": (48.775846, 9.182932),
    "Düsseldorf": (51.227741, 6.773456),
    "Leipzig": (51.339695, 12.373075),
    "Dresden": (51.050407, 13.737262),
    "Bonn": (50.73743, 7.098207),
})

STREET_NAMES = (
    "Hauptstraße", "Bahnhofstraße", "Gartenstraße", "Schulstraße",
    "Kirchstraße", "Marktplatz", "Berliner Straße", "Mühlenweg",
    "Alte Gasse", "Neuer Weg", "Lindenallee", "Rosenweg",
)

CONDITIONS = ("excellent", "good", "fair")


def jittered_coordinates(city: str, rng: random.Random) -> tuple[float, float]:
    """Random point within about 5 km of the city centre.

    Unknown cities are placed around Berlin.
    """
    lat, lng = CITY_COORDINATES.get(city, CITY_COORDINATES[DEFAULT_CITY])
    return (
        lat + (rng.random() - 0.5) * 0.1,
        lng + (rng.random() - 0.5) * 0.1,
    )


def random_address(rng: random.Random, max_number: int) -> str:
    return f"{rng.choice(STREET_NAMES)} {rng.randint(1, max_number)}"


def random_postal_code(rng: random.Random) -> str:
    return str(rng.randint(10000, 99999))


def random_token(rng: random.Random, length: int = 9) -> str:
    return "".join(rng.choices(string.ascii_lowercase + string.digits, k=length))
