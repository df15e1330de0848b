"""UK locations and the regions they resolve to."""

from enum import Enum
from typing import Dict, List


class UKLocation(str, Enum):
    LONDON = "london"
    MANCHESTER = "manchester"
    BIRMINGHAM = "birmingham"
    LEEDS = "leeds"
    SHEFFIELD = "sheffield"
    NOTTINGHAM = "nottingham"
    LIVERPOOL = "liverpool"
    BRISTOL = "bristol"
    BRIGHTON = "brighton"
    GLASGOW = "glasgow"
    CARDIFF = "cardiff"
    BELFAST = "belfast"
    OTHER_URBAN = "other_urban"
    RURAL = "rural"
    UNKNOWN = "unknown"


class UKRegion(str, Enum):
    """ONS English regions, the devolved nations, and the UK-wide catch-all."""
    LONDON = "london"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    EAST_ENGLAND = "east_england"
    EAST_MIDLANDS = "east_midlands"
    WEST_MIDLANDS = "west_midlands"
    NORTH_WEST = "north_west"
    NORTH_EAST = "north_east"
    YORKSHIRE = "yorkshire"
    SCOTLAND = "scotland"
    WALES = "wales"
    NORTHERN_IRELAND = "northern_ireland"
    NATIONWIDE = "nationwide"


CITY_TO_REGION: Dict[UKLocation, UKRegion] = {
    UKLocation.LONDON: UKRegion.LONDON,
    UKLocation.MANCHESTER: UKRegion.NORTH_WEST,
    UKLocation.BIRMINGHAM: UKRegion.WEST_MIDLANDS,
    UKLocation.LEEDS: UKRegion.YORKSHIRE,
    UKLocation.SHEFFIELD: UKRegion.YORKSHIRE,
    UKLocation.NOTTINGHAM: UKRegion.EAST_MIDLANDS,
    UKLocation.LIVERPOOL: UKRegion.NORTH_WEST,
    UKLocation.BRISTOL: UKRegion.SOUTH_WEST,
    UKLocation.BRIGHTON: UKRegion.SOUTH_EAST,
    UKLocation.GLASGOW: UKRegion.SCOTLAND,
    UKLocation.CARDIFF: UKRegion.WALES,
    UKLocation.BELFAST: UKRegion.NORTHERN_IRELAND,
    UKLocation.OTHER_URBAN: UKRegion.NATIONWIDE,
    UKLocation.RURAL: UKRegion.NATIONWIDE,
    UKLocation.UNKNOWN: UKRegion.NATIONWIDE,
}

REGION_DISPLAY_NAMES: Dict[UKRegion, str] = {
    UKRegion.LONDON: "London",
    UKRegion.SOUTH_EAST: "South East England",
    UKRegion.SOUTH_WEST: "South West England",
    UKRegion.EAST_ENGLAND: "East of England",
    UKRegion.EAST_MIDLANDS: "East Midlands",
    UKRegion.WEST_MIDLANDS: "West Midlands",
    UKRegion.NORTH_WEST: "North West England",
    UKRegion.NORTH_EAST: "North East England",
    UKRegion.YORKSHIRE: "Yorkshire and the Humber",
    UKRegion.SCOTLAND: "Scotland",
    UKRegion.WALES: "Wales",
    UKRegion.NORTHERN_IRELAND: "Northern Ireland",
    UKRegion.NATIONWIDE: "UK-wide",
}


def region_for_location(location: UKLocation) -> UKRegion:
    """Resolve a location to its region. Total: anything unmapped is nationwide."""
    try:
        location = UKLocation(location)
    except ValueError:
        return UKRegion.NATIONWIDE
    return CITY_TO_REGION.get(location, UKRegion.NATIONWIDE)


def parse_location(hint: str) -> UKLocation:
    """Map a free-text location hint ("Central London", "a village") to a UKLocation."""
    if not hint:
        return UKLocation.UNKNOWN
    text = hint.strip().lower()
    try:
        return UKLocation(text)
    except ValueError:
        pass
    for location in UKLocation:
        if location.value in text and location not in (
            UKLocation.OTHER_URBAN, UKLocation.RURAL, UKLocation.UNKNOWN,
        ):
            return location
    if any(word in text for word in ("rural", "countryside", "village", "small town")):
        return UKLocation.RURAL
    return UKLocation.OTHER_URBAN


def locations_in_region(region: UKRegion) -> List[UKLocation]:
    return [loc for loc, reg in CITY_TO_REGION.items() if reg == region]
