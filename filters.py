# filters.py
from typing import Iterable, List, Optional

from models import FilteredLocation, OpeningHoursEntry, RawLocation

# Длины префиксов завязаны на текущий формат ответа DHL:
# url = "/locations/<id>", dayOfWeek = "http://schema.org/<Day>".
# Если провайдер поменяет формат, id и дни недели тихо сломаются.
LOCATION_URL_PREFIX_LEN = 11
DAY_OF_WEEK_PREFIX_LEN = 18

WEEKEND_DAYS = ("Saturday", "Sunday")


def location_id(url: str) -> str:
    """Effective location id: the url minus its prefix, second segment if dashed."""
    loc_id = url[LOCATION_URL_PREFIX_LEN:]
    # дефис в самом начале не считается разделителем
    if loc_id.find("-") > 0:
        loc_id = loc_id.split("-")[1]
    return loc_id


def opening_hours(entries: Iterable[OpeningHoursEntry]) -> dict[str, str]:
    hours: dict[str, str] = {}
    for entry in entries:
        day = entry.dayOfWeek[DAY_OF_WEEK_PREFIX_LEN:]
        hours[day] = f"{entry.opens} - {entry.closes}"
    return hours


def filter_location(loc: RawLocation) -> Optional[FilteredLocation]:
    if len(location_id(loc.url)) % 2 != 0:
        return None
    hours = opening_hours(loc.openingHours)
    if not all(day in hours for day in WEEKEND_DAYS):
        return None
    return FilteredLocation(
        locationName=loc.name,
        address=dict(loc.place.address),
        openingHours=hours,
    )


def filter_locations(locations: Iterable[RawLocation]) -> List[FilteredLocation]:
    """
    Keeps locations with an even-length id that are open on both Saturday and Sunday.
    Provider order is preserved; dropped locations are not reported.
    """
    result = []
    for loc in locations:
        filtered = filter_location(loc)
        if filtered is not None:
            result.append(filtered)
    return result
