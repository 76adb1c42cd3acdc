from dataclasses import dataclass

from destinations import destinations_data

ALL_NEIGHBORHOODS = 'All'


@dataclass(frozen=True)
class MapRegion:
    """Center point and viewport span of a map, in degrees."""
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    def bounds(self):
        """Return (south, west, north, east) of the visible area."""
        half_lat = self.latitude_delta / 2
        half_long = self.longitude_delta / 2
        return (
            self.latitude - half_lat,
            self.longitude - half_long,
            self.latitude + half_lat,
            self.longitude + half_long,
        )


def all_destinations():
    return destinations_data


def neighborhoods():
    return [ALL_NEIGHBORHOODS] + sorted({destination.neighborhood for destination in destinations_data})


def filter_by_neighborhood(selector):
    if selector == ALL_NEIGHBORHOODS:
        return list(destinations_data)
    return [destination for destination in destinations_data if destination.neighborhood == selector]


def find_destination(name):
    return next((destination for destination in destinations_data if destination.name == name), None)


def search_destinations(query):
    if not query:
        return []
    return [destination for destination in destinations_data if query.lower() in destination.name.lower()]


def overview_region():
    # Wide enough to show the lake and the eastern caves together
    return MapRegion(13.50751, -88.48359, 0.2, 1.5)


def detail_region(destination):
    return MapRegion(destination.latitude, destination.longitude, 0.1, 0.1)


def map_pins(destinations):
    return [
        {'name': destination.name, 'latitude': destination.latitude, 'longitude': destination.longitude}
        for destination in destinations
    ]
