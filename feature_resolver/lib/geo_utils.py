import cython

if cython.compiled:
    from cython.cimports.libc.math import sqrt
else:
    from math import sqrt

# One degree treated as 111 km in both axes, good enough at city scale
_METERS_PER_DEGREE = 111000


def planar_distance(lat1: cython.double, lon1: cython.double, lat2: cython.double, lon2: cython.double) -> float:
    """
    Approximate the distance between two points in meters.

    Degrees are treated as planar coordinates, this is not geodesically exact.

    >>> round(planar_distance(0, 0, 0.001, 0), 3)
    111.0
    """
    delta_lat: cython.double = lat2 - lat1
    delta_lon: cython.double = lon2 - lon1
    return sqrt(delta_lat * delta_lat + delta_lon * delta_lon) * _METERS_PER_DEGREE


def zoom_radius_meters(zoom: int) -> float:
    """
    Get the query radius for a map click at the given zoom level.

    >>> zoom_radius_meters(19)
    10.0
    """
    return 10 * 1.5 ** (19 - zoom)


def validate_lat_lon(lat: float, lon: float) -> None:
    """Raise ValueError unless the coordinate is a valid WGS84 position."""
    if not (-90 <= lat <= 90):
        raise ValueError(f'Latitude {lat!r} out of range [-90, 90]')
    if not (-180 <= lon <= 180):
        raise ValueError(f'Longitude {lon!r} out of range [-180, 180]')
