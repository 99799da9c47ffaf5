"""The fixed service-area boundary, as data for a map renderer.

Coverage is decided by the city-name list; nothing here tests whether a
point lies inside the polygon.
"""

from typing import Iterable, Tuple

Coordinate = Tuple[float, float]     # (longitude, latitude)
Bounds = Tuple[Coordinate, Coordinate]

SERVICE_AREA_NAME = "1A Home Energy Service Area"

DEFAULT_CENTER: Coordinate = (-71.4, 42.3)
DEFAULT_ZOOM = 7

# Closed ring, first point repeated last.
SERVICE_AREA_POLYGON: Tuple[Coordinate, ...] = (
    (-72.3622586, 42.1569446),
    (-72.1431943, 42.0317266),
    (-71.7984983, 42.0259886),
    (-71.7974683, 42.0106847),
    (-71.3803312, 42.0219079),
    (-71.3789579, 42.0150212),
    (-70.9872266, 42.0471529),
    (-71.0047361, 42.0792684),
    (-71.0126325, 42.1556685),
    (-71.0764368, 42.2024819),
    (-71.1142024, 42.2024819),
    (-71.2123927, 42.2512934),
    (-71.200033, 42.2777172),
    (-71.2323054, 42.3163168),
    (-71.2426051, 42.3183477),
    (-71.2618311, 42.3427133),
    (-71.1272486, 42.3731571),
    (-71.0915431, 42.3835554),
    (-71.0865649, 42.3929377),
    (-71.1021861, 42.4095435),
    (-71.0546359, 42.4176546),
    (-71.0539492, 42.4317199),
    (-71.104761, 42.4436286),
    (-71.0992678, 42.4778218),
    (-71.1023577, 42.5023787),
    (-71.1016711, 42.5236367),
    (-71.1040743, 42.5360339),
    (-71.104761, 42.5544986),
    (-71.1123141, 42.579531),
    (-71.1219271, 42.6060695),
    (-71.1329134, 42.6452248),
    (-71.1418398, 42.6856174),
    (-71.13772, 42.718417),
    (-71.2633761, 42.6941974),
    (-72.0949038, 42.7156423),
    (-72.0395352, 42.5790287),
    (-72.2661282, 42.2637478),
    (-72.3622586, 42.1569446),
)


def compute_bounds(coords: Iterable[Coordinate]) -> Bounds:
    """
    Return ((min_lng, min_lat), (max_lng, max_lat)) for *coords*.

    Raises ValueError if *coords* is empty.
    """
    points = list(coords)
    if not points:
        raise ValueError("cannot compute bounds of an empty coordinate list")
    lngs = [lng for lng, _ in points]
    lats = [lat for _, lat in points]
    return (min(lngs), min(lats)), (max(lngs), max(lats))


def service_area_feature() -> dict:
    """GeoJSON Feature for the service-area polygon."""
    return {
        "type": "Feature",
        "properties": {"name": SERVICE_AREA_NAME},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[list(point) for point in SERVICE_AREA_POLYGON]],
        },
    }
