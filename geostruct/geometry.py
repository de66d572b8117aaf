from __future__ import annotations

from typing import ClassVar, Tuple, Union

from msgspec import Struct

__all__ = (
    "Coordinate",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "Geometry",
    "GEOMETRY_TYPES",
    "SpatialReference",
    "SpatialGeometry",
    "WGS84",
    "attach_spatial_reference",
)


def __dir__():
    return __all__


class Coordinate(Struct, frozen=True, array_like=True):
    """A single position.

    Parameters
    ----------
    x: float
        The first ordinate (longitude for geographic references). ``NaN`` if
        the source value was missing.
    y: float
        The second ordinate (latitude for geographic references). ``NaN`` if
        the source value was missing.
    """

    x: float
    y: float


class _Geometry(Struct, frozen=True, tag=True):
    # The number of nested part levels below the geometry itself
    depth: ClassVar[int]

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError


class Point(_Geometry):
    """A single position, or an explicitly empty point.

    Parameters
    ----------
    coordinate: Coordinate, optional
        The position of the point. ``None`` for an empty point, which is
        distinct from a point with ``NaN`` ordinates.
    """

    depth: ClassVar[int] = 0

    coordinate: Union[Coordinate, None] = None

    @property
    def is_empty(self) -> bool:
        return self.coordinate is None


class MultiPoint(_Geometry):
    """An ordered collection of points.

    Parameters
    ----------
    points: Tuple[Point, ...]
        The points, in input order. Duplicates are kept.
    """

    depth: ClassVar[int] = 1

    points: Tuple[Point, ...] = ()

    @property
    def is_empty(self) -> bool:
        return all(p.is_empty for p in self.points)


class LineString(_Geometry):
    """A single open path.

    Parameters
    ----------
    vertices: Tuple[Coordinate, ...]
        The vertices of the path, in order. No closing segment is implied,
        even when the first and last vertices are equal.
    """

    depth: ClassVar[int] = 1

    vertices: Tuple[Coordinate, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.vertices


class MultiLineString(_Geometry):
    """An ordered collection of disconnected paths.

    Parameters
    ----------
    paths: Tuple[LineString, ...]
        The paths, in input order.
    """

    depth: ClassVar[int] = 2

    paths: Tuple[LineString, ...] = ()

    @property
    def is_empty(self) -> bool:
        return all(p.is_empty for p in self.paths)


class Polygon(_Geometry):
    """A polygon as an ordered collection of rings.

    Ring orientation and closure are kept exactly as given; no ring is
    classified as an exterior or a hole.

    Parameters
    ----------
    rings: Tuple[LineString, ...]
        The rings, in input order.
    """

    depth: ClassVar[int] = 2

    rings: Tuple[LineString, ...] = ()

    @property
    def is_empty(self) -> bool:
        return all(r.is_empty for r in self.rings)


class MultiPolygon(_Geometry):
    """An ordered collection of polygons.

    Parameters
    ----------
    polygons: Tuple[Polygon, ...]
        The polygons, in input order.
    """

    depth: ClassVar[int] = 3

    polygons: Tuple[Polygon, ...] = ()

    @property
    def is_empty(self) -> bool:
        return all(p.is_empty for p in self.polygons)


Geometry = Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon]

GEOMETRY_TYPES = (Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon)


class SpatialReference(Struct, frozen=True):
    """A coordinate reference system, identified by its well-known id.

    Parameters
    ----------
    wkid: int
        The well-known id, e.g. ``4326`` for EPSG:4326.
    """

    wkid: int

    def __str__(self):
        return f"EPSG:{self.wkid}"


WGS84 = SpatialReference(4326)


class SpatialGeometry(Struct, frozen=True):
    """A geometry tagged with the spatial reference its coordinates are in.

    Parameters
    ----------
    geometry: Geometry
        The decoded geometry.
    spatial_reference: SpatialReference
        The reference system of ``geometry``.
    """

    geometry: Geometry
    spatial_reference: SpatialReference = WGS84


def attach_spatial_reference(
    geometry: Geometry, spatial_reference: SpatialReference = WGS84
) -> SpatialGeometry:
    """Tag a geometry with a spatial reference.

    Parameters
    ----------
    geometry: Geometry
        The geometry to tag.
    spatial_reference: SpatialReference, optional
        The spatial reference to attach. Defaults to `WGS84`.

    Returns
    -------
    SpatialGeometry
    """
    if not isinstance(geometry, GEOMETRY_TYPES):
        raise TypeError(
            f"Expected a geometry, got `{type(geometry).__name__}`"
        )
    if not isinstance(spatial_reference, SpatialReference):
        raise TypeError(
            "spatial_reference must be a SpatialReference, got "
            f"`{type(spatial_reference).__name__}`"
        )
    return SpatialGeometry(geometry, spatial_reference)
