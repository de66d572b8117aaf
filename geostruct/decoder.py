"""Decoding of GeoJSON-like records into geometries.

Every builder expects a coordinate payload of an exact nesting depth and
walks it in a single pass:

================  =====  =============================================
Type              Depth  Coordinates
================  =====  =============================================
Point             1      ``[x, y]``
MultiPoint        2      ``[[x, y], ...]``
LineString        2      ``[[x, y], ...]``
MultiLineString   3      ``[[[x, y], ...], ...]``
Polygon           3      ``[[[x, y], ...], ...]``
MultiPolygon      4      ``[[[[x, y], ...], ...], ...]``
================  =====  =============================================

Missing (``None``) ordinates decode as ``NaN``. Any other structural problem
raises `MalformedCoordinate` with the path to the offending value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, List, Union

from ._errors import DecodeError, MalformedCoordinate, UnsupportedGeometryType
from .geometry import (
    WGS84,
    Coordinate,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    SpatialGeometry,
    SpatialReference,
    attach_spatial_reference,
)
from .record import as_record

__all__ = (
    "build_point",
    "build_multi_point",
    "build_line_string",
    "build_multi_line_string",
    "build_polygon",
    "build_multi_polygon",
    "decode",
    "get_type",
    "parse",
    "Decoder",
)

logger = logging.getLogger(__name__)

_NAN = float("nan")


def __dir__():
    return __all__


def _type_name(obj):
    if obj is None:
        return "null"
    if isinstance(obj, (list, tuple)):
        return "array"
    if isinstance(obj, dict):
        return "object"
    return type(obj).__name__


def _array(obj, path):
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)):
        return obj
    raise MalformedCoordinate(f"Expected `array`, got `{_type_name(obj)}`", path)


def _ordinate(obj, path):
    if obj is None:
        return _NAN
    # bool is a subclass of int, but never a valid ordinate
    if isinstance(obj, (int, float)) and not isinstance(obj, bool):
        try:
            return float(obj)
        except OverflowError:
            raise MalformedCoordinate("Number out of range for `float`", path) from None
    raise MalformedCoordinate(f"Expected `float | null`, got `{_type_name(obj)}`", path)


def _point(coords, path):
    coords = _array(coords, path)
    if not coords:
        return Point()
    if len(coords) < 2:
        raise MalformedCoordinate(
            f"Expected `array` of length >= 2, got {len(coords)}", path
        )
    # Any ordinates past the second (z, m) are ignored
    x = _ordinate(coords[0], f"{path}[0]")
    y = _ordinate(coords[1], f"{path}[1]")
    return Point(Coordinate(x, y))


def _vertex(coords, path):
    point = _point(coords, path)
    if point.coordinate is None:
        raise MalformedCoordinate("Expected `array` of length >= 2, got 0", path)
    return point.coordinate


def _multi_point(coords, path):
    coords = _array(coords, path)
    return MultiPoint(tuple(_point(c, f"{path}[{i}]") for i, c in enumerate(coords)))


def _line_string(coords, path):
    coords = _array(coords, path)
    return LineString(
        tuple(_vertex(c, f"{path}[{i}]") for i, c in enumerate(coords))
    )


def _multi_line_string(coords, path):
    coords = _array(coords, path)
    return MultiLineString(
        tuple(_line_string(c, f"{path}[{i}]") for i, c in enumerate(coords))
    )


def _polygon(coords, path):
    coords = _array(coords, path)
    return Polygon(tuple(_line_string(c, f"{path}[{i}]") for i, c in enumerate(coords)))


def _multi_polygon(coords, path):
    coords = _array(coords, path)
    return MultiPolygon(
        tuple(_polygon(c, f"{path}[{i}]") for i, c in enumerate(coords))
    )


_BUILDERS = {
    "point": _point,
    "multipoint": _multi_point,
    "linestring": _line_string,
    "multilinestring": _multi_line_string,
    "polygon": _polygon,
    "multipolygon": _multi_polygon,
}


def build_point(coords: Sequence) -> Point:
    """Build a `Point` from a ``[x, y]`` position.

    An empty position builds an empty point. ``None`` ordinates become
    ``NaN``.
    """
    return _point(coords, "$")


def build_multi_point(coords: Sequence) -> MultiPoint:
    """Build a `MultiPoint` from a list of positions."""
    return _multi_point(coords, "$")


def build_line_string(coords: Sequence) -> LineString:
    """Build a `LineString` from a list of positions.

    Vertices are kept verbatim, including consecutive duplicates. No closing
    vertex is added.
    """
    return _line_string(coords, "$")


def build_multi_line_string(coords: Sequence) -> MultiLineString:
    """Build a `MultiLineString` from a list of paths."""
    return _multi_line_string(coords, "$")


def build_polygon(coords: Sequence) -> Polygon:
    """Build a `Polygon` from a list of rings.

    Rings are not closed, reoriented, or classified.
    """
    return _polygon(coords, "$")


def build_multi_polygon(coords: Sequence) -> MultiPolygon:
    """Build a `MultiPolygon` from a list of polygons."""
    return _multi_polygon(coords, "$")


def decode(type_tag: str, coords: Any) -> Geometry:
    """Decode a coordinate payload as the geometry named by ``type_tag``.

    Parameters
    ----------
    type_tag: str
        The GeoJSON type name (e.g. ``"Polygon"``). Matching ignores case.
    coords: Any
        The nested coordinate lists.

    Returns
    -------
    Geometry

    Raises
    ------
    UnsupportedGeometryType
        If ``type_tag`` isn't one of the six supported type names.
    MalformedCoordinate
        If ``coords`` doesn't have the nesting its type requires.
    """
    if not isinstance(type_tag, str):
        raise UnsupportedGeometryType(type_tag)
    builder = _BUILDERS.get(type_tag.lower())
    if builder is None:
        raise UnsupportedGeometryType(type_tag)
    return builder(coords, "$")


def get_type(record: Any) -> Any:
    """Get the raw ``type`` value of a record, or ``None`` if missing."""
    return as_record(record).value_of("type")


def parse(
    record: Any, *, spatial_reference: SpatialReference = WGS84
) -> SpatialGeometry:
    """Decode a record's ``type`` and ``coordinates`` fields.

    Parameters
    ----------
    record: Record, Mapping, or Struct
        The record to decode.
    spatial_reference: SpatialReference, optional
        The spatial reference to tag the geometry with. Defaults to `WGS84`.

    Returns
    -------
    SpatialGeometry
    """
    record = as_record(record)
    geometry = decode(record.value_of("type"), record.value_of("coordinates"))
    return attach_spatial_reference(geometry, spatial_reference)


class Decoder:
    """A GeoJSON record decoder.

    Parameters
    ----------
    spatial_reference: SpatialReference, optional
        The spatial reference every decoded geometry is tagged with. Defaults
        to `WGS84`.
    """

    __slots__ = ("spatial_reference",)

    def __init__(self, *, spatial_reference: SpatialReference = WGS84):
        if not isinstance(spatial_reference, SpatialReference):
            raise TypeError(
                "spatial_reference must be a SpatialReference, got "
                f"`{type(spatial_reference).__name__}`"
            )
        self.spatial_reference = spatial_reference

    def __repr__(self):
        return f"Decoder(spatial_reference={self.spatial_reference!r})"

    def decode(self, record: Any) -> SpatialGeometry:
        """Decode a single record.

        Parameters
        ----------
        record: Record, Mapping, or Struct
            The record to decode.

        Returns
        -------
        SpatialGeometry
        """
        return parse(record, spatial_reference=self.spatial_reference)

    def decode_all(
        self, records: Iterable[Any], *, errors: str = "raise"
    ) -> List[Union[SpatialGeometry, None]]:
        """Decode a batch of records.

        Parameters
        ----------
        records: iterable
            The records to decode.
        errors: {"raise", "skip", "null"}, optional
            What to do with a record that fails to decode. ``"raise"`` (the
            default) propagates the error. ``"skip"`` drops the record from
            the output. ``"null"`` outputs ``None`` in its place. In the
            ``"skip"`` and ``"null"`` modes the failure is logged and the rest
            of the batch is decoded.

        Returns
        -------
        list
        """
        if errors not in ("raise", "skip", "null"):
            raise ValueError(
                f"errors must be one of 'raise', 'skip', or 'null', got {errors!r}"
            )
        out = []
        for i, record in enumerate(records):
            try:
                out.append(self.decode(record))
            except DecodeError as exc:
                if errors == "raise":
                    raise
                logger.warning("Failed to decode record %d: %s", i, exc)
                if errors == "null":
                    out.append(None)
        return out
