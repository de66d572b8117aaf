import logging as _logging

from ._errors import (
    DecodeError,
    GeoStructError,
    InvalidSchema,
    MalformedCoordinate,
    UnsupportedGeometryType,
)
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
from .record import MappingRecord, Record, StructRecord, as_record
from .schema import RecordSchema, check_schema, is_eligible, schema_info
from .decoder import (
    Decoder,
    build_line_string,
    build_multi_line_string,
    build_multi_point,
    build_multi_polygon,
    build_point,
    build_polygon,
    decode,
    get_type,
    parse,
)

from . import geometry, json, record, schema, yaml
from ._version import __version__

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
