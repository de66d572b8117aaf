import math

from geostruct import Coordinate, Point


def same_ordinate(a, b):
    """Ordinate equality, where NaN equals NaN"""
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b


def assert_coordinate(coord, x, y):
    assert isinstance(coord, Coordinate)
    assert same_ordinate(coord.x, x), f"{coord.x} != {x}"
    assert same_ordinate(coord.y, y), f"{coord.y} != {y}"


def part_depth(obj):
    """The number of nested part levels below a geometry, measured on its
    contents rather than read from the type.

    Only the first part at each level is followed, so callers should pass
    geometries without empty parts."""
    if isinstance(obj, (Point, Coordinate)):
        return 0
    (name,) = obj.__struct_fields__
    parts = getattr(obj, name)
    return 1 + part_depth(parts[0])
