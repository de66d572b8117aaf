import sys

import pytest

import geostruct
import geostruct.yaml
from geostruct import Coordinate, LineString, MultiPolygon, Point

try:
    import yaml  # noqa
except ImportError:
    pytestmark = pytest.mark.skip(reason="PyYAML is not installed")


def test_module_dir():
    assert set(dir(geostruct.yaml)) == {"decode"}


def test_pyyaml_not_installed_error(monkeypatch):
    monkeypatch.setitem(sys.modules, "yaml", None)

    with pytest.raises(ImportError, match="PyYAML"):
        geostruct.yaml.decode("type: Point\ncoordinates: [1, 2]\n")


def test_decode():
    res = geostruct.yaml.decode("type: Point\ncoordinates: [1, 2]\n")
    assert res.geometry == Point(Coordinate(1.0, 2.0))


def test_decode_block_style():
    msg = b"""
type: LineString
coordinates:
  - [0, 0]
  - [1, 1]
"""
    res = geostruct.yaml.decode(msg)
    assert res.geometry == LineString((Coordinate(0.0, 0.0), Coordinate(1.0, 1.0)))


def test_decode_multi_polygon():
    msg = "type: multipolygon\ncoordinates: [[[[0, 0], [1, 0], [1, 1], [0, 0]]]]\n"
    res = geostruct.yaml.decode(msg)
    assert isinstance(res.geometry, MultiPolygon)


def test_null_ordinate():
    res = geostruct.yaml.decode("type: Point\ncoordinates: [~, 2]\n")
    assert res.geometry.coordinate.y == 2.0
    assert res.geometry.coordinate.x != res.geometry.coordinate.x


def test_invalid_yaml():
    with pytest.raises(geostruct.DecodeError):
        geostruct.yaml.decode("type: [Point\n")


def test_non_string_type():
    with pytest.raises(geostruct.UnsupportedGeometryType, match="got `int`"):
        geostruct.yaml.decode("type: 1\ncoordinates: [1, 2]\n")


def test_coordinates_not_an_array():
    with pytest.raises(geostruct.MalformedCoordinate, match="got `int`"):
        geostruct.yaml.decode("type: Point\ncoordinates: 5\n")
