from collections import OrderedDict

import msgspec
import pytest

import geostruct
from geostruct import MappingRecord, Record, StructRecord, as_record


class Row(msgspec.Struct):
    type: str
    coordinates: list
    id: int = 0


class ColumnRecord:
    """A minimal record implemented outside geostruct"""

    def __init__(self, names, values):
        self._columns = dict(zip(names, values))

    def field_names(self):
        return self._columns.keys()

    def value_of(self, name):
        return self._columns.get(name)


class TestMappingRecord:
    def test_fields(self):
        rec = MappingRecord({"type": "Point", "coordinates": [1, 2]})
        assert set(rec.field_names()) == {"type", "coordinates"}
        assert rec.value_of("type") == "Point"
        assert rec.value_of("coordinates") == [1, 2]

    def test_missing_is_none(self):
        assert MappingRecord({}).value_of("type") is None

    def test_repr(self):
        assert repr(MappingRecord({"a": 1})) == "MappingRecord({'a': 1})"

    def test_not_a_mapping(self):
        with pytest.raises(TypeError, match="Expected a mapping, got `list`"):
            MappingRecord([("type", "Point")])


class TestStructRecord:
    def test_fields(self):
        rec = StructRecord(Row("Point", [1, 2]))
        assert rec.field_names() == {"type", "coordinates", "id"}
        assert rec.value_of("type") == "Point"
        assert rec.value_of("id") == 0

    def test_missing_is_none(self):
        rec = StructRecord(Row("Point", [1, 2]))
        assert rec.value_of("__class__") is None
        assert rec.value_of("bbox") is None

    def test_not_a_struct(self):
        with pytest.raises(TypeError, match="Expected a Struct, got `dict`"):
            StructRecord({})


class TestAsRecord:
    def test_mapping(self):
        rec = as_record(OrderedDict(type="Point"))
        assert isinstance(rec, MappingRecord)

    def test_struct(self):
        rec = as_record(Row("Point", [1, 2]))
        assert isinstance(rec, StructRecord)

    def test_existing_adapter_passthrough(self):
        rec = MappingRecord({})
        assert as_record(rec) is rec

    def test_protocol(self):
        rec = ColumnRecord(["type", "coordinates"], ["Point", [1, 2]])
        assert isinstance(rec, Record)
        assert as_record(rec) is rec

    def test_unsupported(self):
        with pytest.raises(TypeError, match="Can't read a record from `str`"):
            as_record("Point")

    def test_custom_record_decodes(self):
        rec = ColumnRecord(["type", "coordinates", "id"], ["point", [1, 2], 7])
        res = geostruct.parse(rec)
        assert res.geometry == geostruct.Point(geostruct.Coordinate(1.0, 2.0))
