__all__ = (
    "GeoStructError",
    "DecodeError",
    "UnsupportedGeometryType",
    "MalformedCoordinate",
    "InvalidSchema",
)


class GeoStructError(Exception):
    """The base class for geostruct exceptions"""


class DecodeError(GeoStructError, ValueError):
    """A record failed to decode as a geometry"""


class UnsupportedGeometryType(DecodeError):
    """The record's type tag doesn't name a supported geometry type.

    Parameters
    ----------
    type_tag: Any
        The offending type tag, as found in the record.
    """

    def __init__(self, type_tag):
        self.type_tag = type_tag
        if isinstance(type_tag, str):
            msg = f"Unknown type in GeoJSON record: {type_tag.lower()!r}"
        elif type_tag is None:
            msg = "GeoJSON record is missing a `type`"
        else:
            msg = f"Expected `str` for GeoJSON type, got `{type(type_tag).__name__}`"
        super().__init__(msg)


class MalformedCoordinate(DecodeError):
    """A coordinate payload doesn't have the shape its geometry type requires.

    Parameters
    ----------
    msg: str
        A description of the problem.
    path: str
        A JSON-path like location of the offending value within the
        coordinates, e.g. ``$[0][2]``.
    """

    def __init__(self, msg, path="$"):
        self.path = path
        super().__init__(f"{msg} - at `{path}`")


class InvalidSchema(GeoStructError, TypeError):
    """A record schema can't hold a GeoJSON geometry"""
