from __future__ import annotations

from typing import Any, Union

import msgspec

from ._errors import DecodeError
from .decoder import parse
from .geometry import WGS84, SpatialGeometry, SpatialReference

__all__ = ("RawGeometry", "decode")


def __dir__():
    return __all__


class RawGeometry(msgspec.Struct):
    """A GeoJSON geometry object as found in a message.

    Both fields are untyped and optional, so that a missing or ill-typed
    ``type`` or ``coordinates`` is reported by the geometry decoder rather
    than as a schema mismatch.
    Unknown fields (e.g. ``bbox``) are ignored.
    """

    type: Any = None
    coordinates: Any = None


_decoder = msgspec.json.Decoder(RawGeometry)


def decode(
    buf: Union[bytes, str], *, spatial_reference: SpatialReference = WGS84
) -> SpatialGeometry:
    """Deserialize a GeoJSON geometry object from JSON.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    spatial_reference : SpatialReference, optional
        The spatial reference to tag the geometry with. Defaults to `WGS84`.

    Returns
    -------
    SpatialGeometry

    See Also
    --------
    geostruct.yaml.decode
    """
    try:
        raw = _decoder.decode(buf)
    except msgspec.DecodeError as exc:
        raise DecodeError(str(exc)) from None
    return parse(raw, spatial_reference=spatial_reference)
