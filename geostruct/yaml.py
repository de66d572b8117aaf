from __future__ import annotations

from typing import Union

import msgspec

from ._errors import DecodeError
from .decoder import parse
from .geometry import WGS84, SpatialGeometry, SpatialReference
from .json import RawGeometry

__all__ = ("decode",)


def __dir__():
    return __all__


def decode(
    buf: Union[bytes, str], *, spatial_reference: SpatialReference = WGS84
) -> SpatialGeometry:
    """Deserialize a GeoJSON geometry object from YAML.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    spatial_reference : SpatialReference, optional
        The spatial reference to tag the geometry with. Defaults to `WGS84`.

    Returns
    -------
    SpatialGeometry

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    geostruct.json.decode
    """
    try:
        raw = msgspec.yaml.decode(buf, type=RawGeometry)
    except ImportError:
        raise ImportError(
            "`geostruct.yaml.decode` requires PyYAML be installed.\n\n"
            "Please either `pip` or `conda` install it as follows:\n\n"
            "  $ python -m pip install pyyaml  # using pip\n"
            "  $ conda install pyyaml          # or using conda"
        ) from None
    except msgspec.DecodeError as exc:
        raise DecodeError(str(exc)) from None
    return parse(raw, spatial_reference=spatial_reference)
