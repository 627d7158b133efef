# -*- coding: utf-8 -*-
"""
dtedtile - DTED Level-2 tile decoding and elevation lookup.

Decodes Digital Terrain Elevation Data (DTED) Level-2 tiles from raw bytes
into an in-memory ``int16`` elevation grid and answers nearest-cell
elevation queries by geographic coordinate.

    >>> from dtedtile import Coordinate, decode
    >>> with open('n47.dt2', 'rb') as f:
    ...     tile = decode(f.read())
    >>> tile.elevation_m(Coordinate.from_degrees(47.164800109, 8.6838999052))
    1116

Dependencies
------------
numpy

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from dtedtile.exceptions import (
    DtedError,
    CoordinateError,
    LatitudeOutOfRange,
    LongitudeOutOfRange,
    DecodeError,
    DecodeIOError,
    InvalidDtedError,
    TruncatedDataError,
)
from dtedtile.coordinate import Coordinate
from dtedtile.tile import DtedHeader, DtedTile
from dtedtile.IO.dted import decode, read_dted
from dtedtile.elevation import ElevationModel, DTEDTileElevation

__all__ = [
    'DtedError',
    'CoordinateError',
    'LatitudeOutOfRange',
    'LongitudeOutOfRange',
    'DecodeError',
    'DecodeIOError',
    'InvalidDtedError',
    'TruncatedDataError',
    'Coordinate',
    'DtedHeader',
    'DtedTile',
    'decode',
    'read_dted',
    'ElevationModel',
    'DTEDTileElevation',
]
