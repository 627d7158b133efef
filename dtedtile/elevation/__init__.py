# -*- coding: utf-8 -*-
"""
Elevation Module - Vectorized terrain elevation lookup over DTED tiles.

Key Classes
-----------
- ElevationModel: Abstract base class for elevation models
- DTEDTileElevation: Nearest-cell lookup over one decoded DTED tile

Usage
-----
    >>> from dtedtile.elevation import DTEDTileElevation
    >>> elev = DTEDTileElevation.from_file('n47.dt2')
    >>> elev.get_elevation(47.356418477, 8.5189232237)
    421.0

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

from dtedtile.elevation.base import ElevationModel
from dtedtile.elevation.dted import DTEDTileElevation

__all__ = [
    'ElevationModel',
    'DTEDTileElevation',
]
