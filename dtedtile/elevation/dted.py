# -*- coding: utf-8 -*-
"""
DTED Tile Elevation Model - Batch elevation lookup over one decoded tile.

Wraps a :class:`~dtedtile.tile.DtedTile` in the ``ElevationModel``
interface so that arrays of points can be queried in one vectorized call.
Each point resolves to the same grid cell as ``DtedTile.elevation_m``;
points outside the tile receive NaN.

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

# Standard library
from pathlib import Path
from typing import Tuple, Union

# Third-party
import numpy as np

# dtedtile internal
from dtedtile.elevation.base import ElevationModel
from dtedtile.tile import DtedTile


class DTEDTileElevation(ElevationModel):
    """Elevation model backed by a single decoded DTED tile.

    Parameters
    ----------
    tile : DtedTile
        Decoded tile.

    Examples
    --------
    >>> from dtedtile.elevation import DTEDTileElevation
    >>> elev = DTEDTileElevation.from_file('n47.dt2')
    >>> elev.get_elevation(47.356418477, 8.5189232237)
    421.0
    >>> elev.get_elevation([47.5, 10.0], [8.5, 8.5])
    array([..., nan])
    """

    def __init__(self, tile: DtedTile) -> None:
        self._tile = tile

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> 'DTEDTileElevation':
        """Read a DTED tile file and wrap it.

        Parameters
        ----------
        filepath : str or Path
            Path to a ``.dt2`` file.

        Returns
        -------
        DTEDTileElevation

        Raises
        ------
        DecodeIOError
            If the file cannot be read.
        InvalidDtedError
            If the file is not a valid DTED Level-2 tile.
        """
        return cls(DtedTile.from_file(filepath))

    @property
    def tile(self) -> DtedTile:
        return self._tile

    @property
    def coverage_bounds(self) -> Tuple[float, float, float, float]:
        """``(min_lon, min_lat, max_lon, max_lat)`` in degrees."""
        return self._tile.bounds

    def _get_elevation_array(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> np.ndarray:
        """Nearest-cell lookup for arrays of points.

        Parameters
        ----------
        lats : np.ndarray
            Latitudes in degrees North. Shape ``(N,)``.
        lons : np.ndarray
            Longitudes in degrees East. Shape ``(N,)``.

        Returns
        -------
        np.ndarray
            Elevation in meters (MSL), float64. NaN outside the tile.
        """
        rows, cols, inside = self._tile.grid_indices(lats, lons)
        heights = np.full(lats.shape, np.nan, dtype=np.float64)
        heights[inside] = self._tile.elevations[rows[inside], cols[inside]]
        return heights
