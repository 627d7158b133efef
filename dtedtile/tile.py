# -*- coding: utf-8 -*-
"""
DTED Tile - Decoded header plus elevation grid with coordinate lookup.

A ``DtedTile`` covers exactly one 1 x 1 degree cell whose south-west
corner is the header origin. Elevations are held in a read-only ``int16``
grid of shape ``(num_lat_points, num_lon_points)``: row 0 is the southern
edge, column 0 the western edge. Lookups return the nearest grid cell
below and to the west of the query point; there is no interpolation.

Containment is decided on the normalized ``lat01``/``lon01`` values, with
the tile corners normalized the same way ``Coordinate.from_degrees`` does
it, so a coordinate built from an exact corner is always inside. Grid
indices are computed in degrees.

Points on the northern or eastern edge map to an index equal to the point
count, one past the last row/column. Those indices are clamped to the
last row/column so that every coordinate accepted by ``contains`` has an
elevation.

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
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

# Third-party
import numpy as np

# dtedtile internal
from dtedtile.coordinate import Coordinate, normalize_lat, normalize_lon

# Every DTED tile spans one degree on each axis
_TILE_SPAN_DEG = 1.0
_WHOLE_DEGREE_TOL = 1e-9


def _snap_whole_degree(value: float) -> float:
    """Undo normalization round-off on a whole-degree origin."""
    nearest = round(value)
    if abs(value - nearest) < _WHOLE_DEGREE_TOL:
        return float(nearest)
    return value


@dataclass(frozen=True)
class DtedHeader:
    """Subset of the User Header Label needed to address the grid.

    Parameters
    ----------
    origin : Coordinate
        South-west corner of the tile.
    num_lat_points : int
        Number of latitude points (grid rows).
    num_lon_points : int
        Number of longitude points (grid columns, one per data record).
    """

    origin: Coordinate
    num_lat_points: int
    num_lon_points: int

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid shape ``(num_lat_points, num_lon_points)``."""
        return (self.num_lat_points, self.num_lon_points)


class DtedTile:
    """One decoded DTED Level-2 tile.

    Instances are produced by :func:`dtedtile.IO.dted.decode` (or the
    ``from_bytes`` / ``from_file`` constructors) and are immutable once
    built, so a tile can be shared freely between readers.

    Parameters
    ----------
    header : DtedHeader
        Decoded header.
    elevations : np.ndarray
        ``int16`` grid of shape ``header.shape``.

    Raises
    ------
    ValueError
        If the grid shape does not match the header point counts.

    Examples
    --------
    >>> from dtedtile import Coordinate, DtedTile
    >>> tile = DtedTile.from_file('n47.dt2')
    >>> tile.header.shape
    (3601, 3601)
    >>> tile.elevation_m(Coordinate.from_degrees(47.356418477, 8.5189232237))
    421
    """

    def __init__(self, header: DtedHeader, elevations: np.ndarray) -> None:
        if elevations.shape != header.shape:
            raise ValueError(
                f"Elevation grid shape {elevations.shape} does not match "
                f"header shape {header.shape}"
            )
        self._header = header
        self._elevations = np.array(elevations, dtype=np.int16, order='F')
        self._elevations.flags.writeable = False

        origin = header.origin
        self._min_lat_deg = _snap_whole_degree(origin.lat_deg)
        self._min_lon_deg = _snap_whole_degree(origin.lon_deg)
        # Bounds in normalized space, computed exactly as
        # Coordinate.from_degrees would for the corner degrees
        self._lat01_range = (
            origin.lat01,
            normalize_lat(self._min_lat_deg + _TILE_SPAN_DEG),
        )
        self._lon01_range = (
            origin.lon01,
            normalize_lon(self._min_lon_deg + _TILE_SPAN_DEG),
        )

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> 'DtedTile':
        """Decode a tile from an in-memory DTED file.

        Parameters
        ----------
        data : bytes-like
            Complete DTED Level-2 file contents.

        Returns
        -------
        DtedTile

        Raises
        ------
        InvalidDtedError
            If the buffer is not a valid DTED Level-2 tile.
        """
        from dtedtile.IO.dted import decode
        return decode(data)

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> 'DtedTile':
        """Read and decode a DTED tile file.

        Parameters
        ----------
        filepath : str or Path
            Path to a ``.dt2`` file.

        Returns
        -------
        DtedTile

        Raises
        ------
        DecodeIOError
            If the file cannot be read.
        InvalidDtedError
            If the file is not a valid DTED Level-2 tile.
        """
        from dtedtile.IO.dted import read_dted
        return read_dted(filepath)

    @property
    def header(self) -> DtedHeader:
        """Decoded header (origin and point counts)."""
        return self._header

    @property
    def elevations(self) -> np.ndarray:
        """Read-only ``int16`` elevation grid in meters, row 0 = south."""
        return self._elevations

    @property
    def min_lat_deg(self) -> float:
        return self._min_lat_deg

    @property
    def max_lat_deg(self) -> float:
        return self._min_lat_deg + _TILE_SPAN_DEG

    @property
    def min_lon_deg(self) -> float:
        return self._min_lon_deg

    @property
    def max_lon_deg(self) -> float:
        return self._min_lon_deg + _TILE_SPAN_DEG

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Geographic bounding box of the tile.

        Returns
        -------
        Tuple[float, float, float, float]
            ``(min_lon, min_lat, max_lon, max_lat)`` in degrees.
        """
        return (
            self.min_lon_deg,
            self.min_lat_deg,
            self.max_lon_deg,
            self.max_lat_deg,
        )

    def contains(self, coord: Coordinate) -> bool:
        """Check whether a coordinate lies inside the tile, edges included.

        Parameters
        ----------
        coord : Coordinate
            Query point.

        Returns
        -------
        bool
        """
        lat_min, lat_max = self._lat01_range
        lon_min, lon_max = self._lon01_range
        return (
            lat_min <= coord.lat01 <= lat_max
            and lon_min <= coord.lon01 <= lon_max
        )

    def _indices(
        self,
        lat01: np.ndarray,
        lon01: np.ndarray,
        lats: np.ndarray,
        lons: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Containment from normalized values, indices from degrees."""
        n_lat, n_lon = self._header.shape
        lat_min, lat_max = self._lat01_range
        lon_min, lon_max = self._lon01_range

        inside = (
            (lat01 >= lat_min) & (lat01 <= lat_max)
            & (lon01 >= lon_min) & (lon01 <= lon_max)
        )

        # Outside points (and NaN) are zeroed before the integer cast
        lat_off = np.where(inside, lats - self._min_lat_deg, 0.0)
        lon_off = np.where(inside, lons - self._min_lon_deg, 0.0)

        # Corner round-off can land a hair below zero or at num_points
        rows = np.floor(lat_off * n_lat).astype(np.intp)
        cols = np.floor(lon_off * n_lon).astype(np.intp)
        rows = np.clip(rows, 0, n_lat - 1)
        cols = np.clip(cols, 0, n_lon - 1)
        return rows, cols, inside

    def grid_indices(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Map degree coordinates to grid ``(row, col)`` indices.

        Indices are ``floor((deg - min_deg) * num_points)`` clamped to
        ``num_points - 1``. Points outside the tile are flagged in the
        returned mask and given index 0.

        Parameters
        ----------
        lats : np.ndarray
            Latitudes in degrees North. Shape ``(N,)``.
        lons : np.ndarray
            Longitudes in degrees East. Shape ``(N,)``.

        Returns
        -------
        rows : np.ndarray
            Row (latitude) indices, dtype ``intp``.
        cols : np.ndarray
            Column (longitude) indices, dtype ``intp``.
        inside : np.ndarray
            Boolean mask of points within the tile bounds.
        """
        lats = np.asarray(lats, dtype=np.float64)
        lons = np.asarray(lons, dtype=np.float64)
        return self._indices(
            normalize_lat(lats), normalize_lon(lons), lats, lons
        )

    def elevation_m(self, coord: Coordinate) -> Optional[int]:
        """Elevation at the grid cell containing a coordinate.

        Parameters
        ----------
        coord : Coordinate
            Query point.

        Returns
        -------
        int or None
            Elevation in meters, or None if the point is outside the tile.
        """
        if not self.contains(coord):
            return None
        rows, cols, _ = self._indices(
            np.array([coord.lat01]), np.array([coord.lon01]),
            np.array([coord.lat_deg]), np.array([coord.lon_deg]),
        )
        return int(self._elevations[rows[0], cols[0]])

    def __repr__(self) -> str:
        return (
            f"DtedTile(origin=({self.min_lat_deg}, {self.min_lon_deg}), "
            f"shape={self._header.shape})"
        )
