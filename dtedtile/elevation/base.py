# -*- coding: utf-8 -*-
"""
Elevation Model Base Class - Abstract interface for terrain elevation lookup.

Defines the abstract base class for elevation models backed by decoded
DTED data. The public ``get_elevation`` method supports scalar, separate
array and stacked ``(2, N)`` inputs and delegates to a single vectorized
``_get_elevation_array`` implemented by subclasses.

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
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

# Third-party
import numpy as np


def _is_scalar(val: Any) -> bool:
    """Check if a value is a scalar (not array-like)."""
    if isinstance(val, np.ndarray):
        return val.ndim == 0
    return isinstance(val, (int, float, np.integer, np.floating))


def _to_array(val: Any) -> np.ndarray:
    """Convert scalar, list, or array to 1D numpy array of float64."""
    arr = np.asarray(val, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return arr


class ElevationModel(ABC):
    """Abstract base class for terrain elevation lookup.

    Concrete subclasses implement ``_get_elevation_array`` for vectorized
    height lookup on 1D arrays. ``get_elevation`` handles the input
    dispatch.

    Coordinate Conventions
    ----------------------
    - **Heights:** Meters above Mean Sea Level, as stored in DTED.
    - **Latitude:** Degrees North, range [-90, 90].
    - **Longitude:** Degrees East, range [-180, 180].
    """

    @abstractmethod
    def _get_elevation_array(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> np.ndarray:
        """Look up terrain elevation for arrays of coordinates.

        Parameters
        ----------
        lats : np.ndarray
            Latitudes in degrees North. Shape ``(N,)``, dtype float64.
        lons : np.ndarray
            Longitudes in degrees East. Shape ``(N,)``, dtype float64.

        Returns
        -------
        np.ndarray
            Elevation values in meters. Shape ``(N,)``. NaN for points
            outside coverage area.
        """
        ...

    def get_elevation(
        self,
        lat_or_points: Union[float, list, np.ndarray],
        lon: Optional[Union[float, list, np.ndarray]] = None,
    ) -> Union[float, np.ndarray]:
        """Query terrain elevation for one or more geographic locations.

        Accepts three input forms:

        - **Scalar:** ``get_elevation(lat, lon)`` returns a single float.
        - **Stacked (2, N) array:** ``get_elevation(points_2xN)`` returns
          an ``(N,)`` ndarray.
        - **Separate arrays:** ``get_elevation(lats_arr, lons_arr)`` returns
          an ndarray.

        Parameters
        ----------
        lat_or_points : float, list, or np.ndarray
            Latitude(s) when ``lon`` is provided, or a ``(2, N)`` ndarray
            of stacked ``[lats; lons]`` when ``lon`` is None.
        lon : float, list, or np.ndarray, optional
            Longitude(s). Omit to pass a ``(2, N)`` stacked array as the
            first argument.

        Returns
        -------
        float
            When scalar inputs are given.
        np.ndarray
            When array inputs are given. Shape ``(N,)``.

        Raises
        ------
        ValueError
            If a ``(2, N)`` array is expected but the shape is wrong, or
            latitude and longitude arrays differ in shape.
        """
        if lon is None:
            pts = np.asarray(lat_or_points, dtype=np.float64)
            if pts.ndim != 2 or pts.shape[0] != 2:
                raise ValueError(
                    f"Expected (2, N) array, got shape {pts.shape}"
                )
            return self._get_elevation_array(pts[0], pts[1])

        lats_arr = _to_array(lat_or_points)
        lons_arr = _to_array(lon)
        if lats_arr.shape != lons_arr.shape:
            raise ValueError(
                f"Latitude shape {lats_arr.shape} does not match "
                f"longitude shape {lons_arr.shape}"
            )
        heights = self._get_elevation_array(lats_arr, lons_arr)
        if _is_scalar(lat_or_points) and _is_scalar(lon):
            return float(heights[0])
        return heights
