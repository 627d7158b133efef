# -*- coding: utf-8 -*-
"""
Coordinate - Normalized geographic point used for tile lookups.

Stores latitude and longitude normalized to the unit interval so that
validation is a pair of ``[0, 1]`` range checks and degree conversion is
a single multiply-add in each direction::

    lat01 = (lat_deg + 90) / 180        lat_deg = lat01 * 180 - 90
    lon01 = (lon_deg + 180) / 360       lon_deg = lon01 * 360 - 180

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

# dtedtile internal
from dtedtile.exceptions import LatitudeOutOfRange, LongitudeOutOfRange


def normalize_lat(lat_deg):
    """Map latitude degrees [-90, 90] to [0, 1]. Accepts arrays."""
    return (lat_deg + 90.0) / 180.0


def normalize_lon(lon_deg):
    """Map longitude degrees [-180, 180] to [0, 1]. Accepts arrays."""
    return (lon_deg + 180.0) / 360.0


@dataclass(frozen=True)
class Coordinate:
    """Immutable geographic point with components normalized to [0, 1].

    Parameters
    ----------
    lat01 : float
        Latitude mapped from [-90, 90] degrees to [0, 1].
    lon01 : float
        Longitude mapped from [-180, 180] degrees to [0, 1].

    Raises
    ------
    LatitudeOutOfRange
        If ``lat01`` is not in [0, 1]. Checked before longitude.
    LongitudeOutOfRange
        If ``lon01`` is not in [0, 1].

    Examples
    --------
    >>> from dtedtile.coordinate import Coordinate
    >>> c = Coordinate.from_degrees(47.0, 8.0)
    >>> c.lat_deg, c.lon_deg
    (47.0, 8.0)
    """

    lat01: float
    lon01: float

    def __post_init__(self) -> None:
        # NaN fails both comparisons and is rejected here as well
        if not 0.0 <= self.lat01 <= 1.0:
            raise LatitudeOutOfRange(
                f"Normalized latitude must be in [0, 1], got {self.lat01}"
            )
        if not 0.0 <= self.lon01 <= 1.0:
            raise LongitudeOutOfRange(
                f"Normalized longitude must be in [0, 1], got {self.lon01}"
            )

    @classmethod
    def new(cls, lat01: float, lon01: float) -> 'Coordinate':
        """Create a coordinate from normalized latitude and longitude.

        Parameters
        ----------
        lat01 : float
            Normalized latitude in [0, 1].
        lon01 : float
            Normalized longitude in [0, 1].

        Returns
        -------
        Coordinate
        """
        return cls(float(lat01), float(lon01))

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float) -> 'Coordinate':
        """Create a coordinate from latitude and longitude in degrees.

        Parameters
        ----------
        lat_deg : float
            Latitude in degrees North, [-90, 90].
        lon_deg : float
            Longitude in degrees East, [-180, 180].

        Returns
        -------
        Coordinate

        Raises
        ------
        LatitudeOutOfRange
            If ``lat_deg`` is outside [-90, 90].
        LongitudeOutOfRange
            If ``lon_deg`` is outside [-180, 180].
        """
        return cls.new(normalize_lat(lat_deg), normalize_lon(lon_deg))

    @property
    def lat_deg(self) -> float:
        """Latitude in degrees North."""
        return self.lat01 * 180.0 - 90.0

    @property
    def lon_deg(self) -> float:
        """Longitude in degrees East."""
        return self.lon01 * 360.0 - 180.0
