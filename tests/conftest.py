# -*- coding: utf-8 -*-
"""
Shared fixtures for dtedtile tests - Synthetic DTED Level-2 buffers.

Builds byte-exact DTED Level-2 files from a small elevation grid: a valid
User Header Label, blank DSI/ACC records carrying their record tags, and
data records with sign-magnitude heights and correct byte-sum checksums.

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

import numpy as np
import pytest

UHL_SIZE = 80
DSI_SIZE = 648
DSI_ACC_SIZE = 3348
DATA_OFFSET = UHL_SIZE + DSI_ACC_SIZE
RECORD_HEADER_SIZE = 8


def record_size(num_lat_points):
    """Bytes in one data record for ``num_lat_points`` heights."""
    return RECORD_HEADER_SIZE + 2 * num_lat_points + 4


def _angle_field(degrees, positive, negative):
    hemisphere = positive if degrees >= 0 else negative
    return f"{abs(int(degrees)):03d}0000{hemisphere}".encode('ascii')


def _build_dsi_acc():
    # Blank records tagged the way GDAL's DTED driver expects
    dsi = b'DSI' + b' ' * (DSI_SIZE - 3)
    acc = b'ACC' + b' ' * (DSI_ACC_SIZE - DSI_SIZE - 3)
    return dsi + acc


def _build_uhl(lon_field, lat_field, lon_count, lat_count, tag=b'UHL1'):
    uhl = (
        tag
        + lon_field
        + lat_field
        + b'0010' + b'0010'   # lon/lat interval, tenths of arc seconds
        + b'NA  '             # absolute vertical accuracy
        + b'U  '              # security code
        + b' ' * 12           # unique reference
        + lon_count
        + lat_count
        + b'0'                # multiple accuracy
        + b' ' * 24           # reserved
    )
    assert len(uhl) == UHL_SIZE
    return uhl


def _encode_sign_magnitude(values):
    values = np.asarray(values, dtype=np.int32)
    raw = np.abs(values).astype(np.uint16)
    raw[values < 0] |= 0x8000
    return raw


def _build_records(elevations):
    n_lat, n_lon = elevations.shape
    columns = np.ascontiguousarray(elevations.T)
    heights = _encode_sign_magnitude(columns).astype('>u2')

    records = np.zeros((n_lon, record_size(n_lat)), dtype=np.uint8)
    records[:, 0] = 0xAA
    records[:, 4:6] = (
        np.arange(n_lon).astype('>u2').view(np.uint8).reshape(n_lon, 2)
    )
    records[:, 6:8] = (
        np.full(n_lon, n_lat).astype('>u2').view(np.uint8).reshape(n_lon, 2)
    )
    records[:, RECORD_HEADER_SIZE:-4] = (
        heights.view(np.uint8).reshape(n_lon, 2 * n_lat)
    )
    sums = records[:, :-4].sum(axis=1, dtype=np.uint64) & 0xFFFFFFFF
    records[:, -4:] = sums.astype('>u4').view(np.uint8).reshape(n_lon, 4)
    return records.tobytes()


@pytest.fixture
def make_uhl():
    """Factory for raw 80-byte User Header Labels.

    Fields are passed as raw bytes so tests can inject malformed values.
    """
    def _make(lon_field=b'0080000E', lat_field=b'0470000N',
              lon_count=b'0005', lat_count=b'0004', tag=b'UHL1'):
        return _build_uhl(lon_field, lat_field, lon_count, lat_count, tag)
    return _make


@pytest.fixture
def make_dted():
    """Factory for complete DTED Level-2 files.

    ``elevations`` is an integer array of shape ``(num_lat, num_lon)``
    with row 0 at the southern edge. Returns a ``bytearray`` so tests can
    corrupt bytes in place.
    """
    def _make(elevations, origin_lat=47, origin_lon=8):
        elevations = np.asarray(elevations)
        n_lat, n_lon = elevations.shape
        uhl = _build_uhl(
            _angle_field(origin_lon, 'E', 'W'),
            _angle_field(origin_lat, 'N', 'S'),
            f"{n_lon:04d}".encode('ascii'),
            f"{n_lat:04d}".encode('ascii'),
        )
        return bytearray(
            uhl + _build_dsi_acc() + _build_records(elevations)
        )
    return _make


@pytest.fixture
def small_grid():
    """4 x 5 grid (lat x lon) encoding ``100 * row + col``, one negative."""
    grid = 100 * np.arange(4)[:, None] + np.arange(5)[None, :]
    grid[0, 0] = -12
    return grid.astype(np.int16)
