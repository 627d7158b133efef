# -*- coding: utf-8 -*-
"""
DTED Level-2 Decoder - Binary parser for DTED tile files.

Decodes a complete DTED Level-2 file held in memory into a
:class:`~dtedtile.tile.DtedTile`. Every parser in this module takes the
buffer and a byte offset and returns ``(value, next_offset)``, so the
decode is a single sequential pass with no intermediate copies of the
input.

File layout::

    UHL  User Header Label                         80 bytes
    DSI  Data Set Identification (skipped)        648 bytes
    ACC  Accuracy Description (skipped)          2700 bytes
    DATA num_lon_points records, each:
         record header (skipped)                   8 bytes
         num_lat_points heights, >u2 sign-mag      2 * num_lat_points bytes
         checksum, >u4 byte sum                    4 bytes

Each data record holds one longitude column ordered south to north. The
record checksum is the unsigned 32-bit sum of every byte in the record
header and height data.

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
import logging
import struct
from pathlib import Path
from typing import Tuple, Union

# Third-party
import numpy as np

# dtedtile internal
from dtedtile.coordinate import Coordinate
from dtedtile.exceptions import (
    CoordinateError,
    DecodeIOError,
    InvalidDtedError,
    TruncatedDataError,
)
from dtedtile.tile import DtedHeader, DtedTile

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

# User Header Label
_UHL_TAG = b'UHL1'
_UHL_SIZE = 80
_ANGLE_SIZE = 8          # DDDMMSSH
_ANGLE_DEGREES_SIZE = 3
_HEMISPHERES = {ord('N'): 1.0, ord('E'): 1.0, ord('S'): -1.0, ord('W'): -1.0}
# lon interval [4], lat interval [4], accuracy [4], security [3], ref [12]
_UHL_SKIP_AFTER_ORIGIN = 27
_POINT_COUNT_SIZE = 4
# multiple accuracy [1], reserved [24]
_UHL_SKIP_TRAILER = 25

# DSI [648] + ACC [2700]
_DSI_ACC_SIZE = 3348

# Data records
_RECORD_HEADER_SIZE = 8
_CHECKSUM_SIZE = 4
_CHECKSUM_FMT = '>I'
_CHECKSUM_MASK = 0xFFFFFFFF

_SIGN_BIT = 0x8000
_MAGNITUDE_MASK = 0x7FFF


def _require(data: BytesLike, offset: int, size: int, what: str) -> None:
    """Raise TruncatedDataError if ``size`` bytes are not available."""
    available = len(data) - offset
    if available < size:
        raise TruncatedDataError(
            f"Unexpected end of input reading {what} at offset {offset}: "
            f"need {size} bytes, {max(available, 0)} available"
        )


def _parse_decimal(
    data: BytesLike, offset: int, size: int, what: str
) -> Tuple[int, int]:
    """Parse a fixed-width ASCII decimal field.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    offset : int
        Start of the field.
    size : int
        Field width in bytes. Every byte must be an ASCII digit.
    what : str
        Field name used in error messages.

    Returns
    -------
    Tuple[int, int]
        ``(value, next_offset)``.
    """
    _require(data, offset, size, what)
    field = bytes(data[offset:offset + size])
    if not field.isdigit():
        raise InvalidDtedError(
            f"Invalid {what} at offset {offset}: expected {size} ASCII "
            f"digits, got {field!r}"
        )
    return int(field), offset + size


def parse_angle(data: BytesLike, offset: int = 0) -> Tuple[float, int]:
    """Parse an 8-byte ``DDDMMSSH`` angle field.

    Only the degrees and hemisphere are used; minutes and seconds are
    always zero for tile origins and are not read.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    offset : int, optional
        Start of the field. Default is 0.

    Returns
    -------
    Tuple[float, int]
        ``(degrees, next_offset)``. Degrees are negative for ``S`` and
        ``W``. No range restriction is applied.

    Raises
    ------
    TruncatedDataError
        If fewer than 8 bytes remain.
    InvalidDtedError
        If the degree digits or the hemisphere code are malformed.

    Examples
    --------
    >>> parse_angle(b'0010000S')
    (-1.0, 8)
    """
    _require(data, offset, _ANGLE_SIZE, "angle")
    degrees, _ = _parse_decimal(
        data, offset, _ANGLE_DEGREES_SIZE, "angle degrees"
    )
    hemisphere = data[offset + _ANGLE_SIZE - 1]
    sign = _HEMISPHERES.get(hemisphere)
    if sign is None:
        raise InvalidDtedError(
            f"Invalid hemisphere code {bytes([hemisphere])!r} at offset "
            f"{offset + _ANGLE_SIZE - 1}: expected one of N, E, S, W"
        )
    return sign * degrees, offset + _ANGLE_SIZE


def parse_user_header_label(
    data: BytesLike, offset: int = 0
) -> Tuple[DtedHeader, int]:
    """Parse the 80-byte User Header Label.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    offset : int, optional
        Start of the UHL record. Default is 0.

    Returns
    -------
    Tuple[DtedHeader, int]
        ``(header, next_offset)``.

    Raises
    ------
    TruncatedDataError
        If the buffer ends inside the UHL.
    InvalidDtedError
        If the tag is not ``UHL1``, an angle or point count is malformed,
        the origin is outside (-180, 180) x (-90, 90), or a point count
        is zero.
    """
    _require(data, offset, _UHL_SIZE, "user header label")
    tag = bytes(data[offset:offset + len(_UHL_TAG)])
    if tag != _UHL_TAG:
        raise InvalidDtedError(
            f"Invalid user header label tag at offset {offset}: "
            f"expected {_UHL_TAG!r}, got {tag!r}"
        )
    pos = offset + len(_UHL_TAG)

    origin_lon, pos = parse_angle(data, pos)
    if not -180.0 < origin_lon < 180.0:
        raise InvalidDtedError(
            f"Origin longitude {origin_lon} outside (-180, 180)"
        )
    origin_lat, pos = parse_angle(data, pos)
    if not -90.0 < origin_lat < 90.0:
        raise InvalidDtedError(
            f"Origin latitude {origin_lat} outside (-90, 90)"
        )
    pos += _UHL_SKIP_AFTER_ORIGIN

    num_lon_points, pos = _parse_decimal(
        data, pos, _POINT_COUNT_SIZE, "longitude point count"
    )
    num_lat_points, pos = _parse_decimal(
        data, pos, _POINT_COUNT_SIZE, "latitude point count"
    )
    if num_lon_points == 0 or num_lat_points == 0:
        raise InvalidDtedError(
            f"Point counts must be positive, got "
            f"{num_lon_points} x {num_lat_points} (lon x lat)"
        )
    pos += _UHL_SKIP_TRAILER

    try:
        origin = Coordinate.from_degrees(origin_lat, origin_lon)
    except CoordinateError as exc:
        raise RuntimeError(
            f"Origin ({origin_lat}, {origin_lon}) passed bounds checks "
            f"but was rejected by Coordinate"
        ) from exc

    header = DtedHeader(
        origin=origin,
        num_lat_points=num_lat_points,
        num_lon_points=num_lon_points,
    )
    return header, pos


def sign_magnitude_to_int16(raw):
    """Convert 16-bit sign-magnitude values to two's-complement.

    Bit 15 is the sign and bits 0-14 the magnitude. Negative zero
    (``0x8000``) becomes 0.

    Parameters
    ----------
    raw : int or np.ndarray
        Unsigned 16-bit pattern(s).

    Returns
    -------
    int or np.ndarray
        ``int`` for scalar input, ``int16`` array otherwise.

    Examples
    --------
    >>> sign_magnitude_to_int16(0x8001)
    -1
    >>> sign_magnitude_to_int16(np.array([0x2000, 0xA000], dtype=np.uint16))
    array([ 8192, -8192], dtype=int16)
    """
    if isinstance(raw, np.ndarray):
        values = raw.astype(np.uint16, copy=False)
        magnitude = (values & _MAGNITUDE_MASK).astype(np.int16)
        return np.where(
            (values & _SIGN_BIT) != 0, -magnitude, magnitude
        ).astype(np.int16)

    raw = int(raw)
    magnitude = raw & _MAGNITUDE_MASK
    if raw & _SIGN_BIT:
        return -magnitude
    return magnitude


def record_checksum(record: np.ndarray) -> int:
    """Unsigned 32-bit byte sum used by DTED data records.

    Parameters
    ----------
    record : np.ndarray
        ``uint8`` bytes of the record header and height data.

    Returns
    -------
    int
        Sum of all bytes, truncated to 32 bits.
    """
    return int(record.sum(dtype=np.uint64)) & _CHECKSUM_MASK


def _record_size(num_lat_points: int) -> int:
    return _RECORD_HEADER_SIZE + 2 * num_lat_points + _CHECKSUM_SIZE


def parse_record(
    data: BytesLike, offset: int, num_lat_points: int
) -> Tuple[np.ndarray, int]:
    """Parse and verify one elevation data record.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    offset : int
        Start of the record.
    num_lat_points : int
        Number of heights in the record.

    Returns
    -------
    Tuple[np.ndarray, int]
        ``(heights, next_offset)``. Heights are ``int16`` ordered south
        to north, shape ``(num_lat_points,)``.

    Raises
    ------
    TruncatedDataError
        If the buffer ends inside the record.
    InvalidDtedError
        If the stored checksum does not match the computed one.
    """
    size = _record_size(num_lat_points)
    _require(data, offset, size, "data record")

    summed = size - _CHECKSUM_SIZE
    body = np.frombuffer(data, dtype=np.uint8, count=summed, offset=offset)
    computed = record_checksum(body)
    (stored,) = struct.unpack_from(_CHECKSUM_FMT, data, offset + summed)
    if computed != stored:
        raise InvalidDtedError(
            f"Checksum mismatch in data record at offset {offset}: "
            f"stored {stored}, computed {computed}"
        )

    raw = np.frombuffer(
        data,
        dtype=np.dtype('>u2'),
        count=num_lat_points,
        offset=offset + _RECORD_HEADER_SIZE,
    )
    return sign_magnitude_to_int16(raw), offset + size


def parse_elevation_data(
    data: BytesLike, offset: int, header: DtedHeader
) -> Tuple[np.ndarray, int]:
    """Parse all data records into an elevation grid.

    The whole data block length is checked before any record is read.
    Records fill the grid one column at a time; the grid is only returned
    once every checksum has passed.

    Parameters
    ----------
    data : bytes-like
        Input buffer.
    offset : int
        Start of the first data record.
    header : DtedHeader
        Header giving the record count and record length.

    Returns
    -------
    Tuple[np.ndarray, int]
        ``(elevations, next_offset)``. Elevations are ``int16``, shape
        ``(num_lat_points, num_lon_points)``, Fortran-ordered.

    Raises
    ------
    TruncatedDataError
        If the buffer is shorter than the declared data block.
    InvalidDtedError
        If any record fails its checksum.
    """
    n_lat, n_lon = header.shape
    _require(data, offset, n_lon * _record_size(n_lat), "elevation data")

    grid = np.empty((n_lat, n_lon), dtype=np.int16, order='F')
    pos = offset
    for col in range(n_lon):
        grid[:, col], pos = parse_record(data, pos, n_lat)
    return grid, pos


def decode(data: BytesLike) -> DtedTile:
    """Decode a complete DTED Level-2 file.

    Parameters
    ----------
    data : bytes-like
        Entire file contents. Bytes after the last data record are
        ignored.

    Returns
    -------
    DtedTile

    Raises
    ------
    TruncatedDataError
        If the buffer ends before the last data record.
    InvalidDtedError
        If any header field or record checksum is invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> tile = decode(Path('n47.dt2').read_bytes())
    >>> tile.header.shape
    (3601, 3601)
    """
    header, pos = parse_user_header_label(data, 0)
    logger.debug(
        "DTED header: origin=(%s, %s) points=%d x %d (lat x lon)",
        header.origin.lat_deg, header.origin.lon_deg,
        header.num_lat_points, header.num_lon_points,
    )

    _require(data, pos, _DSI_ACC_SIZE, "DSI/ACC records")
    pos += _DSI_ACC_SIZE

    elevations, pos = parse_elevation_data(data, pos, header)
    if pos < len(data):
        logger.debug("Ignoring %d trailing bytes", len(data) - pos)
    return DtedTile(header, elevations)


def read_dted(filepath: Union[str, Path]) -> DtedTile:
    """Read a DTED Level-2 file from disk and decode it.

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
        If the file contents are not a valid DTED Level-2 tile.
    """
    filepath = Path(filepath)
    try:
        data = filepath.read_bytes()
    except OSError as exc:
        raise DecodeIOError(
            f"Cannot read DTED file {filepath}: {exc}"
        ) from exc
    logger.debug("Read %d bytes from %s", len(data), filepath)
    return decode(data)
