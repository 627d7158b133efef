# -*- coding: utf-8 -*-
"""
dtedtile Exception Hierarchy - Domain-specific exceptions for DTED decoding.

Provides a small exception hierarchy that lets callers catch dtedtile
errors distinctly from Python built-in exceptions. Every dtedtile
exception subclasses both ``DtedError`` and the appropriate built-in
exception, so ``except ValueError`` and ``except OSError`` handlers keep
working.

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


class DtedError(Exception):
    """Base exception for all dtedtile errors."""


class CoordinateError(DtedError, ValueError):
    """Geographic coordinate outside its valid domain."""


class LatitudeOutOfRange(CoordinateError):
    """Latitude outside [0, 1] normalized, or [-90, 90] degrees."""


class LongitudeOutOfRange(CoordinateError):
    """Longitude outside [0, 1] normalized, or [-180, 180] degrees."""


class DecodeError(DtedError):
    """Base exception for failures while decoding a DTED tile.

    Any ``DecodeError`` means the input is not a usable DTED Level-2
    tile. No partial tile is ever produced.
    """


class DecodeIOError(DecodeError, OSError):
    """The tile bytes could not be obtained from the file system.

    Raised only by the file-reading helpers and always chained to the
    originating ``OSError``.
    """


class InvalidDtedError(DecodeError, ValueError):
    """The buffer does not follow the DTED Level-2 layout.

    Raised for a missing ``UHL1`` tag, malformed angle or point-count
    fields, out-of-range origin, and record checksum mismatches.
    """


class TruncatedDataError(InvalidDtedError):
    """The buffer ended before all required bytes were available."""
