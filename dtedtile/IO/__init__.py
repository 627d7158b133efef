# -*- coding: utf-8 -*-
"""
IO Module - Decoding DTED tile files.

Exposes the DTED Level-2 decoder. Callers either hand ``decode`` the full
file contents as a bytes-like buffer or let ``read_dted`` read the file.

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

from dtedtile.IO.dted import (
    decode,
    read_dted,
    parse_angle,
    parse_user_header_label,
    parse_record,
    parse_elevation_data,
    record_checksum,
    sign_magnitude_to_int16,
)

__all__ = [
    'decode',
    'read_dted',
    'parse_angle',
    'parse_user_header_label',
    'parse_record',
    'parse_elevation_data',
    'record_checksum',
    'sign_magnitude_to_int16',
]
