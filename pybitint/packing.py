#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import sys

import numpy as np

from pybitint.errors import UnsupportedByteWidth, UnsupportedEndianness

'''
Byte-level packing of fixed-width integers. Every supported width is laid out
with the matching numpy fixed-width dtype, so 8, 16, 32 and 64 bits, signed or
unsigned, all share one packing scheme.
'''

logger = logging.getLogger(__name__)

# detected once, read-only afterwards
NATIVE_ENDIANNESS = sys.byteorder
logger.debug(f"Detected '{NATIVE_ENDIANNESS}' host byte order.")

ENDIANNESS_CHARS = {
    'little': '<',
    'big': '>',
}

PACKABLE_NUM_BITS = (8, 16, 32, 64)


def resolve_endianness(endian):
    '''
    Turn one of the "native", "little" or "big" byte order literals into
    "little" or "big".
    '''
    if endian == 'native':
        return NATIVE_ENDIANNESS
    if endian not in ENDIANNESS_CHARS:
        raise UnsupportedEndianness(f"endian must be 'native', 'little' or 'big', not {endian!r}")
    return endian


def calc_dtype(num_bits, is_signed, endian='native'):
    '''
    Numpy dtype, like '<i4' or '>u8', that a width packs into.
    '''
    order = ENDIANNESS_CHARS[resolve_endianness(endian)]
    if num_bits not in PACKABLE_NUM_BITS:
        raise UnsupportedByteWidth(f"Bytes only work for 8, 16, 32 or 64 bits, not {num_bits:,d} bits")
    kind = 'i' if is_signed else 'u'
    return np.dtype(f"{order}{kind}{num_bits // 8:d}")


def pack(num, num_bits, is_signed, endian='native'):
    '''
    Bytes of an in-bounds integer, in a certain byte order.
    '''
    dtype = calc_dtype(num_bits, is_signed, endian)
    return np.array(int(num), dtype=dtype).tobytes()


def unpack(data, num_bits, is_signed, endian='native'):
    '''
    Integer held in a sequence of bytes, the inverse of pack(). Accepts any
    bytes-like object or iterable of byte values.
    :param data: Bytes, bytearray or iterable of integers in 0..255
    '''
    dtype = calc_dtype(num_bits, is_signed, endian)
    data = bytes(data)
    if len(data) != dtype.itemsize:
        raise ValueError(f"Expected {dtype.itemsize:d} bytes for {num_bits:d} bits, got {len(data):d}")
    return int(np.frombuffer(data, dtype=dtype)[0])
