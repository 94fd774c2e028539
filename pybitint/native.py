#!/usr/bin/env python
# -*- coding: utf-8 -*-

import ctypes

import pybitint.packing
from pybitint.registry import make

'''
Width descriptors that match the C integer types of the host platform, for
modeling values passed across a C ABI.
'''

# sizeof() of each C type, in bytes
NATIVE_SIZES = {
    'char': ctypes.sizeof(ctypes.c_char),
    'short': ctypes.sizeof(ctypes.c_short),
    'int': ctypes.sizeof(ctypes.c_int),
    'long': ctypes.sizeof(ctypes.c_long),
    'long long': ctypes.sizeof(ctypes.c_longlong),
    'void*': ctypes.sizeof(ctypes.c_void_p),
    'size_t': ctypes.sizeof(ctypes.c_size_t),
    'ssize_t': ctypes.sizeof(ctypes.c_ssize_t),
    # ctypes has no ptrdiff_t or (u)intptr_t, which are pointer-sized
    'ptrdiff_t': ctypes.sizeof(ctypes.c_ssize_t),
    'intptr_t': ctypes.sizeof(ctypes.c_void_p),
    'uintptr_t': ctypes.sizeof(ctypes.c_void_p),
}


def endianness():
    '''
    Either "little" or "big", depending on the host platform.
    '''
    return pybitint.packing.NATIVE_ENDIANNESS


def is_little_endian():
    return endianness() == 'little'


def is_big_endian():
    return endianness() == 'big'


# C leaves the signedness of plain char up to the platform, so there is no CHAR
SCHAR = make(num_bytes=NATIVE_SIZES['char'], is_signed=True)
UCHAR = make(num_bytes=NATIVE_SIZES['char'], is_signed=False)
SHORT = make(num_bytes=NATIVE_SIZES['short'], is_signed=True)
USHORT = make(num_bytes=NATIVE_SIZES['short'], is_signed=False)
INT = make(num_bytes=NATIVE_SIZES['int'], is_signed=True)
UINT = make(num_bytes=NATIVE_SIZES['int'], is_signed=False)
LONG = make(num_bytes=NATIVE_SIZES['long'], is_signed=True)
ULONG = make(num_bytes=NATIVE_SIZES['long'], is_signed=False)
LONG_LONG = make(num_bytes=NATIVE_SIZES['long long'], is_signed=True)
ULONG_LONG = make(num_bytes=NATIVE_SIZES['long long'], is_signed=False)

VOIDP = make(num_bytes=NATIVE_SIZES['void*'], is_signed=False)
SIZE_T = make(num_bytes=NATIVE_SIZES['size_t'], is_signed=False)
SSIZE_T = make(num_bytes=NATIVE_SIZES['ssize_t'], is_signed=True)
PTRDIFF_T = make(num_bytes=NATIVE_SIZES['ptrdiff_t'], is_signed=True)
INTPTR_T = make(num_bytes=NATIVE_SIZES['intptr_t'], is_signed=True)
UINTPTR_T = make(num_bytes=NATIVE_SIZES['uintptr_t'], is_signed=False)
