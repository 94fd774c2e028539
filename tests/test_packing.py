#!/usr/bin/env python
# -*- coding: utf-8 -*-

import ctypes
import sys

import unittest

import pybitint.native as native
import pybitint.packing
from pybitint import (
    UnsupportedByteWidth, UnsupportedEndianness, I, U, make,
    I8, I16, I32, I64, I128, U8, U16, U32, U64, U128,
)


class BytesTestCase(unittest.TestCase):

    def test_round_trip(self):
        x = I32(-12345)
        for endian in ('little', 'big', 'native'):
            self.assertTrue(I32.from_bytes(x.to_bytes(endian), endian).same_as(x))

    def test_layout(self):
        self.assertEqual(I32(-12345).to_bytes('little'), (-12345).to_bytes(4, 'little', signed=True))
        self.assertEqual(I32(-12345).to_bytes('big'), (-12345).to_bytes(4, 'big', signed=True))
        self.assertEqual(U16(0x1234).to_bytes('big'), b'\x12\x34')
        self.assertEqual(U16(0x1234).to_bytes('little'), b'\x34\x12')
        self.assertEqual(I8(-1).to_bytes(), b'\xff')
        self.assertEqual(U64.MAX.to_bytes('big'), b'\xff' * 8)
        self.assertEqual(I64.MIN.to_bytes('big'), b'\x80' + b'\x00' * 7)

    def test_native(self):
        self.assertIn(pybitint.packing.NATIVE_ENDIANNESS, ('little', 'big'))
        self.assertEqual(pybitint.packing.resolve_endianness('native'), sys.byteorder)
        self.assertEqual(U32(0xDEADBEEF).to_bytes(), U32(0xDEADBEEF).to_bytes(sys.byteorder))
        self.assertEqual(U32(0xDEADBEEF).to_bytes('native'), (0xDEADBEEF).to_bytes(4, sys.byteorder))

    def test_boundaries(self):
        for d in (U8, U16, U32, U64, I8, I16, I32, I64):
            for x in (d.MIN, d.MAX, d.zero, d.one, d(-1)):
                for endian in ('little', 'big', 'native'):
                    data = x.to_bytes(endian)
                    self.assertIsInstance(data, bytes)
                    self.assertEqual(len(data), d.num_bytes)
                    self.assertTrue(d.from_bytes(data, endian).same_as(x), f"{x!r} {endian}")

    def test_unsupported_width(self):
        for d in (U128, I128, U(12), I(1), U(24)):
            with self.assertRaises(UnsupportedByteWidth):
                d.one.to_bytes()
            with self.assertRaises(UnsupportedByteWidth):
                d.from_bytes(b'\x00' * d.num_bytes)
        with self.assertRaises(ValueError):
            U128.MAX.to_bytes('big')

    def test_unsupported_endianness(self):
        for endian in ('middle', 'LITTLE', '<', None):
            with self.assertRaises(UnsupportedEndianness):
                U16(1).to_bytes(endian)
        with self.assertRaises(ValueError):
            U16.from_bytes(b'\x00\x01', 'network')

    def test_from_bytes(self):
        self.assertEqual(I16.from_bytes([0xff, 0xff], 'big'), -1)
        self.assertEqual(U16.from_bytes(bytearray(b'\x01\x02'), 'little'), 0x0201)
        self.assertEqual(U16.from_bytes(U16(0x0102).to_bytes('big'), 'big'), 0x0102)
        self.assertEqual(U16.from_bytes([U8(0x01), U8(0x02)], 'big'), 0x0102)
        self.assertTrue(I16.from_bytes(b'\x80\x00', 'big', wrap=False).same_as(I16.MIN))
        with self.assertRaises(ValueError):
            U16.from_bytes(b'\x00', 'big')
        with self.assertRaises(ValueError):
            U16.from_bytes(b'\x00\x00\x00', 'big')

    def test_bytes_hex(self):
        self.assertEqual(U16(0x1234).bytes_hex('big'), ['12', '34'])
        self.assertEqual(I32(-2).bytes_hex('little'), ['fe', 'ff', 'ff', 'ff'])


class NativeTestCase(unittest.TestCase):

    def test_endianness(self):
        self.assertIn(native.endianness(), ('little', 'big'))
        self.assertEqual(native.endianness(), sys.byteorder)
        self.assertNotEqual(native.is_little_endian(), native.is_big_endian())

    def assert_size_signedness(self, num_bytes, is_signed, descriptor):
        self.assertEqual(descriptor.num_bits, num_bytes * 8)
        self.assertEqual(descriptor.is_signed, is_signed)

    def test_normal_types(self):
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_char), True, native.SCHAR)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_char), False, native.UCHAR)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_short), True, native.SHORT)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_short), False, native.USHORT)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_int), True, native.INT)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_int), False, native.UINT)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_long), True, native.LONG)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_long), False, native.ULONG)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_longlong), True, native.LONG_LONG)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_longlong), False, native.ULONG_LONG)

    def test_additional_types(self):
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_void_p), False, native.VOIDP)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_size_t), False, native.SIZE_T)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_ssize_t), True, native.SSIZE_T)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_ssize_t), True, native.PTRDIFF_T)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_void_p), True, native.INTPTR_T)
        self.assert_size_signedness(ctypes.sizeof(ctypes.c_void_p), False, native.UINTPTR_T)

    def test_shared_descriptors(self):
        self.assertIs(native.SCHAR, I8)
        self.assertIs(native.UCHAR, U8)
        self.assertIs(native.LONG, make(num_bytes=native.NATIVE_SIZES['long'], is_signed=True))
        self.assertIs(native.INT, I(ctypes.sizeof(ctypes.c_int) * 8))

    def test_matches_ctypes(self):
        self.assertEqual(native.INT(2 ** 31).num, ctypes.c_int(2 ** 31).value)
        self.assertEqual(native.UINT(-1).num, ctypes.c_uint(-1).value)
        self.assertEqual(native.INT(5).to_bytes(), bytes(ctypes.c_int(5)))


if __name__ == '__main__':
    unittest.main()
