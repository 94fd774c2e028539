#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Exceptions raised by fixed-width integers. Each one also derives from the
matching Python builtin, so an `except ValueError` or `except OverflowError`
written against plain ints keeps working.
'''


class BitIntError(Exception):
    '''
    Base class for every error raised by this package.
    '''


class InvalidWidthSpec(BitIntError, ValueError):
    '''
    A width descriptor was requested with a non-positive bit count, or with
    both (or neither) of a bit count and a byte count.
    '''


class OutOfBounds(BitIntError, OverflowError):
    '''
    An integer was given to a non-wrapping constructor but does not fit
    within the bounds of the width. For a power or shift too large to build,
    integer is the expression, i.e. "2 ** 1000000000", rather than its value.
    '''

    def __init__(self, integer, min, max):
        super().__init__(f"{integer} is out of bounds (range={min}..{max})")
        self.integer = integer
        self.min = min
        self.max = max


class DivisionByZero(BitIntError, ZeroDivisionError):
    '''
    Division or modulo by zero.
    '''


class UnsupportedByteWidth(BitIntError, ValueError):
    '''
    Byte serialization requested for a width other than 8, 16, 32 or 64 bits.
    '''


class UnsupportedEndianness(BitIntError, ValueError):
    '''
    Byte order other than "native", "little" or "big".
    '''
