#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import operator
import threading

import pybitint.base
import pybitint.packing
from pybitint.errors import InvalidWidthSpec
from pybitint.flowint import FlowInt

logger = logging.getLogger(__name__)


class WidthDescriptor:
    '''
    The bit width and signedness of a family of fixed-width integers, along with
    its precomputed mask and bounds. Never instantiated directly, always fetched
    from the registry with U(), I() or make() so that there is exactly one
    descriptor per (num_bits, is_signed) pair.
    '''

    def __init__(self, num_bits, is_signed):
        self.num_bits = num_bits
        self.is_signed = is_signed
        self.num_bytes = pybitint.base.calc_num_bytes(num_bits)
        self.mask = pybitint.base.calc_mask(num_bits)
        self.min, self.max = pybitint.base.calc_bounds(num_bits, is_signed)
        self.bounds = range(self.min, self.max + 1)

        self.zero = FlowInt(self, 0)
        self.one = FlowInt(self, 1)
        self.MIN = FlowInt(self, self.min)
        self.MAX = FlowInt(self, self.max)

    def __repr__(self):
        return f"{'I' if self.is_signed else 'U'}{self.num_bits:d}"

    @property
    def is_unsigned(self):
        return not self.is_signed

    def wrap(self, num):
        '''
        Reduce an arbitrary integer into the bounds of this width.
        '''
        return pybitint.base.wrap(num, self.num_bits, self.is_signed)

    def in_bounds(self, num):
        return self.min <= num <= self.max

    def new(self, num, wrap=True):
        '''
        Construct a fixed-width integer of this width.
        :param num: Integer value, or anything with an __index__()
        :param wrap: Silently wrap out-of-bounds values when True, otherwise
        raise OutOfBounds. Values derived from the result inherit this policy.
        '''
        return FlowInt(self, num, wrap=wrap)

    __call__ = new

    def from_string(self, text, base=10, wrap=True):
        '''
        Parse a string written by FlowInt.to_string(). Outside of base 10, digits
        that fit within the mask are a bit pattern, so e.g. "ff" is -1 for a
        signed 8-bit width.
        '''
        num = int(text, base)
        if base != 10 and 0 <= num <= self.mask:
            num = self.wrap(num)
        return self.new(num, wrap=wrap)

    def from_bytes(self, data, endian='native', wrap=True):
        '''
        Construct a fixed-width integer from bytes written by FlowInt.to_bytes().
        '''
        num = pybitint.packing.unpack(data, self.num_bits, self.is_signed, endian)
        return self.new(num, wrap=wrap)


_descriptors = {}
_descriptors_lock = threading.Lock()


def get_or_create(num_bits, is_signed):
    '''
    Return the one descriptor for a bit width and signedness, creating and
    caching it on first use.
    '''
    if isinstance(num_bits, bool):
        raise InvalidWidthSpec(f"Bit count must be an integer, not {num_bits!r}")
    try:
        num_bits = operator.index(num_bits)
    except TypeError:
        raise InvalidWidthSpec(f"Bit count must be an integer, not {num_bits!r}") from None
    if num_bits < 1:
        raise InvalidWidthSpec(f"Bit count must be at least 1, not {num_bits:d}")

    key = (num_bits, bool(is_signed))
    descriptor = _descriptors.get(key)
    if descriptor is None:
        with _descriptors_lock:
            descriptor = _descriptors.get(key)
            if descriptor is None:
                logger.debug(f"Creating {'signed' if key[1] else 'unsigned'} {num_bits:,d}-bit descriptor.")
                descriptor = _descriptors[key] = WidthDescriptor(*key)
    return descriptor


def make(num_bits=None, num_bytes=None, is_signed=False):
    '''
    Return a descriptor sized by either a bit count or a byte count, but not both.
    '''
    if (num_bits is None) == (num_bytes is None):
        raise InvalidWidthSpec('Exactly one of num_bits or num_bytes must be supplied')
    if num_bits is None:
        if isinstance(num_bytes, bool):
            raise InvalidWidthSpec(f"Byte count must be an integer, not {num_bytes!r}")
        try:
            num_bits = operator.index(num_bytes) * 8
        except TypeError:
            raise InvalidWidthSpec(f"Byte count must be an integer, not {num_bytes!r}") from None
    return get_or_create(num_bits, is_signed)


def U(num_bits):
    '''
    Unsigned descriptor, i.e. U(16).max == 65535
    '''
    return get_or_create(num_bits, False)


def I(num_bits):
    '''
    Signed descriptor, i.e. I(16).max == 32767
    '''
    return get_or_create(num_bits, True)
