#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numbers
import operator

import pybitint.base
import pybitint.packing
from pybitint.errors import OutOfBounds


def _as_int(o):
    '''
    Integer value of the other operand of an operator, or None when it has no
    integer conversion, i.e. a float or a string.
    '''
    try:
        return operator.index(o)
    except TypeError:
        return None


def _as_real(o):
    '''
    Numeric value of the other side of a comparison. Integers compare exactly, and
    other real numbers, i.e. floats and fractions, compare by value the way
    12 == 12.0 does for Python ints. None when the other side is not a number.
    '''
    num = _as_int(o)
    if num is None and isinstance(o, numbers.Real):
        return o
    return num


class FlowInt:
    '''
    Fixed-width signed or unsigned integers, integers that explicitly under- or over-flow
    according to a particular number of bits. The bit width and signedness live in a
    shared width descriptor, so there is only the one class for every width.
    '''

    __slots__ = ('descriptor', 'num', 'wrap')

    # __getitem__ reads bits, which would otherwise make values iterable forever
    __iter__ = None

    def __init__(self, descriptor, num, wrap=True):
        '''
        Initialize with a width descriptor and a value that can be converted to an
        integer with operator.index(). Prefer calling the descriptor, i.e. U8(255).
        :param descriptor: Width descriptor from the registry
        :param num: Integer value
        :param wrap: Wrap out-of-bounds values two's-complement style when True,
        raise OutOfBounds when False. Inherited by every value derived from this one.
        '''
        num = operator.index(num)
        if not descriptor.in_bounds(num):
            if not wrap:
                raise OutOfBounds(num, descriptor.min, descriptor.max)
            num = descriptor.wrap(num)
        object.__setattr__(self, 'descriptor', descriptor)
        object.__setattr__(self, 'num', num)
        object.__setattr__(self, 'wrap', bool(wrap))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def _new(self, num):
        return FlowInt(self.descriptor, num, wrap=self.wrap)

    @property
    def raw(self):
        return self.num

    def __repr__(self):
        return f"{self.descriptor!r}({self.num})"

    def __str__(self):
        return str(self.num)

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self.num.__format__(*fmt_args)

    def __int__(self): return self.num
    def __index__(self): return self.num
    def __float__(self): return float(self.num)
    def __bool__(self): return self.num != 0
    def __hash__(self): return hash(self.num)

    '''
    Comparison dunders cannot overflow, so just implement these with the underlying
    Python int() operators. Equality is by value, so values of different widths
    (and plain ints or floats) compare equal when their numbers do.
    '''
    def __eq__(self, o):
        o = _as_real(o)
        return NotImplemented if o is None else self.num == o

    def __lt__(self, o):
        o = _as_real(o)
        return NotImplemented if o is None else self.num < o

    def __le__(self, o):
        o = _as_real(o)
        return NotImplemented if o is None else self.num <= o

    def __gt__(self, o):
        o = _as_real(o)
        return NotImplemented if o is None else self.num > o

    def __ge__(self, o):
        o = _as_real(o)
        return NotImplemented if o is None else self.num >= o

    def compare(self, o):
        '''
        Three-way comparison, -1, 0 or 1, or None when the other side is not a
        number, or is NaN, and so is incomparable.
        '''
        o = _as_real(o)
        if o is None or o != o:
            return None
        return (self.num > o) - (self.num < o)

    def same_as(self, o):
        '''
        Strict equality, the same width descriptor as well as the same value.
        '''
        return isinstance(o, FlowInt) and o.descriptor is self.descriptor and o.num == self.num

    def __add__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num + o)

    def __radd__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o + self.num)

    def __sub__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num - o)

    def __rsub__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o - self.num)

    def __mul__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num * o)

    def __rmul__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o * self.num)

    '''
    Division rounds toward zero and the remainder takes the sign of the dividend,
    like C, rather than flooring like Python's int.
    '''
    def __truediv__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        quot, _ = pybitint.base.trunc_divmod(self.num, o)
        return self._new(quot)

    def __rtruediv__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        quot, _ = pybitint.base.trunc_divmod(o, self.num)
        return self._new(quot)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        _, rem = pybitint.base.trunc_divmod(self.num, o)
        return self._new(rem)

    def __rmod__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        _, rem = pybitint.base.trunc_divmod(o, self.num)
        return self._new(rem)

    def __divmod__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        quot, rem = pybitint.base.trunc_divmod(self.num, o)
        return self._new(quot), self._new(rem)

    def __rdivmod__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        quot, rem = pybitint.base.trunc_divmod(o, self.num)
        return self._new(quot), self._new(rem)

    def _pow(self, num, exp, modulo=None):
        if exp < 0:
            raise ValueError(f"Negative exponent {exp} for a fixed-width integer")
        if modulo is not None:
            return self._new(pow(num, exp, operator.index(modulo)))
        if self.wrap:
            # wrapping only keeps the result modulo 2 ** num_bits
            return self._new(pow(num, exp, self.descriptor.mask + 1))
        if abs(num) > 1 and exp >= self.descriptor.num_bits:
            # at least 2 ** num_bits in magnitude, past either bound
            raise OutOfBounds(f"{num} ** {exp}", self.descriptor.min, self.descriptor.max)
        return self._new(num ** exp)

    def __pow__(self, o, modulo=None):
        o = _as_int(o)
        return NotImplemented if o is None else self._pow(self.num, o, modulo)

    def __rpow__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._pow(o, self.num)

    def __lshift__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        if self.wrap and o >= self.descriptor.num_bits:
            return self._new(0)
        if self.num != 0 and o >= self.descriptor.num_bits:
            raise OutOfBounds(f"{self.num} << {o}", self.descriptor.min, self.descriptor.max)
        return self._new(self.num << o)

    def __rlshift__(self, o):
        o = _as_int(o)
        if o is None:
            return NotImplemented
        if self.wrap and self.num >= self.descriptor.num_bits:
            return self._new(0)
        if o != 0 and self.num >= self.descriptor.num_bits:
            raise OutOfBounds(f"{o} << {self.num}", self.descriptor.min, self.descriptor.max)
        return self._new(o << self.num)

    def __rshift__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num >> o)

    def __rrshift__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o >> self.num)

    def __and__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num & o)

    def __rand__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o & self.num)

    def __or__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num | o)

    def __ror__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o | self.num)

    def __xor__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(self.num ^ o)

    def __rxor__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._new(o ^ self.num)

    def __neg__(self):
        '''
        Negating the minimum of a signed width wraps back to the minimum.
        '''
        return self._new(-self.num)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._new(abs(self.num))

    def __invert__(self):
        return self._new(~self.num)

    def is_positive(self): return self.num > 0
    def is_negative(self): return self.num < 0
    def is_zero(self): return self.num == 0
    def is_even(self): return self.num % 2 == 0
    def is_odd(self): return self.num % 2 == 1

    def __getitem__(self, idx):
        '''
        Bit at an index of the two's-complement representation, 0 being the least
        significant. Negative values read as ones above the sign bit, like
        Python ints do.
        '''
        idx = operator.index(idx)
        if idx < 0:
            return 0
        return (self.num >> idx) & 1

    def any_bits(self, mask):
        return self.num & operator.index(mask) != 0

    def all_bits(self, mask):
        mask = operator.index(mask)
        return self.num & mask == mask

    def no_bits(self, mask):
        return self.num & operator.index(mask) == 0

    def bit_length(self):
        '''
        Unlike int.bit_length(), always the full width.
        '''
        return self.descriptor.num_bits

    def byte_length(self):
        return self.descriptor.num_bytes

    def to_string(self, base=10):
        '''
        Base 10 is the plain signed decimal. Any other base writes the two's-complement
        bit pattern, zero-padded to as many digits as the width can need, so
        I8(-1).to_string(16) == 'ff' and U16(1234).to_string(16) == '04d2'.
        '''
        if base == 10:
            return str(self.num)
        num_digits = pybitint.base.calc_num_digits(self.descriptor.num_bits, base)
        return pybitint.base.format_digits(self.num & self.descriptor.mask, base, num_digits)

    def hex(self, upper=False):
        digits = self.to_string(16)
        return digits.upper() if upper else digits

    def oct(self):
        return self.to_string(8)

    def bin(self):
        return self.to_string(2)

    def to_bytes(self, endian='native'):
        '''
        Bytes of this integer in "native", "little" or "big" byte order. Only for
        8, 16, 32 and 64 bit widths.
        '''
        d = self.descriptor
        return pybitint.packing.pack(self.num, d.num_bits, d.is_signed, endian)

    def bytes_hex(self, endian='native'):
        return [f"{byte:02x}" for byte in self.to_bytes(endian)]
