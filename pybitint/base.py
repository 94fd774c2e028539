#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from pybitint.errors import DivisionByZero

'''
Stateless functions that are used throughout the width descriptors and the
fixed-width integer class.
'''

def calc_mask(num_bits):
    '''
    All-ones mask for a certain number of bits, i.e. 0xFF for 8 bits.
    '''
    return (1 << int(num_bits)) - 1


def calc_bounds(num_bits, is_signed):
    '''
    Smallest and largest integer representable in a certain number of bits,
    as a (min, max) tuple of plain Python ints.
    '''
    if is_signed:
        return -(1 << (num_bits - 1)), (1 << (num_bits - 1)) - 1
    return 0, calc_mask(num_bits)


def calc_num_bytes(num_bits):
    '''
    Number of whole bytes needed to hold a certain number of bits.
    '''
    return (int(num_bits) + 7) // 8


def wrap(num, num_bits, is_signed):
    '''
    Reduce an arbitrary integer into the bounds of a width, two's-complement
    style. Shifting by the minimum first moves the range onto [0, mask], so
    one formula covers both signed and unsigned widths.
    '''
    min_num, _ = calc_bounds(num_bits, is_signed)
    return ((int(num) - min_num) & calc_mask(num_bits)) + min_num


def calc_num_digits(num_bits, base):
    '''
    Number of digits needed to write any bit pattern of a certain width in a
    certain base, i.e. ceil(num_bits / log2(base)).
    '''
    return len(np.base_repr(calc_mask(num_bits), base=int(base)))


def format_digits(num, base, num_digits=0):
    '''
    Lower-case digits of a non-negative integer in any base from 2 to 36,
    left-padded with zeros to a minimum number of digits.
    '''
    assert num >= 0, f"Cannot format negative {num} as a bit pattern"
    return np.base_repr(int(num), base=int(base)).lower().rjust(num_digits, '0')


def trunc_divmod(num, div):
    '''
    Integer division that rounds toward zero, with a remainder that takes
    the sign of the dividend. Python's own // and % round toward negative
    infinity instead.
    '''
    if div == 0:
        raise DivisionByZero(f"{num} divided by zero")
    quot = abs(num) // abs(div)
    if (num < 0) != (div < 0):
        quot = -quot
    return quot, num - (div * quot)
