#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pybitint.errors import (
    BitIntError,
    DivisionByZero,
    InvalidWidthSpec,
    OutOfBounds,
    UnsupportedByteWidth,
    UnsupportedEndianness,
)
from pybitint.flowint import FlowInt
from pybitint.registry import I, U, WidthDescriptor, get_or_create, make
from pybitint.constants import I8, I16, I32, I64, I128, U8, U16, U32, U64, U128
import pybitint.native as native
