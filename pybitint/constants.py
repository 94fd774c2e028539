#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pybitint.registry import I, U

'''
Common fixed widths, fetched from the registry once at import.
'''

U8 = U(8)
U16 = U(16)
U32 = U(32)
U64 = U(64)
U128 = U(128)

I8 = I(8)
I16 = I(16)
I32 = I(32)
I64 = I(64)
I128 = I(128)
