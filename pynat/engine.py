#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

from pynat.base import calc_dec_str, check_dec, check_hex, parse_dec_str


class IntEngine:
    '''
    Arbitrary-precision arithmetic over non-negative integers, backed by the
    built-in int. Bounded types only talk to their magnitudes through an engine,
    so a different big-integer library can be swapped in by subclassing.

    Values are never mutated, every method returns a new magnitude. Magnitudes
    compare with the native comparison operators.
    '''

    name = 'int'

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def from_int(self, x):
        '''
        Accepts only true integers (anything with __index__), so floats, strings and
        bounded values of other types are rejected with TypeError, not truncated.
        '''
        return operator.index(x)

    def add(self, a, b):
        return a + b

    def checked_sub(self, a, b):
        '''
        Subtract, or return None if the result would be negative.
        '''
        if b > a:
            return None
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a // b

    def rem(self, a, b):
        return a % b

    def is_zero(self, a):
        return a == 0

    def pow2(self, k):
        return self.from_int(1) << operator.index(k)

    def to_bytes_be(self, a):
        '''
        Minimal big-endian encoding, a single zero byte for zero.
        '''
        a = int(a)
        return a.to_bytes(max(1, (a.bit_length() + 7) // 8), 'big')

    def from_bytes_be(self, data):
        return self.from_int(int.from_bytes(bytes(data), 'big'))

    def from_hex(self, text):
        return self.from_int(int(check_hex(text), 16))

    def to_hex(self, a):
        return format(a, 'x')

    def from_dec(self, text):
        return self.from_int(parse_dec_str(check_dec(text)))

    def to_dec(self, a):
        return calc_dec_str(a)


DEFAULT_ENGINE = IntEngine()
