#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

import gmpy2

from pynat.base import check_dec, check_hex
from pynat.engine import IntEngine


class Gmpy2Engine(IntEngine):
    '''
    Engine backed by GMP's mpz through gmpy2. Install with the "gmp" extra.
    '''

    name = 'gmpy2'

    def from_int(self, x):
        return gmpy2.mpz(operator.index(x))

    def from_hex(self, text):
        return gmpy2.mpz(check_hex(text), 16)

    def to_hex(self, a):
        return a.digits(16)

    def from_dec(self, text):
        return gmpy2.mpz(check_dec(text), 10)

    def to_dec(self, a):
        return a.digits(10)
