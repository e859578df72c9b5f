#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pynat.typegen import define_checked

'''
Common fixed-width unsigned natural integer types, checked for overflow and
underflow.

    >>> x = SizeNat.from_literal(687165654266415) + SizeNat.from_literal(4298832000156)
    >>> x
    691464486266571
    >>> (x - SizeNat.from_literal(8151084996540)) / SizeNat.from_literal(1541654268)
    443233
'''

# Natural integer bounded by the largest 64-bit size.
SizeNat = define_checked('SizeNat', num_bytes=8, max_value=2 ** 64 - 1)

Nat128 = define_checked('Nat128', num_bytes=16)
