#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

from pynat.base import pad_be
from pynat.errors import (
    NatOverflowError,
    NatUnderflowError,
    NatZeroDivisionError,
    OutOfRangeError,
)


class NatInt:
    '''
    Fixed-width natural integers with a declared upper bound, stored as a big-endian
    byte buffer. Abstract class that is sub-typed in this module by the two arithmetic
    disciplines, and then once more per declared type by pynat.typegen, which fills in
    the class attributes below.

    Two declared types never mix: arithmetic or ordering across them raises TypeError,
    even when their widths and bounds coincide.
    '''

    __slots__ = ('_buf',)

    num_bytes = None
    num_bits = None
    engine = None
    _max = None

    def __init__(self, num):
        '''
        Initialize from a magnitude of the type's engine (or anything its from_int()
        accepts), checked against the upper bound.
        :param num: Non-negative integer value, at most max()
        '''
        if self._max is None:
            raise TypeError(f"{self.__class__.__name__} is abstract, declare a type with pynat.typegen")
        mag = self.engine.from_int(num)
        if mag < 0 or mag > self._max:
            raise OutOfRangeError(f"Value {int(mag):#x} out-of-range for type {self.__class__.__name__}")
        self._buf = pad_be(self.engine.to_bytes_be(mag), self.num_bytes, self.__class__.__name__)

    @classmethod
    def _wrap(cls, mag):
        '''
        Build an instance from a magnitude that arithmetic has already brought in range.
        Only the storage width is checked.
        '''
        obj = cls.__new__(cls)
        obj._buf = pad_be(cls.engine.to_bytes_be(mag), cls.num_bytes, cls.__name__)
        return obj

    @classmethod
    def max(cls):
        '''
        Upper bound of the type, as a magnitude of its engine.
        '''
        return cls._max

    @classmethod
    def from_magnitude(cls, mag):
        return cls(mag)

    @classmethod
    def from_literal(cls, num):
        '''
        Convert a non-negative integer literal. Python ints are unbounded, so any size
        of literal is accepted up to max().
        '''
        num = operator.index(num)
        if num < 0:
            raise OutOfRangeError(f"Literal {num:#x} is negative")
        if cls.engine.from_int(num) > cls._max:
            raise OutOfRangeError(f"Literal {num:#x} too big for type {cls.__name__}")
        return cls(num)

    @classmethod
    def from_hex(cls, text):
        '''
        Parse a bare base-16 string, e.g. "98818bd7bcc41714849857".
        '''
        mag = cls.engine.from_hex(text)
        if mag > cls._max:
            raise OutOfRangeError(f"Hex value {text} too big for type {cls.__name__}")
        return cls(mag)

    @classmethod
    def pow2(cls, k):
        '''
        Returns 2 to the power of the argument.
        '''
        k = operator.index(k)
        if k < 0:
            raise OutOfRangeError(f"Negative power of two 2**{k} for type {cls.__name__}")
        mag = cls.engine.pow2(k)
        if mag > cls._max:
            raise OutOfRangeError(f"2**{k} too big for type {cls.__name__}")
        return cls(mag)

    def to_magnitude(self):
        return self.engine.from_bytes_be(self._buf.tobytes())

    def to_bytes(self):
        return self._buf.tobytes()

    @property
    def buffer(self):
        '''
        The read-only uint8 storage buffer, most significant byte first.
        '''
        return self._buf

    def to_hex(self):
        return self.engine.to_hex(self.to_magnitude())

    def __int__(self):
        return int(self.to_magnitude())

    def __str__(self):
        return self.engine.to_dec(self.to_magnitude())

    def __repr__(self):
        return str(self)

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return int(self).__format__(*fmt_args)

    def __hash__(self):
        return hash((self.__class__, self.to_bytes()))

    def _operands(self, o):
        '''
        Magnitudes of both operands, or None when the right-hand side is not of the
        very same declared type.
        '''
        if type(o) is not type(self):
            return None
        return self.to_magnitude(), o.to_magnitude()

    '''
    Comparison dunders cannot overflow, so just implement these with the underlying
    magnitudes.
    '''
    def __eq__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self.to_magnitude() == o.to_magnitude()

    def __lt__(self, o): return self._compare(o, lambda a, b: a < b)
    def __le__(self, o): return self._compare(o, lambda a, b: a <= b)
    def __gt__(self, o): return self._compare(o, lambda a, b: a > b)
    def __ge__(self, o): return self._compare(o, lambda a, b: a >= b)

    def _compare(self, o, cmp):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        return cmp(*operands)

    def _check_divisor(self, b):
        if self.engine.is_zero(b):
            raise NatZeroDivisionError(f"dividing by zero in type {self.__class__.__name__}")

    '''
    Division and remainder are exact integer operations under both disciplines: the
    result never exceeds the dividend, so it is always in range.
    '''
    def __truediv__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        a, b = operands
        self._check_divisor(b)
        return self._wrap(self.engine.div(a, b))

    __floordiv__ = __truediv__

    def __mod__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        a, b = operands
        self._check_divisor(b)
        return self._wrap(self.engine.rem(a, b))


class CheckedNat(NatInt):
    """
    Bounded natural integers whose arithmetic raises on overflow, underflow and
    division by zero instead of wrapping.
    """

    __slots__ = ()
    discipline = 'checked'

    def __add__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        result = self.engine.add(*operands)
        if result > self._max:
            raise NatOverflowError(f"bounded addition overflow for type {self.__class__.__name__}")
        return self._wrap(result)

    def __sub__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        result = self.engine.checked_sub(*operands)
        if result is None:
            raise NatUnderflowError(f"bounded subtraction underflow for type {self.__class__.__name__}")
        return self._wrap(result)

    def __mul__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        result = self.engine.mul(*operands)
        if result > self._max:
            raise NatOverflowError(f"bounded multiplication overflow for type {self.__class__.__name__}")
        return self._wrap(result)


class ModularNat(NatInt):
    """
    Bounded natural integers whose addition, subtraction and multiplication wrap
    around the declared bound, which acts as the modulus. The wrap point is max(),
    not 2**num_bits.
    """

    __slots__ = ()
    discipline = 'modular'

    def __add__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        result = self.engine.add(*operands)
        return self._wrap(self.engine.rem(result, self._max))

    def __sub__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        a, b = operands
        return self._wrap(wrapping_sub(self.engine, a, b, self._max))

    def __mul__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        result = self.engine.mul(*operands)
        return self._wrap(self.engine.rem(result, self._max))


def wrapping_sub(engine, a, b, modulus):
    '''
    a - b when that is non-negative, otherwise modulus - b + a. Reduced, since a may
    be a literal equal to the modulus.
    '''
    result = engine.checked_sub(a, b)
    if result is None:
        return engine.add(engine.checked_sub(modulus, b), a)
    return engine.rem(result, modulus)
