#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

from pynat.errors import NatZeroDivisionError, OutOfRangeError
from pynat.natint import wrapping_sub


class RefinedNat:
    '''
    Residues modulo a fixed modulus, stored as a single value of an existing bounded
    type (the base). Arithmetic always wraps around the refined modulus, whatever the
    base type's own bound or discipline. Sub-typed once per declaration by
    pynat.typegen.define_refined().
    '''

    __slots__ = ('_value',)

    base = None
    _modulus = None

    def __init__(self, value):
        '''
        Wrap a base value that is already reduced, e.g. one coming out of a previous
        computation on this type.
        :param value: Instance of the base type
        '''
        if self.base is None:
            raise TypeError(f"{self.__class__.__name__} is abstract, declare a type with pynat.typegen")
        if type(value) is not self.base:
            raise TypeError(f"{self.__class__.__name__} wraps {self.base.__name__}, not {type(value).__name__}")
        self._value = value

    @property
    def value(self):
        '''
        The wrapped base value. Read-only, like every bounded value.
        '''
        return self._value

    @classmethod
    def max(cls):
        '''
        The modulus, as a value of the base type.
        '''
        return cls._modulus

    @classmethod
    def from_literal(cls, num):
        num = operator.index(num)
        if num > int(cls._modulus):
            raise OutOfRangeError(f"Literal {num:#x} too big for type {cls.__name__}")
        return cls(cls.base.from_literal(num))

    def to_base(self):
        return self.value

    def to_magnitude(self):
        return self.value.to_magnitude()

    def __int__(self):
        return int(self.value)

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return repr(self.value)

    def __format__(self, *fmt_args):
        return self.value.__format__(*fmt_args)

    def __hash__(self):
        return hash((self.__class__, self.value))

    def _operands(self, o):
        if type(o) is not type(self):
            return None
        return self.value.to_magnitude(), o.value.to_magnitude()

    def _reduced(self, mag):
        return self.__class__(self.base._wrap(mag))

    def __eq__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self.value == o.value

    def __lt__(self, o): return self._compare(o, lambda a, b: a < b)
    def __le__(self, o): return self._compare(o, lambda a, b: a <= b)
    def __gt__(self, o): return self._compare(o, lambda a, b: a > b)
    def __ge__(self, o): return self._compare(o, lambda a, b: a >= b)

    def _compare(self, o, cmp):
        if type(o) is not type(self):
            return NotImplemented
        return cmp(self.value, o.value)

    def __add__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        engine = self.base.engine
        return self._reduced(engine.rem(engine.add(*operands), self._modulus.to_magnitude()))

    def __sub__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        a, b = operands
        return self._reduced(wrapping_sub(self.base.engine, a, b, self._modulus.to_magnitude()))

    def __mul__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        engine = self.base.engine
        return self._reduced(engine.rem(engine.mul(*operands), self._modulus.to_magnitude()))

    def __truediv__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        a, b = operands
        self._check_divisor(b)
        return self._reduced(self.base.engine.div(a, b))

    __floordiv__ = __truediv__

    def __mod__(self, o):
        operands = self._operands(o)
        if operands is None:
            return NotImplemented
        a, b = operands
        self._check_divisor(b)
        return self._reduced(self.base.engine.rem(a, b))

    def _check_divisor(self, b):
        if self.base.engine.is_zero(b):
            raise NatZeroDivisionError(f"dividing by zero in type {self.__class__.__name__}")
