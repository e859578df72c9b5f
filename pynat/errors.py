#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Exceptions raised by bounded natural integer types. Every failure is raised at the
call that triggered it, nothing is clamped or truncated.
'''


class NatError(Exception):
    '''
    Base class for all bounded natural integer failures.
    '''


class OutOfRangeError(NatError, ValueError):
    '''
    A literal, hex string or magnitude is above the upper bound of a type.
    '''


class NatOverflowError(NatError, OverflowError):
    pass


class NatUnderflowError(NatError, ArithmeticError):
    pass


class NatZeroDivisionError(NatError, ZeroDivisionError):
    pass


class ParseError(NatError, ValueError):
    '''
    Malformed hexadecimal or decimal text.
    '''


class StorageTooNarrowError(NatError):
    '''
    A magnitude needs more bytes than the fixed width of a type. Only reachable
    when a type is declared with a bound that does not fit its width, so this is
    a defect in the declaration, not in the caller's values.
    '''


class DefinitionError(NatError, ValueError):
    '''
    A type declaration is malformed, e.g. a zero modulus.
    '''
