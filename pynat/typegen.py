#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from pynat.base import calc_width
from pynat.engine import DEFAULT_ENGINE
from pynat.errors import DefinitionError, StorageTooNarrowError
from pynat.natint import CheckedNat, ModularNat, NatInt
from pynat.refined import RefinedNat

'''
Declarations of new bounded and refined integer types. Each call creates a brand
new class, so two declarations never produce interchangeable types, even with the
same width and bound.
'''


def _define_bounded(discipline_cls, name, num_bytes, max_value, num_bits, engine):
    engine = DEFAULT_ENGINE if engine is None else engine
    num_bytes, num_bits = calc_width(num_bytes=num_bytes, num_bits=num_bits)
    if max_value is None:
        max_value = engine.checked_sub(engine.pow2(num_bits), engine.from_int(1))
    max_value = engine.from_int(max_value)

    if max_value < 0:
        raise DefinitionError(f"Negative bound {int(max_value):#x} for type {name}")
    bound_hex = f"0x{engine.to_hex(max_value)}"
    if discipline_cls is ModularNat and engine.is_zero(max_value):
        raise DefinitionError(f"Zero modulus for type {name}")
    if len(engine.to_bytes_be(max_value).lstrip(b'\x00')) > num_bytes:
        raise StorageTooNarrowError(f"Bound {bound_hex} does not fit the {num_bytes:,d} bytes of type {name}")

    cls = type(name, (discipline_cls,), {
        '__slots__': (),
        '__doc__': f"{discipline_cls.discipline.capitalize()} natural integer of {num_bytes:,d} bytes, bounded by {bound_hex}.",
        'num_bytes': num_bytes,
        'num_bits': num_bits,
        'engine': engine,
        '_max': max_value,
    })
    logging.debug(f"Declared {discipline_cls.discipline} type {name} of {num_bytes:,d} bytes, bound {bound_hex}, {engine.name} engine.")
    return cls


def define_checked(name, num_bytes=None, max_value=None, num_bits=None, engine=None):
    '''
    Declare a bounded natural integer type with regular arithmetic, checked for
    overflow and underflow.
    :param name: Name of the new type
    :param num_bytes: Width of the byte buffer holding values of this type
    :param max_value: Largest value of the type. Defaults to the largest value the
    width can hold.
    :param num_bits: Width in bits, instead of num_bytes
    :param engine: Big-integer engine, defaults to pynat.engine.DEFAULT_ENGINE
    '''
    return _define_bounded(CheckedNat, name, num_bytes, max_value, num_bits, engine)


def define_modular(name, num_bytes=None, max_value=None, num_bits=None, engine=None):
    '''
    Declare a bounded natural integer type with arithmetic modulo max_value. Same
    parameters as define_checked().
    '''
    return _define_bounded(ModularNat, name, num_bytes, max_value, num_bits, engine)


def define_field(name, modulus_hex, engine=None):
    '''
    Declare a modular type from a hex modulus, sized to just fit the modulus, e.g.
    define_field('Poly1305Field', '3fffffffffffffffffffffffffffffffb').
    '''
    engine = DEFAULT_ENGINE if engine is None else engine
    modulus = engine.from_hex(modulus_hex)
    num_bytes = len(engine.to_bytes_be(modulus))
    return define_modular(name, num_bytes=num_bytes, max_value=modulus, engine=engine)


def define_refined(name, base, modulus):
    '''
    Declare a type of residues modulo `modulus`, stored as values of `base`.
    :param name: Name of the new type
    :param base: A type declared with define_checked() or define_modular()
    :param modulus: The modulus, as a value of `base`
    '''
    if not (isinstance(base, type) and issubclass(base, NatInt) and base._max is not None):
        raise DefinitionError(f"Base of refined type {name} must be a declared bounded type, not {base!r}")
    if type(modulus) is not base:
        raise DefinitionError(f"Modulus of refined type {name} must be a {base.__name__}, not {type(modulus).__name__}")
    if base.engine.is_zero(modulus.to_magnitude()):
        raise DefinitionError(f"Zero modulus for type {name}")
    modulus_hex = f"0x{modulus.to_hex()}"

    cls = type(name, (RefinedNat,), {
        '__slots__': (),
        '__doc__': f"Natural integers modulo {modulus_hex}, stored as {base.__name__}.",
        'base': base,
        '_modulus': modulus,
    })
    logging.debug(f"Declared refined type {name} over {base.__name__}, modulus {modulus_hex}.")
    return cls
