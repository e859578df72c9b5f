#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re

import numpy as np

from pynat.errors import DefinitionError, ParseError, StorageTooNarrowError

'''
Stateless functions that are used throughout the bounded and refined integer
classes.
'''

HEX_DIGITS_RE = re.compile(r'[0-9a-fA-F]+')
DEC_DIGITS_RE = re.compile(r'[0-9]+')


def calc_num_bytes(num_bits):
    '''
    Number of bytes needed to hold a certain number of bits, rounding up.
    '''
    num_bits = int(num_bits)
    if num_bits <= 0:
        raise DefinitionError(f"Width of {num_bits:,d} bits is not positive")
    return (num_bits + 7) // 8


def calc_width(num_bytes=None, num_bits=None):
    '''
    Resolve a declared width, given either in bytes or in bits (but not both),
    into a (num_bytes, num_bits) pair.
    '''
    if (num_bytes is None) == (num_bits is None):
        raise DefinitionError("Exactly one of num_bytes or num_bits must be declared")
    if num_bits is not None:
        return calc_num_bytes(num_bits), int(num_bits)
    num_bytes = int(num_bytes)
    if num_bytes <= 0:
        raise DefinitionError(f"Width of {num_bytes:,d} bytes is not positive")
    return num_bytes, 8 * num_bytes


def check_hex(text):
    '''
    Raise on anything that is not a bare, non-empty run of hex digits. No "0x"
    prefix, sign, whitespace or underscores are accepted.
    '''
    if not isinstance(text, str) or HEX_DIGITS_RE.fullmatch(text) is None:
        raise ParseError(f"Malformed hexadecimal string {text!r}")
    return text


def check_dec(text):
    if not isinstance(text, str) or DEC_DIGITS_RE.fullmatch(text) is None:
        raise ParseError(f"Malformed decimal string {text!r}")
    return text


def pad_be(repr_be, num_bytes, type_name):
    '''
    Left-pad a minimal big-endian encoding with zero bytes up to a fixed width,
    returning a read-only uint8 buffer.
    :param repr_be: Big-endian bytes of a magnitude
    :param num_bytes: Fixed width of the buffer
    :param type_name: Name of the type, for the error message
    '''
    repr_be = repr_be.lstrip(b'\x00')
    if len(repr_be) > num_bytes:
        raise StorageTooNarrowError(
            f"Magnitude of {len(repr_be):,d} bytes too big for type {type_name} of {num_bytes:,d} bytes")
    buf = np.zeros(num_bytes, dtype=np.uint8)
    if repr_be:
        buf[num_bytes - len(repr_be):] = np.frombuffer(repr_be, dtype=np.uint8)
    buf.flags.writeable = False
    return buf


def calc_dec_str(num, chunk_digits=1000):
    '''
    Decimal string of a non-negative integer of any size, converted a chunk of digits
    at a time so the interpreter's limit on int/str conversion never applies.
    '''
    num = int(num)
    chunk_base = 10 ** chunk_digits
    chunks = []
    while True:
        num, chunk = divmod(num, chunk_base)
        chunks.append(chunk)
        if num == 0:
            break
    head = str(chunks[-1])
    return head + ''.join(f"{chunk:0{chunk_digits}d}" for chunk in reversed(chunks[:-1]))


def parse_dec_str(text, chunk_digits=1000):
    '''
    Inverse of calc_dec_str(), for text already checked with check_dec().
    '''
    num = 0
    for i in range(0, len(text), chunk_digits):
        chunk = text[i:i + chunk_digits]
        num = num * 10 ** len(chunk) + int(chunk, 10)
    return num
