#!/usr/bin/env python3
# vim: sts=4 sw=4 et

from .error import InputError

def is_int(v):
    return isinstance(v, int) and not isinstance(v, bool)

def flatten(items):
    for i in items:
        if isinstance(i, (list, tuple)):
            yield from flatten(i)
        else:
            yield i

def get_bit(value, position):
    if position < 0:
        return 0
    return (value >> position) & 1

def value_bits(target, count):
    """Return low count positional bits of target value

    Integers (and booleans) are split into bits, two's complement for negative
    values, so -1 gives all ones. Lists and tuples are indexed directly, items
    past the end are None, all items are left for bool caster. Anything else
    (strings, None) is a scalar value for the lowest bit, higher bits are 0.
    """
    if isinstance(target, int):
        return [(target >> i) & 1 for i in range(count)]
    elif isinstance(target, (list, tuple)):
        return [target[i] if i < len(target) else None for i in range(count)]
    return [target] + [0] * (count - 1) if count else []

class RawBits:
    """Integer with bit level access

    Negative values are treated as two's complement with infinite leading
    ones, same as Python integer bitwise operators do.
    """
    __slots__ = ['_value']

    def __init__(self, value = 0):
        if isinstance(value, RawBits):
            value = value._value
        if not is_int(value):
            raise InputError("RawBits expects an integer value, {!r} is not an integer", value)
        self._value = value

    @property
    def value(self):
        return self._value

    def __int__(self): return self._value
    def __index__(self): return self._value

    def __eq__(self, other):
        if isinstance(other, RawBits):
            return self._value == other._value
        elif is_int(other):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(('rawbits', self._value))

    def __repr__(self):
        return "<RawBits {} ({})>".format(self._value, bin(self._value))

    def read_bits(self, *positions):
        """Read each position into dict of position: bit"""
        r = {}
        for p in flatten(positions):
            if not is_int(p):
                raise InputError("Bit position must be an integer, {!r} is not", p)
            r[p] = get_bit(self._value, p)
        return r

    def read_field(self, *positions):
        """Compose integer from bits at given positions, in given order

        Output bit i is taken from positions[i]. Bits are combined with OR so
        repeated position fills several output bits: read_field(0, 0, 0) of odd
        value is 7.
        """
        r = 0
        for i, p in enumerate(flatten(positions)):
            if is_int(p):
                r |= get_bit(self._value, p) << i
        return r

    __getitem__ = read_field

    def write_bits(self, bits = None):
        """Set or clear bits in place, return new value

        bits is a mapping (or iterable of pairs) of position: value, value must be
        one of True, False, 1 or 0.
        """
        if bits is None:
            return self._value
        items = bits.items() if hasattr(bits, 'items') else bits
        for p, v in items:
            if not is_int(p):
                raise InputError("Bits can be written only by integer position, {!r} is not a valid position", p)
            if p < 0:
                raise InputError("Can not write to negative position {}", p)
            if not isinstance(v, int) or v not in (0, 1):
                raise InputError("Bit value must be boolean, {!r} is not a boolean", v)
            if v:
                self._value |= (1 << p)
            else:
                self._value &= ~(1 << p)
        return self._value
