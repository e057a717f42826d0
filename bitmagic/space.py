#!/usr/bin/env python3
# vim: sts=4 sw=4 et

import itertools

from .bits import flatten, is_int, value_bits
from .conv import ChainedDict
from .fields import DEFAULT_OPTIONS, FieldTable, check_options, field_key
from .logger import Logger

log = Logger('bitmagic.space')

class ValueSpace:
    """Integer values reachable from bit universe of field table

    Generates lists of possible values and masks for field conditions, this is
    what query adapters need to build filters like "flags IN (...)" or
    "flags & mask = mask".

    Number of values is 2 ** n for n bits, enumeration cost grows the same way.
    """

    def __init__(self, fields, **options):
        if isinstance(fields, FieldTable):
            self.table = fields
            field_list = fields.field_list
            base = fields.options
        else:
            field_list = {}
            for name, positions in dict(fields).items():
                key = field_key(positions)
                field_list[name] = tuple(key if key is not None else positions)
            self.table = None
            base = DEFAULT_OPTIONS
        self.field_list = field_list
        self.options = ChainedDict(check_options(options), base)
        self.default = self.options['default']
        self.bool_caster = self.options['bool_caster']
        self.bits = tuple(dict.fromkeys(b for positions in field_list.values() for b in positions))

    @property
    def length(self):
        return len(self.bits)

    def positions_for(self, *names):
        """Resolve field names and positions into flat list of positions

        Integers are passed as is, unknown names are dropped.
        """
        r = []
        for n in flatten(names):
            if is_int(n):
                r.append(n)
            elif isinstance(n, str) and n in self.field_list:
                r += self.field_list[n]
        return r

    bits_for = positions_for

    def each_value(self, bits = None):
        """Generate all values from given bits, by default from whole universe

        Yields 0 first, then default if it is non-zero, then OR of each
        combination of bits, smaller combinations first.
        """
        if bits is None:
            bits = self.bits
        bits = list(bits)
        yield 0
        if self.default != 0:
            yield self.default
        for i in range(1, len(bits) + 1):
            for combination in itertools.combinations(bits, i):
                num = 0
                for b in combination:
                    num |= 1 << b
                yield num

    def all_values(self, bits = None, warn_threshold = 12):
        if bits is None:
            bits = self.bits
        bits = list(bits)
        if warn_threshold is not None and warn_threshold is not False and len(bits) > warn_threshold:
            log.warning("There are {} bits, result will have {} values."
                    " Please check execution time and memory usage for your use case", len(bits), 2 ** len(bits))
            log.warning("Disable this warning with all_values(warn_threshold=None)")
        return list(self.each_value(bits))

    def _select(self, mask, check):
        if not mask:
            return []
        return [v for v in self.each_value() if check(v)]

    def any_of(self, *names):
        mask = self.any_of_number(*names)
        return self._select(mask, lambda v: v & mask > 0)

    def all_of(self, *names):
        mask = self.any_of_number(*names)
        return self._select(mask, lambda v: v & mask == mask)

    def none_of(self, *names):
        mask = self.any_of_number(*names)
        return self._select(mask, lambda v: v & mask == 0)

    def instead_of(self, *names):
        mask = self.any_of_number(*names)
        return self._select(mask, lambda v: v & mask != mask)

    with_any = any_of
    with_all = all_of
    without_all = none_of
    without_any = instead_of

    def equal_to(self, fields = None, **kw):
        """Values where given fields are equal to given values

            space.equal_to(amount=5)
            space.equal_to({'amount': 7, 'is_odd': 1})

        Values wider than field are truncated.
        """
        all_mask, none_mask = self.equal_to_numbers(fields, **kw)
        return self._select(all_mask | none_mask, lambda v: v & all_mask == all_mask and v & none_mask == 0)

    def equal_to_numbers(self, fields = None, **kw):
        """Return (all_mask, none_mask) pair for field values

        all_mask has bits that must be set, none_mask bits that must be unset.
        """
        pairs = list(fields.items()) if fields else []
        pairs += kw.items()
        all_mask, none_mask = 0, 0
        for name, value in pairs:
            positions = self.positions_for(name)
            for p, v in zip(positions, value_bits(value, len(positions))):
                if self.bool_caster(v):
                    all_mask |= 1 << p
                else:
                    none_mask |= 1 << p
        return all_mask, none_mask

    def any_of_number(self, *names):
        """Mask with bits of all given fields set"""
        mask = 0
        for p in self.positions_for(*names):
            mask |= 1 << p
        return mask

    all_of_number = any_of_number
    with_any_number = any_of_number
    with_all_number = any_of_number

    def none_of_number(self, *names):
        """Complement of any_of_number, negative in two's complement"""
        return ~self.any_of_number(*names)

    without_any_number = none_of_number
    without_all_number = none_of_number

    def __repr__(self):
        return f"<ValueSpace bits={list(self.bits)} default={self.default}>"
