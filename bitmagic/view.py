#!/usr/bin/env python3
# vim: sts=4 sw=4 et

from .bits import RawBits, flatten, is_int, value_bits
from .conv import ChainedDict
from .fields import FieldTable, check_options

class FlagsView:
    """Live accessor for bit fields of single host instance

    Raw value is read from host attribute on every operation and written back
    through updater option, view itself holds no state besides its binding.

        class Example:
            flags = 0

        view = FlagsView(Example(), {0: 'is_odd', (1, 2, 3): 'amount', 4: 'is_cool'})
        view.write('amount', 5)
        view.amount # 5
    """
    __slots__ = ['instance', 'table', 'options']

    def __init__(self, instance, table, **options):
        if not isinstance(table, FieldTable):
            table = FieldTable(table)
        self.instance = instance
        self.table = table
        self.options = ChainedDict(check_options(options), table.options)

    def __setattr__(self, name, value):
        if name in FlagsView.__slots__:
            return object.__setattr__(self, name, value)
        accessor = self.table.accessors.get(name)
        if accessor is None:
            return object.__setattr__(self, name, value)
        accessor.set(self, value)

    def __getattr__(self, name):
        if name in FlagsView.__slots__ or name.startswith('__'):
            raise AttributeError(name)
        accessor = self.table.accessors.get(name)
        if accessor is None:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute or field '{name}'")
        return accessor.get(self)

    @property
    def field_list(self):
        return self.table.field_list

    @property
    def attribute_name(self):
        return self.options['attribute_name']

    @property
    def value(self):
        """Current raw value of host attribute, absent value is replaced with default"""
        v = getattr(self.instance, self.attribute_name, None)
        if v is None or v is False:
            v = self.options['default']
        return v

    current_value = value

    def field(self):
        return RawBits(self.value)

    def update(self, value):
        return self.options['updater'](self, value)

    def cast(self, value):
        return self.options['bool_caster'](value)

    def _positions(self, name):
        if isinstance(name, (list, tuple)):
            return list(flatten(name))
        positions = self.table.field_list.get(name)
        if positions is None:
            raise KeyError(f"Unknown field name {name!r}")
        return positions

    def read(self, name, field = None):
        if field is None:
            field = self.field()
        if is_int(name):
            return field.read_field(name)
        return field.read_field(self._positions(name))

    __getitem__ = read

    def write(self, name, value):
        """Write field, bit position or list of positions and commit result

        Single position is set from whole value cast to bool. For fields value
        bit i goes to positions[i], bits above field width are ignored.
        Returns result of updater.
        """
        if is_int(name):
            bits = {name: self.cast(value)}
        else:
            positions = self._positions(name)
            bits = {}
            for p, v in zip(positions, value_bits(value, len(positions))):
                bits[p] = self.cast(v)
        field = self.field()
        return self.update(field.write_bits(bits))

    __setitem__ = write

    def enabled(self, *names):
        """True if all given fields are enabled, multi-bit field is enabled if any bit is set"""
        field = self.field()
        return all(self.read(n, field) >= 1 for n in flatten(names))

    def disabled(self, *names):
        """True if all given fields have all bits unset"""
        field = self.field()
        return all(self.read(n, field) == 0 for n in flatten(names))

    def test(self, name):
        accessor = self.table.accessors.get(name)
        if accessor is None:
            raise KeyError(f"Unknown field name {name!r}")
        if accessor.test is None:
            raise TypeError(f"Field '{name}' is not a single bit")
        return accessor.test(self)

    def __repr__(self):
        short = {'default': self.options.get('default'), 'attribute_name': self.attribute_name}
        name = '' if self.table.name is None else f"name={self.table.name!r} "
        return f"<{type(self).__name__} {name}value={self.value} options={short}>"

class Magic:
    """Class attribute binding field table to host instances

        class Example:
            magic = Magic({0: 'is_odd', (1, 2, 3): 'amount'}, attribute_name='flags')

            def __init__(self, flags = 0):
                self.flags = flags

        Example.magic               # FieldTable
        Example(9).magic.amount     # 4

    View is created once per instance and cached in instance dict. Prebuilt
    table may be shared between several classes, it is never modified.
    """

    def __init__(self, declaration = None, **options):
        if isinstance(declaration, FieldTable):
            if options:
                raise TypeError("Options can not be used with prebuilt FieldTable")
            self.table = declaration
        else:
            self.table = FieldTable(declaration, name=options.pop('name', None), **options)
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner = None):
        if instance is None:
            return self.table
        view = self.table.bind(instance)
        d = getattr(instance, '__dict__', None)
        if d is not None and self.name is not None:
            d[self.name] = view
        return view
