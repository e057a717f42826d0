#!/usr/bin/env python3
# vim: sts=4 sw=4 et

import collections
import types

import yaml

from .bits import is_int
from .conv import BOOLEAN_CASTER, getT
from .error import FieldError
from .logger import Logger

log = Logger('bitmagic.fields')

def default_updater(view, value):
    setattr(view.instance, view.attribute_name, value)
    return value

DEFAULT_OPTIONS = types.MappingProxyType({
    'attribute_name': 'flags',
    'default': 0,
    'updater': default_updater,
    'bool_caster': BOOLEAN_CASTER,
    'allow_failed_fields': False,
    'helpers': True,
    'view_class': None,
    'space_class': None,
})

# Options converted with getT, type is taken from default value
TYPED_OPTIONS = ('attribute_name', 'default', 'allow_failed_fields', 'helpers')
CALLABLE_OPTIONS = ('updater', 'bool_caster')

Accessor = collections.namedtuple('Accessor', ['get', 'set', 'test'])

def looks_like_field_key(key):
    return (is_int(key) or isinstance(key, (range, list, tuple))) and not isinstance(key, bool)

def field_key(key):
    """Normalize field key into flat list of positions

    Valid keys are non-negative integer, non-empty ascending range or non-empty
    (possibly nested) list or tuple of them. Returns None for anything else.
    """
    if is_int(key):
        return [key] if key >= 0 else None
    elif isinstance(key, range):
        if key.step < 0 or len(key) == 0 or key.start < 0:
            return None
        return list(key)
    elif isinstance(key, (list, tuple)):
        r = []
        for i in key:
            k = field_key(i)
            if k is None:
                return None
            r += k
        return r if r else None
    return None

def _pairs(declaration):
    if declaration is None:
        return []
    if hasattr(declaration, 'items'):
        return list(declaration.items())
    r = []
    for item in declaration:
        try:
            k, v = item
        except (TypeError, ValueError):
            raise FieldError("Declaration item must be (key, value) pair, got {!r}", item)
        r.append((k, v))
    return r

def split_options(pairs, allow_failed_fields = False):
    """Split declaration pairs into (fields, options)

    fields is a list of (positions, name) pairs, options is a dict with
    everything else.
    """
    fields, options = [], {}
    for k, v in pairs:
        positions = field_key(k)
        if positions is not None:
            fields.append((positions, v))
            continue
        if looks_like_field_key(k) and not allow_failed_fields:
            raise FieldError("Key-pair expected to be a valid field declaration, but it is not: {!r}: {!r}."
                    " If this is an option pass allow_failed_fields=True to disable this error", k, v)
        options[_hashable(k)] = v
    return fields, options

def _hashable(key):
    if isinstance(key, (list, tuple)):
        return tuple(_hashable(i) for i in key)
    return key

def check_options(options):
    """Validate option overrides

    Typed options are converted, callable options are checked. None (and
    empty string for typed options) means not set and is dropped, so value
    from next layer or default is used.
    """
    r = dict(options)
    for k in TYPED_OPTIONS:
        if k not in r:
            continue
        if r[k] is None or r[k] == '':
            del r[k]
            continue
        try:
            r[k] = getT(options, k, DEFAULT_OPTIONS[k])
        except (TypeError, ValueError) as e:
            raise FieldError("Invalid value for option '{}': {!r}: {}", k, options.get(k), e)
    for k in CALLABLE_OPTIONS:
        if k not in r:
            continue
        if r[k] is None:
            del r[k]
        elif not callable(r[k]):
            raise FieldError("Option '{}' must be callable, {!r} is not", k, r[k])
    return r

def _typed_options(options):
    r = dict(DEFAULT_OPTIONS)
    r.update(check_options(options))
    return r

def _accessor(name, positions):
    def get(view):
        return view.read(name)
    def set(view, value):
        return view.write(name, value)
    test = None
    if len(positions) == 1:
        def test(view):
            return view.read(name) == 1
    return Accessor(get, set, test)

class FieldTable:
    """Named bit fields declared over single integer attribute

    Declaration maps field keys (bit position, range or list of positions) to
    field names, any other key is an option:

        FieldTable({0: 'is_odd', (1, 2, 3): 'amount', 4: 'is_cool'}, default=0)

    Order of positions is significant, positions[i] holds value bit i of the
    field. Positions may be shared between fields.
    """

    def __init__(self, declaration = None, name = None, **options):
        pairs = _pairs(declaration) + list(options.items())
        allow = False
        for k, v in pairs:
            if isinstance(k, str) and k == 'allow_failed_fields':
                allow = v
        try:
            allow = getT({'allow_failed_fields': allow}, 'allow_failed_fields', False)
        except (TypeError, ValueError) as e:
            raise FieldError("Invalid value for option 'allow_failed_fields': {!r}: {}", allow, e)

        fields, options = split_options(pairs, allow)

        field_list = {}
        for positions, fname in fields:
            if not isinstance(fname, str) or not fname:
                raise FieldError("Field name must be a string, {!r} is not", fname)
            if fname in field_list:
                raise FieldError("Field '{}' defined more than once", fname)
            field_list[fname] = tuple(positions)

        self.name = name
        self.field_list = types.MappingProxyType(field_list)
        self.bits = tuple(b for positions in field_list.values() for b in positions)
        self.distinct_bit_count = len(set(self.bits))
        self.max_bit = max(self.bits) if self.bits else None
        self.options = types.MappingProxyType(_typed_options(options))

        accessors = {}
        if self.options['helpers']:
            accessors = {n: _accessor(n, p) for n, p in field_list.items()}
        self.accessors = types.MappingProxyType(accessors)
        self._space = None

        log.debug("Table {}: fields {}, {} distinct bits", name, dict(field_list), self.distinct_bit_count)

    @property
    def attribute_name(self):
        return self.options['attribute_name']

    @property
    def default(self):
        return self.options['default']

    def __contains__(self, name):
        return name in self.field_list

    def __len__(self):
        return len(self.field_list)

    def __iter__(self):
        return iter(self.field_list)

    def positions(self, name):
        return self.field_list[name]

    def space(self):
        if self._space is None:
            klass = self.options['space_class']
            if klass is None:
                from .space import ValueSpace as klass
            self._space = klass(self)
        return self._space

    def bind(self, instance, **options):
        klass = self.options['view_class']
        if klass is None:
            from .view import FlagsView as klass
        return klass(instance, self, **options)

    def __repr__(self):
        return "<FieldTable name={!r} field_list={}>".format(self.name, dict(self.field_list))

    @classmethod
    def from_config(cls, cfg, name = None):
        """Build table from plain config mapping, as loaded from YAML

            attribute_name: flags
            fields:
              - is_odd
              - {name: amount, offset: 1, size: 3}
              - {name: mixed, bits: [7, 5]}

        Bare name takes next free position, next free position follows end of
        previous entry. Mapping of name: position(s) is accepted as well.
        """
        if not hasattr(cfg, 'items'):
            raise FieldError("Field table config must be a mapping, got {!r}", cfg)
        options = dict(cfg)
        fields = options.pop('fields', None) or []
        pairs = []
        if hasattr(fields, 'items'):
            for fname, positions in fields.items():
                if isinstance(positions, list):
                    positions = tuple(positions)
                pairs.append((positions, fname))
        elif isinstance(fields, list):
            offset = 0
            for f in fields:
                positions, fname = _config_field(f, offset)
                pairs.append((tuple(positions), fname))
                offset = max(positions) + 1
        else:
            raise FieldError("Invalid fields list: {!r}", fields)
        return cls(pairs + list(options.items()), name=name)

    @classmethod
    def from_yaml(cls, data, name = None):
        cfg = yaml.safe_load(data)
        if cfg is None:
            cfg = {}
        return cls.from_config(cfg, name=name)

def _config_field(f, offset):
    if isinstance(f, str):
        return [offset], f
    if not hasattr(f, 'get'):
        raise FieldError("Invalid field entry: {!r}", f)
    fname = f.get('name')
    if 'bits' in f:
        positions = field_key(f['bits'])
        if positions is None:
            raise FieldError("Invalid bit list for field {!r}: {!r}", fname, f['bits'])
        return positions, fname
    try:
        start = getT(f, 'offset', offset)
        size = getT(f, 'size', 1)
    except (TypeError, ValueError) as e:
        raise FieldError("Invalid field entry {!r}: {}", f, e)
    positions = field_key(range(start, start + size))
    if positions is None:
        raise FieldError("Invalid offset or size for field {!r}: {!r}", fname, f)
    return positions, fname
