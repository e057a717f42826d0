#!/usr/bin/env python3
# vim: sts=4 sw=4 et

REGISTRY = {}
REGISTRY[int] = lambda s: int(s, 0)

def conv_bool(s):
    l = str(s).strip().lower()
    if l in ['yes', 'true', 't', '1', 'on']:
        return True
    elif l in ['no', 'false', 'f', '0', 'off']:
        return False
    raise ValueError("Invalid bool string: {}".format(s))

REGISTRY[bool] = conv_bool

def from_string(t, s):
    return REGISTRY.get(t, t)(s)

_default_tag = object()

def getT(obj, key, default):
    s = obj.get(key, _default_tag)
    if s in (_default_tag, None, ''):
        return default
    dtype = type(default)
    if dtype == type(s):
        return s
    return from_string(dtype, s)

class ChainedDict:
    """Read-only lookup through list of option layers, first hit wins"""
    def __init__(self, *a):
        self._chain = a

    def get(self, key, default = None):
        for d in self._chain:
            v = d.get(key, _default_tag)
            if v is not _default_tag:
                return v
        return default

    def __getitem__(self, key):
        v = self.get(key, _default_tag)
        if v is _default_tag:
            raise KeyError(key)
        return v

def BOOLEAN_CASTER(v):
    return not (v is False or v == 0)

def STRING_CASTER(v):
    if isinstance(v, str):
        return conv_bool(v)
    return BOOLEAN_CASTER(v)
