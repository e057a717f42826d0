#!/usr/bin/env python3
# vim: sts=4 sw=4 et

class BitMagicError(ValueError):
    def __init__(self, text, *a, **kw):
        if a or kw:
            text = text.format(*a, **kw)
        ValueError.__init__(self, text)

class InputError(BitMagicError):
    """Malformed raw value or bit write argument"""

class FieldError(BitMagicError):
    """Malformed field declaration"""
