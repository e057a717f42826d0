#!/usr/bin/env python3
# vim: sts=4 sw=4 et

from .error import BitMagicError, InputError, FieldError
from .conv import BOOLEAN_CASTER, STRING_CASTER
from .bits import RawBits
from .fields import FieldTable, DEFAULT_OPTIONS
from .view import FlagsView, Magic
from .space import ValueSpace

__all__ = [
    'BitMagicError', 'InputError', 'FieldError',
    'BOOLEAN_CASTER', 'STRING_CASTER',
    'RawBits', 'FieldTable', 'DEFAULT_OPTIONS',
    'FlagsView', 'Magic', 'ValueSpace',
]
