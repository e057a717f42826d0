#!/usr/bin/env python3
# vim: sts=4 sw=4 et

import logging

from bitmagic.logger import Logger
from bitmagic import FieldTable

def test(logbuf):
    l = Logger('bitmagic.xxx')
    assert l.name == 'bitmagic.xxx'
    l.debug("debug {}", 1)
    l.warning("warning {} {x}", 1, x='y')
    assert [(r.levelname, r.name, r.msg) for r in logbuf.buffer] == [('WARNING', 'bitmagic.xxx', 'warning 1 y')]

def test_levels(logbuf):
    logging.getLogger('bitmagic').setLevel(logging.DEBUG)
    l = Logger('bitmagic.xxx')
    l.debug("debug {}", 0)
    l.warning("{}", 'warning')
    assert [(r.levelname, r.msg) for r in logbuf.buffer] == [
        ('DEBUG', 'debug 0'),
        ('WARNING', 'warning'),
    ]

def test_lazy_format(logbuf):
    class Fail:
        def __format__(self, spec):
            raise RuntimeError("Formatted disabled message")

    logging.getLogger('bitmagic').setLevel(logging.WARNING)
    Logger('bitmagic.xxx').debug("value {}", Fail())
    assert logbuf.buffer == []

def test_braces(logbuf):
    Logger('bitmagic.xxx').warning("no args {}")
    assert [r.msg for r in logbuf.buffer] == ['no args {}']

def test_table_debug(logbuf):
    logging.getLogger('bitmagic').setLevel(logging.DEBUG)
    FieldTable({0: 'a', (1, 2): 'b'}, name='dbg')
    assert [(r.levelname, r.name, r.msg) for r in logbuf.buffer] == [
        ('DEBUG', 'bitmagic.fields', "Table dbg: fields {'a': (0,), 'b': (1, 2)}, 2 distinct bits"),
    ]
