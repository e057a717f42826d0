#!/usr/bin/env python
# vim: sts=4 sw=4 et

import pytest

import logging, logging.handlers

from bitmagic import FieldTable

class Example:
    def __init__(self, flags = 0):
        self.flags = flags

@pytest.fixture
def example():
    return Example

@pytest.fixture
def table():
    return FieldTable({0: 'is_odd', (1, 2, 3): 'amount', 4: 'is_cool'})

@pytest.fixture
def table7():
    return FieldTable({0: 'og', (1, 2): 'hai', 3: 'bae', (4, 5, 6): 'bai'})

@pytest.fixture
def logbuf():
    buf = logging.handlers.BufferingHandler(1000)
    log = logging.getLogger('bitmagic')
    level = log.level
    log.addHandler(buf)
    try:
        yield buf
    finally:
        log.removeHandler(buf)
        log.setLevel(level)
