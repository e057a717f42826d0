#!/usr/bin/env python3
# vim: sts=4 sw=4 et

import logging

from bitmagic import FieldTable, Magic

logging.basicConfig(level=logging.DEBUG)

class Post:
    magic = Magic({0: 'is_published', (1, 2, 3): 'priority', 4: 'is_pinned'})

    def __init__(self, flags = 0):
        self.flags = flags

p = Post()
p.magic.is_published = 1
p.magic.priority = 5
print(f"flags={p.flags} priority={p.magic.priority} enabled={p.magic.enabled('is_published', 'priority')}")

space = Post.magic.space()
print("published values:", space.any_of('is_published'))
print("priority 5 masks:", space.equal_to_numbers(priority=5))
print("not pinned mask:", space.none_of_number('is_pinned'))

table = FieldTable.from_yaml('''
attribute_name: state
fields:
  - active
  - {name: level, size: 2}
''')
print(table, table.space().equal_to(level=3))
