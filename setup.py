#!/usr/bin/env python3
# vim: sts=4 sw=4 et

from setuptools import setup

setup( name = 'bitmagic'
     , version = '0.1.0'
     , description = 'Named bit fields over integer attributes and their value spaces'
     , packages = ['bitmagic']
     , python_requires = '>=3.8'
     , install_requires = ['PyYAML']
     , extras_require = {'test': ['pytest']}
     , classifiers =
        [ 'Intended Audience :: Developers'
        , 'License :: OSI Approved :: MIT License'
        , 'Operating System :: OS Independent'
        ]
)
