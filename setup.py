# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup

modules = [\
    "b45block",
    "b45exception",
    "b45stream",
    "base45",
    "consts",
    "llog",
    "mutil"\
]

setup(
    name = 'base45',
    version = '0.1.0',
    description = 'Base45 encoding, one-shot and streaming.',
    license = 'GPL v2',
    python_requires = '>=3.6',
    py_modules = modules,
    extras_require = {
        'cython': ['Cython'],
        'test': ['pytest'],
    }
)
