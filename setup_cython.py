# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Builds the codec modules as C extensions in place:
#   python setup_cython.py build_ext --inplace

from setuptools import setup
from Cython.Build import cythonize

modules = [\
    "b45block",
    "base45",
    "b45stream"\
]

setup(
    name = 'base45',
    ext_modules = cythonize(\
        [x + ".py" for x in modules],
        compiler_directives = {"language_level": "3"})
)
