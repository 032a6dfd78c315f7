#!/usr/bin/env python3
"""
Setup script for yamlgraph.

yamlgraph is pure Python; it serializes YAML node graphs (with shared and
cyclic nodes) into YAML event streams.

Install for development with:
    pip install -e '.[test]'
"""

import os
import re
from setuptools import setup


def read_version():
    """Read __version__ from the package without importing it."""
    here = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(here, 'yamlgraph', '__init__.py'), encoding='utf-8') as f:
        match = re.search(r"^__version__ = '([^']+)'", f.read(), re.M)
    if not match:
        raise RuntimeError("unable to find __version__")
    return match.group(1)


setup(
    name='yamlgraph',
    version=read_version(),
    description='Serialize YAML node graphs into event streams',
    packages=['yamlgraph'],
    package_data={'yamlgraph': ['__init__.pyi']},
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
)
