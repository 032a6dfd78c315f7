import sys
import os

import pytest

_tests_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir   = os.path.abspath(os.path.join(_tests_dir, '..'))

# Prefer the source tree over any installed copy.
sys.path.insert(0, _src_dir)

from yamlgraph import ScalarNode, SequenceNode, MappingNode  # noqa: E402


STR = 'tag:yaml.org,2002:str'
INT = 'tag:yaml.org,2002:int'
SEQ = 'tag:yaml.org,2002:seq'
MAP = 'tag:yaml.org,2002:map'


@pytest.fixture
def scalar():
    def make(value, tag=STR, **kwargs):
        return ScalarNode(tag, value, **kwargs)
    return make


@pytest.fixture
def sequence():
    def make(items=None, tag=SEQ, **kwargs):
        return SequenceNode(tag, list(items or []), **kwargs)
    return make


@pytest.fixture
def mapping():
    def make(pairs=None, tag=MAP, **kwargs):
        return MappingNode(tag, list(pairs or []), **kwargs)
    return make
