"""Tag resolution.

The resolver answers one question: which tag would a reader infer for a
node of a given kind, optionally looking at its scalar text, at a given
position in the graph. The position is passed explicitly as a path of
(parent, index) pairs from the root, so resolve() keeps no cursor state
and one resolver can be shared by any number of serializers.
"""

import re

from yamlgraph.error import ResolverError
from yamlgraph.nodes import ScalarNode, SequenceNode, MappingNode


class BaseResolver:
    """Base YAML tag resolver."""
    yaml_implicit_resolvers = {}
    yaml_path_resolvers = {}

    DEFAULT_SCALAR_TAG = 'tag:yaml.org,2002:str'
    DEFAULT_SEQUENCE_TAG = 'tag:yaml.org,2002:seq'
    DEFAULT_MAPPING_TAG = 'tag:yaml.org,2002:map'

    @classmethod
    def add_implicit_resolver(cls, tag, regexp, first):
        """Add an implicit resolver."""
        if 'yaml_implicit_resolvers' not in cls.__dict__:
            cls.yaml_implicit_resolvers = {
                key: list(value)
                for key, value in cls.yaml_implicit_resolvers.items()}
        if first is None:
            first = [None]
        for ch in first:
            cls.yaml_implicit_resolvers.setdefault(ch, []).append((tag, regexp))

    @classmethod
    def add_path_resolver(cls, tag, path, kind=None):
        """Add a path resolver.

        ``path`` is a list of elements, one per level below the root. Each
        element is either an index checker, or a ``(node_check, index_check)``
        pair, or a 1-tuple ``(node_check,)`` meaning "the key position".
        ``node_check`` may be a tag string, a node class (or str/list/dict
        for the matching node class) or None. ``index_check`` may be True
        (mapping key), False/None (any value), a string (the key scalar's
        value) or an int (sequence index).
        """
        if 'yaml_path_resolvers' not in cls.__dict__:
            cls.yaml_path_resolvers = cls.yaml_path_resolvers.copy()
        new_path = []
        for element in path:
            if isinstance(element, (list, tuple)):
                if len(element) == 2:
                    node_check, index_check = element
                elif len(element) == 1:
                    node_check = element[0]
                    index_check = True
                else:
                    raise ResolverError("Invalid path element: %s" % (element,))
            else:
                node_check = None
                index_check = element
            node_check = _node_class(node_check, node_check)
            if node_check not in (ScalarNode, SequenceNode, MappingNode) \
                    and not isinstance(node_check, str) \
                    and node_check is not None:
                raise ResolverError("Invalid node checker: %s" % (node_check,))
            if not isinstance(index_check, (str, int)) \
                    and index_check is not None:
                raise ResolverError("Invalid index checker: %s" % (index_check,))
            new_path.append((node_check, index_check))
        kind = _node_class(kind, kind)
        if kind not in (ScalarNode, SequenceNode, MappingNode) \
                and kind is not None:
            raise ResolverError("Invalid node kind: %s" % (kind,))
        cls.yaml_path_resolvers[tuple(new_path), kind] = tag

    @staticmethod
    def check_path_element(element, parent, index):
        node_check, index_check = element
        if isinstance(node_check, str):
            if parent.tag != node_check:
                return False
        elif node_check is not None:
            if not isinstance(parent, node_check):
                return False
        if index_check is True and index is not None:
            return False
        if (index_check is False or index_check is None) and index is None:
            return False
        if isinstance(index_check, str):
            if not (isinstance(index, ScalarNode) and index_check == index.value):
                return False
        elif isinstance(index_check, int) and not isinstance(index_check, bool):
            if index_check != index:
                return False
        return True

    def match_path(self, path):
        """Return {kind: tag} for path resolvers whose path is exactly ``path``."""
        exact_paths = {}
        depth = len(path)
        for (resolver_path, kind), tag in self.yaml_path_resolvers.items():
            if len(resolver_path) != depth:
                continue
            if all(self.check_path_element(element, parent, index)
                   for element, (parent, index) in zip(resolver_path, path)):
                exact_paths[kind] = tag
        return exact_paths

    def resolve(self, kind, value, implicit, path=()):
        """Resolve the tag for a node of ``kind`` located at ``path``.

        For scalars ``implicit`` is a pair: the first item enables the
        content-based implicit resolvers, the second is informational.
        For collections it is a single boolean and is ignored.
        """
        if kind is ScalarNode and implicit[0]:
            if value == '':
                resolvers = self.yaml_implicit_resolvers.get('', [])
            else:
                resolvers = self.yaml_implicit_resolvers.get(value[0], [])
            wildcard_resolvers = self.yaml_implicit_resolvers.get(None, [])
            for tag, regexp in resolvers + wildcard_resolvers:
                if regexp.match(value):
                    return tag
        if self.yaml_path_resolvers:
            exact_paths = self.match_path(path)
            if kind in exact_paths:
                return exact_paths[kind]
            if None in exact_paths:
                return exact_paths[None]
        if kind is ScalarNode:
            return self.DEFAULT_SCALAR_TAG
        elif kind is SequenceNode:
            return self.DEFAULT_SEQUENCE_TAG
        elif kind is MappingNode:
            return self.DEFAULT_MAPPING_TAG
        raise ResolverError("Invalid node kind: %s" % (kind,))


def _node_class(check, default):
    if check is str:
        return ScalarNode
    elif check is list:
        return SequenceNode
    elif check is dict:
        return MappingNode
    return default


class Resolver(BaseResolver):
    """YAML 1.1 resolver with implicit resolvers for the common scalar types."""
    pass


Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r'''^(?:yes|Yes|YES|no|No|NO
                    |true|True|TRUE|false|False|FALSE
                    |on|On|ON|off|Off|OFF)$''', re.X),
    list('yYnNtTfFoO'))

Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:float',
    re.compile(r'''^(?:[-+]?(?:[0-9][0-9_]*)\.[0-9_]*(?:[eE][-+][0-9]+)?
                    |\.[0-9][0-9_]*(?:[eE][-+][0-9]+)?
                    |[-+]?[0-9][0-9_]*(?::[0-5]?[0-9])+\.[0-9_]*
                    |[-+]?\.(?:inf|Inf|INF)
                    |\.(?:nan|NaN|NAN))$''', re.X),
    list('-+0123456789.'))

Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:int',
    re.compile(r'''^(?:[-+]?0b[0-1_]+
                    |[-+]?0[0-7_]+
                    |[-+]?(?:0|[1-9][0-9_]*)
                    |[-+]?0x[0-9a-fA-F_]+
                    |[-+]?[1-9][0-9_]*(?::[0-5]?[0-9])+)$''', re.X),
    list('-+0123456789'))

Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:merge',
    re.compile(r'^(?:<<)$'),
    ['<'])

Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:null',
    re.compile(r'''^(?: ~
                    |null|Null|NULL
                    | )$''', re.X),
    ['~', 'n', 'N', ''])

Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:timestamp',
    re.compile(r'''^(?:[0-9][0-9][0-9][0-9]-[0-9][0-9]-[0-9][0-9]
                    |[0-9][0-9][0-9][0-9] -[0-9][0-9]? -[0-9][0-9]?
                     (?:[Tt]|[ \t]+)[0-9][0-9]?
                     :[0-9][0-9] :[0-9][0-9] (?:\.[0-9]*)?
                     (?:[ \t]*(?:Z|[-+][0-9][0-9]?(?::[0-9][0-9])?))?)$''', re.X),
    list('0123456789'))

Resolver.add_implicit_resolver(
    'tag:yaml.org,2002:value',
    re.compile(r'^(?:=)$'),
    ['='])
