"""YAML node graph classes.

Nodes are compared and hashed by identity: two separately constructed
nodes with equal content are distinct, and the same node instance reached
along two paths is what the serializer turns into an anchor and aliases.
"""


class Node:
    """Base class for YAML nodes."""
    id = None

    def __init__(self, tag, value, start_mark=None, end_mark=None):
        self.tag = tag
        self.value = value
        self.start_mark = start_mark
        self.end_mark = end_mark

    def __repr__(self):
        # Never recurse into children; graphs may be cyclic.
        return '%s(tag=%r, value=%s)' % (
            self.__class__.__name__, self.tag, self._value_repr())

    def _value_repr(self):
        return repr(self.value)


class ScalarNode(Node):
    """Scalar node (strings, numbers, etc.)."""
    id = 'scalar'

    def __init__(self, tag, value, start_mark=None, end_mark=None, style=None):
        super().__init__(tag, value, start_mark, end_mark)
        self.style = style


class CollectionNode(Node):
    """Base class for collection nodes."""

    def __init__(self, tag, value, start_mark=None, end_mark=None, flow_style=None):
        super().__init__(tag, value, start_mark, end_mark)
        self.flow_style = flow_style

    def _value_repr(self):
        return '<%d items>' % len(self.value)


class SequenceNode(CollectionNode):
    """Sequence node; value is a list of nodes."""
    id = 'sequence'

    def children(self):
        return list(self.value)


class MappingNode(CollectionNode):
    """Mapping node; value is a list of (key, value) node pairs in insertion order."""
    id = 'mapping'

    def children(self):
        result = []
        for key_node, value_node in self.value:
            result.append(key_node)
            result.append(value_node)
        return result
