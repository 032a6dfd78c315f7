"""
yamlgraph - serialize YAML node graphs into event streams

A YAML document, once parsed and composed, is a graph of scalar, sequence
and mapping nodes. Nodes may be shared, and the graph may be cyclic. This
package walks such a graph and produces the flat event stream a YAML
emitter consumes: shared nodes are expanded once with an anchor and
referenced by aliases afterwards, and each tag is flagged implicit when a
reader would infer it anyway.

Example:
    >>> from yamlgraph import ScalarNode, SequenceNode, serialize
    >>> item = ScalarNode('tag:yaml.org,2002:str', 'x')
    >>> seq = SequenceNode('tag:yaml.org,2002:seq', [item, item])
    >>> [type(e).__name__ for e in serialize(seq)][2:6]
    ['SequenceStartEvent', 'ScalarEvent', 'AliasEvent', 'SequenceEndEvent']
"""

from yamlgraph.error import (
    Mark, YAMLError, SerializerError, EmitterError, ResolverError, ConfigError,
)
from yamlgraph.nodes import (
    Node, ScalarNode, CollectionNode, SequenceNode, MappingNode,
)
from yamlgraph.events import (
    Event, NodeEvent, CollectionStartEvent, CollectionEndEvent,
    StreamStartEvent, StreamEndEvent, DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent, SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)
from yamlgraph.config import SerializerConfig
from yamlgraph.resolver import BaseResolver, Resolver
from yamlgraph.anchors import AnchorTable, AnchorPlanner
from yamlgraph.serializer import Serializer
from yamlgraph.sink import EventCollector, EventValidator, validate_events

__version__ = '0.1.0'


def serialize_all(nodes, emitter=None, Resolver=Resolver, **options):
    """Serialize a sequence of node graphs as one multi-document stream.

    Options are SerializerConfig options (explicit_start, explicit_end,
    use_version, version, use_header, tags, explicit_types, anchor_format,
    encoding), plus ``ignore_anchor``, a predicate exempting nodes from
    anchoring.

    Returns the list of events if no emitter is given, otherwise None.
    """
    ignore_anchor = options.pop('ignore_anchor', None)
    config = SerializerConfig.from_options(options)
    collector = None
    if emitter is None:
        collector = emitter = EventCollector()
    serializer = Serializer(emitter, Resolver(), config, ignore_anchor=ignore_anchor)
    serializer.open()
    for node in nodes:
        serializer.serialize(node)
    serializer.close()
    if collector is not None:
        return collector.events


def serialize(node, emitter=None, Resolver=Resolver, **options):
    """Serialize a node graph as a single-document stream."""
    return serialize_all([node], emitter=emitter, Resolver=Resolver, **options)


__all__ = [
    'Mark', 'YAMLError', 'SerializerError', 'EmitterError', 'ResolverError',
    'ConfigError',
    'Node', 'ScalarNode', 'CollectionNode', 'SequenceNode', 'MappingNode',
    'Event', 'NodeEvent', 'CollectionStartEvent', 'CollectionEndEvent',
    'StreamStartEvent', 'StreamEndEvent', 'DocumentStartEvent',
    'DocumentEndEvent', 'AliasEvent', 'ScalarEvent', 'SequenceStartEvent',
    'SequenceEndEvent', 'MappingStartEvent', 'MappingEndEvent',
    'SerializerConfig', 'BaseResolver', 'Resolver',
    'AnchorTable', 'AnchorPlanner', 'Serializer',
    'EventCollector', 'EventValidator', 'validate_events',
    'serialize', 'serialize_all',
]
