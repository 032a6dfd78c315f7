"""Node graph serializer.

Serializer turns node graphs into events and hands them, in order, to an
event sink (any object with an ``emit(event)`` method):

    serializer = Serializer(EventCollector())
    serializer.open()
    serializer.serialize(root)      # once per document
    serializer.close()

Each serialize() call is an independent document: anchors are planned
from scratch, so the same node may be anchored ``id0001`` in every
document of a stream.
"""

import logging

from yamlgraph.anchors import AnchorPlanner
from yamlgraph.config import SerializerConfig
from yamlgraph.error import SerializerError
from yamlgraph.events import (
    StreamStartEvent, StreamEndEvent,
    DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)
from yamlgraph.nodes import ScalarNode, SequenceNode, MappingNode
from yamlgraph.resolver import Resolver

logger = logging.getLogger(__name__)


class _DocumentState:
    """Per-document bookkeeping for the emission pass."""

    def __init__(self, anchors):
        self.anchors = anchors
        self.serialized_nodes = set()
        self.ancestors = set()


class Serializer:
    """Serializes node graphs into a stream of events."""

    def __init__(self, emitter, resolver=None, config=None, ignore_anchor=None):
        self.emitter = emitter
        self.resolver = resolver if resolver is not None else Resolver()
        self.config = config if config is not None else SerializerConfig()
        self._ignore_anchor = ignore_anchor
        self._opened = False
        self._closed = False

    @property
    def opened(self):
        return self._opened

    @property
    def closed(self):
        return self._closed

    def ignore_anchor(self, node):
        """Return True if ``node`` must never receive an anchor."""
        if self._ignore_anchor is not None:
            return self._ignore_anchor(node)
        return False

    def open(self):
        if self._closed:
            raise SerializerError("serializer is closed")
        if self._opened:
            raise SerializerError("serializer is already opened")
        self.emitter.emit(StreamStartEvent(encoding=self.config.encoding))
        self._opened = True
        logger.debug("Serializer opened")

    def close(self):
        if self._closed:
            return
        if not self._opened:
            raise SerializerError("serializer is not opened")
        self.emitter.emit(StreamEndEvent())
        self._closed = True
        logger.debug("Serializer closed")

    def serialize(self, node):
        """Serialize the graph rooted at ``node`` as one document."""
        if self._closed:
            raise SerializerError("serializer is closed")
        if not self._opened:
            raise SerializerError("serializer is not opened")
        config = self.config
        self.emitter.emit(DocumentStartEvent(
            explicit=config.explicit_start, version=config.version_info,
            tags=config.document_tags))
        planner = AnchorPlanner(config.anchor_format, self.ignore_anchor)
        anchors = planner.plan(node)
        logger.debug(f"Document planned: {len(anchors)} nodes, "
                     f"{planner.last_anchor_id} anchors")
        self._serialize_node(_DocumentState(anchors), node, ())
        self.emitter.emit(DocumentEndEvent(explicit=config.explicit_end))

    def _implicit(self, node, path):
        if self.config.explicit_types:
            return (False, False) if isinstance(node, ScalarNode) else False
        if isinstance(node, ScalarNode):
            detected_tag = self.resolver.resolve(
                ScalarNode, node.value, (True, False), path)
            default_tag = self.resolver.resolve(
                ScalarNode, node.value, (False, True), path)
            return (node.tag == detected_tag, node.tag == default_tag)
        kind = SequenceNode if isinstance(node, SequenceNode) else MappingNode
        return node.tag == self.resolver.resolve(kind, None, True, path)

    def _serialize_node(self, state, node, path):
        if not isinstance(node, (ScalarNode, SequenceNode, MappingNode)):
            raise SerializerError("cannot serialize %r" % (node,))
        alias = state.anchors.get(node)
        node_id = id(node)
        if node_id in state.serialized_nodes:
            if alias is not None:
                self.emitter.emit(AliasEvent(alias))
                return
            if node_id in state.ancestors:
                raise SerializerError(
                    "cannot serialize a recursive %s node without an anchor"
                    % node.id)
        state.serialized_nodes.add(node_id)
        implicit = self._implicit(node, path)
        if isinstance(node, ScalarNode):
            self.emitter.emit(ScalarEvent(
                alias, node.tag, implicit, node.value,
                start_mark=node.start_mark, end_mark=node.end_mark,
                style=node.style))
            return
        state.ancestors.add(node_id)
        if isinstance(node, SequenceNode):
            self.emitter.emit(SequenceStartEvent(
                alias, node.tag, implicit,
                start_mark=node.start_mark, end_mark=node.end_mark,
                flow_style=node.flow_style))
            for index, item in enumerate(node.value):
                self._serialize_node(state, item, path + ((node, index),))
            self.emitter.emit(SequenceEndEvent())
        elif isinstance(node, MappingNode):
            self.emitter.emit(MappingStartEvent(
                alias, node.tag, implicit,
                start_mark=node.start_mark, end_mark=node.end_mark,
                flow_style=node.flow_style))
            for key_node, value_node in node.value:
                self._serialize_node(state, key_node, path + ((node, None),))
                self._serialize_node(state, value_node, path + ((node, key_node),))
            self.emitter.emit(MappingEndEvent())
        state.ancestors.discard(node_id)
