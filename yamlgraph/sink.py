"""Event sinks.

Anything with an ``emit(event)`` method can receive a serializer's events.
EventCollector keeps them in a list and can check, as each event arrives,
that the stream is one a text emitter would accept.
"""

from yamlgraph.error import EmitterError
from yamlgraph.events import (
    StreamStartEvent, StreamEndEvent,
    DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent, NodeEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)


class EventValidator:
    """Incremental event stream checker.

    Feed events one by one; the first event that cannot follow the ones
    before it raises EmitterError.
    """

    def __init__(self):
        self.state = 'expect_stream_start'
        self.collections = []
        self.anchors = set()
        self.has_root_node = False

    def feed(self, event):
        etype = type(event).__name__
        if self.state == 'expect_stream_start':
            if not isinstance(event, StreamStartEvent):
                raise EmitterError("expected StreamStartEvent, but got %s" % etype)
            self.state = 'expect_document_or_stream_end'
        elif self.state == 'expect_nothing':
            raise EmitterError("expected nothing, but got %s" % etype)
        elif self.state == 'expect_document_or_stream_end':
            if isinstance(event, StreamEndEvent):
                self.state = 'expect_nothing'
            elif isinstance(event, DocumentStartEvent):
                self._check_version(event)
                self.state = 'in_document'
                self.collections = []
                self.anchors = set()
                self.has_root_node = False
            else:
                raise EmitterError("expected DocumentStartEvent, but got %s" % etype)
        elif isinstance(event, DocumentEndEvent):
            if self.collections:
                raise EmitterError("unexpected DocumentEndEvent inside collection")
            if not self.has_root_node:
                raise EmitterError("expected a node, but got DocumentEndEvent")
            self.state = 'expect_document_or_stream_end'
        elif isinstance(event, (SequenceEndEvent, MappingEndEvent)):
            expected = {SequenceEndEvent: SequenceStartEvent,
                        MappingEndEvent: MappingStartEvent}[type(event)]
            if not self.collections or self.collections[-1] is not expected:
                raise EmitterError("unexpected %s" % etype)
            self.collections.pop()
        elif isinstance(event, NodeEvent):
            if self.has_root_node and not self.collections:
                raise EmitterError("expected DocumentEndEvent, but got %s" % etype)
            self.has_root_node = True
            self._check_node(event)
            if isinstance(event, (SequenceStartEvent, MappingStartEvent)):
                self.collections.append(type(event))
        else:
            raise EmitterError("unexpected %s in document" % etype)

    def finish(self):
        """Check that the stream was closed."""
        if self.state != 'expect_nothing':
            raise EmitterError("stream is not closed")

    @staticmethod
    def _check_version(event):
        if event.version is not None:
            major, minor = event.version
            if major != 1:
                raise EmitterError("unsupported YAML version: %d.%d" % (major, minor))

    def _check_node(self, event):
        etype = type(event).__name__
        if isinstance(event, AliasEvent):
            if not event.anchor:
                raise EmitterError("anchor is not specified for alias")
            if event.anchor not in self.anchors:
                raise EmitterError("found undefined alias %r" % event.anchor)
            return
        if event.anchor is not None:
            if event.anchor in self.anchors:
                raise EmitterError("found duplicate anchor %r" % event.anchor)
            self.anchors.add(event.anchor)
        if isinstance(event, ScalarEvent):
            if not event.implicit[0] and not event.implicit[1] and event.tag is None:
                raise EmitterError("tag is not specified for %s" % etype)
        elif not event.implicit and event.tag is None:
            raise EmitterError("tag is not specified for %s" % etype)


def validate_events(events):
    """Validate a complete event sequence, raising EmitterError on the first problem."""
    validator = EventValidator()
    for event in events:
        validator.feed(event)
    validator.finish()


class EventCollector:
    """Event sink that records events in order."""

    def __init__(self, validate=False):
        self.events = []
        self.validator = EventValidator() if validate else None

    def emit(self, event):
        if self.validator is not None:
            self.validator.feed(event)
        self.events.append(event)

    def __iter__(self):
        return iter(self.events)

    def __len__(self):
        return len(self.events)
