"""Tests for event sinks and event stream validation."""

import pytest

from yamlgraph import (
    EventCollector, EventValidator, EmitterError, validate_events,
    StreamStartEvent, StreamEndEvent, DocumentStartEvent, DocumentEndEvent,
    AliasEvent, ScalarEvent, SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)


def _scalar(value='x', anchor=None, tag=None, implicit=(True, True)):
    return ScalarEvent(anchor=anchor, tag=tag, implicit=implicit, value=value)


def _stream(*body):
    return [StreamStartEvent(), DocumentStartEvent(), *body,
            DocumentEndEvent(), StreamEndEvent()]


class TestValidEvents:

    def test_scalar_document(self):
        validate_events(_stream(_scalar()))

    def test_nested_collections(self):
        validate_events(_stream(
            MappingStartEvent(anchor=None, tag=None, implicit=True),
            _scalar('key'),
            SequenceStartEvent(anchor='id0001', tag=None, implicit=True),
            _scalar('item'),
            AliasEvent('id0001'),
            SequenceEndEvent(),
            MappingEndEvent(),
        ))

    def test_empty_stream(self):
        validate_events([StreamStartEvent(), StreamEndEvent()])

    def test_anchors_reset_between_documents(self):
        """The same anchor may be defined again in the next document."""
        validate_events([
            StreamStartEvent(),
            DocumentStartEvent(), _scalar(anchor='id0001'), DocumentEndEvent(),
            DocumentStartEvent(), _scalar(anchor='id0001'), DocumentEndEvent(),
            StreamEndEvent(),
        ])


class TestInvalidEvents:

    def test_missing_stream_start(self):
        with pytest.raises(EmitterError, match="expected StreamStartEvent"):
            validate_events([DocumentStartEvent()])

    def test_event_after_stream_end(self):
        with pytest.raises(EmitterError, match="expected nothing"):
            validate_events([StreamStartEvent(), StreamEndEvent(), StreamEndEvent()])

    def test_node_outside_document(self):
        with pytest.raises(EmitterError, match="expected DocumentStartEvent"):
            validate_events([StreamStartEvent(), _scalar()])

    def test_empty_document(self):
        with pytest.raises(EmitterError, match="expected a node"):
            validate_events(_stream())

    def test_two_root_nodes(self):
        with pytest.raises(EmitterError, match="expected DocumentEndEvent"):
            validate_events(_stream(_scalar('a'), _scalar('b')))

    def test_unclosed_collection(self):
        with pytest.raises(EmitterError, match="inside collection"):
            validate_events(_stream(SequenceStartEvent(anchor=None, tag=None, implicit=True)))

    def test_mismatched_end(self):
        with pytest.raises(EmitterError, match="unexpected MappingEndEvent"):
            validate_events(_stream(
                SequenceStartEvent(anchor=None, tag=None, implicit=True),
                MappingEndEvent(),
            ))

    def test_undefined_alias(self):
        with pytest.raises(EmitterError, match="undefined alias"):
            validate_events(_stream(AliasEvent('id0001')))

    def test_alias_without_anchor(self):
        with pytest.raises(EmitterError, match="anchor is not specified"):
            validate_events(_stream(AliasEvent(None)))

    def test_duplicate_anchor(self):
        with pytest.raises(EmitterError, match="duplicate anchor"):
            validate_events(_stream(
                SequenceStartEvent(anchor='a', tag=None, implicit=True),
                _scalar(anchor='a'),
                SequenceEndEvent(),
            ))

    def test_scalar_needs_tag(self):
        with pytest.raises(EmitterError, match="tag is not specified"):
            validate_events(_stream(_scalar(implicit=(False, False))))

    def test_collection_needs_tag(self):
        with pytest.raises(EmitterError, match="tag is not specified"):
            validate_events(_stream(
                MappingStartEvent(anchor=None, tag=None, implicit=False),
                MappingEndEvent(),
            ))

    def test_unsupported_version(self):
        with pytest.raises(EmitterError, match="unsupported YAML version"):
            validate_events([StreamStartEvent(), DocumentStartEvent(version=(2, 0))])

    def test_stream_not_closed(self):
        with pytest.raises(EmitterError, match="not closed"):
            validate_events([StreamStartEvent()])


class TestEventCollector:

    def test_records_in_order(self):
        sink = EventCollector()
        events = _stream(_scalar())
        for event in events:
            sink.emit(event)
        assert sink.events == events
        assert list(sink) == events
        assert len(sink) == 5
        assert sink.validator is None

    def test_validating_collector_rejects_before_recording(self):
        sink = EventCollector(validate=True)
        sink.emit(StreamStartEvent())
        with pytest.raises(EmitterError):
            sink.emit(_scalar())
        assert len(sink) == 1

    def test_validator_state(self):
        validator = EventValidator()
        assert validator.state == 'expect_stream_start'
        validator.feed(StreamStartEvent())
        validator.feed(DocumentStartEvent())
        assert validator.state == 'in_document'
