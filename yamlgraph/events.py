"""YAML event classes.

A serialized document graph is a flat, ordered list of these events:

    StreamStartEvent
        DocumentStartEvent
            (ScalarEvent | AliasEvent
             | SequenceStartEvent ... SequenceEndEvent
             | MappingStartEvent ... MappingEndEvent)
        DocumentEndEvent
        ...
    StreamEndEvent
"""


class Event:

    def __init__(self, start_mark=None, end_mark=None):
        self.start_mark = start_mark
        self.end_mark = end_mark

    def __repr__(self):
        attributes = [key for key in ('anchor', 'tag', 'implicit', 'value')
                      if hasattr(self, key)]
        arguments = ', '.join('%s=%r' % (key, getattr(self, key))
                              for key in attributes)
        return '%s(%s)' % (self.__class__.__name__, arguments)


class NodeEvent(Event):

    def __init__(self, anchor, start_mark=None, end_mark=None):
        super().__init__(start_mark, end_mark)
        self.anchor = anchor


class CollectionStartEvent(NodeEvent):

    def __init__(self, anchor, tag, implicit, start_mark=None, end_mark=None,
                 flow_style=None):
        super().__init__(anchor, start_mark, end_mark)
        self.tag = tag
        self.implicit = implicit
        self.flow_style = flow_style


class CollectionEndEvent(Event):
    pass


class StreamStartEvent(Event):

    def __init__(self, start_mark=None, end_mark=None, encoding=None):
        super().__init__(start_mark, end_mark)
        self.encoding = encoding


class StreamEndEvent(Event):
    pass


class DocumentStartEvent(Event):

    def __init__(self, start_mark=None, end_mark=None, explicit=None,
                 version=None, tags=None):
        super().__init__(start_mark, end_mark)
        self.explicit = explicit
        self.version = version
        self.tags = tags


class DocumentEndEvent(Event):

    def __init__(self, start_mark=None, end_mark=None, explicit=None):
        super().__init__(start_mark, end_mark)
        self.explicit = explicit


class AliasEvent(NodeEvent):
    pass


class ScalarEvent(NodeEvent):
    """Scalar event.

    ``implicit`` is a pair: whether the tag may be omitted for a plain
    scalar (content-based inference), and whether it may be omitted for a
    non-plain scalar (kind default).
    """

    def __init__(self, anchor, tag, implicit, value, start_mark=None,
                 end_mark=None, style=None):
        super().__init__(anchor, start_mark, end_mark)
        self.tag = tag
        self.implicit = implicit
        self.value = value
        self.style = style


class SequenceStartEvent(CollectionStartEvent):
    pass


class SequenceEndEvent(CollectionEndEvent):
    pass


class MappingStartEvent(CollectionStartEvent):
    pass


class MappingEndEvent(CollectionEndEvent):
    pass
