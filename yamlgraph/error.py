"""Error types and source positions used by yamlgraph."""


class Mark:
    """Represents a position in a YAML stream.

    Attributes:
        name: The name of the stream (e.g., filename or '<string>')
        index: Character index in the stream
        line: Line number (0-indexed)
        column: Column number (0-indexed)
    """

    def __init__(self, name, index, line, column):
        self.name = name
        self.index = index
        self.line = line
        self.column = column

    def __str__(self):
        return "  in \"%s\", line %d, column %d" % (
            self.name, self.line + 1, self.column + 1)


class YAMLError(Exception):
    """Base exception for yamlgraph errors."""
    pass


class SerializerError(YAMLError):
    """Serializer error (state violations, unlabelled cycles)."""
    pass


class EmitterError(YAMLError):
    """Event sink error (invalid event sequence, undefined alias)."""
    pass


class ResolverError(YAMLError):
    """Invalid implicit or path resolver registration."""
    pass


class ConfigError(YAMLError, ValueError):
    """Invalid serializer option."""
    pass
