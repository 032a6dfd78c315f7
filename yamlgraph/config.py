"""Serializer options.

Options are read once, when a Serializer is constructed. They can be given
as keyword arguments or as a mapping via SerializerConfig.from_options(),
which also accepts the camel-case option names used by other YAML tools
(explicitStart, anchorFormat, ...).
"""

from yamlgraph.error import ConfigError


DEFAULT_VERSION = '1.1'
DEFAULT_ANCHOR_FORMAT = 'id%04d'

_ALIASES = {
    'explicitStart': 'explicit_start',
    'explicitEnd': 'explicit_end',
    'useVersion': 'use_version',
    'useHeader': 'use_header',
    'explicitTypes': 'explicit_types',
    'anchorFormat': 'anchor_format',
}


def parse_version(version):
    """Parse '<major>.<minor>' (or a 2-item sequence) into an int pair."""
    if isinstance(version, str):
        major, sep, minor = version.strip().partition('.')
        if not sep:
            raise ConfigError("version must look like '<major>.<minor>': %r" % version)
        parts = (major, minor)
    else:
        try:
            parts = tuple(version)
        except TypeError:
            raise ConfigError("invalid version: %r" % (version,)) from None
        if len(parts) != 2:
            raise ConfigError("version must have two components: %r" % (version,))
    try:
        return int(parts[0]), int(parts[1])
    except (TypeError, ValueError):
        raise ConfigError("invalid version: %r" % (version,)) from None


class SerializerConfig:
    """Construction-time options for Serializer."""

    def __init__(self, explicit_start=None, explicit_end=None, use_version=False,
                 version=DEFAULT_VERSION, use_header=False, tags=None,
                 explicit_types=False, anchor_format=None, encoding=None):
        self.explicit_start = explicit_start
        self.explicit_end = explicit_end
        self.use_version = bool(use_version)
        self.version = version
        self.use_header = bool(use_header)
        self.tags = dict(tags) if tags else None
        self.explicit_types = bool(explicit_types)
        self.anchor_format = anchor_format or DEFAULT_ANCHOR_FORMAT
        self.encoding = encoding

        self.version_info = parse_version(version) if self.use_version else None
        try:
            self.anchor_format % 1
        except (TypeError, ValueError):
            raise ConfigError(
                "anchor format must take a single integer: %r"
                % self.anchor_format) from None

    @classmethod
    def from_options(cls, options=None, **kwargs):
        """Build a config from a mapping of option names to values."""
        merged = {}
        for source in (options or {}, kwargs):
            for key, value in source.items():
                name = _ALIASES.get(key, key)
                if name not in _OPTION_NAMES:
                    raise ConfigError("unknown serializer option: %r" % key)
                merged[name] = value
        return cls(**merged)

    @property
    def document_tags(self):
        """Tag directives to announce on each document, if headers are in use."""
        return self.tags if self.use_header else None

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, ', '.join(
            '%s=%r' % (name, getattr(self, name)) for name in _OPTION_NAMES))


_OPTION_NAMES = (
    'explicit_start', 'explicit_end', 'use_version', 'version', 'use_header',
    'tags', 'explicit_types', 'anchor_format', 'encoding',
)
