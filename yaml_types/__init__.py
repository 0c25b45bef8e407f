"""Function, regexp and absent values for YAML documents.

This package extends PyYAML's safe schema with three tagged value kinds:

    - ``!!python/function``: a function given by its ``def`` or ``lambda``
      source. Loading never runs the source; only calling the result does.
    - ``!!python/regexp``: a compiled regular expression written as
      ``/body/flags``.
    - ``!!python/absent``: the ``Absent`` sentinel, an explicitly declared
      non-value distinct from ``None``.

Usage:
    >>> import yaml_types
    >>> data = yaml_types.load('''
    ... add: !!python/function 'lambda a, b: a + b'
    ... word: !!python/regexp /w[aeiou]rd/i
    ... gone: !!python/absent
    ... ''')
    >>> data['add'](2, 3)
    5
    >>> bool(data['word'].match('WORD'))
    True
    >>> data['gone'] is yaml_types.Absent
    True
    >>> print(yaml_types.dump([yaml_types.Absent]), end='')
    - !!python/absent

The loader and dumper classes can be used with PyYAML directly
(``yaml.load(text, Loader=yaml_types.SafeLoader)``), and the kinds can be
installed into other PyYAML classes with ``register_all``.
"""

import yaml
from yaml.composer import Composer
from yaml.parser import Parser
from yaml.reader import Reader
from yaml.resolver import Resolver
from yaml.serializer import Serializer

from yaml_types.absent import Absent, AbsentType, is_absent
from yaml_types.constructor import SafeConstructor, construct_extension
from yaml_types.emitter import Emitter
from yaml_types.error import (
    ConstructionError,
    EmptyCallableBody,
    InvalidFlag,
    InvalidPattern,
    MalformedCallableSource,
    RepresenterError,
    TagNotApplicable,
    UnterminatedPattern,
)
from yaml_types.keys import MAPPING_KEY, OBJECT_KEY
from yaml_types.keys import materialize as materialize_key
from yaml_types.nodes import TaggedScalar
from yaml_types.representer import SafeRepresenter, represent_extension
from yaml_types.resolver import (
    ABSENT,
    ALL,
    FUNCTION,
    REGEXP,
    REGISTRY,
    TYPES,
    Registry,
    TypeDef,
    register,
    register_all,
)
from yaml_types.scanner import Scanner

__version__ = '1.0.0'


class SafeLoader(Reader, Scanner, Parser, Composer, SafeConstructor, Resolver):
    """PyYAML safe loader that also understands the extension tags."""

    def __init__(self, stream):
        Reader.__init__(self, stream)
        Scanner.__init__(self)
        Parser.__init__(self)
        Composer.__init__(self)
        SafeConstructor.__init__(self)
        Resolver.__init__(self)


class SafeDumper(Emitter, Serializer, SafeRepresenter, Resolver):
    """PyYAML safe dumper that also writes the extension kinds."""

    def __init__(self, stream,
                 default_style=None, default_flow_style=False,
                 canonical=None, indent=None, width=None,
                 allow_unicode=None, line_break=None,
                 encoding=None, explicit_start=None, explicit_end=None,
                 version=None, tags=None, sort_keys=True):
        Emitter.__init__(self, stream, canonical=canonical,
                         indent=indent, width=width,
                         allow_unicode=allow_unicode, line_break=line_break)
        Serializer.__init__(self, encoding=encoding,
                            explicit_start=explicit_start,
                            explicit_end=explicit_end,
                            version=version, tags=tags)
        SafeRepresenter.__init__(self, default_style=default_style,
                                 default_flow_style=default_flow_style,
                                 sort_keys=sort_keys)
        Resolver.__init__(self)


register_all(SafeLoader, SafeDumper)


def load(stream, Loader=SafeLoader):
    """Parse the first YAML document in a stream.

    Args:
        stream: str, bytes or file-like object
        Loader: Loader class (defaults to ``SafeLoader``)

    Returns:
        The constructed Python object

    Raises:
        yaml.YAMLError: the document is malformed; extension tags raise
            the ``ConstructionError`` subclasses
    """
    return yaml.load(stream, Loader=Loader)


def load_all(stream, Loader=SafeLoader):
    """Parse all YAML documents in a stream, yielding each one."""
    return yaml.load_all(stream, Loader=Loader)


def dump(data, stream=None, Dumper=SafeDumper, **kwds):
    """Serialize a Python object into a YAML stream.

    Args:
        data: Object to serialize
        stream: File-like object to write to; if None, return a string
        Dumper: Dumper class (defaults to ``SafeDumper``)
        **kwds: PyYAML dumper options (``width``, ``indent``,
            ``default_flow_style``, ``sort_keys``, ...)
    """
    return yaml.dump_all([data], stream, Dumper=Dumper, **kwds)


def dump_all(documents, stream=None, Dumper=SafeDumper, **kwds):
    """Serialize a sequence of Python objects into a YAML stream."""
    return yaml.dump_all(documents, stream, Dumper=Dumper, **kwds)


__all__ = [
    'ABSENT',
    'ALL',
    'Absent',
    'AbsentType',
    'ConstructionError',
    'EmptyCallableBody',
    'Emitter',
    'FUNCTION',
    'InvalidFlag',
    'InvalidPattern',
    'MAPPING_KEY',
    'MalformedCallableSource',
    'OBJECT_KEY',
    'REGEXP',
    'REGISTRY',
    'Registry',
    'RepresenterError',
    'SafeConstructor',
    'SafeDumper',
    'SafeLoader',
    'SafeRepresenter',
    'Scanner',
    'TYPES',
    'TagNotApplicable',
    'TaggedScalar',
    'TypeDef',
    'UnterminatedPattern',
    'construct_extension',
    'dump',
    'dump_all',
    'is_absent',
    'load',
    'load_all',
    'materialize_key',
    'register',
    'register_all',
    'represent_extension',
]
