"""Registry of the extension value kinds.

Each kind is described by a ``TypeDef``: its tag, its short alias, the
Python type it represents, and its resolve/construct/represent functions.
The registry is an ordered, read-only collection of TypeDefs; the order is
the precedence in which tags are matched.
"""

import logging
import re
import types
from collections import namedtuple
from types import MappingProxyType

from yaml_types import absent, function, regexp
from yaml_types.constructor import construct_extension
from yaml_types.representer import represent_extension

logger = logging.getLogger(__name__)


class TypeDef(namedtuple('TypeDef', [
        'kind', 'tag', 'aliases', 'instance_type',
        'resolve', 'construct', 'represent'])):
    """Resolve/construct/represent triple of one value kind.

    Attributes:
        kind: Short name of the kind ('absent', 'regexp', 'function')
        tag: Full tag URI
        aliases: Other tags accepted on load
        instance_type: Python type handled by ``represent``
        resolve: ``resolve(text) -> bool``
        construct: ``construct(text) -> value``
        represent: ``represent(value, width) -> TaggedScalar``
    """

    __slots__ = ()

    @property
    def tags(self):
        """The full tag followed by the aliases."""
        return (self.tag,) + tuple(self.aliases)

    def matches(self, tag):
        return tag == self.tag or tag in self.aliases


ABSENT = TypeDef(
    kind='absent',
    tag=absent.TAG,
    aliases=(absent.ALIAS,),
    instance_type=absent.AbsentType,
    resolve=absent.resolve,
    construct=absent.construct,
    represent=absent.represent,
)

REGEXP = TypeDef(
    kind='regexp',
    tag=regexp.TAG,
    aliases=(regexp.ALIAS,),
    instance_type=re.Pattern,
    resolve=regexp.resolve,
    construct=regexp.construct,
    represent=regexp.represent,
)

FUNCTION = TypeDef(
    kind='function',
    tag=function.TAG,
    aliases=(function.ALIAS,),
    instance_type=types.FunctionType,
    resolve=function.resolve,
    construct=function.construct,
    represent=function.represent,
)


class Registry:
    """Ordered, read-only collection of TypeDefs."""

    __slots__ = ('_types', '_by_kind')

    def __init__(self, typedefs):
        typedefs = tuple(typedefs)
        by_kind = {}
        for typedef in typedefs:
            if typedef.kind in by_kind:
                raise ValueError("duplicate kind %r" % typedef.kind)
            by_kind[typedef.kind] = typedef
        self._types = typedefs
        self._by_kind = MappingProxyType(by_kind)

    @property
    def all(self):
        """All TypeDefs in precedence order."""
        return self._types

    @property
    def kinds(self):
        """Read-only mapping of kind name to TypeDef."""
        return self._by_kind

    def get(self, kind):
        """Return the TypeDef of *kind*; raises KeyError if unknown."""
        return self._by_kind[kind]

    def lookup(self, tag):
        """Return the first TypeDef accepting *tag*, or None."""
        for typedef in self._types:
            if typedef.matches(tag):
                return typedef
        return None

    def resolve(self, tag, data):
        """Return True if *tag* is an extension tag that applies to *data*."""
        typedef = self.lookup(tag)
        return typedef is not None and typedef.resolve(data)

    def __iter__(self):
        return iter(self._types)

    def __len__(self):
        return len(self._types)

    def __contains__(self, kind):
        return kind in self._by_kind

    def __repr__(self):
        return "Registry(%r)" % (tuple(self._by_kind),)


REGISTRY = Registry((ABSENT, REGEXP, FUNCTION))
ALL = REGISTRY.all
TYPES = REGISTRY.kinds


def register(typedef, Loader, Dumper):
    """Install one TypeDef into a PyYAML loader and dumper class.

    The constructor is added for the full tag and for every alias.
    Either class may be None to skip that side.
    """
    if Loader is not None:
        def construct(loader, node):
            return construct_extension(loader, typedef, node)
        for tag in typedef.tags:
            Loader.add_constructor(tag, construct)
    if Dumper is not None:
        def represent(dumper, data):
            return represent_extension(dumper, typedef, data)
        Dumper.add_representer(typedef.instance_type, represent)
    logger.debug("registered %s (%s) on %s/%s", typedef.kind, typedef.tag,
                 getattr(Loader, '__name__', None),
                 getattr(Dumper, '__name__', None))
    return typedef


def register_all(Loader, Dumper, kinds=ALL):
    """Install several TypeDefs (all of them by default).

    Args:
        Loader: PyYAML loader class
        Dumper: PyYAML dumper class
        kinds: TypeDefs or kind names to install

    Returns:
        Tuple of the installed TypeDefs
    """
    installed = []
    for typedef in kinds:
        if isinstance(typedef, str):
            typedef = REGISTRY.get(typedef)
        installed.append(register(typedef, Loader, Dumper))
    return tuple(installed)
