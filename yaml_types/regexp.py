"""Regular expression values (``!!python/regexp``).

Wire form is ``/body/flags``. The body may hold unescaped ``/`` characters,
so the closing delimiter is found from the end: skip the trailing run of
flag characters, and the character before it must be an unescaped ``/``::

    - !!python/regexp /fo{2,}/
    - !!python/regexp /^spec/im
    - !!python/regexp /fo/i/i      # body 'fo/i', flags 'i'
"""

import re

from yaml_types.error import (
    InvalidFlag,
    InvalidPattern,
    RepresenterError,
    UnterminatedPattern,
)
from yaml_types.nodes import TaggedScalar

TAG = 'tag:yaml.org,2002:python/regexp'
ALIAS = '!regexp'

# Flags valid for str patterns, in the order they are written out.
FLAGS = (
    ('a', re.ASCII),
    ('i', re.IGNORECASE),
    ('m', re.MULTILINE),
    ('s', re.DOTALL),
    ('u', re.UNICODE),
    ('x', re.VERBOSE),
)

FLAG_CHARS = frozenset(ch for ch, _ in FLAGS)
_FLAG_VALUES = dict(FLAGS)
_KNOWN_MASK = 0
for _ch, _flag in FLAGS:
    _KNOWN_MASK |= _flag
del _ch, _flag


def _is_escaped(text, index):
    """Return True if ``text[index]`` is preceded by an odd run of backslashes."""
    count = 0
    index -= 1
    while index >= 0 and text[index] == '\\':
        count += 1
        index -= 1
    return count % 2 == 1


def _last_unescaped_slash(text):
    index = text.rfind('/')
    while index > 0 and _is_escaped(text, index):
        index = text.rfind('/', 0, index)
    return index


def split(data):
    """Split ``/body/flags`` text into ``(body, flags)``.

    Raises:
        UnterminatedPattern: no opening ``/`` or no unescaped closing ``/``
        InvalidFlag: characters after the last unescaped ``/`` are not flags
    """
    if not data.startswith('/'):
        raise UnterminatedPattern(
            "expected a regexp starting with '/', but found %r" % data)
    end = len(data)
    while end > 1 and data[end - 1] in FLAG_CHARS:
        end -= 1
    if end > 1 and data[end - 1] == '/' and not _is_escaped(data, end - 1):
        return data[1:end - 1], data[end:]
    slash = _last_unescaped_slash(data)
    if slash > 0:
        raise InvalidFlag("unknown regexp flags %r in %r"
                          % (data[slash + 1:], data))
    raise UnterminatedPattern("regexp %r is not closed by an unescaped '/'"
                              % data)


def parse_flags(flags):
    """Turn flag characters into an ``re`` flag value."""
    value = 0
    seen = set()
    for ch in flags:
        if ch not in _FLAG_VALUES:
            raise InvalidFlag("unknown regexp flag %r" % ch)
        if ch in seen:
            raise InvalidFlag("regexp flag %r given more than once in %r"
                              % (ch, flags))
        seen.add(ch)
        value |= _FLAG_VALUES[ch]
    if 'a' in seen and 'u' in seen:
        raise InvalidFlag("regexp flags 'a' and 'u' are incompatible")
    return value


def format_flags(value):
    """Turn an ``re`` flag value into flag characters.

    The implicit ``re.UNICODE`` of str patterns is left out.
    """
    return ''.join(ch for ch, flag in FLAGS
                   if value & flag and flag != re.UNICODE)


def unescape_slashes(body):
    """Replace ``\\/`` with ``/``, leaving every other escape alone."""
    chunks = []
    index = 0
    while index < len(body):
        ch = body[index]
        if ch == '\\' and index + 1 < len(body):
            pair = body[index:index + 2]
            chunks.append('/' if pair == '\\/' else pair)
            index += 2
            continue
        chunks.append(ch)
        index += 1
    return ''.join(chunks)


def escape_slashes(body):
    """Escape every ``/`` in *body* that is not escaped already."""
    chunks = []
    index = 0
    while index < len(body):
        ch = body[index]
        if ch == '\\' and index + 1 < len(body):
            chunks.append(body[index:index + 2])
            index += 2
            continue
        chunks.append('\\/' if ch == '/' else ch)
        index += 1
    return ''.join(chunks)


def resolve(data):
    """Return True if *data* is well-formed ``/body/flags`` text."""
    if not data:
        return False
    try:
        split(data)
    except (UnterminatedPattern, InvalidFlag):
        return False
    return True


def construct(data):
    """Build a compiled pattern from ``/body/flags`` text."""
    body, flags = split(data)
    value = parse_flags(flags)
    try:
        return re.compile(unescape_slashes(body), value)
    except (re.error, RecursionError) as exc:
        raise InvalidPattern("invalid regexp %r: %s" % (data, exc)) from exc


def represent(data, width=80):
    """Rebuild ``/body/flags`` text from a compiled pattern.

    Args:
        data: Compiled str pattern
        width: Line width past which the folded style is used

    Returns:
        TaggedScalar for the pattern
    """
    if not isinstance(data.pattern, str):
        raise RepresenterError("cannot represent a bytes regexp: %r" % data)
    unknown = data.flags & ~_KNOWN_MASK
    if unknown:
        raise RepresenterError("cannot represent regexp flags %#x of %r"
                               % (unknown, data))
    text = '/%s/%s' % (escape_slashes(data.pattern), format_flags(data.flags))
    style = None
    if '\n' in text or len(text) > width:
        style = '>'
    return TaggedScalar(TAG, text, style=style)
