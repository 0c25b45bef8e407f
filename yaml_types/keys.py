"""Mapping key materialization.

A key built from a YAML collection cannot be used as a dict key directly,
and turning it into text through ``str()`` would call behaviour that the
document itself supplied. Keys are therefore described structurally: the
description depends only on the exact type of the key and on the contents
of its containers. No method of the key is ever called.
"""

import datetime
import re
import types

from yaml_types.absent import AbsentType

MAPPING_KEY = '<mapping>'
OBJECT_KEY = '<object>'

_SCALAR_TYPES = (str, int, float, bool, type(None))
_SEQUENCE_TYPES = (list, tuple)
_DATE_TYPES = (datetime.date, datetime.datetime)
_KEPT_TYPES = _DATE_TYPES + (bytes, re.Pattern, types.FunctionType, AbsentType)


def describe(value):
    """Return the text a value contributes to a sequence key."""
    kind = type(value)
    if kind is str:
        return value
    if value is None:
        return 'null'
    if kind is bool:
        return 'true' if value else 'false'
    if kind is int or kind is float:
        return repr(value)
    if kind is dict:
        return MAPPING_KEY
    if kind in _SEQUENCE_TYPES:
        return ','.join(describe(item) for item in value)
    if kind in _DATE_TYPES:
        return kind.isoformat(value)
    return OBJECT_KEY


def materialize(key):
    """Return the value a constructed key is stored under.

    Plain scalars and a closed set of loader-built hashable values are kept
    as they are. Mappings become ``'<mapping>'``, sequences the comma-joined
    descriptions of their items, and anything else ``'<object>'``.
    """
    kind = type(key)
    if kind in _SCALAR_TYPES or kind in _KEPT_TYPES:
        return key
    if kind is dict:
        return MAPPING_KEY
    if kind in _SEQUENCE_TYPES:
        return describe(key)
    return OBJECT_KEY
