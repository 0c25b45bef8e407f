"""The explicit "absent" value.

``Absent`` marks a slot that is declared as holding no value. It differs
from ``None`` (a null value) and from a missing key (no slot at all)::

    - !!python/absent
    - !!python/absent 'anything here is ignored'
"""

from yaml_types.nodes import TaggedScalar

TAG = 'tag:yaml.org,2002:python/absent'
ALIAS = '!absent'


class AbsentType:
    """Type of the ``Absent`` singleton."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'Absent'

    def __bool__(self):
        return False

    def __reduce__(self):
        return 'Absent'

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Absent = AbsentType()


def resolve(data):
    return True


def construct(data):
    return Absent


def represent(data, width=80):
    return TaggedScalar(TAG, '', style='')


def is_absent(value):
    """Return True if *value* is the ``Absent`` sentinel."""
    return value is Absent
