"""Tests for structural mapping keys."""

import datetime
import re

import pytest

import yaml_types
from yaml_types import keys
from yaml_types.keys import MAPPING_KEY, OBJECT_KEY

HOSTILE = "!!python/function 'def hook(*args): raise RuntimeError(\"code execution\")'"
RECORDING = "!!python/function 'def hook(*args): return make_bad_thing(\"called\")'"


class TestMaterialize:
    """keys.materialize on constructed values."""

    @pytest.mark.parametrize('key', ['a', 1, 1.5, True, None])
    def test_plain_scalars_kept(self, key):
        assert keys.materialize(key) is key

    def test_mapping(self):
        assert keys.materialize({'__str__': lambda: 1}) == MAPPING_KEY

    def test_sequence(self):
        assert keys.materialize([123, {'a': 1}]) == '123,' + MAPPING_KEY

    def test_nested_sequence(self):
        assert keys.materialize([[1, 2], 3]) == '1,2,3'

    def test_sequence_scalars(self):
        assert keys.materialize([None, True, False, 1.5, 'abc']) == \
            'null,true,false,1.5,abc'

    def test_dates_in_sequence(self):
        assert keys.materialize([datetime.date(2019, 4, 5)]) == '2019-04-05'

    def test_kept_objects(self):
        pattern = re.compile('x')
        stamp = datetime.datetime(2019, 4, 5, 12, 0, 43)
        assert keys.materialize(pattern) is pattern
        assert keys.materialize(stamp) is stamp
        assert keys.materialize(yaml_types.Absent) is yaml_types.Absent

    def test_other_objects(self):
        assert keys.materialize({'a', 'b'}) == OBJECT_KEY
        assert keys.materialize([{'a'}]) == OBJECT_KEY

    def test_subclass_hooks_not_called(self):
        """Only exact types are described; hooks on subclasses never run."""
        class Loud(dict):
            def __str__(self):
                raise AssertionError('called')
            __repr__ = __format__ = __str__

        assert keys.materialize(Loud()) == OBJECT_KEY
        assert keys.materialize([Loud()]) == OBJECT_KEY


class TestLoadKeys:
    """Keys built by the loader."""

    def test_mapping_with_str_hook(self):
        data = yaml_types.load('{ __str__: %s } : key\n' % HOSTILE)
        assert data == {MAPPING_KEY: 'key'}

    def test_mapping_with_nested_class_hook(self):
        data = yaml_types.load(
            '{ __class__: { __str__: %s, __repr__: %s } } : key\n'
            % (HOSTILE, HOSTILE))
        assert data == {MAPPING_KEY: 'key'}

    def test_mapping_with_hash_hook(self):
        data = yaml_types.load('{ __hash__: %s, __eq__: %s } : key\n'
                               % (HOSTILE, HOSTILE))
        assert data == {MAPPING_KEY: 'key'}

    def test_object_inside_sequence(self):
        data = yaml_types.load(
            '? [123, { __str__: %s }]\n'
            ': key\n' % HOSTILE)
        assert data == {'123,' + MAPPING_KEY: 'key'}

    def test_hooks_never_invoked(self, bad_things):
        yaml_types.load(
            '? { __str__: %s, __format__: %s }\n'
            ': key\n'
            '? [1, { __repr__: %s }]\n'
            ': other\n' % (RECORDING, RECORDING, RECORDING))
        assert bad_things == []

    def test_timestamp_key_left_as_is(self):
        data = yaml_types.load(
            "{ !!timestamp '2019-04-05T12:00:43.467Z': 123 }\n")
        assert len(data) == 1
        key = next(iter(data))
        assert isinstance(key, datetime.datetime)
        assert key.year == 2019

    def test_plain_keys_unchanged(self):
        data = yaml_types.load('{2: a, true: b, null: c, x: d}')
        assert data == {2: 'a', True: 'b', None: 'c', 'x': 'd'}

    def test_extension_keys(self):
        data = yaml_types.load('? !!python/regexp /a+/\n: x\n'
                               '? !!python/absent\n: y\n')
        assert data == {re.compile('a+'): 'x', yaml_types.Absent: 'y'}

    def test_set_key(self):
        data = yaml_types.load('? !!set {a: null}\n: v\n')
        assert data == {OBJECT_KEY: 'v'}

    def test_merge_keys_still_work(self):
        data = yaml_types.load(
            'base: &base {x: 1, y: 1}\n'
            'derived:\n'
            '  <<: *base\n'
            '  y: 2\n')
        assert data['derived'] == {'x': 1, 'y': 2}
