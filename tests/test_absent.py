"""Tests for !!python/absent values."""

import copy
import pickle

import pytest

import yaml_types
from yaml_types import absent
from yaml_types.absent import Absent, AbsentType


class TestSentinel:
    """The Absent singleton."""

    def test_singleton(self):
        assert AbsentType() is Absent

    def test_falsy(self):
        assert not Absent

    def test_repr(self):
        assert repr(Absent) == 'Absent'

    def test_distinct_from_none(self):
        assert Absent is not None
        assert Absent != None  # noqa: E711

    def test_copy_keeps_identity(self):
        assert copy.copy(Absent) is Absent
        assert copy.deepcopy([Absent])[0] is Absent

    def test_pickle_keeps_identity(self):
        assert pickle.loads(pickle.dumps(Absent)) is Absent

    def test_is_absent(self):
        assert yaml_types.is_absent(Absent)
        assert not yaml_types.is_absent(None)


class TestLoad:
    """Loading tagged absent scalars."""

    def test_sequence_item(self):
        """The tag alone is not an error."""
        assert yaml_types.load('- !!python/absent')[0] is Absent

    def test_flow_sequence(self):
        """[!!python/absent] holds one element, which is not None."""
        data = yaml_types.load('[!!python/absent]')
        assert len(data) == 1
        assert data[0] is Absent
        assert data != [None]

    @pytest.mark.parametrize('text, expected', [
        ('[!!python/absent, 1]', [Absent, 1]),
        ('[1, !absent]', [1, Absent]),
        ('{a: !absent}', {'a': Absent}),
        ('{a: [!!python/absent], b: !absent}', {'a': [Absent], 'b': Absent}),
        ('[!<tag:yaml.org,2002:python/absent>]', [Absent]),
        ("[!!python/absent '', 2]", [Absent, 2]),
    ])
    def test_flow_collections(self, text, expected):
        """A tag inside a flow collection ends at a flow indicator."""
        assert yaml_types.load(text) == expected

    @pytest.mark.parametrize('text', ["''", "'foobar'", 'hello world', '42'])
    def test_text_ignored(self, text):
        assert yaml_types.load('- !!python/absent %s' % text) == [Absent]

    def test_alias_tag(self):
        assert yaml_types.load('x: !absent') == {'x': Absent}

    def test_distinct_from_missing_key(self):
        data = yaml_types.load('a: !!python/absent\nb: null\n')
        assert 'a' in data
        assert data['a'] is Absent
        assert data['b'] is None
        assert 'c' not in data

    def test_mapping_node_not_applicable(self):
        with pytest.raises(yaml_types.TagNotApplicable):
            yaml_types.load('!!python/absent {a: 1}')


class TestRepresent:
    """Dumping Absent."""

    def test_bare_tag(self):
        assert absent.represent(Absent) == \
            yaml_types.TaggedScalar(absent.TAG, '', style='')

    def test_sequence(self):
        assert yaml_types.dump([Absent]) == '- !!python/absent\n'

    def test_mapping_value(self):
        assert yaml_types.dump({'a': Absent}) == 'a: !!python/absent\n'

    def test_never_aliased(self):
        assert '&' not in yaml_types.dump([Absent, Absent])

    def test_round_trip(self):
        data = [Absent, None, {'key': Absent}, [Absent]]
        loaded = yaml_types.load(yaml_types.dump(data))
        assert loaded == data
        assert loaded[0] is Absent
        assert loaded[2]['key'] is Absent

    def test_top_level(self):
        assert yaml_types.load(yaml_types.dump(Absent)) is Absent

    def test_flow_style(self):
        """Flow collections get an empty quoted scalar after the tag."""
        text = yaml_types.dump([1, Absent, 2], default_flow_style=True)
        assert text == "[1, !!python/absent '', 2]\n"
        assert yaml_types.load(text) == [1, Absent, 2]

    @pytest.mark.parametrize('data', [
        {'k': [Absent]},
        [[Absent], {'a': Absent}],
        {'a': Absent, 'b': [Absent, None]},
    ])
    def test_flow_round_trip(self, data):
        text = yaml_types.dump(data, default_flow_style=True)
        assert yaml_types.load(text) == data
