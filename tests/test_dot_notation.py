"""Tests for dot-notation get, set, fill, has, forget, flatten and expand."""

from __future__ import annotations

import copy
import logging
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from arraykit import Arr, Collection


class TestGet:
    """Test suite for reading values."""

    @pytest.fixture
    def data(self) -> Dict[str, Any]:
        """Create nested test data."""
        return {
            'db': {'host': 'localhost', 'port': 3306},
            'items': [{'id': 1}, {'id': 2}],
            'flag': None,
        }

    def test_whole_container_without_key(self, data: Dict[str, Any]) -> None:
        assert Arr.get(data) is data

    def test_nested_lookup_and_default(self, data: Dict[str, Any]) -> None:
        assert Arr.get(data, 'db.port') == 3306
        assert Arr.get(data, 'db.user', 'root') == 'root'

    def test_key_without_dot_is_not_searched(self, data: Dict[str, Any]) -> None:
        """Test that a plain missing key returns the default immediately."""
        assert Arr.get(data, 'host', 'nope') == 'nope'

    def test_explicit_none_is_returned(self, data: Dict[str, Any]) -> None:
        assert Arr.get(data, 'flag', 'default') is None

    def test_numeric_keys(self) -> None:
        """Test that integer and numeric-string keys address the same entry."""
        assert Arr.get({1: 'one'}, '1') == 'one'
        assert Arr.get({'1': 'one'}, 1) == 'one'
        assert Arr.get(['a', 'b'], 1) == 'b'
        assert Arr.get({'list': ['a', 'b']}, 'list.1') == 'b'
        assert Arr.get({'list': ['a', 'b']}, 'list.5', 'x') == 'x'
        assert Arr.get({'list': ['a', 'b']}, 'list.-1', 'x') == 'x'

    def test_lazy_default_is_only_called_on_miss(self, data: Dict[str, Any]) -> None:
        calls: List[int] = []

        def producer() -> str:
            calls.append(1)
            return 'computed'

        assert Arr.get(data, 'db.host', producer) == 'localhost'
        assert calls == []
        assert Arr.get(data, 'db.missing', producer) == 'computed'
        assert calls == [1]

    def test_many_keys_share_the_default(self, data: Dict[str, Any]) -> None:
        assert Arr.get(data, ['db.host', 'db.user'], 'x') == {'db.host': 'localhost', 'db.user': 'x'}

    def test_many_keys_with_own_defaults(self, data: Dict[str, Any]) -> None:
        result = Arr.get(data, {'db.host': 'a', 'db.user': 'root', 'db.pass': None})
        assert result == {'db.host': 'localhost', 'db.user': 'root', 'db.pass': None}

    def test_wildcard_fan_out(self, data: Dict[str, Any]) -> None:
        assert Arr.get(data, 'items.*.id') == [1, 2]

    def test_wildcard_fan_out_over_mapping(self) -> None:
        data = {'users': {'alice': {'age': 30}, 'bob': {'age': 40}}}
        assert Arr.get(data, 'users.*.age') == [30, 40]

    def test_wildcard_collapse(self) -> None:
        """Test that a second wildcard flattens the result one level."""
        data = {'groups': [{'tags': ['a', 'b']}, {'tags': ['c']}]}
        assert Arr.get(data, 'groups.*.tags') == [['a', 'b'], ['c']]
        assert Arr.get(data, 'groups.*.tags.*') == ['a', 'b', 'c']

    def test_wildcard_collapse_drops_scalars(self) -> None:
        data = {'groups': [{'tags': ['a']}, {'name': 'no tags'}]}
        assert Arr.get(data, 'groups.*.tags.*', 'none') == ['a']

    def test_wildcard_on_scalar_returns_default(self) -> None:
        assert Arr.get({'a': 5}, 'a.*', 'd') == 'd'

    def test_first_and_last_tokens(self) -> None:
        data = {'users': [{'name': 'Alice'}, {'name': 'Bob'}], 'empty': []}
        assert Arr.get(data, 'users.{first}.name') == 'Alice'
        assert Arr.get(data, 'users.{last}.name') == 'Bob'
        assert Arr.get(data, 'empty.{first}', 'none') == 'none'

    def test_escaped_wildcard_reads_literal_key(self) -> None:
        data = {'a': {'*': 'star', 'x': 'ex'}}
        assert Arr.get(data, 'a.\\*') == 'star'

    def test_objects_are_walked_by_attribute(self) -> None:
        data = {'user': SimpleNamespace(name='Alice', profile={'city': 'Paris'})}
        assert Arr.get(data, 'user.name') == 'Alice'
        assert Arr.get(data, 'user.profile.city') == 'Paris'
        assert Arr.get(data, 'user.missing', 'd') == 'd'

    def test_collections_resolve_position_tokens(self) -> None:
        data = {'list': Collection([10, 20, 30])}
        assert Arr.get(data, 'list.{last}') == 30


class TestHas:
    """Test suite for existence checks."""

    @pytest.fixture
    def data(self) -> Dict[str, Any]:
        return {'a': {'b': None, 'c': [1, 2]}, 'users': [{'name': 'A'}, {'name': 'B'}]}

    def test_none_counts_as_existing(self, data: Dict[str, Any]) -> None:
        assert Arr.has(data, 'a.b')

    def test_every_key_must_exist(self, data: Dict[str, Any]) -> None:
        assert Arr.has(data, ['a.b', 'a.c.1'])
        assert not Arr.has(data, ['a.b', 'a.c.2'])

    def test_empty_inputs(self, data: Dict[str, Any]) -> None:
        assert not Arr.has(data, None)
        assert not Arr.has(data, [])
        assert not Arr.has({}, 'a')

    def test_wildcard_requires_every_element(self, data: Dict[str, Any]) -> None:
        assert Arr.has(data, 'users.*.name')
        data['users'].append({'email': 'x'})
        assert not Arr.has(data, 'users.*.name')

    def test_has_any(self, data: Dict[str, Any]) -> None:
        assert Arr.has_any(data, ['nope', 'a.c'])
        assert not Arr.has_any(data, ['nope', 'a.z'])
        assert not Arr.has_any(data, [])


class TestSetAndFill:
    """Test suite for writing values."""

    def test_creates_missing_intermediates(self) -> None:
        data: Dict[str, Any] = {}
        assert Arr.set(data, 'session.timeout', 120) is True
        assert data == {'session': {'timeout': 120}}

    def test_idempotent(self) -> None:
        once: Dict[str, Any] = {'a': 1}
        twice: Dict[str, Any] = {'a': 1}
        Arr.set(once, 'x.y', [1])
        Arr.set(twice, 'x.y', [1])
        Arr.set(twice, 'x.y', [1])
        assert once == twice

    def test_set_overwrites_and_fill_keeps_first(self) -> None:
        data: Dict[str, Any] = {}
        Arr.fill(data, 'a.b', 1)
        Arr.fill(data, 'a.b', 2)
        assert data['a']['b'] == 1

        Arr.set(data, 'c.d', 1)
        Arr.set(data, 'c.d', 2)
        assert data['c']['d'] == 2

    def test_scalar_in_the_way_is_replaced(self) -> None:
        data: Dict[str, Any] = {'a': 'scalar'}
        Arr.set(data, 'a.b', 1)
        assert data == {'a': {'b': 1}}

    def test_many_pairs(self) -> None:
        data: Dict[str, Any] = {'a': 1}
        Arr.set(data, {'a': 2, 'b.c': 3}, overwrite=False)
        assert data == {'a': 1, 'b': {'c': 3}}

    def test_null_key_replaces_whole_container(self) -> None:
        data: Dict[str, Any] = {'a': 1}
        Arr.set(data, None, {'b': 2})
        assert data == {'b': 2}

    def test_new_intermediate_list_when_next_key_is_zero(self) -> None:
        data: Dict[str, Any] = {}
        Arr.set(data, 'rows.0.id', 7)
        assert data == {'rows': [{'id': 7}]}

    def test_list_append_and_promotion(self) -> None:
        data: Dict[str, Any] = {'list': [1, 2]}
        Arr.set(data, 'list.2', 3)
        assert data['list'] == [1, 2, 3]

        Arr.set(data, 'list.5', 6)
        assert data['list'] == {0: 1, 1: 2, 2: 3, 5: 6}

    def test_wildcard_broadcast(self) -> None:
        data: Dict[str, Any] = {'users': [{'active': True}, {'active': True}]}
        Arr.set(data, 'users.*.active', False)
        assert data['users'] == [{'active': False}, {'active': False}]

        Arr.fill(data, 'users.*.role', 'guest')
        assert [user['role'] for user in data['users']] == ['guest', 'guest']

    def test_terminal_wildcard(self) -> None:
        data: Dict[str, Any] = {'flags': [1, 2, 3]}
        Arr.fill(data, 'flags.*', 0)
        assert data['flags'] == [1, 2, 3]
        Arr.set(data, 'flags.*', 0)
        assert data['flags'] == [0, 0, 0]

    def test_position_tokens(self) -> None:
        data: Dict[str, Any] = {'users': [{'name': 'A'}, {'name': 'B'}], 'empty': []}
        Arr.set(data, 'users.{last}.name', 'Z')
        assert data['users'][1]['name'] == 'Z'
        Arr.set(data, 'empty.{first}', 'x')
        assert data['empty'] == []

    def test_objects_are_written_by_attribute(self) -> None:
        user = SimpleNamespace(name='Alice')
        data = {'user': user}
        Arr.set(data, 'user.address.city', 'Paris')
        assert user.address == {'city': 'Paris'}
        Arr.fill(data, 'user.name', 'Bob')
        assert user.name == 'Alice'

    def test_root_replacement_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a write that would need a new root is logged and ignored."""
        with caplog.at_level(logging.WARNING, logger='arraykit.Support.Mutator'):
            assert Arr.set('scalar', 'a.b', 1) is True
        assert 'Dropped write' in caplog.text


class TestForget:
    """Test suite for removing values."""

    def test_forget_nested(self) -> None:
        data = {'user': {'name': 'Alice', 'email': 'a@x.com'}}
        Arr.forget(data, 'user.email')
        assert data == {'user': {'name': 'Alice'}}

    def test_forget_then_has(self) -> None:
        data = {'a': {'b': {'c': 1, 'd': 2}}, 'e': 3}
        for key in ('a.b.c', 'e'):
            Arr.forget(data, key)
            assert not Arr.has(data, key)
        assert data == {'a': {'b': {'d': 2}}}

    def test_missing_intermediate_is_skipped(self) -> None:
        data = {'a': 1}
        Arr.forget(data, ['x.y.z', 'a.b'])
        assert data == {'a': 1}

    def test_wildcard_forget(self) -> None:
        data = {'users': [{'name': 'A', 'secret': 1}, {'name': 'B'}]}
        Arr.forget(data, 'users.*.secret')
        assert data == {'users': [{'name': 'A'}, {'name': 'B'}]}

    def test_terminal_wildcard_removes_nothing(self) -> None:
        data = {'list': [1, 2]}
        Arr.forget(data, 'list.*')
        assert data == {'list': [1, 2]}

    def test_forget_object_attribute(self) -> None:
        user = SimpleNamespace(name='Alice', token='t')
        Arr.forget({'user': user}, 'user.token')
        assert not hasattr(user, 'token')

    def test_forget_list_index(self) -> None:
        data = {'list': ['a', 'b', 'c']}
        Arr.forget(data, 'list.{first}')
        assert data == {'list': {1: 'b', 2: 'c'}}
        assert Arr.get(data, 'list.1') == 'b'

    def test_forget_list_index_then_has(self) -> None:
        data = {'list': ['a', 'b']}
        Arr.forget(data, 'list.0')
        assert not Arr.has(data, 'list.0')
        assert data == {'list': {1: 'b'}}

    def test_forget_last_list_index_keeps_a_list(self) -> None:
        data = {'list': ['a', 'b', 'c']}
        Arr.forget(data, 'list.{last}')
        assert data == {'list': ['a', 'b']}
        assert not Arr.has(data, 'list.2')

    def test_forget_many_list_indices(self) -> None:
        data = {'list': ['a', 'b', 'c']}
        Arr.forget(data, ['list.0', 'list.1'])
        assert data == {'list': {2: 'c'}}

        data = {'list': ['a', 'b', 'c']}
        Arr.forget(data, ['list.2', 'list.1'])
        assert data == {'list': ['a']}

    def test_wildcard_forget_inside_nested_lists(self) -> None:
        data = {'rows': [['a', 'b'], ['c', 'd']]}
        Arr.forget(data, 'rows.*.0')
        assert data == {'rows': [{1: 'b'}, {1: 'd'}]}

    def test_forget_list_index_under_object(self) -> None:
        holder = SimpleNamespace(tags=['x', 'y'])
        Arr.forget({'holder': holder}, 'holder.tags.0')
        assert holder.tags == {1: 'y'}

    def test_forget_many_indices_from_root_list(self) -> None:
        data = ['a', 'b', 'c', 'd']
        Arr.forget(data, [0, '1', '{last}'])
        assert data == ['c']

    def test_forget_nested_path_and_index_from_root_list(self) -> None:
        data = [{'id': 1, 'secret': 'x'}, {'id': 2}]
        Arr.forget(data, [0, '1.id'])
        assert data == [{}]


class TestFlattenExpand:
    """Test suite for dot flattening."""

    def test_flatten_scenario(self) -> None:
        data = {'user': {'name': 'Alice', 'roles': ['admin', 'editor']}}
        assert Arr.flatten(data) == {
            'user.name': 'Alice',
            'user.roles.0': 'admin',
            'user.roles.1': 'editor',
        }

    def test_flatten_with_prefix(self) -> None:
        assert Arr.dot({'a': {'b': 1}}, 'cfg.') == {'cfg.a.b': 1}

    def test_round_trip(self) -> None:
        data = {'a': {'b': 1, 'c': [1, {'d': 2}]}, 'e': 'x'}
        assert Arr.expand(Arr.flatten(copy.deepcopy(data))) == data

    def test_empty_containers_stay_leaves(self) -> None:
        """Test the asymmetry that keeps empty nested containers intact."""
        data = {'a': {}, 'b': {'c': []}}
        flat = Arr.flatten(data)
        assert flat == {'a': {}, 'b.c': []}
        assert Arr.undot(flat) == data

    def test_expand_later_keys_win(self) -> None:
        assert Arr.expand({'a': 1, 'a.b': 2}) == {'a': {'b': 2}}
