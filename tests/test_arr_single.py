"""Tests for single-dimension array helpers."""

from __future__ import annotations

from arraykit import ArrSingle


class TestArrSingleInspection:
    """Test suite for predicates and lookups."""

    def test_exists(self) -> None:
        assert ArrSingle.exists({'a': None}, 'a')
        assert ArrSingle.exists(['x'], 0)
        assert not ArrSingle.exists(['x'], 1)

    def test_list_and_assoc(self) -> None:
        assert ArrSingle.is_list([1, 2])
        assert ArrSingle.is_list({0: 'a', 1: 'b'})
        assert not ArrSingle.is_list({1: 'a'})
        assert not ArrSingle.is_list([])
        assert ArrSingle.is_assoc({'a': 1})
        assert not ArrSingle.is_assoc([1])

    def test_sign_checks(self) -> None:
        assert ArrSingle.is_positive([1, 2])
        assert not ArrSingle.is_positive([0, 2])
        assert ArrSingle.is_negative([-1, -2])
        assert not ArrSingle.is_negative([])
        assert ArrSingle.positive([-1, 2, 'x', 3]) == [2, 3]
        assert ArrSingle.negative({'a': -1, 'b': 1}) == {'a': -1}

    def test_int_and_unique(self) -> None:
        assert ArrSingle.is_int([1, 2])
        assert not ArrSingle.is_int([1, True])
        assert ArrSingle.is_unique([1, 2, 3])
        assert not ArrSingle.is_unique([1, 2, 1])

    def test_search(self) -> None:
        assert ArrSingle.search({'a': 1, 'b': '1'}, '1') == 'b'
        assert ArrSingle.search([5, 6], lambda value, key: value > 5) == 1
        assert ArrSingle.search([5, 6], 7) is None

    def test_contains(self) -> None:
        assert ArrSingle.contains([1, 2], 2)
        assert ArrSingle.contains([1.0], 1)
        assert not ArrSingle.contains([1.0], 1, strict=True)
        assert ArrSingle.contains([1, 2], lambda value, key: value == 2)

    def test_some_and_every(self) -> None:
        assert ArrSingle.some([1, 2], lambda value, key: value > 1)
        assert not ArrSingle.every([1, 2], lambda value, key: value > 1)


class TestArrSingleTransforms:
    """Test suite for helpers that build new arrays."""

    def test_only_and_separate(self) -> None:
        assert ArrSingle.only({'a': 1, 'b': 2, 'c': 3}, ['a', 'c']) == {'a': 1, 'c': 3}
        assert ArrSingle.separate({'a': 1, 'b': 2}) == {'keys': ['a', 'b'], 'values': [1, 2]}

    def test_prepend(self) -> None:
        assert ArrSingle.prepend([2, 3], 1) == [1, 2, 3]
        assert ArrSingle.prepend({'b': 2}, 1, 'a') == {'a': 1, 'b': 2}
        assert list(ArrSingle.prepend({'b': 2}, 1, 'a')) == ['a', 'b']

    def test_shuffle_with_seed_is_reproducible(self) -> None:
        values = list(range(20))
        first = ArrSingle.shuffle(values, seed=42)
        assert first == ArrSingle.shuffle(values, seed=42)
        assert sorted(first) == values
        assert values == list(range(20))

    def test_non_empty_and_avg(self) -> None:
        assert ArrSingle.non_empty([0, '', None, 'a', False]) == [0, 'a', False]
        assert ArrSingle.avg([1, 2, 3, 4]) == 2.5
        assert ArrSingle.avg([]) == 0

    def test_nth_and_duplicates(self) -> None:
        assert ArrSingle.nth([1, 2, 3, 4, 5, 6], 2) == [1, 3, 5]
        assert ArrSingle.nth([1, 2, 3, 4, 5, 6], 2, 1) == [2, 4, 6]
        assert ArrSingle.nth([1, 2], 0) == []
        assert ArrSingle.duplicates([1, 2, 1, 3, 2, 1]) == [1, 2]

    def test_paginate_and_slice(self) -> None:
        assert ArrSingle.paginate([1, 2, 3, 4, 5], 2, 2) == [3, 4]
        assert ArrSingle.paginate({'a': 1, 'b': 2, 'c': 3}, 2, 2) == {'c': 3}
        assert ArrSingle.slice([1, 2, 3, 4], 1, 2) == [2, 3]
        assert ArrSingle.slice([1, 2, 3, 4], -2) == [3, 4]
        assert ArrSingle.slice([1, 2, 3, 4], 1, -1) == [2, 3]
        assert ArrSingle.skip([1, 2, 3], 2) == [3]

    def test_combine(self) -> None:
        assert ArrSingle.combine(['a', 'b', 'c'], [1, 2]) == {'a': 1, 'b': 2}

    def test_where_and_reject(self) -> None:
        assert ArrSingle.where([0, 1, '', 2]) == [1, 2]
        assert ArrSingle.where({'a': 1, 'b': 2}, lambda value, key: key == 'b') == {'b': 2}
        assert ArrSingle.reject([1, 2, 3], lambda value, key: value == 2) == [1, 3]
        assert ArrSingle.reject([1, 2, 2], 2) == [1]

    def test_chunk(self) -> None:
        assert ArrSingle.chunk([1, 2, 3], 2) == [[1, 2], [3]]
        assert ArrSingle.chunk({'a': 1, 'b': 2, 'c': 3}, 2, preserve_keys=True) == [{'a': 1, 'b': 2}, {'c': 3}]
        assert ArrSingle.chunk([1, 2], 0) == [[1, 2]]

    def test_map_each_reduce(self) -> None:
        assert ArrSingle.map({'a': 1}, lambda value, key: f"{key}{value}") == {'a': 'a1'}
        seen = []
        ArrSingle.each([1, 2, 3], lambda value, key: seen.append(value) or value < 2)
        assert seen == [1, 2]
        assert ArrSingle.reduce([1, 2, 3], lambda carry, value, key: carry + value, 0) == 6

    def test_sum_and_unique(self) -> None:
        assert ArrSingle.sum([1, 2, 3]) == 6
        assert ArrSingle.sum([{'n': 2}, {'n': 3}], lambda row: row['n']) == 5
        assert ArrSingle.unique([1, 2, 1, 3]) == [1, 2, 3]
        assert ArrSingle.unique([1, 1.0, True], strict=True) == [1, 1.0, True]

    def test_skip_while_until_and_partition(self) -> None:
        assert ArrSingle.skip_while([1, 2, 3, 1], lambda value, key: value < 3) == [3, 1]
        assert ArrSingle.skip_until([1, 2, 3, 1], lambda value, key: value >= 2) == [2, 3, 1]
        passed, failed = ArrSingle.partition({'a': 1, 'b': 2}, lambda value, key: value > 1)
        assert passed == {'b': 2}
        assert failed == {'a': 1}
