#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_plist.py
"""Unit tests for the persistent list.

Tests cover:
- Construction and equality
- map, foldr, foldl and all_satisfy semantics
- Short-circuit evaluation of all_satisfy
- Long lists that would overflow a recursive implementation

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from domtree.exceptions import ValidationError
from domtree.plist import Cons, Empty, PList, from_iterable


@pytest.mark.unit
class TestConstruction:
    """Tests for building lists."""

    def test_from_iterable_empty(self):
        """An empty iterable gives Empty."""
        assert isinstance(from_iterable([]), Empty)

    def test_from_iterable_preserves_order(self):
        """Elements are chained in iteration order."""
        lst = from_iterable(["a", "b", "c"])
        assert isinstance(lst, Cons)
        assert lst.first == "a"
        assert lst.rest.first == "b"
        assert lst.rest.rest.first == "c"
        assert isinstance(lst.rest.rest.rest, Empty)

    def test_from_generator(self):
        """Any iterable is accepted."""
        assert from_iterable(n * n for n in range(4)).to_list() == [0, 1, 4, 9]

    def test_equality_is_structural(self):
        """Lists with equal elements compare equal."""
        assert from_iterable([1, 2]) == Cons(1, Cons(2, Empty()))
        assert Empty() == Empty()
        assert from_iterable([1, 2]) != from_iterable([1, 2, 3])
        assert from_iterable([1, 2]) != from_iterable([2, 1])

    def test_hash_matches_equality(self):
        """Equal lists hash equally."""
        assert hash(from_iterable([1, 2])) == hash(Cons(1, Cons(2, Empty())))

    def test_cells_are_immutable(self):
        """Cons cells cannot be reassigned."""
        lst = from_iterable([1])
        with pytest.raises(AttributeError):
            lst.first = 2  # type: ignore[misc]

    def test_len_and_iter(self):
        """len and iteration walk every cell."""
        lst = from_iterable("xyz")
        assert len(lst) == 3
        assert list(lst) == ["x", "y", "z"]
        assert len(Empty()) == 0

    def test_repr(self):
        """repr shows the elements."""
        assert repr(from_iterable([1, 2])) == "from_iterable([1, 2])"

    def test_builtin_rest_converted(self):
        """A builtin list or tuple given as rest keeps its elements."""
        assert Cons(1, [2, 3]).to_list() == [1, 2, 3]
        assert Cons(1, (2,)) == from_iterable([1, 2])
        assert isinstance(Cons(1, []).rest, Empty)

    def test_invalid_rest_rejected(self):
        """Any other rest raises instead of truncating the list."""
        with pytest.raises(ValidationError) as exc_info:
            Cons(1, "23")  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "rest"
        with pytest.raises(ValidationError):
            Cons(1, None)  # type: ignore[arg-type]

    def test_plist_is_abstract(self):
        """The base class cannot be instantiated."""
        with pytest.raises(TypeError):
            PList()  # type: ignore[abstract]


@pytest.mark.unit
class TestMap:
    """Tests for map."""

    def test_empty_maps_to_empty(self):
        """Empty maps to Empty without calling the function."""
        calls = []
        assert Empty().map(calls.append) == Empty()
        assert calls == []

    def test_map_transforms_each_element(self):
        """Each position holds f of the original element."""
        assert from_iterable([1, 2, 3]).map(lambda n: n + 1).to_list() == [2, 3, 4]

    def test_map_calls_in_list_order(self):
        """The function is applied front to back."""
        seen = []
        from_iterable(["a", "b", "c"]).map(seen.append)
        assert seen == ["a", "b", "c"]

    def test_map_does_not_change_source(self):
        """The original list is untouched."""
        lst = from_iterable([1, 2])
        lst.map(str)
        assert lst.to_list() == [1, 2]


@pytest.mark.unit
class TestFolds:
    """Tests for foldr and foldl."""

    def test_folds_on_empty_return_base(self):
        """Both folds return the base for Empty."""
        assert Empty().foldr(lambda x, acc: acc + x, 7) == 7
        assert Empty().foldl(lambda x, acc: acc + x, 7) == 7

    def test_foldr_is_right_associative(self):
        """foldr nests towards the right."""
        result = from_iterable(["1", "2", "3"]).foldr(lambda x, acc: f"({x} {acc})", "nil")
        assert result == "(1 (2 (3 nil)))"

    def test_foldl_threads_accumulator_forward(self):
        """foldl folds the first element first."""
        result = from_iterable(["1", "2", "3"]).foldl(lambda x, acc: f"({x} {acc})", "nil")
        assert result == "(3 (2 (1 nil)))"

    def test_foldr_with_cons_rebuilds_list(self):
        """foldr with Cons and Empty reproduces the list."""
        lst = from_iterable([3, 1, 4, 1, 5])
        assert lst.foldr(Cons, Empty()) == lst

    def test_foldl_with_cons_reverses_list(self):
        """foldl with Cons and Empty reverses the list."""
        assert from_iterable([1, 2, 3]).foldl(Cons, Empty()).to_list() == [3, 2, 1]


@pytest.mark.unit
class TestAllSatisfy:
    """Tests for all_satisfy."""

    def test_empty_is_vacuously_true(self):
        """Empty satisfies even a predicate that always fails."""
        assert Empty().all_satisfy(lambda _: False) is True

    def test_all_pass(self):
        """True when every element passes."""
        assert from_iterable([2, 4, 6]).all_satisfy(lambda n: n % 2 == 0) is True

    def test_one_fails(self):
        """False when any element fails."""
        assert from_iterable([2, 3, 6]).all_satisfy(lambda n: n % 2 == 0) is False

    def test_stops_at_first_failure(self):
        """Elements after the first failure are never evaluated."""
        seen = []

        def pred(n):
            seen.append(n)
            return n < 2

        assert from_iterable([0, 1, 2, 3, 4]).all_satisfy(pred) is False
        assert seen == [0, 1, 2]

    def test_truthy_results_are_normalized(self):
        """The result is a bool even for truthy predicate values."""
        assert from_iterable(["a", "b"]).all_satisfy(lambda s: s) is True
        assert from_iterable(["a", ""]).all_satisfy(lambda s: s) is False


@pytest.mark.unit
class TestLongLists:
    """Operations must not recurse once per element."""

    SIZE = 10_000

    def test_operations_on_long_list(self):
        """map, folds, all_satisfy and equality handle very long lists."""
        lst = from_iterable(range(self.SIZE))
        assert len(lst.map(lambda n: n)) == self.SIZE
        assert lst.foldr(lambda x, acc: acc + 1, 0) == self.SIZE
        assert lst.foldl(lambda x, acc: acc + x, 0) == sum(range(self.SIZE))
        assert lst.all_satisfy(lambda n: n >= 0)
        assert lst == from_iterable(range(self.SIZE))


@pytest.mark.unit
class TestListProperties:
    """Property-based tests for list operations using Hypothesis."""

    @given(st.lists(st.integers()))
    def test_map_preserves_length_and_position(self, items):
        """Property: map keeps length and per-position correspondence."""
        mapped = from_iterable(items).map(lambda n: n * 3)
        assert len(mapped) == len(items)
        assert mapped.to_list() == [n * 3 for n in items]

    @given(st.lists(st.integers()))
    def test_foldr_reconstructs(self, items):
        """Property: foldr(Cons, Empty()) is the identity."""
        lst = from_iterable(items)
        assert lst.foldr(Cons, Empty()) == lst

    @given(st.lists(st.integers()))
    def test_all_satisfy_matches_builtin_all(self, items):
        """Property: all_satisfy agrees with all()."""
        assert from_iterable(items).all_satisfy(lambda n: n > 0) == all(n > 0 for n in items)

    @given(st.integers(), st.booleans())
    def test_singleton_all_satisfy_is_predicate(self, item, verdict):
        """Property: [x].all_satisfy(p) == p(x)."""
        assert from_iterable([item]).all_satisfy(lambda _: verdict) == verdict
